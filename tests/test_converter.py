"""Integration tests for the Converter orchestrator."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
import zipfile
from pathlib import Path

import pytest

from docxwriter.converter import Converter, page_number_footer
from docxwriter.errors import DestinationUnavailableError
from docxwriter.style_manager import StyleManager

W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MD = FIXTURE_DIR / "sample.md"


class TestConverterInit:
    """Test Converter construction."""

    def test_default_preset(self):
        c = Converter()
        assert c.style_manager.preset == "default"
        assert c.page_numbers is False

    def test_custom_preset(self):
        c = Converter(style_preset="academic")
        assert c.style_manager.preset == "academic"

    def test_invalid_preset_raises(self):
        with pytest.raises(ValueError):
            Converter(style_preset="nonexistent")

    def test_all_presets_valid(self):
        for preset in StyleManager.PRESETS:
            c = Converter(style_preset=preset)
            assert c.style_manager.preset == preset


class TestConvertText:
    """Test convert_text produces valid DOCX bytes."""

    def test_output_is_zip(self):
        data = Converter().convert_text("Some text")
        assert zipfile.is_zipfile(io.BytesIO(data))

    def test_zip_contains_required_files(self):
        data = Converter().convert_text("# Test\n\nParagraph text.")
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            names = zf.namelist()
            assert "[Content_Types].xml" in names
            assert "_rels/.rels" in names
            assert "word/document.xml" in names
            assert "word/footer1.xml" not in names

    def test_unicode_text_preserved(self):
        data = Converter().convert_text("# 한글 제목\n\n한글 본문입니다.")
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            xml = zf.read("word/document.xml").decode("utf-8")
            assert "한글 제목" in xml
            assert "한글 본문입니다." in xml

    def test_same_input_same_bytes(self):
        md = SAMPLE_MD.read_text(encoding="utf-8")
        assert Converter().convert_text(md) == Converter().convert_text(md)

    def test_page_numbers_footer(self):
        data = Converter(page_numbers=True).convert_text("Body")
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            footer = ET.fromstring(zf.read("word/footer1.xml"))
            document = zf.read("word/document.xml").decode("utf-8")
        instrs = [e.text for e in footer.iter(f"{W}instrText")]
        assert instrs == ["PAGE", "NUMPAGES"]
        assert "w:footerReference" in document

    def test_empty_markdown(self):
        data = Converter().convert_text("")
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            body = ET.fromstring(zf.read("word/document.xml")).find(f"{W}body")
        assert [c.tag for c in body] == [f"{W}sectPr"]


class TestPageNumberFooter:

    def test_layout(self):
        footer = ET.fromstring(page_number_footer().build())
        assert [c.tag for c in footer] == [f"{W}sdt", f"{W}p", f"{W}sdt"]
        for jc in footer.iter(f"{W}jc"):
            assert jc.get(f"{W}val") == "center"


class TestConvertFile:

    def test_convert_sample(self, tmp_path):
        out = tmp_path / "sample.docx"
        Converter().convert_file(SAMPLE_MD, out)
        assert out.exists()
        with zipfile.ZipFile(out) as zf:
            xml = zf.read("word/document.xml").decode("utf-8")
        assert "Quarterly Report" in xml
        assert "<w:tbl>" in xml

    def test_creates_parent_directories(self, tmp_path):
        out = tmp_path / "nested" / "dir" / "out.docx"
        Converter().convert_file(SAMPLE_MD, out)
        assert out.exists()

    def test_encoding(self, tmp_path):
        src = tmp_path / "latin.md"
        src.write_bytes("Café crème".encode("latin-1"))
        out = tmp_path / "latin.docx"
        Converter().convert_file(src, out, encoding="latin-1")
        with zipfile.ZipFile(out) as zf:
            assert "Café crème" in zf.read("word/document.xml").decode("utf-8")

    def test_directory_destination(self, tmp_path):
        with pytest.raises(DestinationUnavailableError):
            Converter().convert_file(SAMPLE_MD, tmp_path)

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(DestinationUnavailableError):
            Converter().convert_file(SAMPLE_MD, blocker / "sub" / "out.docx")

    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Converter().convert_file(tmp_path / "nope.md", tmp_path / "out.docx")
