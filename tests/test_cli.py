"""Tests for the CLI module."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from docxwriter import __version__
from docxwriter.cli import main

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MD = FIXTURE_DIR / "sample.md"


class TestCLIMain:
    """Test the main() entry point."""

    def test_list_styles(self, capsys):
        ret = main(["--list-styles"])
        assert ret == 0
        out = capsys.readouterr().out
        assert "default" in out
        assert "academic" in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_missing_input(self):
        with pytest.raises(SystemExit):
            main([])

    def test_unknown_style(self, capsys):
        with pytest.raises(SystemExit):
            main([str(SAMPLE_MD), "-s", "fancy"])

    def test_file_not_found(self, capsys):
        ret = main(["nonexistent.md"])
        assert ret == 1
        err = capsys.readouterr().err
        assert "not found" in err

    def test_convert_sample(self, tmp_path, capsys):
        out = tmp_path / "output.docx"
        ret = main([str(SAMPLE_MD), "-o", str(out)])
        assert ret == 0
        assert out.exists()
        assert zipfile.is_zipfile(out)
        assert f"Converted: {out}" in capsys.readouterr().out

    def test_verbose_flag(self, tmp_path, capsys):
        out = tmp_path / "output.docx"
        ret = main([str(SAMPLE_MD), "-o", str(out), "-v"])
        assert ret == 0
        stdout = capsys.readouterr().out
        assert "Input:" in stdout
        assert "Output:" in stdout
        assert "Done." in stdout

    def test_default_output_name(self, tmp_path, capsys):
        md_file = tmp_path / "myfile.md"
        md_file.write_text("# Test", encoding="utf-8")
        ret = main([str(md_file)])
        assert ret == 0
        expected = tmp_path / "myfile.docx"
        assert expected.exists()

    def test_style_presets(self, tmp_path, capsys):
        for preset in ["default", "academic", "business", "minimal"]:
            out = tmp_path / f"output_{preset}.docx"
            ret = main([str(SAMPLE_MD), "-o", str(out), "-s", preset])
            assert ret == 0, f"Failed for preset: {preset}"
            assert out.exists()

    def test_page_numbers(self, tmp_path, capsys):
        out = tmp_path / "numbered.docx"
        ret = main([str(SAMPLE_MD), "-o", str(out), "--page-numbers"])
        assert ret == 0
        with zipfile.ZipFile(out) as zf:
            assert "word/footer1.xml" in zf.namelist()

    def test_unwritable_output(self, tmp_path, capsys):
        ret = main([str(SAMPLE_MD), "-o", str(tmp_path)])
        assert ret == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_encoding(self, tmp_path, capsys):
        md_file = tmp_path / "bad.md"
        md_file.write_bytes(b"\xff\xfe\xfa broken")
        ret = main([str(md_file), "-o", str(tmp_path / "bad.docx")])
        assert ret == 1
        assert "Error:" in capsys.readouterr().err

    def test_output_parent_is_a_file(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        ret = main([str(SAMPLE_MD), "-o", str(blocker / "out.docx")])
        assert ret == 1
        assert "Error:" in capsys.readouterr().err
