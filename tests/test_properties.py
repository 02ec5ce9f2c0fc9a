"""Tests for property objects and their merge semantics."""

from __future__ import annotations

from itertools import permutations

import pytest

from docxwriter.fields import NumPages
from docxwriter.properties import (
    FrameProperty,
    Indent,
    LineSpacing,
    ParagraphProperty,
    RunFonts,
    RunProperty,
    SectionProperty,
    TableBorders,
    TableCellProperty,
    TableProperty,
    TableWidth,
)
from docxwriter.types import (
    AlignmentType,
    LineSpacingRule,
    SpecialIndentType,
    VAlignType,
    VMergeType,
)
from docxwriter.xml_builder import render

FRAME_VALUES = {
    "w": (1200, "w:w"),
    "h": (300, "w:h"),
    "h_rule": ("exact", "w:hRule"),
    "wrap": ("none", "w:wrap"),
    "v_anchor": ("text", "w:vAnchor"),
    "h_anchor": ("margin", "w:hAnchor"),
    "h_space": (120, "w:hSpace"),
    "v_space": (60, "w:vSpace"),
    "x": (10, "w:x"),
    "x_align": ("left", "w:xAlign"),
    "y": (1, "w:y"),
    "y_align": ("top", "w:yAlign"),
}


class TestFrameProperty:

    def test_empty_frame_is_explicit_pair(self):
        assert render(FrameProperty()) == "<w:framePr></w:framePr>"

    def test_empty_frame_inside_field_code(self):
        out = render(NumPages(frame_property=FrameProperty()))
        assert "<w:pPr><w:framePr></w:framePr><w:rPr></w:rPr></w:pPr>" in out
        assert "<w:framePr />" not in out

    @pytest.mark.parametrize("first,second", list(permutations(FRAME_VALUES, 2)))
    def test_setting_a_field_keeps_previous_field(self, first, second):
        v1, attr1 = FRAME_VALUES[first]
        v2, attr2 = FRAME_VALUES[second]
        fp = FrameProperty().derive(**{first: v1}).derive(**{second: v2})
        assert getattr(fp, first) == v1
        assert getattr(fp, second) == v2
        out = render(fp)
        assert f'{attr1}="{v1}"' in out
        assert f'{attr2}="{v2}"' in out
        assert out.count("<w:framePr") == 1

    def test_unset_fields_omitted(self):
        out = render(FrameProperty(wrap="none"))
        assert out == '<w:framePr w:wrap="none" />'

    def test_wrap_then_x_align_attribute_order(self):
        out = render(FrameProperty().derive(x_align="left").derive(wrap="none"))
        assert out == '<w:framePr w:wrap="none" w:xAlign="left" />'

    def test_derive_does_not_mutate(self):
        base = FrameProperty(wrap="none")
        base.derive(x=5)
        assert base.x is None

    def test_derive_unknown_field_raises(self):
        with pytest.raises(TypeError):
            FrameProperty().derive(colour="red")


class TestMerge:

    def test_merge_overlays_only_set_fields(self):
        base = FrameProperty(wrap="none", x=5)
        merged = base.merge(FrameProperty(x=9, y_align="top"))
        assert merged == FrameProperty(wrap="none", x=9, y_align="top")

    def test_merge_none_is_identity(self):
        base = RunProperty(bold=True)
        assert base.merge(None) is base

    def test_is_empty(self):
        assert RunProperty().is_empty()
        assert not RunProperty(size=20).is_empty()

    def test_paragraph_merge_keeps_alignment(self):
        base = ParagraphProperty(alignment=AlignmentType.CENTER)
        merged = base.merge(ParagraphProperty(style="Heading1"))
        assert merged.alignment is AlignmentType.CENTER
        assert merged.style == "Heading1"


class TestRunProperty:

    def test_empty_is_explicit_pair(self):
        assert render(RunProperty()) == "<w:rPr></w:rPr>"

    def test_full_order(self):
        rp = RunProperty(
            style="Emphasis",
            fonts=RunFonts(ascii="Arial"),
            bold=True,
            italic=True,
            color="FF0000",
            size=28,
            underline="single",
        )
        assert render(rp) == (
            "<w:rPr>"
            '<w:rStyle w:val="Emphasis" />'
            '<w:rFonts w:ascii="Arial" />'
            "<w:b /><w:bCs /><w:i /><w:iCs />"
            '<w:color w:val="FF0000" />'
            '<w:sz w:val="28" /><w:szCs w:val="28" />'
            '<w:u w:val="single" />'
            "</w:rPr>"
        )

    def test_false_toggle_is_written_explicitly(self):
        assert render(RunProperty(bold=False)) == (
            '<w:rPr><w:b w:val="false" /><w:bCs w:val="false" /></w:rPr>'
        )


class TestParagraphProperty:

    def test_empty_still_renders_run_property(self):
        assert render(ParagraphProperty()) == "<w:pPr><w:rPr></w:rPr></w:pPr>"

    def test_children_order(self):
        pp = ParagraphProperty(
            style="Body",
            keep_next=True,
            frame_property=FrameProperty(wrap="none"),
            line_spacing=LineSpacing(after=120, line=240, line_rule=LineSpacingRule.AUTO),
            indent=Indent(start=720, special=SpecialIndentType.HANGING, special_value=360),
            alignment=AlignmentType.RIGHT,
            run_property=RunProperty(bold=True),
        )
        assert render(pp) == (
            "<w:pPr>"
            '<w:pStyle w:val="Body" />'
            "<w:keepNext />"
            '<w:framePr w:wrap="none" />'
            '<w:spacing w:after="120" w:line="240" w:lineRule="auto" />'
            '<w:ind w:left="720" w:hanging="360" />'
            '<w:jc w:val="right" />'
            "<w:rPr><w:b /><w:bCs /></w:rPr>"
            "</w:pPr>"
        )


class TestTableProperties:

    def test_table_property(self):
        tp = TableProperty(
            width=TableWidth(5000),
            justification=AlignmentType.CENTER,
            borders=TableBorders.uniform(),
        )
        out = render(tp)
        assert out.startswith('<w:tblPr><w:tblW w:w="5000" w:type="dxa" /><w:jc w:val="center" />')
        assert out.count('w:val="single"') == 6

    def test_cell_property(self):
        cp = TableCellProperty(
            width=TableWidth(2000),
            grid_span=2,
            vertical_merge=VMergeType.RESTART,
            vertical_align=VAlignType.CENTER,
        )
        assert render(cp) == (
            '<w:tcPr><w:tcW w:w="2000" w:type="dxa" /><w:gridSpan w:val="2" />'
            '<w:vMerge w:val="restart" /><w:vAlign w:val="center" /></w:tcPr>'
        )

    def test_empty_cell_property(self):
        assert render(TableCellProperty()) == "<w:tcPr></w:tcPr>"


class TestSectionProperty:

    def test_defaults_are_a4_with_inch_margins(self):
        out = render(SectionProperty())
        assert '<w:pgSz w:w="11906" w:h="16838" />' in out
        assert 'w:top="1440"' in out
        assert "headerReference" not in out

    def test_header_and_footer_references(self):
        out = render(SectionProperty(header_reference="rIdH", footer_reference="rIdF"))
        assert '<w:headerReference w:type="default" r:id="rIdH" />' in out
        assert '<w:footerReference w:type="default" r:id="rIdF" />' in out
        assert out.index("headerReference") < out.index("pgSz")
