"""Tests for the style preset manager."""

from __future__ import annotations

import pytest

from docxwriter.style_manager import StyleManager
from docxwriter.types import AlignmentType, LineSpacingRule, SpecialIndentType


class TestStyleManager:

    def test_presets(self):
        assert StyleManager.PRESETS == ["default", "academic", "business", "minimal"]

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            StyleManager("nonexistent")

    @pytest.mark.parametrize("preset", StyleManager.PRESETS)
    def test_every_preset_builds_all_styles(self, preset):
        sm = StyleManager(preset)
        names = sm.list_style_names()
        for expected in (
            "body", "heading_1", "heading_6", "code_block", "inline_code",
            "blockquote", "list_item", "table_header", "table_body", "horizontal_rule",
        ):
            assert expected in names

    def test_default_body(self):
        sm = StyleManager()
        run = sm.get_body_run()
        assert run.size == 20
        assert run.fonts.ascii == "Times New Roman"
        assert run.fonts.east_asia == "Malgun Gothic"

        para = sm.get_body_para()
        assert para.alignment is AlignmentType.BOTH
        assert para.line_spacing.line == 384
        assert para.line_spacing.line_rule is LineSpacingRule.AUTO
        assert para.line_spacing.after == 120

    def test_heading_sizes_decrease(self):
        sm = StyleManager()
        sizes = [sm.get_heading(level).run.size for level in range(1, 7)]
        assert sizes == sorted(sizes, reverse=True)
        assert sizes[0] == 44

    def test_heading_is_bold_and_keeps_with_next(self):
        h = StyleManager("business").get_heading(2)
        assert h.run.bold is True
        assert h.para.keep_next is True
        assert h.run.fonts.ascii == "Arial"

    def test_heading_level_is_clamped(self):
        sm = StyleManager()
        assert sm.get_heading(0) == sm.get_heading(1)
        assert sm.get_heading(9) == sm.get_heading(6)

    def test_unknown_style_falls_back_to_body(self):
        sm = StyleManager()
        assert sm.get_style("no_such_style") == sm.get_style("body")

    def test_list_item_hanging_indent(self):
        indent = StyleManager("academic").get_style("list_item").para.indent
        assert indent.start == 480
        assert indent.special is SpecialIndentType.HANGING
        assert indent.special_value == 240

    def test_code_uses_monospace_font(self):
        assert StyleManager("minimal").get_style("code_block").run.fonts.ascii == "Menlo"
