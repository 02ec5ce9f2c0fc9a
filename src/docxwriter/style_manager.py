"""Style presets for the Markdown front-end.

Presets (default, academic, business, minimal) map semantic style names
(heading_1, body, code_block, ...) to the direct formatting applied to
generated paragraphs: a :class:`RunProperty` and a :class:`ParagraphProperty`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from docxwriter.properties import Indent, LineSpacing, ParagraphProperty, RunFonts, RunProperty
from docxwriter.types import AlignmentType, LineSpacingRule, SpecialIndentType
from docxwriter.units import line_spacing_percent_to_line, pt_to_half_points, pt_to_twips


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StyleDef:
    """Complete style definition combining run and paragraph formatting."""

    name: str
    run: RunProperty
    para: ParagraphProperty


@dataclass(frozen=True)
class _PresetSpec:
    latin: str
    east_asia: str
    body_size_pt: float
    body_align: AlignmentType
    line_spacing_percent: int
    space_after_pt: float
    heading_sizes: tuple[float, ...]
    heading_space_before: tuple[float, ...]
    heading_space_after: tuple[float, ...]
    code_font: str
    code_size_pt: float
    quote_indent_pt: float
    quote_color: Optional[str]
    list_indent_pt: float
    table_size_pt: float
    table_space_pt: float


_PRESETS: dict[str, _PresetSpec] = {
    "default": _PresetSpec(
        latin="Times New Roman",
        east_asia="Malgun Gothic",
        body_size_pt=10.0,
        body_align=AlignmentType.BOTH,
        line_spacing_percent=160,
        space_after_pt=6.0,
        heading_sizes=(22.0, 18.0, 14.0, 12.0, 11.0, 10.0),
        heading_space_before=(16.0, 14.0, 12.0, 10.0, 8.0, 6.0),
        heading_space_after=(10.0, 8.0, 6.0, 6.0, 4.0, 4.0),
        code_font="Consolas",
        code_size_pt=9.0,
        quote_indent_pt=20.0,
        quote_color=None,
        list_indent_pt=20.0,
        table_size_pt=9.0,
        table_space_pt=2.0,
    ),
    "academic": _PresetSpec(
        latin="Times New Roman",
        east_asia="Batang",
        body_size_pt=11.0,
        body_align=AlignmentType.BOTH,
        line_spacing_percent=200,
        space_after_pt=8.0,
        heading_sizes=(24.0, 20.0, 16.0, 13.0, 12.0, 11.0),
        heading_space_before=(20.0, 16.0, 14.0, 12.0, 10.0, 8.0),
        heading_space_after=(12.0, 10.0, 8.0, 8.0, 6.0, 6.0),
        code_font="Courier New",
        code_size_pt=9.5,
        quote_indent_pt=24.0,
        quote_color=None,
        list_indent_pt=24.0,
        table_size_pt=10.0,
        table_space_pt=3.0,
    ),
    "business": _PresetSpec(
        latin="Arial",
        east_asia="Malgun Gothic",
        body_size_pt=10.0,
        body_align=AlignmentType.LEFT,
        line_spacing_percent=150,
        space_after_pt=4.0,
        heading_sizes=(20.0, 16.0, 13.0, 11.0, 10.5, 10.0),
        heading_space_before=(14.0, 12.0, 10.0, 8.0, 6.0, 6.0),
        heading_space_after=(8.0, 6.0, 4.0, 4.0, 4.0, 4.0),
        code_font="Consolas",
        code_size_pt=9.0,
        quote_indent_pt=16.0,
        quote_color="555555",
        list_indent_pt=18.0,
        table_size_pt=9.0,
        table_space_pt=2.0,
    ),
    "minimal": _PresetSpec(
        latin="Helvetica Neue",
        east_asia="NanumGothic",
        body_size_pt=10.0,
        body_align=AlignmentType.LEFT,
        line_spacing_percent=145,
        space_after_pt=3.0,
        heading_sizes=(18.0, 15.0, 12.5, 11.0, 10.5, 10.0),
        heading_space_before=(12.0, 10.0, 8.0, 6.0, 4.0, 4.0),
        heading_space_after=(6.0, 5.0, 4.0, 3.0, 3.0, 3.0),
        code_font="Menlo",
        code_size_pt=9.0,
        quote_indent_pt=14.0,
        quote_color="666666",
        list_indent_pt=16.0,
        table_size_pt=9.0,
        table_space_pt=1.0,
    ),
}


# ---------------------------------------------------------------------------
# Preset expansion
# ---------------------------------------------------------------------------

def _spacing(
    line_percent: int, before_pt: float = 0.0, after_pt: float = 0.0
) -> LineSpacing:
    return LineSpacing(
        before=pt_to_twips(before_pt),
        after=pt_to_twips(after_pt),
        line=line_spacing_percent_to_line(line_percent),
        line_rule=LineSpacingRule.AUTO,
    )


def _build_styles(spec: _PresetSpec) -> dict[str, StyleDef]:
    fonts = RunFonts(ascii=spec.latin, hi_ansi=spec.latin, east_asia=spec.east_asia)
    code_fonts = RunFonts(ascii=spec.code_font, hi_ansi=spec.code_font, east_asia=spec.code_font)

    body_run = RunProperty(fonts=fonts, size=pt_to_half_points(spec.body_size_pt))
    body_para = ParagraphProperty(
        alignment=spec.body_align,
        line_spacing=_spacing(spec.line_spacing_percent, after_pt=spec.space_after_pt),
    )

    styles: dict[str, StyleDef] = {"body": StyleDef("body", body_run, body_para)}

    for level in range(1, 7):
        i = level - 1
        styles[f"heading_{level}"] = StyleDef(
            name=f"heading_{level}",
            run=body_run.derive(size=pt_to_half_points(spec.heading_sizes[i]), bold=True),
            para=body_para.derive(
                alignment=AlignmentType.LEFT,
                keep_next=True,
                line_spacing=_spacing(
                    spec.line_spacing_percent,
                    spec.heading_space_before[i],
                    spec.heading_space_after[i],
                ),
            ),
        )

    code_run = RunProperty(fonts=code_fonts, size=pt_to_half_points(spec.code_size_pt))
    styles["code_block"] = StyleDef(
        name="code_block",
        run=code_run,
        para=ParagraphProperty(
            alignment=AlignmentType.LEFT,
            line_spacing=_spacing(100),
        ),
    )
    styles["inline_code"] = StyleDef(
        name="inline_code",
        run=code_run.derive(color="333333"),
        para=body_para,
    )
    styles["blockquote"] = StyleDef(
        name="blockquote",
        run=body_run.derive(italic=True, color=spec.quote_color),
        para=body_para.derive(indent=Indent(start=pt_to_twips(spec.quote_indent_pt))),
    )
    styles["list_item"] = StyleDef(
        name="list_item",
        run=body_run,
        para=body_para.derive(
            alignment=AlignmentType.LEFT,
            indent=Indent(
                start=pt_to_twips(spec.list_indent_pt),
                special=SpecialIndentType.HANGING,
                special_value=pt_to_twips(spec.list_indent_pt / 2),
            ),
        ),
    )
    table_spacing = _spacing(100, spec.table_space_pt, spec.table_space_pt)
    table_run = body_run.derive(size=pt_to_half_points(spec.table_size_pt))
    styles["table_header"] = StyleDef(
        name="table_header",
        run=table_run.derive(bold=True),
        para=ParagraphProperty(alignment=AlignmentType.CENTER, line_spacing=table_spacing),
    )
    styles["table_body"] = StyleDef(
        name="table_body",
        run=table_run,
        para=ParagraphProperty(alignment=AlignmentType.LEFT, line_spacing=table_spacing),
    )
    styles["horizontal_rule"] = StyleDef(
        name="horizontal_rule",
        run=body_run.derive(color="999999"),
        para=ParagraphProperty(
            alignment=AlignmentType.CENTER,
            line_spacing=_spacing(100, 8.0, 8.0),
        ),
    )
    return styles


# ---------------------------------------------------------------------------
# StyleManager
# ---------------------------------------------------------------------------

class StyleManager:
    """Manages document style presets and provides style definitions.

    Usage::

        sm = StyleManager("academic")
        heading_style = sm.get_style("heading_1")
        body_run = sm.get_body_run()
    """

    PRESETS = list(_PRESETS.keys())

    def __init__(self, preset: str = "default") -> None:
        if preset not in _PRESETS:
            raise ValueError(
                f"Unknown preset {preset!r}. Choose from: {', '.join(_PRESETS)}"
            )
        self.preset = preset
        self._styles: dict[str, StyleDef] = _build_styles(_PRESETS[preset])

    def get_style(self, name: str) -> StyleDef:
        """Get style by semantic name.

        Supported names: heading_1..heading_6, body, code_block,
        inline_code, blockquote, list_item, table_header, table_body,
        horizontal_rule.

        Falls back to ``body`` for unknown names.
        """
        return self._styles.get(name, self._styles["body"])

    def get_heading(self, level: int) -> StyleDef:
        """Return the style for heading level *1--6* (clamped)."""
        level = max(1, min(6, level))
        return self.get_style(f"heading_{level}")

    def get_body_run(self) -> RunProperty:
        return self.get_style("body").run

    def get_body_para(self) -> ParagraphProperty:
        return self.get_style("body").para

    def list_style_names(self) -> list[str]:
        """Return all available style names in this preset."""
        return sorted(self._styles.keys())
