"""Property objects: the optional-attribute bags attached to elements.

Every field of a property object is independently optional; ``None`` means
"absent" and is never written.  Updates go through :meth:`derive` (copy with
named fields overridden) or :meth:`merge` (overlay another object's set
fields), so setting one field never clears another.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Optional, TypeVar

from docxwriter.types import (
    AlignmentType,
    BorderType,
    HeightRule,
    LineSpacingRule,
    PageOrientation,
    ShdType,
    SpecialIndentType,
    TableLayoutType,
    VAlignType,
    VMergeType,
    VertAlignType,
    WidthType,
)
from docxwriter.xml_builder import BuildXML, XMLBuilder

P = TypeVar("P", bound="_Property")


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class _Property(BuildXML):
    """Shared overlay behaviour for optional-field property objects."""

    def derive(self: P, **overrides: Any) -> P:
        """Return a copy with selected fields overridden."""
        return replace(self, **overrides)

    def merge(self: P, other: Optional[P]) -> P:
        """Overlay the fields *other* has set onto a copy of ``self``.

        Nested property objects are taken wholesale from *other*.
        """
        if other is None:
            return self
        updates = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **updates)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


def _toggle(b: XMLBuilder, tag: str, on: Optional[bool]) -> None:
    if on is None:
        return
    if on:
        b.empty(tag)
    else:
        b.empty(tag, {"w:val": "false"})


def _val(b: XMLBuilder, tag: str, value: Any) -> None:
    if value is not None:
        b.empty(tag, {"w:val": value})


# ---------------------------------------------------------------------------
# Run properties
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RunFonts(_Property):
    ascii: Optional[str] = None
    hi_ansi: Optional[str] = None
    east_asia: Optional[str] = None
    cs: Optional[str] = None

    def build(self) -> bytes:
        return XMLBuilder().empty("w:rFonts", [
            ("w:ascii", self.ascii),
            ("w:hAnsi", self.hi_ansi),
            ("w:eastAsia", self.east_asia),
            ("w:cs", self.cs),
        ]).build()


@dataclass(frozen=True)
class RunProperty(_Property):
    """``w:rPr``.  Always rendered as an element, even when empty."""

    style: Optional[str] = None
    fonts: Optional[RunFonts] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    strike: Optional[bool] = None
    vanish: Optional[bool] = None
    color: Optional[str] = None
    character_spacing: Optional[int] = None
    # half-points
    size: Optional[int] = None
    highlight: Optional[str] = None
    underline: Optional[str] = None
    vert_align: Optional[VertAlignType] = None

    def build(self) -> bytes:
        b = XMLBuilder().open("w:rPr")
        _val(b, "w:rStyle", self.style)
        b.add_optional_child(self.fonts)
        _toggle(b, "w:b", self.bold)
        _toggle(b, "w:bCs", self.bold)
        _toggle(b, "w:i", self.italic)
        _toggle(b, "w:iCs", self.italic)
        _toggle(b, "w:strike", self.strike)
        _toggle(b, "w:vanish", self.vanish)
        _val(b, "w:color", self.color)
        _val(b, "w:spacing", self.character_spacing)
        _val(b, "w:sz", self.size)
        _val(b, "w:szCs", self.size)
        _val(b, "w:highlight", self.highlight)
        _val(b, "w:u", self.underline)
        _val(b, "w:vertAlign", self.vert_align)
        return b.close().build()


# ---------------------------------------------------------------------------
# Paragraph properties
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FrameProperty(_Property):
    """``w:framePr``: absolute or floating text frame positioning."""

    w: Optional[int] = None
    h: Optional[int] = None
    h_rule: Optional[str] = None
    wrap: Optional[str] = None
    v_anchor: Optional[str] = None
    h_anchor: Optional[str] = None
    h_space: Optional[int] = None
    v_space: Optional[int] = None
    x: Optional[int] = None
    x_align: Optional[str] = None
    y: Optional[int] = None
    y_align: Optional[str] = None

    def build(self) -> bytes:
        if self.is_empty():
            return XMLBuilder().open("w:framePr").close().build()
        return XMLBuilder().empty("w:framePr", [
            ("w:w", self.w),
            ("w:h", self.h),
            ("w:hRule", self.h_rule),
            ("w:wrap", self.wrap),
            ("w:vAnchor", self.v_anchor),
            ("w:hAnchor", self.h_anchor),
            ("w:hSpace", self.h_space),
            ("w:vSpace", self.v_space),
            ("w:x", self.x),
            ("w:xAlign", self.x_align),
            ("w:y", self.y),
            ("w:yAlign", self.y_align),
        ]).build()


@dataclass(frozen=True)
class Indent(_Property):
    """``w:ind`` in twips."""

    start: Optional[int] = None
    end: Optional[int] = None
    special: Optional[SpecialIndentType] = None
    special_value: Optional[int] = None

    def build(self) -> bytes:
        attrs: list[tuple[str, Any]] = [("w:left", self.start), ("w:right", self.end)]
        if self.special is not None:
            attrs.append((f"w:{self.special.value}", self.special_value or 0))
        return XMLBuilder().empty("w:ind", attrs).build()


@dataclass(frozen=True)
class LineSpacing(_Property):
    """``w:spacing``; before/after in twips, line in 240ths of a line for ``auto``."""

    before: Optional[int] = None
    after: Optional[int] = None
    line: Optional[int] = None
    line_rule: Optional[LineSpacingRule] = None

    def build(self) -> bytes:
        return XMLBuilder().empty("w:spacing", [
            ("w:before", self.before),
            ("w:after", self.after),
            ("w:line", self.line),
            ("w:lineRule", self.line_rule),
        ]).build()


@dataclass(frozen=True)
class NumberingProperty(BuildXML):
    id: int
    level: int = 0

    def build(self) -> bytes:
        return (
            XMLBuilder()
            .open("w:numPr")
            .empty("w:ilvl", {"w:val": self.level})
            .empty("w:numId", {"w:val": self.id})
            .close()
            .build()
        )


@dataclass(frozen=True)
class ParagraphProperty(_Property):
    """``w:pPr``.  Always rendered, and always carries a ``w:rPr``."""

    style: Optional[str] = None
    keep_next: Optional[bool] = None
    keep_lines: Optional[bool] = None
    page_break_before: Optional[bool] = None
    frame_property: Optional[FrameProperty] = None
    numbering: Optional[NumberingProperty] = None
    line_spacing: Optional[LineSpacing] = None
    indent: Optional[Indent] = None
    alignment: Optional[AlignmentType] = None
    run_property: Optional[RunProperty] = None

    def align(self, alignment: AlignmentType) -> ParagraphProperty:
        return self.derive(alignment=alignment)

    def build(self) -> bytes:
        b = XMLBuilder().open("w:pPr")
        _val(b, "w:pStyle", self.style)
        _toggle(b, "w:keepNext", self.keep_next)
        _toggle(b, "w:keepLines", self.keep_lines)
        _toggle(b, "w:pageBreakBefore", self.page_break_before)
        b.add_optional_child(self.frame_property)
        b.add_optional_child(self.numbering)
        b.add_optional_child(self.line_spacing)
        b.add_optional_child(self.indent)
        _val(b, "w:jc", self.alignment)
        b.add_child(self.run_property or RunProperty())
        return b.close().build()


# ---------------------------------------------------------------------------
# Table properties
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TableWidth:
    width: int
    width_type: WidthType = WidthType.DXA

    def attrs(self) -> list[tuple[str, Any]]:
        return [("w:w", self.width), ("w:type", self.width_type)]


@dataclass(frozen=True)
class TableBorder:
    border_type: BorderType = BorderType.SINGLE
    # eighths of a point
    size: int = 2
    space: int = 0
    color: str = "000000"

    def attrs(self) -> list[tuple[str, Any]]:
        return [
            ("w:val", self.border_type),
            ("w:sz", self.size),
            ("w:space", self.space),
            ("w:color", self.color),
        ]


@dataclass(frozen=True)
class TableBorders(_Property):
    top: Optional[TableBorder] = None
    left: Optional[TableBorder] = None
    bottom: Optional[TableBorder] = None
    right: Optional[TableBorder] = None
    inside_h: Optional[TableBorder] = None
    inside_v: Optional[TableBorder] = None

    @classmethod
    def uniform(cls, border: Optional[TableBorder] = None) -> TableBorders:
        """All six edges set to *border* (single, 1/4 pt, black by default)."""
        border = border or TableBorder()
        return cls(border, border, border, border, border, border)

    def build(self) -> bytes:
        b = XMLBuilder().open("w:tblBorders")
        for tag, border in (
            ("w:top", self.top),
            ("w:left", self.left),
            ("w:bottom", self.bottom),
            ("w:right", self.right),
            ("w:insideH", self.inside_h),
            ("w:insideV", self.inside_v),
        ):
            if border is not None:
                b.empty(tag, border.attrs())
        return b.close().build()


@dataclass(frozen=True)
class TableProperty(_Property):
    style: Optional[str] = None
    width: Optional[TableWidth] = None
    justification: Optional[AlignmentType] = None
    # twips
    indent: Optional[int] = None
    borders: Optional[TableBorders] = None
    layout: Optional[TableLayoutType] = None

    def build(self) -> bytes:
        b = XMLBuilder().open("w:tblPr")
        _val(b, "w:tblStyle", self.style)
        if self.width is not None:
            b.empty("w:tblW", self.width.attrs())
        _val(b, "w:jc", self.justification)
        if self.indent is not None:
            b.empty("w:tblInd", {"w:w": self.indent, "w:type": WidthType.DXA})
        b.add_optional_child(self.borders)
        if self.layout is not None:
            b.empty("w:tblLayout", {"w:type": self.layout})
        return b.close().build()


@dataclass(frozen=True)
class TableRowProperty(_Property):
    # twips
    height: Optional[int] = None
    height_rule: Optional[HeightRule] = None

    def build(self) -> bytes:
        b = XMLBuilder().open("w:trPr")
        if self.height is not None:
            b.empty("w:trHeight", [("w:val", self.height), ("w:hRule", self.height_rule)])
        return b.close().build()


@dataclass(frozen=True)
class Shading(BuildXML):
    fill: str
    color: str = "auto"
    shd_type: ShdType = ShdType.CLEAR

    def build(self) -> bytes:
        return XMLBuilder().empty("w:shd", [
            ("w:val", self.shd_type),
            ("w:color", self.color),
            ("w:fill", self.fill),
        ]).build()


@dataclass(frozen=True)
class TableCellProperty(_Property):
    width: Optional[TableWidth] = None
    grid_span: Optional[int] = None
    vertical_merge: Optional[VMergeType] = None
    shading: Optional[Shading] = None
    vertical_align: Optional[VAlignType] = None

    def build(self) -> bytes:
        b = XMLBuilder().open("w:tcPr")
        if self.width is not None:
            b.empty("w:tcW", self.width.attrs())
        _val(b, "w:gridSpan", self.grid_span)
        _val(b, "w:vMerge", self.vertical_merge)
        b.add_optional_child(self.shading)
        _val(b, "w:vAlign", self.vertical_align)
        return b.close().build()


# ---------------------------------------------------------------------------
# Section properties
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PageSize:
    """Page dimensions in twips; A4 portrait by default."""

    w: int = 11906
    h: int = 16838
    orient: Optional[PageOrientation] = None


@dataclass(frozen=True)
class PageMargin:
    """Page margins in twips; one inch on every side by default."""

    top: int = 1440
    right: int = 1440
    bottom: int = 1440
    left: int = 1440
    header: int = 708
    footer: int = 708
    gutter: int = 0


@dataclass(frozen=True)
class SectionProperty(_Property):
    page_size: Optional[PageSize] = None
    page_margin: Optional[PageMargin] = None
    header_reference: Optional[str] = None
    footer_reference: Optional[str] = None

    def build(self) -> bytes:
        size = self.page_size or PageSize()
        margin = self.page_margin or PageMargin()
        b = XMLBuilder().open("w:sectPr")
        if self.header_reference is not None:
            b.empty("w:headerReference", {"w:type": "default", "r:id": self.header_reference})
        if self.footer_reference is not None:
            b.empty("w:footerReference", {"w:type": "default", "r:id": self.footer_reference})
        b.empty("w:pgSz", [("w:w", size.w), ("w:h", size.h), ("w:orient", size.orient)])
        b.empty("w:pgMar", [
            ("w:top", margin.top),
            ("w:right", margin.right),
            ("w:bottom", margin.bottom),
            ("w:left", margin.left),
            ("w:header", margin.header),
            ("w:footer", margin.footer),
            ("w:gutter", margin.gutter),
        ])
        return b.close().build()
