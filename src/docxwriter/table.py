"""Tables: ``w:tbl`` with rows of cells.

Cells hold the closed union ``Paragraph | Table``.  A cell must contain at
least one block, so an empty cell renders a single empty paragraph.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from docxwriter.paragraph import Paragraph
from docxwriter.properties import (
    Shading,
    TableBorders,
    TableCellProperty,
    TableProperty,
    TableRowProperty,
    TableWidth,
)
from docxwriter.types import (
    AlignmentType,
    HeightRule,
    TableLayoutType,
    VAlignType,
    VMergeType,
    WidthType,
)
from docxwriter.xml_builder import BuildXML, XMLBuilder

CellContent = Union[Paragraph, "Table"]


def _check_cell_content(content: Any) -> None:
    if not isinstance(content, (Paragraph, Table)):
        raise TypeError(
            f"table cell content must be Paragraph or Table, got {type(content).__name__}"
        )


@dataclass(frozen=True)
class TableCell(BuildXML):
    children: tuple[CellContent, ...] = ()
    cell_property: TableCellProperty = field(default_factory=TableCellProperty)

    def __post_init__(self) -> None:
        children = tuple(self.children)
        for child in children:
            _check_cell_content(child)
        object.__setattr__(self, "children", children)

    def add_paragraph(self, p: Paragraph) -> TableCell:
        _check_cell_content(p)
        return replace(self, children=self.children + (p,))

    def add_table(self, t: Table) -> TableCell:
        _check_cell_content(t)
        return replace(self, children=self.children + (t,))

    def width(self, width: int, width_type: WidthType = WidthType.DXA) -> TableCell:
        return self._with_property(width=TableWidth(width, width_type))

    def grid_span(self, span: int) -> TableCell:
        return self._with_property(grid_span=span)

    def vertical_merge(self, merge: VMergeType) -> TableCell:
        return self._with_property(vertical_merge=merge)

    def vertical_align(self, align: VAlignType) -> TableCell:
        return self._with_property(vertical_align=align)

    def shading(self, fill: str) -> TableCell:
        return self._with_property(shading=Shading(fill))

    def build(self) -> bytes:
        b = XMLBuilder().open("w:tc").add_child(self.cell_property)
        for child in self.children or (Paragraph(),):
            b.add_child(child)
        return b.close().build()

    def _with_property(self, **fields: Any) -> TableCell:
        return replace(self, cell_property=self.cell_property.derive(**fields))


@dataclass(frozen=True)
class TableRow(BuildXML):
    cells: tuple[TableCell, ...] = ()
    row_property: TableRowProperty = field(default_factory=TableRowProperty)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))

    def add_cell(self, cell: TableCell) -> TableRow:
        return replace(self, cells=self.cells + (cell,))

    def row_height(self, height: int, rule: Optional[HeightRule] = None) -> TableRow:
        update = TableRowProperty(height=height, height_rule=rule)
        return replace(self, row_property=self.row_property.merge(update))

    def build(self) -> bytes:
        b = XMLBuilder().open("w:tr").add_child(self.row_property)
        for cell in self.cells:
            b.add_child(cell)
        return b.close().build()


@dataclass(frozen=True)
class Table(BuildXML):
    """``w:tbl``.

    Usage::

        table = Table((TableRow((TableCell().add_paragraph(p),)),)).set_grid([2000])
    """

    rows: tuple[TableRow, ...] = ()
    table_property: TableProperty = field(default_factory=TableProperty)
    grid: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))
        object.__setattr__(self, "grid", tuple(self.grid))

    def add_row(self, row: TableRow) -> Table:
        return replace(self, rows=self.rows + (row,))

    def set_grid(self, widths: list[int] | tuple[int, ...]) -> Table:
        """Column widths in twips for ``w:tblGrid``."""
        return replace(self, grid=tuple(widths))

    def width(self, width: int, width_type: WidthType = WidthType.DXA) -> Table:
        return self._with_property(width=TableWidth(width, width_type))

    def align(self, alignment: AlignmentType) -> Table:
        return self._with_property(justification=alignment)

    def indent(self, twips: int) -> Table:
        return self._with_property(indent=twips)

    def style(self, style_id: str) -> Table:
        return self._with_property(style=style_id)

    def layout(self, layout: TableLayoutType) -> Table:
        return self._with_property(layout=layout)

    def borders(self, borders: TableBorders) -> Table:
        current = self.table_property.borders or TableBorders()
        return self._with_property(borders=current.merge(borders))

    def build(self) -> bytes:
        b = XMLBuilder().open("w:tbl").add_child(self.table_property)
        b.open("w:tblGrid")
        for w in self.grid:
            b.empty("w:gridCol", {"w:w": w})
        b.close()
        for row in self.rows:
            b.add_child(row)
        return b.close().build()

    def _with_property(self, **fields: Any) -> Table:
        return replace(self, table_property=self.table_property.derive(**fields))
