"""Markdown front-end: turn Markdown text into a :class:`Document` tree.

Uses mistune v3 in AST mode and maps each block token onto paragraphs and
tables, applying direct formatting from a :class:`StyleManager` preset.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import mistune

from docxwriter.document import Document
from docxwriter.logger import get_logger
from docxwriter.paragraph import Paragraph
from docxwriter.properties import PageMargin, PageSize, RunProperty, TableBorders
from docxwriter.run import Run
from docxwriter.style_manager import StyleDef, StyleManager
from docxwriter.table import Table, TableCell, TableRow
from docxwriter.types import AlignmentType, BreakType, TableLayoutType

logger = get_logger(__name__)

Block = Union[Paragraph, Table]

# Usable width between the default margins, in twips.
CONTENT_WIDTH = PageSize().w - PageMargin().left - PageMargin().right

LINK_COLOR = "0563C1"
HEADER_FILL = "D9D9D9"
BULLETS = ("•", "◦", "▪")
TASK_DONE = "☑"
TASK_OPEN = "☐"

_ALIGN_FROM_STR = {
    "left": AlignmentType.LEFT,
    "center": AlignmentType.CENTER,
    "right": AlignmentType.RIGHT,
}


class MarkdownReader:
    """Parse Markdown into a :class:`Document`.

    Usage::

        doc = MarkdownReader(StyleManager("academic")).read("# Title")
    """

    def __init__(self, style_manager: Optional[StyleManager] = None) -> None:
        self.style: StyleManager = style_manager or StyleManager()
        self._md = mistune.create_markdown(
            renderer=None,  # AST mode
            plugins=["table", "strikethrough", "task_lists"],
        )

    # -- public API ---------------------------------------------------------

    def read(self, markdown_text: str) -> Document:
        tokens: list[dict[str, Any]] = self._md(markdown_text)  # type: ignore[assignment]
        logger.debug("Parsed %d block tokens", len(tokens))
        doc = Document()
        for block in self._blocks(tokens):
            if isinstance(block, Table):
                doc = doc.add_table(block)
            else:
                doc = doc.add_paragraph(block)
        return doc

    # -- block dispatch -----------------------------------------------------

    def _blocks(self, tokens: list[dict[str, Any]], depth: int = 0) -> list[Block]:
        blocks: list[Block] = []
        for tok in tokens:
            blocks.extend(self._block(tok, depth))
        return blocks

    def _block(self, tok: dict[str, Any], depth: int = 0) -> list[Block]:
        ttype = tok.get("type", "")
        handler = getattr(self, f"_handle_{ttype}", None)
        if handler is not None:
            return handler(tok, depth)
        # Unknown block: keep its raw text as a body paragraph.
        raw = tok.get("raw", tok.get("text", ""))
        if raw:
            run = self._run(str(raw), self.style.get_body_run())
            return [Paragraph((run,), self.style.get_body_para())]
        return []

    def _handle_blank_line(self, _tok: dict, _depth: int) -> list[Block]:
        return []

    def _handle_heading(self, tok: dict, _depth: int) -> list[Block]:
        level = tok.get("attrs", {}).get("level", 1)
        style = self.style.get_heading(level)
        return [self._paragraph(self._inline(tok.get("children"), style.run), style)]

    def _handle_paragraph(self, tok: dict, _depth: int) -> list[Block]:
        style = self.style.get_style("body")
        runs = self._inline(tok.get("children"), style.run)
        return [self._paragraph(runs, style)] if runs else []

    def _handle_block_text(self, tok: dict, depth: int) -> list[Block]:
        return self._handle_paragraph(tok, depth)

    def _handle_block_html(self, tok: dict, _depth: int) -> list[Block]:
        style = self.style.get_style("body")
        raw = str(tok.get("raw", "")).strip()
        return [self._paragraph([self._run(raw, style.run)], style)] if raw else []

    def _handle_thematic_break(self, _tok: dict, _depth: int) -> list[Block]:
        style = self.style.get_style("horizontal_rule")
        return [self._paragraph([self._run("─" * 40, style.run)], style)]

    def _handle_block_code(self, tok: dict, _depth: int) -> list[Block]:
        style = self.style.get_style("code_block")
        lines = str(tok.get("raw", "")).split("\n")
        if lines and lines[-1] == "":
            lines = lines[:-1]
        return [
            self._paragraph([self._run(line, style.run)] if line else [], style)
            for line in lines
        ]

    def _handle_block_quote(self, tok: dict, depth: int) -> list[Block]:
        style = self.style.get_style("blockquote")
        blocks: list[Block] = []
        for child in tok.get("children", []):
            if child.get("type") == "paragraph":
                runs = self._inline(child.get("children"), style.run)
                if runs:
                    blocks.append(self._paragraph(runs, style))
            else:
                blocks.extend(self._block(child, depth))
        return blocks

    # -- lists --------------------------------------------------------------

    def _handle_list(self, tok: dict, depth: int) -> list[Block]:
        attrs = tok.get("attrs", {})
        ordered = bool(attrs.get("ordered", False))
        counter = attrs.get("start", 1) or 1
        blocks: list[Block] = []
        for item in tok.get("children", []):
            if ordered:
                marker = f"{counter}."
            else:
                marker = BULLETS[depth % len(BULLETS)]
            if item.get("type") == "task_list_item":
                checked = item.get("attrs", {}).get("checked", False)
                marker = TASK_DONE if checked else TASK_OPEN
            blocks.extend(self._list_item(item, marker, depth))
            counter += 1
        return blocks

    def _list_item(self, item: dict, marker: str, depth: int) -> list[Block]:
        style = self.style.get_style("list_item")
        indent = style.para.indent
        if indent is not None and indent.start is not None:
            style = StyleDef(
                name=style.name,
                run=style.run,
                para=style.para.derive(indent=indent.derive(start=indent.start * (depth + 1))),
            )

        blocks: list[Block] = []
        marked = False
        for child in item.get("children", []):
            ctype = child.get("type")
            if ctype == "list":
                blocks.extend(self._handle_list(child, depth + 1))
            elif ctype in ("block_text", "paragraph"):
                runs = self._inline(child.get("children"), style.run)
                if not marked:
                    runs = [Run(run_property=style.run).add_text(marker).add_tab()] + runs
                    marked = True
                blocks.append(self._paragraph(runs, style))
            else:
                blocks.extend(self._block(child, depth))
        if not marked:
            blocks.insert(0, self._paragraph([self._run(marker, style.run)], style))
        return blocks

    # -- tables -------------------------------------------------------------

    def _handle_table(self, tok: dict, _depth: int) -> list[Block]:
        rows: list[tuple[list[dict], bool]] = []
        for child in tok.get("children", []):
            ctype = child.get("type", "")
            if ctype == "table_head":
                rows.append((child.get("children", []), True))
            elif ctype == "table_body":
                for row in child.get("children", []):
                    rows.append((row.get("children", []), False))
        if not rows:
            return []

        num_cols = max(len(cells) for cells, _ in rows) or 1
        col_width = CONTENT_WIDTH // num_cols

        table = (
            Table()
            .set_grid([col_width] * num_cols)
            .width(col_width * num_cols)
            .layout(TableLayoutType.FIXED)
            .borders(TableBorders.uniform())
        )
        for cells, is_header in rows:
            style = self.style.get_style("table_header" if is_header else "table_body")
            row = TableRow()
            for cell_tok in cells:
                para = self._paragraph(self._inline(cell_tok.get("children"), style.run), style)
                align = _ALIGN_FROM_STR.get(cell_tok.get("attrs", {}).get("align") or "")
                if align is not None:
                    para = para.align(align)
                cell = TableCell().add_paragraph(para).width(col_width)
                if is_header:
                    cell = cell.shading(HEADER_FILL)
                row = row.add_cell(cell)
            table = table.add_row(row)
        return [table]

    # -- inline -------------------------------------------------------------

    def _inline(self, children: Any, base: RunProperty) -> list[Run]:
        if children is None:
            return []
        if isinstance(children, str):
            return [self._run(children, base)] if children else []

        runs: list[Run] = []
        for tok in children:
            runs.extend(self._inline_token(tok, base))
        return runs

    def _inline_token(self, tok: dict[str, Any], base: RunProperty) -> list[Run]:
        ttype = tok.get("type", "")

        if ttype == "text":
            raw = tok.get("raw", "")
            return [self._run(raw, base)] if raw else []

        if ttype == "strong":
            return self._inline(tok.get("children"), base.derive(bold=True))

        if ttype == "emphasis":
            return self._inline(tok.get("children"), base.derive(italic=True))

        if ttype == "strikethrough":
            return self._inline(tok.get("children"), base.derive(strike=True))

        if ttype == "codespan":
            code = self.style.get_style("inline_code").run
            return [self._run(str(tok.get("raw", "")), base.merge(code))]

        if ttype == "link":
            link = base.derive(underline="single", color=LINK_COLOR)
            return self._inline(tok.get("children"), link)

        if ttype == "image":
            alt = self._plain_text(tok.get("children")) or "image"
            return [self._run(f"[Image: {alt}]", base.derive(italic=True, color="666666"))]

        if ttype == "linebreak":
            return [Run(run_property=base).add_break(BreakType.TEXT_WRAPPING)]

        if ttype == "softbreak":
            return [self._run(" ", base)]

        text = self._plain_text(tok.get("children")) or str(tok.get("raw", ""))
        return [self._run(text, base)] if text else []

    # -- helpers ------------------------------------------------------------

    @staticmethod
    def _run(text: str, prop: RunProperty) -> Run:
        return Run(run_property=prop).add_text(text)

    @staticmethod
    def _paragraph(runs: list[Run], style: StyleDef) -> Paragraph:
        return Paragraph(tuple(runs), style.para)

    def _plain_text(self, children: Any) -> str:
        if isinstance(children, str):
            return children
        if isinstance(children, list):
            parts: list[str] = []
            for c in children:
                if isinstance(c, dict):
                    parts.append(c.get("raw") or self._plain_text(c.get("children")))
            return "".join(parts)
        return ""
