"""Part roots: the main document body, headers and footers.

Content unions are closed.  ``Document`` holds only paragraphs and tables;
headers and footers additionally hold the block-level page fields.  Anything
else is rejected with ``TypeError`` when it is added.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, TypeVar, Union

from docxwriter.fields import NumPages, PageNum
from docxwriter.paragraph import Paragraph
from docxwriter.properties import SectionProperty
from docxwriter.table import Table
from docxwriter.xml_builder import BuildXML, XMLBuilder

DocumentContent = Union[Paragraph, Table]
HeaderFooterContent = Union[Paragraph, Table, PageNum, NumPages]

_DOCUMENT_CONTENT_TYPES = (Paragraph, Table)
_HEADER_FOOTER_CONTENT_TYPES = (Paragraph, Table, PageNum, NumPages)

H = TypeVar("H", bound="_HeaderFooter")


def _checked(children: Any, allowed: tuple[type, ...], owner: str) -> tuple:
    children = tuple(children)
    for child in children:
        if not isinstance(child, allowed):
            raise TypeError(f"{owner} cannot contain {type(child).__name__}")
    return children


def _render_document_content(b: XMLBuilder, content: DocumentContent) -> None:
    if isinstance(content, Paragraph):
        b.add_child(content)
    elif isinstance(content, Table):
        b.add_child(content)
    else:
        raise TypeError(f"unknown document content {type(content).__name__}")


@dataclass(frozen=True)
class Document(BuildXML):
    """``word/document.xml``.

    Usage::

        xml = Document().add_paragraph(Paragraph().add_run(Run().add_text("Hi"))).build()
    """

    children: tuple[DocumentContent, ...] = ()
    section: Optional[SectionProperty] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "children", _checked(self.children, _DOCUMENT_CONTENT_TYPES, "Document")
        )

    def add_paragraph(self, p: Paragraph) -> Document:
        return self._append(p)

    def add_table(self, t: Table) -> Document:
        return self._append(t)

    def section_property(self, section: SectionProperty) -> Document:
        return replace(self, section=section)

    def build(self) -> bytes:
        b = XMLBuilder().declaration(standalone=True).open_document().open_body()
        for child in self.children:
            _render_document_content(b, child)
        b.add_optional_child(self.section)
        return b.close().close().build()

    def _append(self, child: DocumentContent) -> Document:
        children = _checked((child,), _DOCUMENT_CONTENT_TYPES, "Document")
        return replace(self, children=self.children + children)


@dataclass(frozen=True)
class _HeaderFooter(BuildXML):
    children: tuple[HeaderFooterContent, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "children",
            _checked(self.children, _HEADER_FOOTER_CONTENT_TYPES, type(self).__name__),
        )

    def add_paragraph(self: H, p: Paragraph) -> H:
        return self._append(p)

    def add_table(self: H, t: Table) -> H:
        return self._append(t)

    def add_page_num(self: H, page_num: PageNum) -> H:
        return self._append(page_num)

    def add_num_pages(self: H, num_pages: NumPages) -> H:
        return self._append(num_pages)

    def _open_root(self, b: XMLBuilder) -> XMLBuilder:
        raise NotImplementedError

    def build(self) -> bytes:
        b = self._open_root(XMLBuilder().declaration(standalone=True))
        for child in self.children:
            b.add_child(child)
        return b.close().build()

    def _append(self: H, child: HeaderFooterContent) -> H:
        children = _checked((child,), _HEADER_FOOTER_CONTENT_TYPES, type(self).__name__)
        return replace(self, children=self.children + children)


@dataclass(frozen=True)
class Header(_HeaderFooter):
    """``word/header1.xml``."""

    def _open_root(self, b: XMLBuilder) -> XMLBuilder:
        return b.open_header()


@dataclass(frozen=True)
class Footer(_HeaderFooter):
    """``word/footer1.xml``."""

    def _open_root(self, b: XMLBuilder) -> XMLBuilder:
        return b.open_footer()
