"""DOCX packaging: place rendered XML parts into an OPC ZIP container.

:class:`Docx` aggregates the document body with an optional header and
footer; :meth:`Docx.build` renders every part and returns an
:class:`XMLDocx`, whose :meth:`XMLDocx.pack` writes the archive.
"""

from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import BinaryIO, Optional, Union

from docxwriter.document import Document, Footer, Header
from docxwriter.errors import DestinationUnavailableError, SerializationError
from docxwriter.logger import get_logger
from docxwriter.paragraph import Paragraph
from docxwriter.properties import PageMargin, PageSize, SectionProperty
from docxwriter.table import Table
from docxwriter.xml_builder import XMLBuilder

logger = get_logger(__name__)

DOCX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

_PKG_RELS_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
_CT_NS = "http://schemas.openxmlformats.org/package/2006/content-types"
_OFFICE_RELS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
_W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

_REL_OFFICE_DOCUMENT = f"{_OFFICE_RELS}/officeDocument"
_REL_CORE = "http://schemas.openxmlformats.org/package/2006/relationships/metadata/core-properties"
_REL_APP = f"{_OFFICE_RELS}/extended-properties"
_REL_SETTINGS = f"{_OFFICE_RELS}/settings"
_REL_HEADER = f"{_OFFICE_RELS}/header"
_REL_FOOTER = f"{_OFFICE_RELS}/footer"

_CT_MAIN = "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"
_CT_SETTINGS = "application/vnd.openxmlformats-officedocument.wordprocessingml.settings+xml"
_CT_HEADER = "application/vnd.openxmlformats-officedocument.wordprocessingml.header+xml"
_CT_FOOTER = "application/vnd.openxmlformats-officedocument.wordprocessingml.footer+xml"
_CT_CORE = "application/vnd.openxmlformats-package.core-properties+xml"
_CT_APP = "application/vnd.openxmlformats-officedocument.extended-properties+xml"

HEADER_RID = "rIdHeader1"
FOOTER_RID = "rIdFooter1"

# Fixed member timestamp keeps archives byte-identical across runs.
_ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)

Target = Union[str, Path, BinaryIO]


# ---------------------------------------------------------------------------
# Fixed-structure parts
# ---------------------------------------------------------------------------

def _relationships(rels: list[tuple[str, str, str]]) -> bytes:
    b = XMLBuilder().declaration(standalone=True).open("Relationships")
    b.attribute("xmlns", _PKG_RELS_NS)
    for rid, rel_type, target in rels:
        b.empty("Relationship", [("Id", rid), ("Type", rel_type), ("Target", target)])
    return b.close().build()


def _content_types(overrides: list[tuple[str, str]]) -> bytes:
    b = XMLBuilder().declaration(standalone=True).open("Types")
    b.attribute("xmlns", _CT_NS)
    b.empty("Default", {
        "Extension": "rels",
        "ContentType": "application/vnd.openxmlformats-package.relationships+xml",
    })
    b.empty("Default", {"Extension": "xml", "ContentType": "application/xml"})
    for part_name, content_type in overrides:
        b.empty("Override", {"PartName": part_name, "ContentType": content_type})
    return b.close().build()


def _settings() -> bytes:
    b = XMLBuilder().declaration(standalone=True).open("w:settings")
    b.attribute("xmlns:w", _W_NS)
    b.empty("w:zoom", {"w:percent": 100})
    b.empty("w:defaultTabStop", {"w:val": 709})
    b.open("w:compat")
    # compatibilityMode 15 keeps Word 2013+ out of compatibility mode
    b.empty("w:compatSetting", [
        ("w:name", "compatibilityMode"),
        ("w:uri", "http://schemas.microsoft.com/office/word"),
        ("w:val", 15),
    ])
    return b.close().close().build()


def _core_properties(title: Optional[str], creator: str) -> bytes:
    b = XMLBuilder().declaration(standalone=True).open("cp:coreProperties")
    b.attributes([
        ("xmlns:cp", "http://schemas.openxmlformats.org/package/2006/metadata/core-properties"),
        ("xmlns:dc", "http://purl.org/dc/elements/1.1/"),
        ("xmlns:dcterms", "http://purl.org/dc/terms/"),
        ("xmlns:dcmitype", "http://purl.org/dc/dcmitype/"),
        ("xmlns:xsi", "http://www.w3.org/2001/XMLSchema-instance"),
    ])
    if title is not None:
        b.open("dc:title").raw(title).close()
    b.open("dc:creator").raw(creator).close()
    return b.close().build()


def _app_properties(application: str) -> bytes:
    b = XMLBuilder().declaration(standalone=True).open("Properties")
    b.attribute(
        "xmlns", "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties"
    )
    b.open("Application").raw(application).close()
    return b.close().build()


# ---------------------------------------------------------------------------
# XMLDocx
# ---------------------------------------------------------------------------

@dataclass
class XMLDocx:
    """Rendered parts keyed by their archive path, in archive order."""

    parts: dict[str, bytes]

    def pack(self, target: Target) -> None:
        """Write the ZIP archive to a path or a writable binary stream."""
        if isinstance(target, (str, Path)):
            try:
                with open(target, "wb") as fh:
                    self._write_zip(fh)
            except OSError as exc:
                raise DestinationUnavailableError(
                    f"cannot write {target}: {exc.strerror or exc}"
                ) from exc
            logger.info("Wrote %s (%d parts)", target, len(self.parts))
            return

        try:
            self._write_zip(target)
        except (OSError, ValueError) as exc:
            raise DestinationUnavailableError(f"cannot write to stream: {exc}") from exc

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self._write_zip(buf)
        return buf.getvalue()

    def _write_zip(self, fh: BinaryIO) -> None:
        try:
            with zipfile.ZipFile(fh, "w", zipfile.ZIP_DEFLATED) as zf:
                for name, data in self.parts.items():
                    info = zipfile.ZipInfo(name, date_time=_ZIP_DATE_TIME)
                    info.compress_type = zipfile.ZIP_DEFLATED
                    zf.writestr(info, data)
                    logger.debug("Packed %s (%d bytes)", name, len(data))
        except zipfile.LargeZipFile as exc:
            raise SerializationError(str(exc)) from exc


# ---------------------------------------------------------------------------
# Docx
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Docx:
    """A complete word-processing package.

    Usage::

        Docx().header(Header().add_page_num(PageNum())).add_paragraph(p).build().pack("out.docx")
    """

    doc: Document = field(default_factory=Document)
    hdr: Optional[Header] = None
    ftr: Optional[Footer] = None
    pg_size: PageSize = field(default_factory=PageSize)
    pg_margin: PageMargin = field(default_factory=PageMargin)
    doc_title: Optional[str] = None
    creator: str = "docxwriter"

    # -- builders -----------------------------------------------------------

    def add_paragraph(self, p: Paragraph) -> Docx:
        return replace(self, doc=self.doc.add_paragraph(p))

    def add_table(self, t: Table) -> Docx:
        return replace(self, doc=self.doc.add_table(t))

    def header(self, header: Header) -> Docx:
        return replace(self, hdr=header)

    def footer(self, footer: Footer) -> Docx:
        return replace(self, ftr=footer)

    def page_size(self, w: int, h: int) -> Docx:
        return replace(self, pg_size=replace(self.pg_size, w=w, h=h))

    def page_margin(self, margin: PageMargin) -> Docx:
        return replace(self, pg_margin=margin)

    def title(self, title: str) -> Docx:
        return replace(self, doc_title=title)

    # -- rendering ----------------------------------------------------------

    def build(self) -> XMLDocx:
        """Render every part; the section property links header and footer.

        The document's section property is always rebuilt from this
        package's page size, page margin and header/footer parts.  A section
        property set directly on :attr:`doc` is replaced; use
        :meth:`page_size` and :meth:`page_margin` instead.
        """
        if self.doc.section is not None:
            logger.debug("Replacing document section property with package page settings")
        section = SectionProperty(
            page_size=self.pg_size,
            page_margin=self.pg_margin,
            header_reference=HEADER_RID if self.hdr is not None else None,
            footer_reference=FOOTER_RID if self.ftr is not None else None,
        )
        document = self.doc.section_property(section)

        doc_rels = [("rIdSettings", _REL_SETTINGS, "settings.xml")]
        overrides = [
            ("/word/document.xml", _CT_MAIN),
            ("/word/settings.xml", _CT_SETTINGS),
            ("/docProps/core.xml", _CT_CORE),
            ("/docProps/app.xml", _CT_APP),
        ]
        if self.hdr is not None:
            doc_rels.append((HEADER_RID, _REL_HEADER, "header1.xml"))
            overrides.append(("/word/header1.xml", _CT_HEADER))
        if self.ftr is not None:
            doc_rels.append((FOOTER_RID, _REL_FOOTER, "footer1.xml"))
            overrides.append(("/word/footer1.xml", _CT_FOOTER))

        parts: dict[str, bytes] = {
            "[Content_Types].xml": _content_types(overrides),
            "_rels/.rels": _relationships([
                ("rId1", _REL_OFFICE_DOCUMENT, "word/document.xml"),
                ("rId2", _REL_CORE, "docProps/core.xml"),
                ("rId3", _REL_APP, "docProps/app.xml"),
            ]),
            "docProps/app.xml": _app_properties(self.creator),
            "docProps/core.xml": _core_properties(self.doc_title, self.creator),
            "word/document.xml": document.build(),
            "word/_rels/document.xml.rels": _relationships(doc_rels),
            "word/settings.xml": _settings(),
        }
        if self.hdr is not None:
            parts["word/header1.xml"] = self.hdr.build()
        if self.ftr is not None:
            parts["word/footer1.xml"] = self.ftr.build()

        logger.debug("Rendered %d package parts", len(parts))
        return XMLDocx(parts)
