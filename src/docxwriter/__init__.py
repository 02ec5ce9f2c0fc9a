"""docxwriter: build WordprocessingML documents from typed element trees.

Elements are immutable; every builder call returns a new value::

    from docxwriter import Docx, Header, PageNum, Paragraph, Run

    header = Header().add_page_num(PageNum().wrap("none").x_align("right"))
    docx = Docx().header(header).add_paragraph(Paragraph().add_run(Run().add_text("Hello")))
    docx.build().pack("hello.docx")
"""

__version__ = "0.1.0"

from docxwriter.document import Document, DocumentContent, Footer, Header
from docxwriter.errors import (
    DestinationUnavailableError,
    DocxError,
    MarkupError,
    SerializationError,
)
from docxwriter.fields import NumPages, PageNum, StructuredDataTagProperty
from docxwriter.package import Docx, XMLDocx
from docxwriter.paragraph import Paragraph
from docxwriter.properties import (
    FrameProperty,
    Indent,
    LineSpacing,
    PageMargin,
    PageSize,
    ParagraphProperty,
    RunFonts,
    RunProperty,
    SectionProperty,
    Shading,
    TableBorder,
    TableBorders,
    TableCellProperty,
    TableProperty,
    TableRowProperty,
    TableWidth,
)
from docxwriter.run import Break, FieldChar, InstrText, Run, Tab, Text
from docxwriter.table import Table, TableCell, TableRow
from docxwriter.types import (
    AlignmentType,
    BorderType,
    BreakType,
    FieldCharType,
    HeightRule,
    InstrKind,
    LineSpacingRule,
    PageOrientation,
    ShdType,
    SpecialIndentType,
    TableLayoutType,
    VAlignType,
    VertAlignType,
    VMergeType,
    WidthType,
)
from docxwriter.xml_builder import BuildXML, XMLBuilder

__all__ = [
    "AlignmentType",
    "BorderType",
    "Break",
    "BreakType",
    "BuildXML",
    "DestinationUnavailableError",
    "Document",
    "DocumentContent",
    "Docx",
    "DocxError",
    "FieldChar",
    "FieldCharType",
    "Footer",
    "FrameProperty",
    "Header",
    "HeightRule",
    "Indent",
    "InstrKind",
    "InstrText",
    "LineSpacing",
    "LineSpacingRule",
    "MarkupError",
    "NumPages",
    "PageMargin",
    "PageNum",
    "PageOrientation",
    "PageSize",
    "Paragraph",
    "ParagraphProperty",
    "Run",
    "RunFonts",
    "RunProperty",
    "SectionProperty",
    "SerializationError",
    "Shading",
    "ShdType",
    "SpecialIndentType",
    "StructuredDataTagProperty",
    "Tab",
    "Table",
    "TableBorder",
    "TableBorders",
    "TableCell",
    "TableCellProperty",
    "TableLayoutType",
    "TableProperty",
    "TableRow",
    "TableRowProperty",
    "TableWidth",
    "Text",
    "VAlignType",
    "VMergeType",
    "VertAlignType",
    "WidthType",
    "XMLBuilder",
    "XMLDocx",
    "__version__",
]
