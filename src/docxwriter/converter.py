"""High-level Markdown-to-DOCX conversion orchestrator.

Ties together the Markdown reader, style manager and packaging into a single
public API for converting Markdown text or files to DOCX output.
"""

from __future__ import annotations

from pathlib import Path

from docxwriter.document import Footer
from docxwriter.errors import DestinationUnavailableError
from docxwriter.fields import NumPages, PageNum
from docxwriter.logger import get_logger
from docxwriter.markdown import MarkdownReader
from docxwriter.package import Docx
from docxwriter.paragraph import Paragraph
from docxwriter.run import Run
from docxwriter.style_manager import StyleManager
from docxwriter.types import AlignmentType

logger = get_logger(__name__)


def page_number_footer() -> Footer:
    """Footer showing the current page, then a ``of N`` line with the total.

    Both fields are block-level structured tags, so they occupy their own
    centred paragraphs.
    """
    return (
        Footer()
        .add_page_num(PageNum().align(AlignmentType.CENTER))
        .add_paragraph(
            Paragraph().align(AlignmentType.CENTER).add_run(Run().add_text("of"))
        )
        .add_num_pages(NumPages().align(AlignmentType.CENTER))
    )


class Converter:
    """Convert Markdown content to DOCX format.

    Usage::

        converter = Converter(style_preset="default")
        converter.convert_file("input.md", "output.docx")

        # or from string
        docx_bytes = converter.convert_text("# Hello")
    """

    STYLE_PRESETS = StyleManager.PRESETS

    def __init__(self, style_preset: str = "default", page_numbers: bool = False) -> None:
        self.style_manager = StyleManager(style_preset)
        self.reader = MarkdownReader(self.style_manager)
        self.page_numbers = page_numbers

    def build_docx(self, markdown_text: str) -> Docx:
        """Return the unrendered :class:`Docx` for *markdown_text*."""
        docx = Docx(doc=self.reader.read(markdown_text))
        if self.page_numbers:
            docx = docx.footer(page_number_footer())
        return docx

    def convert_text(self, markdown_text: str) -> bytes:
        """Convert Markdown text to DOCX bytes.

        Args:
            markdown_text: Markdown source string.

        Returns:
            DOCX file content as bytes.
        """
        return self.build_docx(markdown_text).build().to_bytes()

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        *,
        encoding: str = "utf-8",
    ) -> None:
        """Read a Markdown file and write the DOCX output.

        Args:
            input_path: Path to the input ``.md`` file.
            output_path: Path for the output ``.docx`` file.
            encoding: Text encoding of the source file.

        Raises:
            DestinationUnavailableError: *output_path* cannot be written.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        md_text = input_path.read_text(encoding=encoding)
        logger.debug("Read %d characters from %s", len(md_text), input_path)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DestinationUnavailableError(
                f"cannot create {output_path.parent}: {exc.strerror or exc}"
            ) from exc
        self.build_docx(md_text).build().pack(output_path)
