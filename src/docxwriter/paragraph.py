"""Paragraphs."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from docxwriter.properties import (
    FrameProperty,
    Indent,
    LineSpacing,
    NumberingProperty,
    ParagraphProperty,
    RunProperty,
)
from docxwriter.run import Run
from docxwriter.types import AlignmentType, SpecialIndentType
from docxwriter.xml_builder import BuildXML, XMLBuilder


@dataclass(frozen=True)
class Paragraph(BuildXML):
    """``w:p``: an ordered sequence of runs plus one :class:`ParagraphProperty`.

    The property element is always written, even when nothing is set, because
    the consuming schema expects it to be present.
    """

    runs: tuple[Run, ...] = ()
    paragraph_property: ParagraphProperty = field(default_factory=ParagraphProperty)

    def __post_init__(self) -> None:
        runs = tuple(self.runs)
        for run in runs:
            if not isinstance(run, Run):
                raise TypeError(f"paragraph content must be Run, got {type(run).__name__}")
        object.__setattr__(self, "runs", runs)

    def add_run(self, run: Run) -> Paragraph:
        if not isinstance(run, Run):
            raise TypeError(f"paragraph content must be Run, got {type(run).__name__}")
        return replace(self, runs=self.runs + (run,))

    # -- formatting ---------------------------------------------------------

    def align(self, alignment: AlignmentType) -> Paragraph:
        return self._with_property(alignment=alignment)

    def style(self, style_id: str) -> Paragraph:
        return self._with_property(style=style_id)

    def indent(
        self,
        start: Optional[int] = None,
        special: Optional[SpecialIndentType] = None,
        special_value: Optional[int] = None,
        end: Optional[int] = None,
    ) -> Paragraph:
        current = self.paragraph_property.indent or Indent()
        update = Indent(start, end, special, special_value)
        return self._with_property(indent=current.merge(update))

    def line_spacing(self, spacing: LineSpacing) -> Paragraph:
        current = self.paragraph_property.line_spacing or LineSpacing()
        return self._with_property(line_spacing=current.merge(spacing))

    def keep_next(self, on: bool = True) -> Paragraph:
        return self._with_property(keep_next=on)

    def keep_lines(self, on: bool = True) -> Paragraph:
        return self._with_property(keep_lines=on)

    def page_break_before(self, on: bool = True) -> Paragraph:
        return self._with_property(page_break_before=on)

    def numbering(self, num_id: int, level: int = 0) -> Paragraph:
        return self._with_property(numbering=NumberingProperty(num_id, level))

    def frame(self, frame: FrameProperty) -> Paragraph:
        current = self.paragraph_property.frame_property or FrameProperty()
        return self._with_property(frame_property=current.merge(frame))

    def run_property(self, prop: RunProperty) -> Paragraph:
        """Set the paragraph mark's run property (``w:pPr/w:rPr``)."""
        return self._with_property(run_property=prop)

    def merge_property(self, prop: Optional[ParagraphProperty]) -> Paragraph:
        """Overlay the set fields of *prop* onto this paragraph's property."""
        return replace(self, paragraph_property=self.paragraph_property.merge(prop))

    # -- rendering ----------------------------------------------------------

    def build(self) -> bytes:
        b = XMLBuilder().open("w:p").add_child(self.paragraph_property)
        for run in self.runs:
            b.add_child(run)
        return b.close().build()

    def _with_property(self, **fields: Any) -> Paragraph:
        return replace(self, paragraph_property=self.paragraph_property.derive(**fields))
