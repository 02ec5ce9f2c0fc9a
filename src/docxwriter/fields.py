"""Block-level dynamic fields: current page number and total page count.

A field renders as a structured document tag hosting one paragraph with one
run whose content is exactly::

    fldChar(begin), instrText(KIND), fldChar(separate), t("1"), fldChar(end)

The cached ``1`` is a placeholder; Word recalculates the value on open.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Optional, TypeVar

from docxwriter.paragraph import Paragraph
from docxwriter.properties import FrameProperty, ParagraphProperty, RunProperty
from docxwriter.run import Run
from docxwriter.types import AlignmentType, FieldCharType, InstrKind
from docxwriter.xml_builder import BuildXML, XMLBuilder

PLACEHOLDER_TEXT = "1"

F = TypeVar("F", bound="FieldCode")


@dataclass(frozen=True)
class StructuredDataTagProperty(BuildXML):
    """``w:sdtPr`` wrapping an (empty by default) run property."""

    run_property: RunProperty = field(default_factory=RunProperty)

    def build(self) -> bytes:
        return (
            XMLBuilder()
            .open("w:sdtPr")
            .add_child(self.run_property)
            .close()
            .build()
        )


@dataclass(frozen=True)
class FieldCode(BuildXML):
    """Shared implementation of :class:`PageNum` and :class:`NumPages`.

    Frame setters merge into one :class:`FrameProperty`, so
    ``.wrap("none").x_align("left")`` yields a single ``w:framePr`` carrying
    both attributes.
    """

    instr: ClassVar[InstrKind]

    frame_property: Optional[FrameProperty] = None
    paragraph_property: Optional[ParagraphProperty] = None

    def __post_init__(self) -> None:
        if not isinstance(getattr(type(self), "instr", None), InstrKind):
            raise TypeError(
                f"{type(self).__name__} has no field instruction; use PageNum or NumPages"
            )

    # -- frame positioning --------------------------------------------------

    def wrap(self: F, wrap: str) -> F:
        return self._with_frame(wrap=wrap)

    def v_anchor(self: F, anchor: str) -> F:
        return self._with_frame(v_anchor=anchor)

    def h_anchor(self: F, anchor: str) -> F:
        return self._with_frame(h_anchor=anchor)

    def h_rule(self: F, rule: str) -> F:
        return self._with_frame(h_rule=rule)

    def x_align(self: F, align: str) -> F:
        return self._with_frame(x_align=align)

    def y_align(self: F, align: str) -> F:
        return self._with_frame(y_align=align)

    def h_space(self: F, x: int) -> F:
        return self._with_frame(h_space=x)

    def v_space(self: F, x: int) -> F:
        return self._with_frame(v_space=x)

    def x(self: F, x: int) -> F:
        return self._with_frame(x=x)

    def y(self: F, y: int) -> F:
        return self._with_frame(y=y)

    def width(self: F, n: int) -> F:
        return self._with_frame(w=n)

    def height(self: F, n: int) -> F:
        return self._with_frame(h=n)

    # -- paragraph ----------------------------------------------------------

    def align(self: F, alignment: AlignmentType) -> F:
        prop = (self.paragraph_property or ParagraphProperty()).align(alignment)
        return replace(self, paragraph_property=prop)

    # -- rendering ----------------------------------------------------------

    def field_run(self) -> Run:
        return (
            Run()
            .add_field_char(FieldCharType.BEGIN, False)
            .add_instr_text(self.instr)
            .add_field_char(FieldCharType.SEPARATE, False)
            .add_text(PLACEHOLDER_TEXT)
            .add_field_char(FieldCharType.END, False)
        )

    def build(self) -> bytes:
        b = (
            XMLBuilder()
            .open_structured_tag()
            .add_child(StructuredDataTagProperty())
            .open_structured_tag_content()
        )

        p = Paragraph().add_run(self.field_run())
        # Element-level overwrites: the caller's paragraph property replaces
        # the synthesized one, then the frame replaces the paragraph's frame.
        if self.paragraph_property is not None:
            p = replace(p, paragraph_property=self.paragraph_property)
        if self.frame_property is not None:
            p = replace(
                p,
                paragraph_property=p.paragraph_property.derive(
                    frame_property=self.frame_property
                ),
            )

        return b.add_child(p).close().close().build()

    def _with_frame(self: F, **fields: Any) -> F:
        frame = (self.frame_property or FrameProperty()).derive(**fields)
        return replace(self, frame_property=frame)


@dataclass(frozen=True)
class PageNum(FieldCode):
    """Current page number (``PAGE``)."""

    instr: ClassVar[InstrKind] = InstrKind.PAGE


@dataclass(frozen=True)
class NumPages(FieldCode):
    """Total page count (``NUMPAGES``)."""

    instr: ClassVar[InstrKind] = InstrKind.NUMPAGES
