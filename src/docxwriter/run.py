"""Runs and run content."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from docxwriter.properties import RunFonts, RunProperty
from docxwriter.types import BreakType, FieldCharType, InstrKind, VertAlignType
from docxwriter.xml_builder import BuildXML, XMLBuilder


# ---------------------------------------------------------------------------
# Run content
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Text(BuildXML):
    text: str
    preserve_space: bool = True

    def build(self) -> bytes:
        return XMLBuilder().text(self.text, self.preserve_space).build()


@dataclass(frozen=True)
class Tab(BuildXML):
    def build(self) -> bytes:
        return XMLBuilder().empty("w:tab").build()


@dataclass(frozen=True)
class Break(BuildXML):
    break_type: BreakType = BreakType.TEXT_WRAPPING

    def build(self) -> bytes:
        return XMLBuilder().empty("w:br", {"w:type": self.break_type}).build()


@dataclass(frozen=True)
class FieldChar(BuildXML):
    """One begin/separate/end marker of a complex field."""

    field_char_type: FieldCharType
    dirty: bool = False

    def build(self) -> bytes:
        return XMLBuilder().empty("w:fldChar", [
            ("w:fldCharType", self.field_char_type),
            ("w:dirty", self.dirty),
        ]).build()


@dataclass(frozen=True)
class InstrText(BuildXML):
    """Field instruction, e.g. ``PAGE``."""

    kind: InstrKind

    def build(self) -> bytes:
        return XMLBuilder().open("w:instrText").raw(self.kind.value).close().build()


RunChild = Union[Text, Tab, Break, FieldChar, InstrText]

_RUN_CHILD_TYPES = (Text, Tab, Break, FieldChar, InstrText)


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Run(BuildXML):
    """``w:r``: a span of content sharing one :class:`RunProperty`.

    Usage::

        run = Run().add_text("Hello").bold().size(28)
    """

    children: tuple[RunChild, ...] = ()
    run_property: RunProperty = field(default_factory=RunProperty)

    def __post_init__(self) -> None:
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, _RUN_CHILD_TYPES):
                raise TypeError(f"unsupported run content: {type(child).__name__}")
        object.__setattr__(self, "children", children)

    # -- content ------------------------------------------------------------

    def add_text(self, text: str) -> Run:
        return self._append(Text(text))

    def add_tab(self) -> Run:
        return self._append(Tab())

    def add_break(self, break_type: BreakType = BreakType.TEXT_WRAPPING) -> Run:
        return self._append(Break(break_type))

    def add_field_char(self, field_char_type: FieldCharType, dirty: bool = False) -> Run:
        return self._append(FieldChar(field_char_type, dirty))

    def add_instr_text(self, kind: InstrKind) -> Run:
        return self._append(InstrText(kind))

    # -- formatting ---------------------------------------------------------

    def style(self, style_id: str) -> Run:
        return self._with_property(style=style_id)

    def fonts(self, fonts: RunFonts) -> Run:
        return self._with_property(fonts=fonts)

    def size(self, half_points: int) -> Run:
        return self._with_property(size=half_points)

    def color(self, color: str) -> Run:
        return self._with_property(color=color)

    def highlight(self, color: str) -> Run:
        return self._with_property(highlight=color)

    def bold(self) -> Run:
        return self._with_property(bold=True)

    def italic(self) -> Run:
        return self._with_property(italic=True)

    def strike(self) -> Run:
        return self._with_property(strike=True)

    def vanish(self) -> Run:
        return self._with_property(vanish=True)

    def underline(self, line_type: str = "single") -> Run:
        return self._with_property(underline=line_type)

    def character_spacing(self, spacing: int) -> Run:
        return self._with_property(character_spacing=spacing)

    def vert_align(self, align: VertAlignType) -> Run:
        return self._with_property(vert_align=align)

    def merge_property(self, prop: Optional[RunProperty]) -> Run:
        """Overlay the set fields of *prop* onto this run's property."""
        return replace(self, run_property=self.run_property.merge(prop))

    # -- rendering ----------------------------------------------------------

    def build(self) -> bytes:
        b = XMLBuilder().open("w:r").add_child(self.run_property)
        for child in self.children:
            b.add_child(child)
        return b.close().build()

    # -- internals ----------------------------------------------------------

    def _append(self, child: RunChild) -> Run:
        return replace(self, children=self.children + (child,))

    def _with_property(self, **fields: Any) -> Run:
        return replace(self, run_property=self.run_property.derive(**fields))
