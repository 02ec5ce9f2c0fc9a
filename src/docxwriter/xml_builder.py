"""Low-level markup accumulator shared by every element type.

Every element and property object renders itself through one
:class:`XMLBuilder` and exposes the result via :meth:`BuildXML.build`.  The
builder only knows about tags, attributes and text; it has no idea what a
paragraph is.

Known limitation: attribute values are written verbatim.  Callers must pass
attribute text that is already legal inside a double-quoted XML attribute.
Text content (``text`` / ``raw``) is escaped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Mapping, Optional, Union

from docxwriter.errors import MarkupError

# ---------------------------------------------------------------------------
# Root namespace table
# ---------------------------------------------------------------------------

# Order matters and unused prefixes stay: consumers compare these bytes.
ROOT_NAMESPACES: tuple[tuple[str, str], ...] = (
    ("o", "urn:schemas-microsoft-com:office:office"),
    ("r", "http://schemas.openxmlformats.org/officeDocument/2006/relationships"),
    ("v", "urn:schemas-microsoft-com:vml"),
    ("w", "http://schemas.openxmlformats.org/wordprocessingml/2006/main"),
    ("w10", "urn:schemas-microsoft-com:office:word"),
    ("wp", "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"),
    ("wps", "http://schemas.microsoft.com/office/word/2010/wordprocessingShape"),
    ("wpg", "http://schemas.microsoft.com/office/word/2010/wordprocessingGroup"),
    ("mc", "http://schemas.openxmlformats.org/markup-compatibility/2006"),
    ("wp14", "http://schemas.microsoft.com/office/word/2010/wordprocessingDrawing"),
    ("w14", "http://schemas.microsoft.com/office/word/2010/wordml"),
)

MC_IGNORABLE = "w14 wp14"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="{}"?>\n'

AttrValue = Union[str, int, bool, Enum, None]
Attrs = Union[Mapping[str, AttrValue], Iterable[tuple[str, AttrValue]]]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _xml_escape(s: str) -> str:
    """Escape XML special characters for character data."""
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _attr_value(value: AttrValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _attr_pairs(attrs: Optional[Attrs]) -> list[tuple[str, AttrValue]]:
    if attrs is None:
        return []
    if isinstance(attrs, Mapping):
        return list(attrs.items())
    return list(attrs)


# ---------------------------------------------------------------------------
# Render contract
# ---------------------------------------------------------------------------

class BuildXML(ABC):
    """Anything that can render itself to markup bytes."""

    @abstractmethod
    def build(self) -> bytes:
        """Return this node's markup, children included."""


# ---------------------------------------------------------------------------
# XMLBuilder
# ---------------------------------------------------------------------------

class XMLBuilder:
    """Accumulate markup through open/attribute/close primitives.

    Usage::

        b = XMLBuilder()
        b.open("w:p").add_child(prop).close()
        data = b.build()

    Each primitive returns the builder so calls chain.  A builder is
    single-use: any call after :meth:`build` raises :class:`MarkupError`.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._stack: list[str] = []
        # True while the start tag on top of the stack still accepts attributes
        self._start_open: bool = False
        self._built: bool = False

    # -- document level -----------------------------------------------------

    def declaration(self, standalone: bool = True) -> XMLBuilder:
        """Emit the XML declaration.  Must be the first call."""
        self._check_usable()
        if self._parts:
            raise MarkupError("XML declaration must precede all other markup")
        self._parts.append(XML_DECLARATION.format("yes" if standalone else "no"))
        return self

    def open_root(self, tag: str) -> XMLBuilder:
        """Open a part root carrying the full, fixed namespace table."""
        self.open(tag)
        for prefix, uri in ROOT_NAMESPACES:
            self.attribute(f"xmlns:{prefix}", uri)
        return self.attribute("mc:Ignorable", MC_IGNORABLE)

    def open_document(self) -> XMLBuilder:
        return self.open_root("w:document")

    def open_header(self) -> XMLBuilder:
        return self.open_root("w:hdr")

    def open_footer(self) -> XMLBuilder:
        return self.open_root("w:ftr")

    def open_body(self) -> XMLBuilder:
        return self.open("w:body")

    def open_structured_tag(self) -> XMLBuilder:
        return self.open("w:sdt")

    def open_structured_tag_content(self) -> XMLBuilder:
        return self.open("w:sdtContent")

    # -- primitives ---------------------------------------------------------

    def open(self, tag: str) -> XMLBuilder:
        """Push *tag*; attributes may follow until content is added."""
        self._check_usable()
        self._seal()
        self._parts.append(f"<{tag}")
        self._stack.append(tag)
        self._start_open = True
        return self

    def attribute(self, name: str, value: AttrValue) -> XMLBuilder:
        """Attach ``name="value"`` to the innermost start tag (not escaped)."""
        self._check_usable()
        if not self._start_open:
            raise MarkupError(
                f"attribute {name!r} added after content or with no open tag"
            )
        self._parts.append(f' {name}="{_attr_value(value)}"')
        return self

    def attributes(self, attrs: Optional[Attrs]) -> XMLBuilder:
        """Attach every pair in *attrs* whose value is not ``None``."""
        for name, value in _attr_pairs(attrs):
            if value is not None:
                self.attribute(name, value)
        return self

    def close(self) -> XMLBuilder:
        """Close the innermost open tag.

        An element closed without content renders as an explicit
        ``<tag></tag>`` pair, never self-closed.
        """
        self._check_usable()
        if not self._stack:
            raise MarkupError("close() called with no open tag")
        tag = self._stack.pop()
        self._seal()
        self._parts.append(f"</{tag}>")
        return self

    def empty(self, tag: str, attrs: Optional[Attrs] = None) -> XMLBuilder:
        """Emit a self-closing leaf ``<tag a="b" />``; ``None`` values are skipped."""
        self._check_usable()
        self._seal()
        self._parts.append(f"<{tag}")
        for name, value in _attr_pairs(attrs):
            if value is not None:
                self._parts.append(f' {name}="{_attr_value(value)}"')
        self._parts.append(" />")
        return self

    def text(self, content: str, preserve_whitespace: bool = True) -> XMLBuilder:
        """Emit a ``w:t`` text node, marked ``xml:space="preserve"`` if asked."""
        self.open("w:t")
        if preserve_whitespace:
            self.attribute("xml:space", "preserve")
        return self.raw(content).close()

    def raw(self, content: str) -> XMLBuilder:
        """Emit escaped character data inside the current element."""
        self._check_usable()
        self._seal()
        self._parts.append(_xml_escape(content))
        return self

    def add_child(self, child: BuildXML) -> XMLBuilder:
        """Splice the fully rendered markup of *child* in place."""
        self._check_usable()
        self._seal()
        self._parts.append(child.build().decode("utf-8"))
        return self

    def add_optional_child(self, child: Optional[BuildXML]) -> XMLBuilder:
        if child is not None:
            self.add_child(child)
        return self

    # -- finalisation -------------------------------------------------------

    def build(self) -> bytes:
        """Return the accumulated bytes and retire the builder."""
        self._check_usable()
        if self._stack:
            raise MarkupError(f"unclosed tags at build(): {self._stack!r}")
        self._built = True
        return "".join(self._parts).encode("utf-8")

    # -- internals ----------------------------------------------------------

    def _seal(self) -> None:
        if self._start_open:
            self._parts.append(">")
            self._start_open = False

    def _check_usable(self) -> None:
        if self._built:
            raise MarkupError("XMLBuilder is single-use; build() was already called")


def render(node: BuildXML) -> str:
    """Convenience: ``node.build()`` decoded to ``str``."""
    return node.build().decode("utf-8")
