"""Exception types raised by docxwriter.

Rendering a tree built through the public builders cannot fail.  The only
errors callers should expect come from handing the finished bytes to a
destination, and those derive from :class:`DocxError`.
"""

from __future__ import annotations


class MarkupError(RuntimeError):
    """An :class:`~docxwriter.xml_builder.XMLBuilder` call broke tag nesting.

    Signals a bug in an element's ``build()``, not bad user input.  Not a
    :class:`DocxError`.
    """


class DocxError(Exception):
    """Base class for recoverable errors at the output boundary."""


class DestinationUnavailableError(DocxError):
    """The destination file or stream could not be created or written."""


class SerializationError(DocxError):
    """The package archive could not be assembled from the rendered parts."""
