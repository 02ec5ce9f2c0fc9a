"""Enumerations of WordprocessingML attribute values.

Each member's ``value`` is the exact token written into the markup.
"""

from __future__ import annotations

from enum import Enum


class AlignmentType(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BOTH = "both"
    DISTRIBUTE = "distribute"
    START = "start"
    END = "end"


class FieldCharType(Enum):
    BEGIN = "begin"
    SEPARATE = "separate"
    END = "end"


class InstrKind(Enum):
    """Instruction payload of a dynamic field."""

    PAGE = "PAGE"
    NUMPAGES = "NUMPAGES"


class BreakType(Enum):
    PAGE = "page"
    COLUMN = "column"
    TEXT_WRAPPING = "textWrapping"


class SpecialIndentType(Enum):
    FIRST_LINE = "firstLine"
    HANGING = "hanging"


class LineSpacingRule(Enum):
    AUTO = "auto"
    AT_LEAST = "atLeast"
    EXACT = "exact"


class WidthType(Enum):
    DXA = "dxa"
    AUTO = "auto"
    PCT = "pct"
    NIL = "nil"


class VMergeType(Enum):
    RESTART = "restart"
    CONTINUE = "continue"


class VAlignType(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class TableLayoutType(Enum):
    FIXED = "fixed"
    AUTOFIT = "autofit"


class BorderType(Enum):
    NIL = "nil"
    SINGLE = "single"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"


class HeightRule(Enum):
    AUTO = "auto"
    AT_LEAST = "atLeast"
    EXACT = "exact"


class ShdType(Enum):
    CLEAR = "clear"
    SOLID = "solid"


class VertAlignType(Enum):
    BASELINE = "baseline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class PageOrientation(Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
