"""Unit conversion helpers for WordprocessingML measurements."""

from __future__ import annotations

TWIPS_PER_POINT = 20
TWIPS_PER_INCH = 1440


def pt_to_half_points(pt: float | None) -> int | None:
    if pt is None:
        return None
    return int(round(pt * 2))


def pt_to_twips(pt: float | None) -> int | None:
    """Convert points to twips (1/20th of a point)."""
    if pt is None:
        return None
    return int(round(pt * TWIPS_PER_POINT))


def line_spacing_percent_to_line(percent: int) -> int:
    """Convert a percentage (``160`` = 1.6 lines) to ``w:line`` in 240ths."""
    return int(round(percent * 240 / 100))
