"""Hex color parsing.

Accepts ``RRGGBB`` with an optional leading ``#``. Anything else parses
to the zero color rather than raising.
"""

from __future__ import annotations

import re
from typing import NamedTuple

HEX_DIGITS = re.compile(r"^[0-9A-F]{6}$")


class HexColor(NamedTuple):
    """Normalized color channels in ``[0.0, 1.0]``."""

    red: float
    green: float
    blue: float


ZERO_COLOR = HexColor(0.0, 0.0, 0.0)


def _parse_rgb_value(text: str) -> int | None:
    cleaned = text.strip().upper()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]
    if len(cleaned) != 6:
        return None
    # int(..., 16) also takes "0X", "+" and "_", so gate on plain digits.
    if HEX_DIGITS.match(cleaned) is None:
        return None
    return int(cleaned, 16)


def is_valid_hex_color(text: str) -> bool:
    """Check whether *text* parses as a color rather than the zero fallback."""
    return _parse_rgb_value(text) is not None


def hex_color_rgb255(text: str) -> tuple[int, int, int]:
    """Parse *text* into 0-255 channel values; ``(0, 0, 0)`` when malformed.

    Examples:
        >>> hex_color_rgb255("#1E90FF")
        (30, 144, 255)
        >>> hex_color_rgb255("#FFF")
        (0, 0, 0)
    """
    value = _parse_rgb_value(text)
    if value is None:
        return (0, 0, 0)
    return ((value & 0xFF0000) >> 16, (value & 0x00FF00) >> 8, value & 0x0000FF)


def hex_color_components(text: str) -> HexColor:
    """Parse a ``#RRGGBB`` string into fractional red, green, blue.

    Surrounding whitespace is trimmed and one leading ``#`` is stripped.
    Wrong length or non-hex characters yield :data:`ZERO_COLOR`.
    """
    red, green, blue = hex_color_rgb255(text)
    return HexColor(red / 255.0, green / 255.0, blue / 255.0)
