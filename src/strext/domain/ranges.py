"""UTF-16 range <-> Python slice conversion.

Platform text APIs address strings in UTF-16 code units while Python
indexes by code point. A UTF-16 range only maps to a slice when both ends
fall on extended grapheme cluster boundaries.
"""

from __future__ import annotations

from typing import NamedTuple

import regex

GRAPHEME = regex.compile(r"\X")


class Utf16Range(NamedTuple):
    """A ``(location, length)`` pair measured in UTF-16 code units."""

    location: int
    length: int


def _units(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """Number of UTF-16 code units needed to encode *text*."""
    return sum(_units(ch) for ch in text)


def _utf16_to_index(text: str) -> dict[int, int]:
    """Map each UTF-16 offset that starts a code point to its code-point index."""
    offsets: dict[int, int] = {}
    position = 0
    for index, ch in enumerate(text):
        offsets[position] = index
        position += _units(ch)
    offsets[position] = len(text)
    return offsets


def _grapheme_boundaries(text: str) -> set[int]:
    boundaries = {m.start() for m in GRAPHEME.finditer(text)}
    boundaries.add(len(text))
    return boundaries


def to_range(text: str, utf16_range: tuple[int, int]) -> slice | None:
    """Convert a UTF-16 ``(location, length)`` into a code-point slice.

    Returns None when the range runs past the end, splits a surrogate
    pair, or cuts through a grapheme cluster.

    Examples:
        >>> to_range("a😀b", (1, 2))
        slice(1, 2, None)
        >>> to_range("a😀b", (2, 1)) is None
        True
    """
    location, length = utf16_range
    if location < 0 or length < 0:
        return None
    offsets = _utf16_to_index(text)
    start = offsets.get(location)
    stop = offsets.get(location + length)
    if start is None or stop is None:
        return None
    boundaries = _grapheme_boundaries(text)
    if start not in boundaries or stop not in boundaries:
        return None
    return slice(start, stop)


def to_utf16_range(text: str, span: slice) -> Utf16Range:
    """Convert a code-point slice of *text* into a UTF-16 range.

    Out-of-bounds or reversed slices yield ``Utf16Range(0, 0)``.

    Raises:
        ValueError: If *span* has a step other than 1.
    """
    if span.step not in (None, 1):
        msg = f"Slice step must be 1, got {span.step}"
        raise ValueError(msg)
    start = 0 if span.start is None else span.start
    stop = len(text) if span.stop is None else span.stop
    if not 0 <= start <= stop <= len(text):
        return Utf16Range(0, 0)
    return Utf16Range(utf16_length(text[:start]), utf16_length(text[start:stop]))
