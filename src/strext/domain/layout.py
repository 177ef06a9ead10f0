"""Text height measurement for wrapped layout.

Lays text out the way a label does: explicit newlines break lines, words
wrap greedily at whitespace, and a word wider than the box is broken
between characters. Height is unbounded, so the result is the full height
the text needs at the given width.
"""

from __future__ import annotations

from pathlib import Path

from PIL import ImageFont

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont

DEFAULT_FONT_SIZE = 14.0


def load_font(path: str | Path | None = None, size: float = DEFAULT_FONT_SIZE) -> Font:
    """Load a TrueType font, or Pillow's bundled default when *path* is None.

    Raises:
        OSError: If the font file cannot be read.
        ValueError: If *size* is not positive.
    """
    if size <= 0:
        raise ValueError(f"Font size must be positive, got {size}")
    if path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(str(path), size=size)


def line_height(font: Font) -> float:
    """Ascent plus descent of *font*, i.e. one line including leading."""
    if isinstance(font, ImageFont.FreeTypeFont):
        ascent, descent = font.getmetrics()
        return float(ascent + descent)
    # Bitmap fonts carry no metrics; fall back to a tall-and-deep sample.
    _left, top, _right, bottom = font.getbbox("Ag")
    return float(bottom - top)


def _break_word(word: str, width: float, font: Font) -> list[str]:
    """Split a word wider than *width* into pieces that fit (at least one char each)."""
    pieces: list[str] = []
    while len(word) > 1 and font.getlength(word) > width:
        cut = 1
        while cut < len(word) and font.getlength(word[: cut + 1]) <= width:
            cut += 1
        pieces.append(word[:cut])
        word = word[cut:]
    pieces.append(word)
    return pieces


def _wrap_paragraph(paragraph: str, width: float, font: Font) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in paragraph.split():
        candidate = f"{current} {word}" if current else word
        if font.getlength(candidate) <= width:
            current = candidate
            continue
        if current:
            lines.append(current)
        *full, current = _break_word(word, width, font)
        lines.extend(full)
    lines.append(current)
    return lines


def wrap_lines(text: str, width: float, font: Font) -> list[str]:
    """Lay out *text* into lines no wider than *width* pixels.

    Raises:
        ValueError: If *width* is not positive.
    """
    if width <= 0:
        msg = f"Width must be positive, got {width}"
        raise ValueError(msg)
    if not text:
        return []
    lines: list[str] = []
    for paragraph in text.split("\n"):
        lines.extend(_wrap_paragraph(paragraph, width, font))
    return lines


def text_height(text: str, width: float, font: Font) -> float:
    """Height in pixels needed to draw *text* with *font* inside *width*.

    Empty text needs no height.
    """
    return len(wrap_lines(text, width, font)) * line_height(font)
