"""Chinese-character detection.

Two checks that agree on everyday text but not at the edges:

- :func:`is_include_chinese` scans for code points strictly between
  U+4E00 and U+9FFF. Both endpoints are excluded.
- :func:`contains_chinese_characters` matches the Unicode ``Han`` script,
  which also covers the endpoints, extension blocks, and compatibility
  ideographs.
"""

from __future__ import annotations

import regex

CJK_LOWER = 0x4E00
CJK_UPPER = 0x9FFF

HAN_SCRIPT = regex.compile(r"\p{Han}")


def is_include_chinese(text: str) -> bool:
    """Return True if any code point lies in the open range (U+4E00, U+9FFF).

    Examples:
        >>> is_include_chinese("你好")
        True
        >>> is_include_chinese("\\u4e00")
        False
    """
    return any(CJK_LOWER < ord(ch) < CJK_UPPER for ch in text)


def contains_chinese_characters(text: str) -> bool:
    """Return True if *text* contains a character of the Han script."""
    return HAN_SCRIPT.search(text) is not None
