"""Pinyin transliteration for Han text.

Han runs become toneless pinyin syllables separated by single spaces.
Letters of other non-Latin scripts such as Cyrillic or kana are
romanised. Everything else passes through, with
combining marks stripped so the result stays plain Latin where the input
was accented Latin.
"""

from __future__ import annotations

import unicodedata

import regex
from anyascii import anyascii
from pypinyin import Style, lazy_pinyin

HAN_OR_OTHER_RUN = regex.compile(r"\p{Han}+|\P{Han}+")
HAN_START = regex.compile(r"\p{Han}")
# Letters that are neither Latin nor Han.
FOREIGN_LETTERS = regex.compile(r"[^\P{L}\p{Latin}\p{Han}]+")

DEFAULT_HEAD = "#"


def strip_combining_marks(text: str) -> str:
    """Remove nonspacing combining marks (``"café"`` -> ``"cafe"``)."""
    decomposed = unicodedata.normalize("NFD", text)
    kept = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", kept)


def _transliterate_run(run: str) -> str:
    if HAN_START.match(run) is None:
        return FOREIGN_LETTERS.sub(lambda m: anyascii(m.group()), run)
    # v_to_u keeps "lü" so mark stripping lands on "lu", not "lv".
    return " ".join(lazy_pinyin(run, style=Style.NORMAL, v_to_u=True))


def transform_to_pinyin(text: str) -> str:
    """Transliterate *text* to toneless pinyin.

    Syllables within a Han run are space separated; runs are joined as-is,
    so ``"我爱Python"`` becomes ``"wo aiPython"``.
    """
    pieces = [_transliterate_run(m.group()) for m in HAN_OR_OTHER_RUN.finditer(text)]
    return strip_combining_marks("".join(pieces))


def transform_to_pinyin_without_blank(text: str) -> str:
    """Transliterate *text* and drop every space: ``"你好"`` -> ``"nihao"``."""
    return transform_to_pinyin(text).replace(" ", "")


def get_pinyin_head(text: str, *, fallback: str = DEFAULT_HEAD) -> str:
    """Return the uppercase ASCII initial of the pinyin, else *fallback*.

    Examples:
        >>> get_pinyin_head("张三")
        'Z'
        >>> get_pinyin_head("")
        '#'
    """
    pinyin = transform_to_pinyin(text).upper()
    if not pinyin or not pinyin[0].isascii():
        return fallback
    return pinyin[0]
