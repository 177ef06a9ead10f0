"""MD5 digests of UTF-8 text.

INVARIANT: the same input always yields the same 32-char lowercase digest.

Lenient mode keeps a long-standing quirk: text that cannot be encoded as
UTF-8 (lone surrogates) is returned unchanged instead of a digest. Callers
that need to tell the two apart use :func:`is_md5_digest` or strict mode.
"""

from __future__ import annotations

import hashlib
import logging
import re

logger = logging.getLogger(__name__)

MD5_PATTERN = re.compile(r"^[0-9a-f]{32}$")


class DigestEncodingError(ValueError):
    """Raised in strict mode when the input is not encodable as UTF-8."""


def md5(text: str, *, strict: bool = False) -> str:
    """Return the lowercase hex MD5 digest of *text* encoded as UTF-8.

    Args:
        text: Input string.
        strict: Raise :class:`DigestEncodingError` on encoding failure
            instead of echoing *text* back.
    """
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        if strict:
            msg = f"Text is not encodable as UTF-8 at position {exc.start}"
            raise DigestEncodingError(msg) from exc
        logger.warning("md5 input not UTF-8 encodable; returning input unchanged")
        return text
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def md5_generate(text: str) -> str:
    """Same digest as :func:`md5`, but encoding failures always raise."""
    return md5(text, strict=True)


def is_md5_digest(value: str) -> bool:
    """Check whether *value* looks like an MD5 hex digest."""
    return MD5_PATTERN.match(value) is not None
