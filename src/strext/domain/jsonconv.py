"""JSON object <-> string conversion.

Failures are reported as ``None``, never raised.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def _reject_constant(name: str) -> float:
    raise ValueError(f"Non-standard JSON constant {name}")


def convert_json_string_to_hash(text: str | None) -> dict[str, Any] | None:
    """Parse *text* as a JSON object.

    Returns None for None input, invalid JSON (including ``NaN`` and
    ``Infinity`` literals and nesting too deep to decode), or JSON whose
    top level is not an object.
    """
    if text is None:
        return None
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed


def convert_json_hash_to_string(
    mapping: Mapping[str, Any] | None,
    *,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> str | None:
    """Serialise *mapping* as pretty-printed JSON.

    Returns None for None input or values JSON cannot represent (including
    NaN, infinities and self-referencing or overly deep containers).
    """
    if mapping is None:
        return None
    try:
        return json.dumps(dict(mapping), indent=indent, ensure_ascii=ensure_ascii, allow_nan=False)
    except (TypeError, ValueError, RecursionError):
        return None
