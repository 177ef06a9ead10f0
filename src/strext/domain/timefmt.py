"""Millisecond durations rendered as ``HH:MM:SS``."""

from __future__ import annotations


def format_hms(milliseconds: int) -> str:
    """Render *milliseconds* as zero-padded ``HH:MM:SS``.

    Sub-second remainders are truncated. Hours are unbounded, so long
    durations widen the first field.

    Examples:
        >>> format_hms(3_661_000)
        '01:01:01'
        >>> format_hms(360_000_000)
        '100:00:00'

    Raises:
        ValueError: If *milliseconds* is negative.
    """
    if milliseconds < 0:
        msg = f"Duration must be non-negative, got {milliseconds}"
        raise ValueError(msg)
    total_seconds = milliseconds // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
