"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from strext.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from strext.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    keys = _PRIMARY_KEYS.get(result.op)
    if keys is None or any(k not in result.data for k in keys):
        return f"OK: {result.op}"
    return ",".join(_quiet_value(result.data[k]) for k in keys)


def _quiet_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, ensure_ascii=False)
    return str(value)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="strext.ok")
    op = Text(f"  {result.op}", style="strext.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="strext.key")
    if isinstance(value, bool):
        v = Text(str(value).lower(), style="strext.true" if value else "strext.false")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":"), ensure_ascii=False))
    else:
        v = Text(str(value), style="strext.value")
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry timing (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            console.print(f"    {v.get('duration_ms', 0.0):>8.3f}ms  {v.get('name', '?')}")
        else:
            console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="strext.error")
    op = Text(f"  {result.op}", style="strext.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_color(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Color result with a swatch of the parsed color."""
    _status_line(console, result)
    red, green, blue = result.data.get("rgb255", [0, 0, 0])
    swatch = Text("      ", style=f"on rgb({red},{green},{blue})")
    console.print(Text("  swatch: ", style="strext.key"), swatch, sep="", end="")
    console.print()
    for key in ("red", "green", "blue"):
        _field(console, key, f"{result.data.get(key, 0.0):.4f}")
    _field(console, "rgb255", result.data.get("rgb255"))
    if verbose:
        _render_meta(console, result)


def _render_json_dump(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print the serialised JSON as-is so it can be copied."""
    _status_line(console, result)
    console.print(Text(result.data.get("json", "")), soft_wrap=True)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "hex_color": _render_color,
    "json_dump": _render_json_dump,
}

_PRIMARY_KEYS: dict[str, tuple[str, ...]] = {
    "hex_color": ("rgb255",),
    "md5": ("digest",),
    "detect_chinese": ("in_range",),
    "pinyin": ("pinyin",),
    "json_parse": ("object",),
    "json_dump": ("json",),
    "range_to_slice": ("text",),
    "range_to_utf16": ("location", "length"),
    "format_hms": ("hms",),
    "text_height": ("height",),
}
