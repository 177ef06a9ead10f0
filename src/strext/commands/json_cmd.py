"""Command group: JSON object <-> string conversion."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from strext.commands._base import StrextGroup

if TYPE_CHECKING:
    from strext.commands._context import AppContext

_JSON_EXAMPLES = """\
  strext json parse '{"name": "strext", "version": 1}'
  strext json dump name=strext version=1 stable=true
  strext -q json dump city=北京"""


def _no_constants(name: str) -> Any:
    raise ValueError(name)


def _parse_pair(pair: str) -> tuple[str, Any]:
    """Split ``KEY=VALUE``; VALUE is read as JSON when it parses, else kept as text.

    ``NaN`` and ``Infinity`` stay text since they cannot be dumped back out.
    """
    key, sep, raw = pair.partition("=")
    if not sep or not key:
        msg = f"Expected KEY=VALUE, got {pair!r}"
        raise click.BadParameter(msg, param_hint="PAIRS")
    try:
        return key, json.loads(raw, parse_constant=_no_constants)
    except (ValueError, RecursionError):
        return key, raw


@click.group("json", cls=StrextGroup, examples=_JSON_EXAMPLES)
def json_group() -> None:
    """Convert between JSON text and objects."""


@json_group.command(
    examples="""\
  strext json parse '{"a": 1}'
  strext --json json parse '{"nested": {"b": [1, 2]}}'""",
)
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Parse TEXT as a JSON object."""
    app.emit(app.service.json_parse(text))


@json_group.command(
    examples="""\
  strext json dump name=strext count=3
  strext json dump flag=true ratio=0.5""",
)
@click.argument("pairs", nargs=-1)
@click.pass_obj
def dump(app: AppContext, pairs: tuple[str, ...]) -> None:
    """Serialise KEY=VALUE pairs as pretty-printed JSON."""
    mapping = dict(_parse_pair(p) for p in pairs)
    app.emit(app.service.json_dump(mapping))
