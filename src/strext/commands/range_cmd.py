"""Command group: UTF-16 range <-> code-point slice conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strext.commands._base import StrextGroup

if TYPE_CHECKING:
    from strext.commands._context import AppContext

_RANGE_EXAMPLES = """\
  strext range to-slice "a😀b" 1 2
  strext range to-utf16 "a😀b" 1 2"""


@click.group("range", cls=StrextGroup, examples=_RANGE_EXAMPLES)
def range_group() -> None:
    """Convert between UTF-16 ranges and code-point slices."""


@range_group.command(
    "to-slice",
    examples="""\
  strext range to-slice "héllo" 1 3
  strext --json range to-slice "a😀b" 1 2""",
)
@click.argument("text")
@click.argument("location", type=click.IntRange(min=0))
@click.argument("length", type=click.IntRange(min=0))
@click.pass_obj
def to_slice(app: AppContext, text: str, location: int, length: int) -> None:
    """Convert the UTF-16 range LOCATION/LENGTH of TEXT to a slice."""
    app.emit(app.service.range_to_slice(text, location, length))


@range_group.command(
    "to-utf16",
    examples="""\
  strext range to-utf16 "a😀b" 0 2
  strext -q range to-utf16 "😀😀" 1 2""",
)
@click.argument("text")
@click.argument("start", type=int)
@click.argument("stop", type=int)
@click.pass_obj
def to_utf16(app: AppContext, text: str, start: int, stop: int) -> None:
    """Convert the code-point slice START:STOP of TEXT to a UTF-16 range."""
    app.emit(app.service.range_to_utf16(text, start, stop))
