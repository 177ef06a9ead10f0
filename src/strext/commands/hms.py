"""Command: format milliseconds as HH:MM:SS."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strext.commands._base import StrextCommand

if TYPE_CHECKING:
    from strext.commands._context import AppContext


@click.command(
    cls=StrextCommand,
    examples="""\
  strext hms 3661000
  strext -q hms 360000000""",
)
@click.argument("milliseconds", type=int)
@click.pass_obj
def hms(app: AppContext, milliseconds: int) -> None:
    """Format MILLISECONDS as a zero-padded HH:MM:SS duration."""
    app.emit(app.service.format_hms(milliseconds))
