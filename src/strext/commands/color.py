"""Command: parse a hex color."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strext.commands._base import StrextCommand

if TYPE_CHECKING:
    from strext.commands._context import AppContext


@click.command(
    cls=StrextCommand,
    examples="""\
  strext color "#1E90FF"
  strext color ff0000
  strext --json color "#FFFFFF\"""",
)
@click.argument("hex_value")
@click.pass_obj
def color(app: AppContext, hex_value: str) -> None:
    """Parse a #RRGGBB color into red, green, and blue fractions."""
    app.emit(app.service.hex_color(hex_value))
