"""Command: measure wrapped text height."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strext.commands._base import StrextCommand

if TYPE_CHECKING:
    from strext.commands._context import AppContext


@click.command(
    cls=StrextCommand,
    examples="""\
  strext height "Some long label text" --width 120
  strext height "Title" --width 200 --font ./Inter.ttf --size 18
  strext -q height "多行文本" --width 40""",
)
@click.argument("text")
@click.option(
    "--width",
    type=click.FloatRange(min=0, min_open=True),
    required=True,
    help="Box width in pixels.",
)
@click.option(
    "--font", "font_path", default=None, help="TrueType font file (default from [layout])."
)
@click.option(
    "--size",
    "font_size",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Font size in pixels.",
)
@click.pass_obj
def height(
    app: AppContext,
    text: str,
    width: float,
    font_path: str | None,
    font_size: float | None,
) -> None:
    """Measure the height TEXT needs when wrapped to WIDTH pixels."""
    app.emit(app.service.text_height(text, width, font_path=font_path, font_size=font_size))
