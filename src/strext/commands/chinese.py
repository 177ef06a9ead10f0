"""Command: detect Chinese characters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strext.commands._base import StrextCommand

if TYPE_CHECKING:
    from strext.commands._context import AppContext


@click.command(
    cls=StrextCommand,
    examples="""\
  strext chinese "你好 world"
  strext --json chinese "hello\"""",
)
@click.argument("text")
@click.pass_obj
def chinese(app: AppContext, text: str) -> None:
    """Report whether TEXT contains Chinese characters."""
    app.emit(app.service.detect_chinese(text))
