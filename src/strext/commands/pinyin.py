"""Command: transliterate to pinyin."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strext.commands._base import StrextCommand

if TYPE_CHECKING:
    from strext.commands._context import AppContext


@click.command(
    cls=StrextCommand,
    examples="""\
  strext pinyin "你好"
  strext pinyin "北京" --no-blank
  strext -q pinyin "张三\"""",
)
@click.argument("text")
@click.option("--no-blank", is_flag=True, help="Remove spaces between syllables.")
@click.pass_obj
def pinyin(app: AppContext, text: str, no_blank: bool) -> None:
    """Transliterate TEXT to toneless pinyin, with its index letter."""
    app.emit(app.service.pinyin(text, blank=not no_blank))
