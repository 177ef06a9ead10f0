"""Command: MD5 digest of text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strext.commands._base import StrextCommand

if TYPE_CHECKING:
    from strext.commands._context import AppContext


@click.command(
    cls=StrextCommand,
    examples="""\
  strext md5 "hello"
  strext md5 "" --strict
  strext -q md5 "你好\"""",
)
@click.argument("text")
@click.option(
    "--strict/--lenient",
    default=None,
    help="Fail on text that is not UTF-8 encodable (default from [digest] strict).",
)
@click.pass_obj
def md5(app: AppContext, text: str, strict: bool | None) -> None:
    """Compute the lowercase hex MD5 digest of TEXT."""
    app.emit(app.service.md5(text, strict=strict))
