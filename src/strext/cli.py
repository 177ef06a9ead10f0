"""Root CLI group for strext with global flags and command registration."""

from __future__ import annotations

import click

from strext import __version__
from strext.commands import register_commands
from strext.commands._base import StrextGroup
from strext.commands._context import AppContext
from strext.config.settings import StrextSettings


@click.group(
    cls=StrextGroup,
    invoke_without_command=True,
    examples="""\
  strext color "#1E90FF"
  strext --json pinyin "你好"
  strext -q range to-utf16 "a😀b" 1 2""",
)
@click.version_option(version=__version__, prog_name="strext")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the primary value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """strext — string extension utilities."""
    settings = StrextSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
