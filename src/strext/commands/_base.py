"""Click base classes for strext commands.

``StrextCommand`` and ``StrextGroup`` take an ``examples`` string and
expose it through an eager ``--examples`` flag, so ``--help`` stays short.
Example blocks may be written at any indentation; they are normalised to
a two-space indent when shown.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def format_examples(examples: str) -> str:
    """Dedent *examples* and indent every non-blank line by two spaces."""
    return textwrap.indent(textwrap.dedent(examples).strip("\n"), "  ")


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    text = format_examples(examples)

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(text)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class StrextCommand(click.Command):
    """A command with optional ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class StrextGroup(click.Group):
    """A group with optional ``--examples`` whose subcommands are StrextCommands.

    Subcommands are listed in registration order, not alphabetically.
    """

    command_class = StrextCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)
