"""Subcommand modules for strext.

Provides register_commands() which uses deferred imports to keep
``strext --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from strext.commands.json_cmd import json_group
    from strext.commands.range_cmd import range_group

    cli.add_command(json_group)
    cli.add_command(range_group)

    # --- Standalone commands ---
    from strext.commands.chinese import chinese
    from strext.commands.color import color
    from strext.commands.digest import md5
    from strext.commands.height import height
    from strext.commands.hms import hms
    from strext.commands.pinyin import pinyin

    cli.add_command(color)
    cli.add_command(md5)
    cli.add_command(chinese)
    cli.add_command(pinyin)
    cli.add_command(hms)
    cli.add_command(height)
