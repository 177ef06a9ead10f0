"""Locate and read ``strext.toml``.

Resolution order: ``--config`` path, then ``STREXT_CONFIG``, then a
walk up from the working directory. Only an explicit ``--config`` that
points nowhere is an error; otherwise no file just means defaults.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "strext.toml"
CONFIG_ENV_VAR = "STREXT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for strext.toml.

    ``STREXT_CONFIG`` wins when set, even if the file it names is gone.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(config_path: str | None, search_from: Path | None = None) -> Path | None:
    """Pick the config file for a CLI run.

    Raises:
        click.ClickException: If *config_path* is given but is not a file.
    """
    if config_path is None:
        return find_config(search_from)
    path = Path(config_path)
    if not path.is_file():
        raise click.ClickException(f"Config file not found: {path}")
    return path


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* as TOML; ``{}`` when there is no file.

    Raises:
        click.ClickException: On malformed TOML, naming the file.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
