"""Shared pytest fixtures for strext tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from strext.config.settings import StrextSettings
from strext.services.telemetry import disable_telemetry
from strext.services.text import TextService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` enables telemetry in a ContextVar; keep it from leaking."""
    yield
    disable_telemetry()


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """CWD in an empty temp dir with no config discovery env override.

    Use via ``@pytest.mark.usefixtures("isolated_dir")`` on command test
    classes, or request it directly to write a ``strext.toml``.
    """
    monkeypatch.delenv("STREXT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(isolated_dir: Path) -> StrextSettings:
    """Default settings with no TOML file in reach."""
    return StrextSettings.from_cli(search_from=isolated_dir)


@pytest.fixture
def service(settings: StrextSettings) -> TextService:
    """TextService built on default settings."""
    return TextService(settings)
