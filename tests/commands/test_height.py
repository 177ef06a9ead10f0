"""Tests for the height CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from strext.cli import cli


@pytest.mark.usefixtures("isolated_dir")
class TestHeightCommand:
    def test_height_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "height", "one\ntwo", "--width", "300"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["lines"] == 2
        assert data["height"] > 0

    def test_width_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["height", "text"])
        assert result.exit_code == 2

    def test_width_must_be_positive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["height", "text", "--width", "0"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("size", ["0", "-2"])
    def test_size_must_be_positive(self, cli_runner: CliRunner, size: str) -> None:
        result = cli_runner.invoke(cli, ["height", "text", "--width", "100", "--size", size])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_missing_font(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            cli, ["height", "text", "--width", "100", "--font", str(tmp_path / "none.ttf")]
        )
        assert result.exit_code == 1
        assert "Cannot load font" in result.output

    def test_size_option(self, cli_runner: CliRunner) -> None:
        small = cli_runner.invoke(cli, ["-q", "height", "x", "--width", "500", "--size", "10"])
        large = cli_runner.invoke(cli, ["-q", "height", "x", "--width", "500", "--size", "40"])
        assert float(large.output) > float(small.output)
