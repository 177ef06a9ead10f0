"""Tests for the color CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from strext.cli import cli


@pytest.mark.usefixtures("isolated_dir")
class TestColorCommand:
    def test_color_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["color", "--help"])
        assert result.exit_code == 0
        assert "HEX_VALUE" in result.output

    def test_color_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "color", "#FF0000"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "hex_color"
        assert data["data"]["rgb255"] == [255, 0, 0]
        assert data["data"]["red"] == 1.0

    def test_color_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["color", "1E90FF"])
        assert result.exit_code == 0
        assert "rgb255: [30,144,255]" in result.output

    def test_color_malformed_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["color", "#FFF"])
        assert result.exit_code == 0
        assert "WARNING: Unparseable color" in result.output

    def test_color_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "color", "#000000"])
        assert result.output.strip() == "[0, 0, 0]"

    def test_color_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["color", "--examples"])
        assert result.exit_code == 0
        assert "strext color" in result.output
