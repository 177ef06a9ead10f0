"""Tests for the md5 CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from strext.cli import cli


@pytest.mark.usefixtures("isolated_dir")
class TestMd5Command:
    def test_md5_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["md5", "--help"])
        assert result.exit_code == 0
        assert "--strict" in result.output

    def test_md5_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "md5", ""])
        assert result.exit_code == 0
        assert result.output.strip() == "d41d8cd98f00b204e9800998ecf8427e"

    def test_md5_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "md5", "hello"])
        data = json.loads(result.output)
        assert data["data"]["digest"] == "5d41402abc4b2a76b9719d911017c592"

    def test_md5_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["md5", "--examples"])
        assert result.exit_code == 0
        assert "strext md5" in result.output
