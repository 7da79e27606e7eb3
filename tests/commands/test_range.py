"""Tests for the range command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from dashkit.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestRangeCommand:
    def test_end_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "range", "4"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"] == {"value": [0, 1, 2, 3], "count": 4}

    def test_start_end_step(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "range", "0", "10", "--step", "3"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["value"] == [0, 3, 6, 9]

    def test_negative_step(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "range", "5", "0", "--step", "-2"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["value"] == [5, 3, 1]

    def test_zero_step(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["range", "0", "5", "--step", "0"])
        assert result.exit_code == 1
        assert result.stderr == "ERROR: range - Step must not be zero\n"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["range", "2"])
        assert result.exit_code == 0
        assert result.stdout == "OK: range\n[\n  0,\n  1\n]\n"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["range", "--examples"])
        assert result.exit_code == 0
        assert "dashkit range 0 10 --step 3" in result.output
