"""Tests for the scheme command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from barcodectl.cli import cli


class TestSchemeCommand:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "scheme"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["length"] == 8
        assert data["base_year"] == 2008
        assert data["last_year"] == 2033
        assert [f["positions"] for f in data["fields"]] == [[1, 1], [2, 2], [3, 4], [5, 7]]

    def test_rich(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["scheme"])
        assert result.exit_code == 0
        assert "describe_scheme" in result.stdout
        assert "Capacity" in result.stdout

    def test_configured_scheme(self, cli_runner: CliRunner, write_config) -> None:
        write_config("[scheme]\nbase_year = 2030\n")
        result = cli_runner.invoke(cli, ["--json", "scheme"])
        data = json.loads(result.stdout)["data"]
        assert data["last_year"] == 2055
        assert data["fields"][1]["first_label"] == "2030"
        assert json.loads(result.stdout)["warnings"] == []

    def test_window_warning_is_configurable(self, cli_runner: CliRunner, write_config) -> None:
        write_config("[scheme]\nbase_year = 2000\nyear_window_warning = 0\n")
        result = cli_runner.invoke(cli, ["scheme"])
        assert result.exit_code == 0
        assert "WARNING: The year window ended in 2025" in result.stderr

    def test_invalid_config_exits(self, cli_runner: CliRunner, write_config) -> None:
        write_config('[scheme]\ncapacities = ["1GB"]\n')
        result = cli_runner.invoke(cli, ["scheme"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
