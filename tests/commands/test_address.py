"""Tests for the address CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from placectl.cli import cli

SPRINGFIELD = ["apartment:12", "building:5", "street:Oak", "city:Springfield"]


@pytest.mark.usefixtures("_isolated_config")
class TestAddressCommand:
    def test_address(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["address", *SPRINGFIELD])
        assert result.exit_code == 0
        assert result.output.strip() == "кв. 12, д. 5, ул. Oak, г. Springfield"

    def test_marked_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["address", "region:Московская обл.", "country:Россия"])
        assert result.exit_code == 0
        assert result.output.strip() == "Московская обл., Россия"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "address", "street:Oak", "city:Springfield"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["address"] == "ул. Oak, г. Springfield"

    def test_name_may_contain_colon(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "address", "building:5:2"])
        assert result.output.strip() == "д. 5:2"

    def test_unknown_type_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["address", "planet:Earth"])
        assert result.exit_code == 1
        assert "Unknown place type" in result.output

    def test_untyped_place_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "address", "street:Oak", ":somewhere"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "TYPE_UNSET"

    def test_malformed_token_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["address", "Springfield"])
        assert result.exit_code == 2
        assert "TYPE:NAME" in result.output

    def test_places_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["address"])
        assert result.exit_code == 2

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["address", "--examples"])
        assert result.exit_code == 0
        assert "placectl address" in result.output

    def test_toml_quiet(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "placectl.toml").write_text("[output]\nquiet = true\n")
        result = cli_runner.invoke(cli, ["address", "street:Oak"])
        assert result.exit_code == 0
        assert result.output.strip() == "ул. Oak"

    def test_toml_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "placectl.toml").write_text("[output]\njson = true\n")
        result = cli_runner.invoke(cli, ["address", "street:Oak"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["address"] == "ул. Oak"
