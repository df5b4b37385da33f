"""Tests for the exec command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from deptdir.cli import cli
from deptdir.domain.directory import Directory
from deptdir.domain.parser import parse
from deptdir.services.executor import execute
from tests.conftest import SCENARIO_ADDS


class TestExecCommand:
    def test_scenario(self, cli_runner: CliRunner) -> None:
        args = [*SCENARIO_ADDS, "List Engineering", "List Nowhere", "Bogus input here"]
        result = cli_runner.invoke(cli, ["exec", *args])
        assert result.exit_code == 0
        assert result.output == (
            "Added Sally to Engineering\n"
            "Added Amir to Sales\n"
            "Added Pat to Engineering\n"
            "Engineering:\n    Pat\n    Sally\n"
            "No such department\n"
            "Invalid command\n"
        )

    def test_unknown_department_exits_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["exec", "List Ghost"])
        assert result.exit_code == 0
        assert result.output == "No such department\n"

    def test_each_invocation_starts_empty(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["exec", "Add Sally to Eng"])
        result = cli_runner.invoke(cli, ["exec", "List Eng"])
        assert result.output == "No such department\n"

    def test_requires_lines(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["exec"])
        assert result.exit_code == 2

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "exec", "Add Sally to Eng", "List All"])
        records = [json.loads(line) for line in result.output.splitlines()]
        assert records[1]["data"]["departments"] == [
            {"department": "Eng", "employees": ["Sally"]}
        ]


class TestExecMatchesCore:
    @pytest.mark.parametrize(
        "line",
        ["Add a\x07b to D", "Add Sally to Eng\x08", "Add [bold]x to :smile:", "List\x7fAll"],
    )
    def test_output_is_core_response(self, cli_runner: CliRunner, line: str) -> None:
        result = cli_runner.invoke(cli, ["exec", line])
        assert result.output == execute(parse(line), Directory()) + "\n"

    def test_control_character_name_can_be_listed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["exec", "Add a\x07b to D", "List D"])
        assert result.output == "Added a\x07b to D\nD:\n    a\x07b\n"
