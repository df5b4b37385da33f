"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from deptdir.cli import cli
from deptdir.commands._base import EXAMPLES_HINT

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["repl", "--examples"], ["deptdir repl --file"]),
    (["exec", "--examples"], ["Add Sally to Engineering"]),
    (["stats", "--examples"], ["deptdir stats median", "deptdir stats mode"]),
    (["stats", "median", "--examples"], ["deptdir stats median"]),
    (["stats", "mode", "--examples"], ["deptdir stats mode"]),
    (["pig-latin", "--examples"], ["deptdir pig-latin"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--examples")


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


class TestExamplesEagerExit:
    def test_examples_skips_required_args(self, cli_runner: CliRunner) -> None:
        # exec requires LINES, but --examples should work without them
        result = cli_runner.invoke(cli, ["exec", "--examples"])
        assert result.exit_code == 0

    @pytest.mark.parametrize("args", [["repl", "--help"], ["exec", "--help"], ["stats", "--help"]])
    def test_examples_in_help(self, cli_runner: CliRunner, args: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "--examples" in result.output

    def test_help_ends_with_hint(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["repl", "--help"])
        assert EXAMPLES_HINT in result.output
