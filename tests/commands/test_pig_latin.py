"""Tests for the pig-latin command."""

from __future__ import annotations

from click.testing import CliRunner

from deptdir.cli import cli


class TestPigLatinCommand:
    def test_words(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["pig-latin", "first", "apple", "cbnm", "because"])
        assert result.exit_code == 0
        assert result.output == "irst-fay apple-hay cbnm ecause-bay\n"

    def test_quoted_sentence(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["pig-latin", "first  apple"])
        assert result.output == "irst-fay apple-hay\n"

    def test_requires_words(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["pig-latin"]).exit_code == 2
