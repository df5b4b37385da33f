"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns logging setup, builds fresh directories from
the configured storage mode, and centralizes result output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from deptdir.config.logging import configure_logging
from deptdir.domain.directory import Directory
from deptdir.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from deptdir.config.settings import DeptdirSettings
    from deptdir.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: DeptdirSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=sys.stdout.isatty(),
        )

    @property
    def interactive(self) -> bool:
        """Whether prompts may be shown (stdin is a TTY and not ``--no-interact``)."""
        return not self.settings.no_interact and sys.stdin.isatty()

    def new_directory(self) -> Directory:
        """A fresh, empty directory using the configured storage mode."""
        return Directory(keep_sorted=self.settings.directory.keep_sorted)

    def respond(self, result: ServiceResult) -> None:
        """Print one interpreter response to stdout, whatever its outcome.

        Unknown departments and invalid lines are ordinary responses here,
        so nothing goes to stderr and nothing exits.  JSON mode writes one
        compact object per response.
        """
        output = format_result(result, settings=self.output_settings, compact=True)
        if output or not self.settings.quiet:
            click.echo(output)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
