"""Subcommand modules for deptdir.

Provides register_commands() which uses deferred imports to keep
``deptdir --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    1 group (stats) + 3 standalone commands.
    """
    # --- Groups ---
    from deptdir.commands.stats import stats

    cli.add_command(stats)

    # --- Standalone commands ---
    from deptdir.commands.exec_cmd import exec_cmd
    from deptdir.commands.pig_latin import pig_latin
    from deptdir.commands.repl import repl

    cli.add_command(repl)
    cli.add_command(exec_cmd)
    cli.add_command(pig_latin)
