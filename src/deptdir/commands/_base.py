"""Click base classes with ``--examples`` support.

DeptCommand and DeptGroup accept an ``examples`` parameter.  Passing
``--examples`` prints them and exits before argument validation, so
``deptdir exec --examples`` works without any LINES.  ``--help`` stays
short and ends with a pointer to the flag.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

EXAMPLES_HINT = "Run with --examples for usage examples."


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    assert isinstance(command, ExamplesMixin)
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(command.examples)
    ctx.exit(0)


class ExamplesMixin:
    """Adds the eager ``--examples`` option and a help-text hint."""

    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.indent(textwrap.dedent(examples), "  ") if examples else None
        if self.examples is None:
            return
        assert isinstance(self, click.Command)
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_show_examples,
                help="Show usage examples.",
            )
        )

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(EXAMPLES_HINT)


class DeptCommand(ExamplesMixin, click.Command):
    """Click Command that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class DeptGroup(ExamplesMixin, click.Group):
    """Click Group that supports an ``--examples`` flag.

    Sets ``command_class = DeptCommand`` so subcommands accept ``examples``
    without an explicit ``cls=`` each time.
    """

    command_class = DeptCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
