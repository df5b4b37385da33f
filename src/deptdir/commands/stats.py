"""Command group: integer statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deptdir.commands._base import DeptGroup
from deptdir.services.utilities import UtilityService

if TYPE_CHECKING:
    from deptdir.commands._context import AppContext

_STATS_EXAMPLES = """\
  deptdir stats median 3 4 8 2 2 5
  deptdir stats mode 3 4 8 2 2 5
  deptdir --json stats median -- -4 7 1"""

# Let negative numbers through as arguments rather than options.
_NUMBERS_CONTEXT = {"ignore_unknown_options": True}


@click.group(cls=DeptGroup, examples=_STATS_EXAMPLES)
def stats() -> None:
    """Median and mode over a list of integers."""


@stats.command(
    context_settings=_NUMBERS_CONTEXT,
    examples="""\
  deptdir stats median 3 4 8 2 2 5
  deptdir stats median 10 -2 7""",
)
@click.argument("numbers", nargs=-1, type=int)
@click.pass_obj
def median(app: AppContext, numbers: tuple[int, ...]) -> None:
    """Print the lower-middle value of NUMBERS after sorting."""
    app.emit(UtilityService().median(numbers))


@stats.command(
    context_settings=_NUMBERS_CONTEXT,
    examples="""\
  deptdir stats mode 1 2 2 3
  deptdir --json stats mode 5 5 1 1""",
)
@click.argument("numbers", nargs=-1, type=int)
@click.pass_obj
def mode(app: AppContext, numbers: tuple[int, ...]) -> None:
    """Print the most frequent value in NUMBERS and how often it occurs."""
    app.emit(UtilityService().mode(numbers))
