"""pig-latin — transform words to pig latin."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deptdir.commands._base import DeptCommand
from deptdir.services.utilities import UtilityService

if TYPE_CHECKING:
    from deptdir.commands._context import AppContext


@click.command(
    "pig-latin",
    cls=DeptCommand,
    examples="""\
  deptdir pig-latin first apple
  deptdir pig-latin "first apple cbnm because\"""",
)
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def pig_latin(app: AppContext, words: tuple[str, ...]) -> None:
    """Convert WORDS to pig latin."""
    app.emit(UtilityService().pig_latin(" ".join(words)))
