"""exec — run command lines given as arguments against one directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deptdir.commands._base import DeptCommand
from deptdir.services.executor import DirectoryService

if TYPE_CHECKING:
    from deptdir.commands._context import AppContext


@click.command(
    "exec",
    cls=DeptCommand,
    examples="""\
  deptdir exec "Add Sally to Engineering" "Add Amir to Sales" "List All"
  deptdir --json exec "Add Pat to Engineering" "List Engineering"
  deptdir -q exec "Add Sally to Engineering" "List Engineering\"""",
)
@click.argument("lines", nargs=-1, required=True)
@click.pass_obj
def exec_cmd(app: AppContext, lines: tuple[str, ...]) -> None:
    """Execute each LINE in order and print its response.

    The directory starts empty and is discarded when the command exits.
    """
    svc = DirectoryService(app.new_directory())
    for line in lines:
        app.respond(svc.run_line(line))
