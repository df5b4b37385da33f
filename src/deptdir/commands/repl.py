"""repl — the line-oriented directory interpreter loop."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click
import structlog

from deptdir.commands._base import DeptCommand
from deptdir.services.executor import DirectoryService

if TYPE_CHECKING:
    from deptdir.commands._context import AppContext

log = structlog.get_logger(__name__)


@click.command(
    cls=DeptCommand,
    examples="""\
  # Interactive session
  deptdir repl

  # Replay a script of commands
  deptdir repl --file commands.txt
  printf 'Add Sally to Engineering\\nList All\\n' | deptdir repl

  # One JSON result per line
  deptdir --json repl --file commands.txt""",
)
@click.option(
    "--file",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read commands from a file instead of stdin.",
)
@click.pass_obj
def repl(app: AppContext, input_file: IO[str] | None) -> None:
    """Read directory commands line by line until end of input.

    \b
    Commands:
      Add <name> to <department>
      List <department>
      List All
    """
    stream = input_file or click.get_text_stream("stdin")
    prompt = app.settings.repl.prompt
    show_prompt = input_file is None and app.settings.repl.show_prompt and app.interactive

    directory = app.new_directory()
    svc = DirectoryService(directory)
    log.debug("repl.started", show_prompt=show_prompt, keep_sorted=directory.keep_sorted)

    executed = 0
    while True:
        if show_prompt:
            click.echo(prompt, nl=False)
        line = stream.readline()
        if not line:
            break
        app.respond(svc.run_line(line.rstrip("\r\n")))
        executed += 1

    log.debug(
        "repl.finished",
        commands=executed,
        departments=len(directory),
        employees=directory.employee_count(),
    )
