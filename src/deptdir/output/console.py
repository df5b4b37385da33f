"""Rich Console factory and theme for deptdir output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  Without ``color=True`` Rich
emits no escape codes, so rendered text matches the line protocol exactly.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEPT_THEME = Theme(
    {
        "dept.ok": "bold green",
        "dept.error": "bold red",
        "dept.op": "bold cyan",
        "dept.key": "dim",
        "dept.header": "bold",
        "dept.department": "bold blue",
        "dept.employee": "",
        "dept.number": "magenta",
    }
)


def create_console(
    *,
    no_color: bool = False,
    color: bool = False,
    width: int | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes even when *color* is set.
        color: Force styled output (the buffer is never a terminal).
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=DEPT_THEME,
        no_color=no_color,
        force_terminal=color or None,
        highlight=False,
        emoji=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
