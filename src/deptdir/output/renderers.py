"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Directory renderers reproduce the line protocol character for character;
styling only adds color.  Renderers are dispatched by ``result.op`` in
:func:`render_result`.  Unknown ops fall through to a generic key-value
renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from deptdir.domain.responses import EMPLOYEE_INDENT
from deptdir.output.console import create_console, get_output
from deptdir.services.executor import response_text

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from deptdir.services.result import ServiceResult

    Renderer = Callable[[ServiceResult, Console], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, color: bool = False) -> str:
    """Render a ServiceResult to a (optionally styled) string via Rich.

    Uncolored directory results are the line-protocol text itself: Rich
    drops control characters, which would change stored names on screen.
    """
    if not color and result.op in _DIRECTORY_OPS and (result.ok or not verbose):
        return response_text(result)

    console = create_console(color=color)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, color: bool = False) -> str:
    """Render minimal output for ``--quiet`` mode.

    Confirmations are dropped; listings, values and errors still print.
    """
    if result.ok and result.op == "add_employee":
        return ""
    return render_result(result, color=color)


# ── Helpers ───────────────────────────────────────────────────────────


def _print(console: Console, *parts: Text) -> None:
    console.print(*parts, sep="", soft_wrap=True)


def _department_block(console: Console, department: str, employees: list[str]) -> None:
    _print(console, Text(department, style="dept.department"), Text(":", style="dept.header"))
    for name in employees:
        _print(console, Text(EMPLOYEE_INDENT), Text(name, style="dept.employee"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    _print(console, Text(msg, style="dept.error"))

    if verbose and err and err.detail:
        _print(console, Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            _print(console, Text(f"  {k}: {v}", style="dim"))


# ── Directory renderers ───────────────────────────────────────────────


def _render_added(result: ServiceResult, console: Console) -> None:
    d = result.data
    _print(
        console,
        Text("Added ", style="dept.ok"),
        Text(d["name"], style="dept.employee"),
        Text(" to ", style="dept.ok"),
        Text(d["department"], style="dept.department"),
    )


def _render_department(result: ServiceResult, console: Console) -> None:
    _department_block(console, result.data["department"], result.data["employees"])


def _render_listing(result: ServiceResult, console: Console) -> None:
    for entry in result.data.get("departments", []):
        _department_block(console, entry["department"], entry["employees"])


# ── Utility renderers ─────────────────────────────────────────────────


def _render_median(result: ServiceResult, console: Console) -> None:
    _print(console, Text(str(result.data["median"]), style="dept.number"))


def _render_mode(result: ServiceResult, console: Console) -> None:
    d = result.data
    _print(
        console,
        Text(str(d["mode"]), style="dept.number"),
        Text(f" (count {d['count']})", style="dept.key"),
    )


def _render_pig_latin(result: ServiceResult, console: Console) -> None:
    _print(console, Text(result.data["text"]))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback: OK status line + key-value fields."""
    _print(console, Text("OK", style="dept.ok"), Text(f"  {result.op}", style="dept.op"))
    for key, value in result.data.items():
        _print(console, Text(f"  {key}: ", style="dept.key"), Text(str(value)))


_DIRECTORY_OPS = frozenset({"add_employee", "list_department", "list_all", "invalid_command"})

_OP_RENDERERS: dict[str, Renderer] = {
    "add_employee": _render_added,
    "list_department": _render_department,
    "list_all": _render_listing,
    "median": _render_median,
    "mode": _render_mode,
    "pig_latin": _render_pig_latin,
}
