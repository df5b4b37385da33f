"""Line-protocol response text.

``Add`` confirms, ``List`` renders a ``<department>:`` header followed by one
indented line per employee, and the two rejection outcomes have fixed text.
"""

from __future__ import annotations

from collections.abc import Iterable

NO_SUCH_DEPARTMENT = "No such department"
INVALID_COMMAND = "Invalid command"
EMPLOYEE_INDENT = "    "


def render_added(name: str, department: str) -> str:
    return f"Added {name} to {department}"


def render_department(department: str, employees: Iterable[str]) -> str:
    """Header line plus one indented line per employee, in the given order."""
    lines = [f"{department}:"]
    lines.extend(f"{EMPLOYEE_INDENT}{name}" for name in employees)
    return "\n".join(lines)


def render_listing(listing: Iterable[tuple[str, Iterable[str]]]) -> str:
    """Render consecutive department blocks. An empty listing renders as ``""``."""
    return "\n".join(render_department(dept, names) for dept, names in listing)
