"""DirectoryService — the command executor.

Dispatches a parsed :data:`~deptdir.domain.commands.Command` against the
bound directory. Every command yields exactly one result:

* ``Add`` mutates the directory and confirms.
* ``ListDepartment`` and ``ListAll`` read sorted copies.
* Unknown departments and invalid lines come back as ``ok=False`` results
  with codes ``NOT_FOUND`` and ``INVALID_COMMAND``.

:func:`response_text` renders any of those results as line-protocol text;
:func:`execute` combines both steps for callers that only want the text.
"""

from __future__ import annotations

import logging

from deptdir.domain.commands import Add, Command, Invalid, ListAll, ListDepartment
from deptdir.domain.directory import Directory, NotFound
from deptdir.domain.parser import parse
from deptdir.domain.responses import (
    INVALID_COMMAND,
    NO_SUCH_DEPARTMENT,
    render_added,
    render_department,
    render_listing,
)
from deptdir.services.base import BaseService
from deptdir.services.result import ServiceResult

logger = logging.getLogger(__name__)

NOT_FOUND = "NOT_FOUND"
INVALID = "INVALID_COMMAND"


class DirectoryService(BaseService):
    """Executes directory commands against one :class:`Directory`."""

    def execute(self, command: Command) -> ServiceResult:
        match command:
            case Add(name=name, department=department):
                result = self._add(name, department)
            case ListDepartment(department=department):
                result = self._list_department(department)
            case ListAll():
                result = self._list_all()
            case Invalid(raw_line=raw_line):
                result = ServiceResult.failure(
                    "invalid_command", INVALID, INVALID_COMMAND, line=raw_line
                )
        logger.debug("Executed %s ok=%s", result.op, result.ok)
        return result

    def run_line(self, line: str) -> ServiceResult:
        """Parse *line* and execute it."""
        return self.execute(parse(line))

    def _add(self, name: str, department: str) -> ServiceResult:
        self._directory.add_employee(name, department)
        return ServiceResult.success("add_employee", name=name, department=department)

    def _list_department(self, department: str) -> ServiceResult:
        employees = self._directory.list_department(department)
        if isinstance(employees, NotFound):
            return ServiceResult.failure(
                "list_department", NOT_FOUND, NO_SUCH_DEPARTMENT, department=department
            )
        return ServiceResult.success(
            "list_department", department=department, employees=employees
        )

    def _list_all(self) -> ServiceResult:
        listing = self._directory.list_all()
        return ServiceResult.success(
            "list_all",
            departments=[
                {"department": dept, "employees": employees} for dept, employees in listing
            ],
            count=len(listing),
        )


def response_text(result: ServiceResult) -> str:
    """Render a DirectoryService result as line-protocol text."""
    if not result.ok:
        return result.error.message if result.error else INVALID_COMMAND
    data = result.data
    if result.op == "add_employee":
        return render_added(data["name"], data["department"])
    if result.op == "list_department":
        return render_department(data["department"], data["employees"])
    if result.op == "list_all":
        return render_listing(
            (entry["department"], entry["employees"]) for entry in data["departments"]
        )
    msg = f"Not a directory result: {result.op}"
    raise ValueError(msg)


def execute(command: Command, directory: Directory) -> str:
    """Execute *command* against *directory* and return the response text."""
    return response_text(DirectoryService(directory).execute(command))
