"""In-memory department directory.

Stores department -> employee names. Writes append; reads sort. The stored
order is never changed by a read, so listing twice without an intervening
add returns identical results.

INVARIANT: Adding an employee never removes or reorders existing entries
(with ``keep_sorted`` the list is kept in ascending order instead of
insertion order, which reads present identically).
"""

from __future__ import annotations

import bisect
import copy
from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    """Lookup outcome for a department that has no entry."""

    department: str


DepartmentListing = list[tuple[str, list[str]]]


class Directory:
    """Department -> employee-name mapping owned by a single interpreter loop.

    Args:
        keep_sorted: Keep each department's list sorted on insert using
            binary-search insertion. Reads still return copies.
    """

    def __init__(self, *, keep_sorted: bool = False) -> None:
        self._departments: dict[str, list[str]] = {}
        self.keep_sorted = keep_sorted

    def __len__(self) -> int:
        return len(self._departments)

    def __contains__(self, department: object) -> bool:
        return department in self._departments

    def __repr__(self) -> str:
        return f"Directory(departments={len(self)}, employees={self.employee_count()})"

    # --- Mutation ---

    def add_employee(self, name: str, department: str) -> None:
        """File *name* under *department*, creating the department if absent."""
        employees = self._departments.setdefault(department, [])
        if self.keep_sorted:
            bisect.insort(employees, name)
        else:
            employees.append(name)

    # --- Queries ---

    def list_department(self, department: str) -> list[str] | NotFound:
        """Return a sorted copy of *department*'s employees, or :class:`NotFound`."""
        employees = self._departments.get(department)
        if employees is None:
            return NotFound(department)
        return sorted(employees)

    def list_all(self) -> DepartmentListing:
        """Return every department in ascending order with sorted employees."""
        return [(dept, sorted(self._departments[dept])) for dept in self.departments()]

    def departments(self) -> list[str]:
        """Department names in ascending order."""
        return sorted(self._departments)

    def employee_count(self) -> int:
        """Total number of filed names, duplicates included."""
        return sum(len(names) for names in self._departments.values())

    def snapshot(self) -> dict[str, list[str]]:
        """Deep copy of the stored state, in stored order."""
        return copy.deepcopy(self._departments)


def add_employee(store: Directory, name: str, department: str) -> None:
    store.add_employee(name, department)


def list_department(store: Directory, department: str) -> list[str] | NotFound:
    return store.list_department(department)


def list_all(store: Directory) -> DepartmentListing:
    return store.list_all()
