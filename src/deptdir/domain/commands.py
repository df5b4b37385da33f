"""Command variants produced by the parser.

One frozen dataclass per line-protocol case. The executor switches on the
variant type only; keyword literals never leave :mod:`deptdir.domain.parser`.
"""

from __future__ import annotations

from dataclasses import dataclass

ALL_DEPARTMENTS = "All"


@dataclass(frozen=True)
class Add:
    """``Add <name> to <department>``."""

    name: str
    department: str


@dataclass(frozen=True)
class ListDepartment:
    """``List <department>`` for any department other than ``All``."""

    department: str


@dataclass(frozen=True)
class ListAll:
    """``List All``."""


@dataclass(frozen=True)
class Invalid:
    """Any line that matches no other command."""

    raw_line: str


Command = Add | ListDepartment | ListAll | Invalid
