"""Line parser — raw text line to :data:`~deptdir.domain.commands.Command`.

Token matching is structural and case-sensitive. Name and department tokens
are not validated beyond whitespace splitting, so ``Add Sally to to`` files
Sally under a department literally named ``to``.
"""

from __future__ import annotations

import re

from deptdir.domain.commands import (
    ALL_DEPARTMENTS,
    Add,
    Command,
    Invalid,
    ListAll,
    ListDepartment,
)


# Unicode White_Space. str.split() also breaks on the \x1c-\x1f separators.
_WHITESPACE = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def tokenize(line: str) -> list[str]:
    """Split *line* on runs of whitespace. Blank lines yield no tokens."""
    return [token for token in _WHITESPACE.split(line) if token]


def parse(line: str) -> Command:
    """Parse one input line into a command.

    Examples:
        >>> parse("Add Sally to Engineering")
        Add(name='Sally', department='Engineering')
        >>> parse("List All")
        ListAll()
        >>> parse("add sally to engineering")
        Invalid(raw_line='add sally to engineering')
    """
    match tokenize(line):
        case ["Add", name, "to", department]:
            return Add(name=name, department=department)
        case ["List", department] if department != ALL_DEPARTMENTS:
            return ListDepartment(department=department)
        case ["List", "All"]:
            return ListAll()
        case _:
            return Invalid(raw_line=line)
