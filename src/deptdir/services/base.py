"""BaseService — foundation for deptdir services.

A service that touches directory state receives the :class:`Directory` at
construction time. The caller owns the directory; every mutation goes
through the service it was handed to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deptdir.domain.directory import Directory


class BaseService:
    """Base for service-layer classes bound to one directory.

    Usage::

        class DirectoryService(BaseService):
            def execute(self, command: Command) -> ServiceResult:
                self._directory.add_employee(...)
    """

    def __init__(self, directory: Directory) -> None:
        self._directory = directory

    @property
    def directory(self) -> Directory:
        return self._directory
