"""Shared pytest fixtures and test helpers for deptdir tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from deptdir.domain.directory import Directory
from deptdir.services.executor import DirectoryService


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp dir with no config override.

    Keeps a stray ``deptdir.toml`` or ``DEPTDIR_*`` variable on the host
    from leaking into settings discovery.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEPTDIR_CONFIG", raising=False)
    monkeypatch.delenv("DEPTDIR_DIRECTORY__KEEP_SORTED", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler changes made by CLI invocations (configure_logging)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("deptdir")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def directory() -> Directory:
    """An empty directory in the default (append) storage mode."""
    return Directory()


@pytest.fixture
def service(directory: Directory) -> DirectoryService:
    return DirectoryService(directory)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------

SCENARIO_ADDS = [
    "Add Sally to Engineering",
    "Add Amir to Sales",
    "Add Pat to Engineering",
]


def seed(directory: Directory, *pairs: tuple[str, str]) -> Directory:
    """Add ``(name, department)`` pairs in order and return the directory."""
    for name, department in pairs:
        directory.add_employee(name, department)
    return directory
