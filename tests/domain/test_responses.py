"""Tests for line-protocol response text."""

from __future__ import annotations

from deptdir.domain.responses import (
    INVALID_COMMAND,
    NO_SUCH_DEPARTMENT,
    render_added,
    render_department,
    render_listing,
)


class TestResponses:
    def test_added(self) -> None:
        assert render_added("Sally", "Engineering") == "Added Sally to Engineering"

    def test_department(self) -> None:
        assert render_department("Engineering", ["Pat", "Sally"]) == (
            "Engineering:\n    Pat\n    Sally"
        )

    def test_department_keeps_given_order(self) -> None:
        assert render_department("D", ["b", "a"]) == "D:\n    b\n    a"

    def test_listing(self) -> None:
        listing = [("Engineering", ["Pat", "Sally"]), ("Sales", ["Amir"])]
        assert render_listing(listing) == "Engineering:\n    Pat\n    Sally\nSales:\n    Amir"

    def test_empty_listing(self) -> None:
        assert render_listing([]) == ""

    def test_fixed_messages(self) -> None:
        assert NO_SUCH_DEPARTMENT == "No such department"
        assert INVALID_COMMAND == "Invalid command"
