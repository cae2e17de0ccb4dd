"""Tests for the bounds-safe Grid and its processing sweep."""

import re

import pytest

from src.pathfinder import Grid, Neighbors, ProcessResult, BLANK
from src.pathfinder.errors import GRAMMAR, HANDLER_FAILED


VALID = re.compile(r'[A-Z@x+\-| ]')


def ok(row, col):
    return ProcessResult(success=True)


class TestPoint:
    """Test cases for Grid.point."""

    grid = Grid([
        "ABC",
        "D E",
        "FGH",
    ])

    def test_returns_character(self):
        """Stored characters are returned as is."""
        assert self.grid.point(0, 0) == "A"
        assert self.grid.point(2, 2) == "H"

    def test_space_is_blank(self):
        """A literal space reads back as blank."""
        assert self.grid.point(1, 1) == BLANK

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (-1, -1)])
    def test_negative_indices_are_blank(self, row, col):
        """Negative coordinates never fail."""
        assert self.grid.point(row, col) == BLANK

    @pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (3, 3)])
    def test_out_of_bounds_is_blank(self, row, col):
        """Coordinates past the last row or column are blank."""
        assert self.grid.point(row, col) == BLANK

    def test_jagged_rows(self):
        """Column bounds are checked per row."""
        grid = Grid(["@", "|---", "x"])
        assert grid.point(0, 1) == BLANK
        assert grid.point(1, 3) == "-"
        assert grid.point(2, 3) == BLANK

    def test_accepts_character_lists(self):
        """Rows may be lists of characters as well as strings."""
        grid = Grid([["@", "-"], ["x"]])
        assert grid.point(0, 1) == "-"
        assert grid.row_count == 2
        assert len(grid) == 2

    def test_grid_is_immutable_copy(self):
        """Mutating the input does not change the grid."""
        rows = [["@", "-"]]
        grid = Grid(rows)
        rows[0][1] = "|"
        assert grid.point(0, 1) == "-"
        assert grid.rows == (("@", "-"),)

    def test_empty_grid(self):
        """An empty grid is all blank."""
        grid = Grid([])
        assert grid.row_count == 0
        assert grid.point(0, 0) == BLANK


class TestNeighbors:
    """Test cases for Grid.neighbors."""

    grid = Grid([
        "ABC",
        "DEF",
        "GHI",
    ])

    def test_center(self):
        """All four neighbors of the center cell."""
        assert self.grid.neighbors(1, 1) == Neighbors(up="B", down="H", left="D", right="F")

    def test_corners(self):
        """Neighbors off the edge are blank."""
        assert self.grid.neighbors(0, 0) == Neighbors(up="", down="D", left="", right="B")
        assert self.grid.neighbors(2, 2) == Neighbors(up="F", down="", left="H", right="")

    def test_far_outside(self):
        """A position far outside the grid has only blank neighbors."""
        assert self.grid.neighbors(10, 10) == Neighbors("", "", "", "")


class TestProcess:
    """Test cases for the Grid.process sweep."""

    grid = Grid([
        "@-A",
        "|+x",
        "B-C",
    ])

    def test_valid_grid(self):
        """Every handler succeeding gives a successful result."""
        result = self.grid.process(
            {"@": ok, "x": ok},
            {re.compile(r'[A-Z]'): ok},
            VALID,
        )
        assert result.success is True
        assert result.error is None

    def test_invalid_character(self):
        """An invalid character stops the sweep with its location."""
        grid = Grid(["@-A", "|?x"])
        result = grid.process({}, {}, VALID)
        assert result.success is False
        assert result.error.code == GRAMMAR
        assert "'?'" in result.error.message
        assert (result.error.row, result.error.col) == (1, 1)

    def test_first_invalid_in_sweep_order(self):
        """Left to right, top to bottom: the earliest bad cell is reported."""
        grid = Grid(["@-#", "?-x"])
        result = grid.process({}, {}, VALID)
        assert (result.error.row, result.error.col) == (0, 2)

    def test_spaces_are_skipped(self):
        """Blank cells are not checked or handled."""
        calls = []
        grid = Grid(["@ x"])
        grid.process({}, {re.compile(r'.'): lambda r, c: calls.append((r, c)) or ProcessResult(success=True)}, VALID)
        assert calls == [(0, 0), (0, 2)]

    def test_exact_handler_error_is_propagated(self):
        """Errors from exact handlers reach the caller unchanged."""
        from src.pathfinder import PathError

        def fail(row, col):
            return ProcessResult(success=False, error=PathError(code="CUSTOM", message="boom", row=row, col=col))

        result = self.grid.process({"x": fail}, {}, VALID)
        assert result.success is False
        assert result.error.code == "CUSTOM"
        assert result.error.message == "boom"
        assert (result.error.row, result.error.col) == (1, 2)

    def test_exact_handler_takes_priority(self):
        """A character with an exact handler skips the pattern handlers."""
        pattern_calls = []

        def record(row, col):
            pattern_calls.append((row, col))
            return ProcessResult(success=True)

        grid = Grid(["AB"])
        grid.process({"A": ok}, {re.compile(r'[A-Z]'): record}, VALID)
        assert pattern_calls == [(0, 1)]

    def test_pattern_handler_failure_is_generic(self):
        """A failing pattern handler gives a generic located error."""
        result = self.grid.process(
            {},
            {re.compile(r'[A-Z]'): lambda r, c: ProcessResult(success=False)},
            VALID,
        )
        assert result.success is False
        assert result.error.code == HANDLER_FAILED
        assert result.error.message == "Validation failed for: A"
        assert (result.error.row, result.error.col) == (0, 2)

    def test_all_matching_pattern_handlers_run(self):
        """Every matching pattern handler is called, in registration order."""
        calls = []
        grid = Grid(["A"])
        grid.process(
            {},
            {
                re.compile(r'[A-Z]'): lambda r, c: calls.append("letter") or ProcessResult(success=True),
                re.compile(r'A'): lambda r, c: calls.append("a") or ProcessResult(success=True),
                re.compile(r'B'): lambda r, c: calls.append("b") or ProcessResult(success=True),
            },
            VALID,
        )
        assert calls == ["letter", "a"]
