"""
Follow an ASCII diagram from its start marker to its end marker.

A diagram encodes exactly one route: '@' marks the start, 'x' the end,
'-' and '|' are roads, '+' is a turn and uppercase letters are waypoints
that may also sit on turns. The walk records every tile it visits and the
letters it passes, each letter cell counted once.
"""

import logging
from typing import List, Optional, Sequence, Set, Tuple

from .grid import Grid
from .models import Endpoints, PathError, PathfinderConfig, PathResult, VisitedTile
from .movement import next_move
from .tiles import Direction, LETTER_PATTERN
from .validation import validate_grid
from . import errors


logger = logging.getLogger(__name__)


class Pathfinder:
    """Validates a diagram and walks it. Holds no state between calls."""

    def __init__(self, rows: Sequence[Sequence[str]], config: Optional[PathfinderConfig] = None):
        self.grid = Grid(rows)
        self.config = config or PathfinderConfig()

    def validate(self) -> Tuple[Optional[Endpoints], Optional[PathError]]:
        """Run the validation sweep; see validation.validate_grid."""
        return validate_grid(self.grid, self.config)

    def find_path(self) -> PathResult:
        """Validate the grid, then walk it from the start marker."""
        endpoints, error = self.validate()
        if error is not None:
            logger.debug("Validation failed: %s", error.message)
            return PathResult(success=False, error=error)
        return self.walk(endpoints)

    def walk(self, endpoints: Endpoints) -> PathResult:
        """Run the state machine until FINISH or ERROR."""
        visited: List[VisitedTile] = []
        letters: List[str] = []
        letter_cells: Set[Tuple[int, int]] = set()
        states: Set[Tuple[int, int, Direction]] = set()

        row, col = endpoints.start
        direction = Direction.START

        while True:
            state = (row, col, direction)
            if state in states:
                return self._failure(visited, letters, errors.located(
                    errors.CYCLE,
                    f"Path loops back on itself at ({row}, {col}) heading {direction.value}",
                    row, col,
                ))
            if self.config.max_steps is not None and len(visited) >= self.config.max_steps:
                return self._failure(visited, letters, errors.located(
                    errors.CYCLE,
                    f"Path exceeds {self.config.max_steps} steps",
                    row, col,
                ))
            states.add(state)

            character = self.grid.point(row, col)
            visited.append(VisitedTile(row=row, col=col, character=character))
            if LETTER_PATTERN.fullmatch(character) and (row, col) not in letter_cells:
                letter_cells.add((row, col))
                letters.append(character)

            move = next_move(self.grid, row, col, direction)
            logger.debug("(%d, %d) %r %s -> %s", row, col, character, direction.value, move.direction.value)

            if move.direction is Direction.FINISH:
                return PathResult(success=True, visited=visited, letters=''.join(letters))
            if move.direction is Direction.ERROR:
                return self._failure(visited, letters, errors.located(
                    move.code or errors.MOVEMENT, move.message or "Walk failed", move.row, move.col,
                ))

            row, col, direction = move.row, move.col, move.direction

    @staticmethod
    def _failure(visited: List[VisitedTile], letters: List[str], error: PathError) -> PathResult:
        logger.debug("Walk failed after %d tiles: %s", len(visited), error.message)
        return PathResult(success=False, visited=visited, letters=''.join(letters), error=error)


def find_path(rows: Sequence[Sequence[str]], config: Optional[PathfinderConfig] = None) -> PathResult:
    """Convenience wrapper: build a Pathfinder and run it."""
    return Pathfinder(rows, config).find_path()
