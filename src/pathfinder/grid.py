"""Bounds-safe character grid."""

import logging
import re
from typing import Callable, Dict, Iterable, Sequence, Tuple

from .models import Neighbors, ProcessResult
from .tiles import BLANK
from . import errors


logger = logging.getLogger(__name__)

CellHandler = Callable[[int, int], ProcessResult]


class Grid:
    """
    Immutable jagged character matrix.

    Row 0 is the top row and column 0 the leftmost column. Rows may have
    different lengths. Spaces and anything outside the stored cells read
    back as BLANK.
    """

    def __init__(self, rows: Iterable[Sequence[str]]):
        self._rows: Tuple[Tuple[str, ...], ...] = tuple(tuple(row) for row in rows)

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def point(self, row: int, col: int) -> str:
        """Character at (row, col), or BLANK for spaces and out-of-bounds cells."""
        if row < 0 or col < 0:
            return BLANK
        if row >= len(self._rows) or col >= len(self._rows[row]):
            return BLANK

        character = self._rows[row][col]
        return BLANK if character == ' ' else character

    def neighbors(self, row: int, col: int) -> Neighbors:
        """The four characters around (row, col)."""
        return Neighbors(
            up=self.point(row - 1, col),
            down=self.point(row + 1, col),
            left=self.point(row, col - 1),
            right=self.point(row, col + 1),
        )

    def process(
        self,
        exact_handlers: Dict[str, CellHandler],
        pattern_handlers: Dict[re.Pattern, CellHandler],
        valid_chars: re.Pattern,
    ) -> ProcessResult:
        """
        Sweep every non-blank cell left to right, top to bottom.

        Each character must fully match `valid_chars`. An exact handler for the
        character takes priority and its error is returned as is; otherwise
        every pattern handler whose pattern matches runs in registration order.
        The first failure stops the sweep.

        Args:
            exact_handlers: Handlers keyed by a single character
            pattern_handlers: Handlers keyed by a compiled pattern
            valid_chars: Pattern a character must fully match

        Returns:
            ProcessResult, with a located PathError on failure
        """
        for row, cells in enumerate(self._rows):
            for col in range(len(cells)):
                character = self.point(row, col)
                if character == BLANK:
                    continue

                if not valid_chars.fullmatch(character):
                    logger.debug("Invalid character %r at (%d, %d)", character, row, col)
                    return ProcessResult(
                        success=False,
                        error=errors.located(
                            errors.GRAMMAR,
                            f"Invalid character found: '{character}' at ({row}, {col})",
                            row, col,
                        ),
                    )

                if character in exact_handlers:
                    result = exact_handlers[character](row, col)
                    if not result.success:
                        return ProcessResult(success=False, error=result.error)
                    continue

                for pattern, handler in pattern_handlers.items():
                    if not pattern.fullmatch(character):
                        continue
                    result = handler(row, col)
                    if not result.success:
                        return ProcessResult(
                            success=False,
                            error=errors.located(errors.HANDLER_FAILED, f"Validation failed for: {character}", row, col),
                        )

        return ProcessResult(success=True)
