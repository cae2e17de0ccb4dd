"""
Static validation of a diagram before it is walked.

Checks:
1. Grammar (every non-blank cell is a known tile)
2. A single start marker with exactly one road leaving it
3. Presence of the start and end markers
"""

import logging
from typing import Dict, Optional, Tuple

from .grid import Grid
from .models import Endpoints, PathError, PathfinderConfig, Position, ProcessResult
from .movement import real_directions
from .tiles import END_CHARACTER, START_CHARACTER, VALID_CHARACTERS
from . import errors


logger = logging.getLogger(__name__)


def validate_grid(
    grid: Grid,
    config: Optional[PathfinderConfig] = None,
) -> Tuple[Optional[Endpoints], Optional[PathError]]:
    """
    Run the validation sweep over the grid.

    Returns (endpoints, None) when the grid is well formed, otherwise
    (None, error) for the first problem found in sweep order.
    """
    config = config or PathfinderConfig()
    found: Dict[str, Position] = {}

    def check_start(row: int, col: int) -> ProcessResult:
        if 'start' in found:
            return ProcessResult(success=False, error=errors.located(
                errors.STRUCTURAL,
                f"Grid has multiple start points: another '{START_CHARACTER}' at ({row}, {col})",
                row, col,
            ))

        roads = sum(real_directions(grid, row, col).values())
        if roads != 1:
            return ProcessResult(success=False, error=errors.located(
                errors.START_POINT,
                f"Start point at ({row}, {col}) must have exactly 1 road coming out of it, found {roads}",
                row, col,
            ))

        found['start'] = Position(row, col)
        return ProcessResult(success=True)

    def check_end(row: int, col: int) -> ProcessResult:
        if 'end' in found:
            if config.reject_duplicate_end:
                return ProcessResult(success=False, error=errors.located(
                    errors.STRUCTURAL,
                    f"Grid has multiple end points: another '{END_CHARACTER}' at ({row}, {col})",
                    row, col,
                ))
            logger.warning(
                "Multiple end points found; (%d, %d) replaces (%d, %d)",
                row, col, found['end'].row, found['end'].col,
            )

        found['end'] = Position(row, col)
        return ProcessResult(success=True)

    result = grid.process(
        {START_CHARACTER: check_start, END_CHARACTER: check_end},
        {},
        VALID_CHARACTERS,
    )
    if not result.success:
        return None, result.error

    start, end = found.get('start'), found.get('end')
    if start is None or end is None:
        if start is None and end is None:
            missing = "missing start and end points"
        elif start is None:
            missing = "missing start point"
        else:
            missing = "missing end point"
        return None, errors.located(errors.STRUCTURAL, f"Start or end point not found: {missing}")

    logger.debug("Grid is valid: start at %s, end at %s", tuple(start), tuple(end))
    return Endpoints(start=start, end=end), None
