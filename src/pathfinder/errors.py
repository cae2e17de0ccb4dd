"""Error codes carried by PathError values."""

from typing import Optional

from .models import PathError


# Validation phase
GRAMMAR = "GRAMMAR"  # Character outside the tile grammar
STRUCTURAL = "STRUCTURAL"  # Missing or duplicated start/end markers
START_POINT = "START_POINT"  # Start marker without exactly one road
HANDLER_FAILED = "HANDLER_FAILED"  # A pattern handler rejected a cell

# Walk phase
TURN = "TURN"  # Turn with a bad road count, or a straight pass
MOVEMENT = "MOVEMENT"  # No valid next cell
CYCLE = "CYCLE"  # Walk revisited a state or ran out of steps

VALIDATION_CODES = frozenset({GRAMMAR, STRUCTURAL, START_POINT, HANDLER_FAILED})
WALK_CODES = frozenset({TURN, MOVEMENT, CYCLE})


def located(code: str, message: str, row: Optional[int] = None, col: Optional[int] = None) -> PathError:
    """Build a PathError, optionally pinned to a grid cell."""
    return PathError(code=code, message=message, row=row, col=col)
