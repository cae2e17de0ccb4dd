"""
Walk transitions, one per tile kind.

Every transition takes the current cell and the direction the walk arrived
in, and returns a Move: the next cell and direction, FINISH at the end
marker, or ERROR with a message and the current cell.
"""

from typing import Dict, Optional, Tuple

from .grid import Grid
from .models import Move, PathError
from .tiles import (
    BLANK,
    CARDINAL_DIRECTIONS,
    Axis,
    Direction,
    TileKind,
    connectable,
    step,
    tile_kind,
)
from . import errors


# Turn candidates, in the order they are tried
_TURNS: Dict[Direction, Tuple[Direction, Direction]] = {
    Direction.UP: (Direction.LEFT, Direction.RIGHT),
    Direction.DOWN: (Direction.LEFT, Direction.RIGHT),
    Direction.LEFT: (Direction.UP, Direction.DOWN),
    Direction.RIGHT: (Direction.UP, Direction.DOWN),
}


def is_intersection(grid: Grid, row: int, col: int) -> bool:
    """True when all four neighbors of (row, col) connect along their own axis."""
    up, down, left, right = grid.neighbors(row, col)
    return (
        connectable(up, Axis.VERTICAL)
        and connectable(down, Axis.VERTICAL)
        and connectable(left, Axis.HORIZONTAL)
        and connectable(right, Axis.HORIZONTAL)
    )


def can_move(grid: Grid, row: int, col: int, direction: Direction) -> bool:
    """
    Whether the neighbor in `direction` is a real connection.

    A wrong-axis road next to the cell is a through-road, unless that road
    cell is a four-way crossing the walk can pass straight over.
    """
    next_row, next_col = step(row, col, direction)
    character = grid.point(next_row, next_col)
    if character == BLANK:
        return False
    if connectable(character, direction.axis):
        return True
    return is_intersection(grid, next_row, next_col)


def real_directions(grid: Grid, row: int, col: int) -> Dict[Direction, bool]:
    return {direction: can_move(grid, row, col, direction) for direction in CARDINAL_DIRECTIONS}


def _go(row: int, col: int, direction: Direction) -> Move:
    next_row, next_col = step(row, col, direction)
    return Move(next_row, next_col, direction)


def _fail(row: int, col: int, message: str, code: str = errors.MOVEMENT) -> Move:
    return Move(row, col, Direction.ERROR, message, code)


def handle_start(grid: Grid, row: int, col: int) -> Move:
    """Leave the start marker toward its single real neighbor."""
    for direction in CARDINAL_DIRECTIONS:
        if can_move(grid, row, col, direction):
            return _go(row, col, direction)
    return _fail(row, col, "No valid path found at start")


def handle_road(grid: Grid, row: int, col: int, last_direction: Direction) -> Move:
    """Roads never change direction."""
    if not last_direction.is_cardinal:
        return _fail(row, col, f"Cannot continue {last_direction.value}: road reached without a heading")

    next_row, next_col = step(row, col, last_direction)
    if grid.point(next_row, next_col) == BLANK:
        return _fail(row, col, f"Cannot continue {last_direction.value}: path ends unexpectedly")
    return Move(next_row, next_col, last_direction)


def check_turn(grid: Grid, row: int, col: int) -> Optional[PathError]:
    """Validate a turn: exactly two real roads, and not a straight pass."""
    real = real_directions(grid, row, col)
    if sum(real.values()) != 2:
        return errors.located(errors.TURN, "Turn must have exactly 2 roads coming into it", row, col)

    vertical = real[Direction.UP] and real[Direction.DOWN]
    horizontal = real[Direction.LEFT] and real[Direction.RIGHT]
    if vertical or horizontal:
        return errors.located(errors.TURN, "Turn must not be a straight path", row, col)
    return None


def handle_turn(grid: Grid, row: int, col: int, last_direction: Direction) -> Move:
    """Turn 90 degrees, preferring left/up over right/down."""
    error = check_turn(grid, row, col)
    if error is not None:
        return _fail(row, col, error.message, error.code)
    return try_turn(grid, row, col, last_direction) or _fail(row, col, "No valid path found at turn")


def try_continue(grid: Grid, row: int, col: int, last_direction: Direction) -> Optional[Move]:
    """Keep going in `last_direction` if that neighbor is a real connection."""
    if last_direction.is_cardinal and can_move(grid, row, col, last_direction):
        return _go(row, col, last_direction)
    return None


def try_turn(grid: Grid, row: int, col: int, last_direction: Direction) -> Optional[Move]:
    """Turn off the current axis: LEFT then RIGHT, or UP then DOWN."""
    for direction in _TURNS.get(last_direction, ()):
        if can_move(grid, row, col, direction):
            return _go(row, col, direction)
    return None


def handle_letter(grid: Grid, row: int, col: int, last_direction: Direction) -> Move:
    """Letters act as roads, or as turns when the road does not go on."""
    move = try_continue(grid, row, col, last_direction) or try_turn(grid, row, col, last_direction)
    return move or _fail(row, col, "No valid path found at letter")


def next_move(grid: Grid, row: int, col: int, last_direction: Direction) -> Move:
    """Dispatch on the tile kind under (row, col)."""
    character = grid.point(row, col)
    kind = tile_kind(character)

    if kind is TileKind.START:
        return handle_start(grid, row, col)
    elif kind is TileKind.END:
        return Move(row, col, Direction.FINISH)
    elif kind in (TileKind.HORIZONTAL, TileKind.VERTICAL):
        return handle_road(grid, row, col, last_direction)
    elif kind is TileKind.TURN:
        return handle_turn(grid, row, col, last_direction)
    elif kind is TileKind.LETTER:
        return handle_letter(grid, row, col, last_direction)
    elif kind is TileKind.BLANK:
        return _fail(row, col, "Path leads onto an empty cell")
    return _fail(row, col, f"Invalid character found: '{character}'", errors.GRAMMAR)
