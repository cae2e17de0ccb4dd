"""Tile grammar: characters, tile kinds, directions and the connection rule."""

import re
from enum import Enum
from typing import Tuple


BLANK = ''
START_CHARACTER = '@'
END_CHARACTER = 'x'
HORIZONTAL_ROAD = '-'
VERTICAL_ROAD = '|'
TURN = '+'

LETTER_PATTERN = re.compile(r'[A-Z]')
VALID_CHARACTERS = re.compile(r'[A-Z@x+\-| ]')


class TileKind(Enum):
    """Kind of a grid cell, derived from its character."""
    START = 'start'
    END = 'end'
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'
    TURN = 'turn'
    LETTER = 'letter'
    BLANK = 'blank'
    INVALID = 'invalid'


class Axis(Enum):
    VERTICAL = 'vertical'
    HORIZONTAL = 'horizontal'


class Direction(str, Enum):
    """Walk direction. START, FINISH and ERROR are control states only."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    START = 'start'
    FINISH = 'finish'
    ERROR = 'error'

    @property
    def is_cardinal(self) -> bool:
        return self in _OFFSETS

    @property
    def axis(self) -> Axis:
        if self in (Direction.UP, Direction.DOWN):
            return Axis.VERTICAL
        if self in (Direction.LEFT, Direction.RIGHT):
            return Axis.HORIZONTAL
        raise ValueError(f"Direction '{self.value}' has no axis")


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

CARDINAL_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

_KINDS = {
    START_CHARACTER: TileKind.START,
    END_CHARACTER: TileKind.END,
    HORIZONTAL_ROAD: TileKind.HORIZONTAL,
    VERTICAL_ROAD: TileKind.VERTICAL,
    TURN: TileKind.TURN,
    BLANK: TileKind.BLANK,
    ' ': TileKind.BLANK,
}


def tile_kind(character: str) -> TileKind:
    """Classify a single grid character."""
    if character in _KINDS:
        return _KINDS[character]
    if LETTER_PATTERN.fullmatch(character):
        return TileKind.LETTER
    return TileKind.INVALID


def step(row: int, col: int, direction: Direction) -> Tuple[int, int]:
    """Coordinates one cell away from (row, col) in a cardinal direction."""
    d_row, d_col = _OFFSETS[direction]
    return row + d_row, col + d_col


def connectable(character: str, axis: Axis) -> bool:
    """
    Whether a neighbor character can connect along the given axis.

    Blank never connects. A horizontal road seen above or below (vertical
    axis) and a vertical road seen left or right (horizontal axis) are
    through-roads passing alongside, not connections.
    """
    if character == BLANK:
        return False
    if axis is Axis.VERTICAL:
        return character != HORIZONTAL_ROAD
    return character != VERTICAL_ROAD
