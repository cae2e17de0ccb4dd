"""Data models for path finding."""

from typing import List, Optional, NamedTuple
from pydantic import BaseModel, ConfigDict, Field

from .tiles import Direction


class Position(NamedTuple):
    """A grid cell address."""
    row: int
    col: int


class Neighbors(NamedTuple):
    """The four characters around a cell; blank where there is nothing."""
    up: str
    down: str
    left: str
    right: str


class Move(NamedTuple):
    """Outcome of one walk transition."""
    row: int
    col: int
    direction: Direction
    message: Optional[str] = None  # Only set when direction is ERROR
    code: Optional[str] = None


class Endpoints(NamedTuple):
    """Start and end markers found by the validation sweep."""
    start: Position
    end: Position


class PathError(BaseModel):
    """A single located failure."""
    code: str
    message: str
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def location(self) -> Optional[Position]:
        if self.row is None or self.col is None:
            return None
        return Position(self.row, self.col)


class ProcessResult(BaseModel):
    """Result of a grid sweep or of a single cell handler."""
    success: bool
    error: Optional[PathError] = None


class VisitedTile(BaseModel):
    """One entry of the walk trace."""
    row: int
    col: int
    character: str


class PathResult(BaseModel):
    """Result of following a diagram from start to end."""
    success: bool
    visited: List[VisitedTile] = Field(default_factory=list)
    letters: str = ""
    error: Optional[PathError] = None

    @property
    def path(self) -> str:
        """The visited characters joined in walk order."""
        return ''.join(tile.character for tile in self.visited)


class PathfinderConfig(BaseModel):
    """Configuration for a path finding run."""
    model_config = ConfigDict(extra='forbid')

    max_steps: Optional[int] = Field(None, ge=1)
    reject_duplicate_end: bool = False
