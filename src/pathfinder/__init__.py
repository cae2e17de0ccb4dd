"""Path following over ASCII diagrams."""

from .pathfinder import Pathfinder, find_path
from .grid import Grid
from .models import (
    Position,
    Neighbors,
    Move,
    Endpoints,
    PathError,
    ProcessResult,
    VisitedTile,
    PathResult,
    PathfinderConfig,
)
from .tiles import Direction, TileKind, Axis, tile_kind, connectable, BLANK
from .validation import validate_grid

__all__ = [
    # Main entry points
    "Pathfinder",
    "find_path",
    "validate_grid",
    # Grid
    "Grid",
    # Models
    "Position",
    "Neighbors",
    "Move",
    "Endpoints",
    "PathError",
    "ProcessResult",
    "VisitedTile",
    "PathResult",
    "PathfinderConfig",
    # Tiles
    "Direction",
    "TileKind",
    "Axis",
    "tile_kind",
    "connectable",
    "BLANK",
]
