"""A* grid pathfinding package."""

from .core.grid import CellKind, Grid, Location
from .search.pathfinder import PathFailure, PathResult, Pathfinder, find_path

__all__ = [
    "CellKind",
    "Grid",
    "Location",
    "PathFailure",
    "PathResult",
    "Pathfinder",
    "find_path",
]
