"""search package."""

from .engine import AStarSearch, SearchStatus
from .pathfinder import PathFailure, PathResult, Pathfinder, find_path
from .state import GridState, SearchState

__all__ = [
    "AStarSearch",
    "SearchStatus",
    "GridState",
    "SearchState",
    "Pathfinder",
    "PathResult",
    "PathFailure",
    "find_path",
]
