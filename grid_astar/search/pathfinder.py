"""High level grid pathfinding on top of :class:`AStarSearch`."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import List, Optional

from ..config import CONFIG
from ..core.grid import Coord, Grid, Location, as_location
from .engine import AStarSearch, SearchStatus
from .state import GridState

logger = logging.getLogger(__name__)


class PathFailure(Enum):
    """Why :meth:`Pathfinder.find_path` did not produce a path."""

    INVALID_ENDPOINT = "invalid_endpoint"
    NO_PATH_EXISTS = "no_path_exists"
    RESOURCE_EXHAUSTED = "resource_exhausted"


@dataclass
class PathResult:
    """Outcome of a single :meth:`Pathfinder.find_path` call.

    On failure ``path`` is empty and ``cost`` is ``0.0``; ``steps`` still
    reports how many search steps were attempted.
    """

    success: bool
    path: List[Location] = field(default_factory=list)
    cost: float = 0.0
    steps: int = 0
    failure: Optional[PathFailure] = None

    def __bool__(self) -> bool:
        return self.success


class Pathfinder:
    """Validate endpoints, run A* to completion and keep the last diagnostics."""

    def __init__(self, max_nodes: Optional[int] = None) -> None:
        if max_nodes is None:
            max_nodes = CONFIG.search.max_nodes
        self._search: AStarSearch[GridState] = AStarSearch(max_nodes=max_nodes)
        self.last_path_cost: float = 0.0
        self.last_search_steps: int = 0
        self.last_failure: Optional[PathFailure] = None

    @property
    def max_nodes(self) -> int:
        return self._search.max_nodes

    def find_path(self, grid: Grid, start: Coord, goal: Coord) -> PathResult:
        """Return the cheapest path from ``start`` to ``goal`` on ``grid``.

        The returned path includes both endpoints. ``grid`` must not change
        while this call is running.
        """

        self.last_path_cost = 0.0
        self.last_search_steps = 0
        self.last_failure = None

        start_loc = as_location(start)
        goal_loc = as_location(goal)

        if not grid.is_walkable(start_loc):
            logger.warning("Start position %s is not valid or walkable", start_loc)
            return self._fail(PathFailure.INVALID_ENDPOINT, 0)
        if not grid.is_walkable(goal_loc):
            logger.warning("Goal position %s is not valid or walkable", goal_loc)
            return self._fail(PathFailure.INVALID_ENDPOINT, 0)

        search = self._search
        search.set_start_and_goal_states(
            GridState(start_loc, grid), GridState(goal_loc, grid)
        )

        steps = 0
        status = SearchStatus.SEARCHING
        try:
            while status is SearchStatus.SEARCHING:
                status = search.search_step()
                steps += 1

            self.last_search_steps = steps

            if status is SearchStatus.SUCCEEDED:
                path = [state.location for state in search.solution_path()]
                cost = search.get_solution_cost()
                self.last_path_cost = cost
                logger.info(
                    "Path found in %d steps: cost %.1f, %d positions",
                    steps,
                    cost,
                    len(path),
                )
                return PathResult(success=True, path=path, cost=cost, steps=steps)

            if status is SearchStatus.OUT_OF_MEMORY:
                logger.info(
                    "Search terminated after %d steps: node budget of %d exhausted",
                    steps,
                    search.max_nodes,
                )
                return self._fail(PathFailure.RESOURCE_EXHAUSTED, steps)

            logger.info("Search terminated after %d steps: no path exists", steps)
            return self._fail(PathFailure.NO_PATH_EXISTS, steps)
        finally:
            search.free_solution_nodes()

    def _fail(self, reason: PathFailure, steps: int) -> PathResult:
        self.last_failure = reason
        self.last_search_steps = steps
        return PathResult(success=False, steps=steps, failure=reason)


def find_path(
    grid: Grid, start: Coord, goal: Coord, max_nodes: Optional[int] = None
) -> PathResult:
    """Convenience wrapper creating a throwaway :class:`Pathfinder`."""

    return Pathfinder(max_nodes=max_nodes).find_path(grid, start, goal)


__all__ = ["Pathfinder", "PathResult", "PathFailure", "find_path"]
