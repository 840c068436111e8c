"""Search state capabilities and the grid implementation of them."""

from __future__ import annotations

import weakref
from typing import Any, List, Optional, Protocol

from ..core.grid import Coord, Grid, Location, as_location


class SearchState(Protocol):
    """Capabilities :class:`~grid_astar.search.engine.AStarSearch` needs from a state.

    ``__hash__`` must agree with :meth:`is_same_state`: states that are the
    same must hash equal.
    """

    def goal_distance_estimate(self, goal: Any) -> float:
        """Admissible estimate of the remaining cost to ``goal``."""
        ...

    def is_goal(self, goal: Any) -> bool:
        ...

    def get_successors(self, parent: Any) -> Optional[List[Any]]:
        """Return states one edge away, or ``None`` if none can be produced."""
        ...

    def get_cost(self, successor: Any) -> float:
        ...

    def is_same_state(self, other: Any) -> bool:
        ...

    def __hash__(self) -> int:
        ...


class GridState:
    """A grid location bound to the :class:`Grid` it lives on.

    The grid is held through a weak reference; it must stay alive for the
    duration of any search using this state.
    """

    __slots__ = ("location", "_grid_ref")

    def __init__(self, location: Coord, grid: Optional[Grid] = None) -> None:
        self.location: Location = as_location(location)
        self._grid_ref: Optional[weakref.ref[Grid]] = (
            weakref.ref(grid) if grid is not None else None
        )

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid_ref() if self._grid_ref is not None else None

    # ------------------------------------------------------------------
    # Search capabilities
    # ------------------------------------------------------------------
    def goal_distance_estimate(self, goal: "GridState") -> float:
        """Manhattan distance, exact on an open 4-connected unit-cost grid."""

        return float(
            abs(self.location.x - goal.location.x)
            + abs(self.location.y - goal.location.y)
        )

    def is_goal(self, goal: "GridState") -> bool:
        return self.location == goal.location

    def get_successors(self, parent: Optional["GridState"]) -> Optional[List["GridState"]]:
        grid = self.grid
        if grid is None:
            return None

        successors: List[GridState] = []
        for pos in grid.neighbors(self.location):
            # Only the direct parent is skipped; longer cycles are handled by
            # the engine's closed list.
            if parent is not None and pos == parent.location:
                continue
            successors.append(GridState(pos, grid))
        return successors

    def get_cost(self, successor: "GridState") -> float:
        # Unit cost for every cardinal move.
        return 1.0

    def is_same_state(self, other: "GridState") -> bool:
        return self.location == other.location

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return self.location == other.location

    def __hash__(self) -> int:
        return hash((self.location.x, self.location.y))

    def __repr__(self) -> str:
        return f"GridState({self.location.x}, {self.location.y})"


__all__ = ["SearchState", "GridState"]
