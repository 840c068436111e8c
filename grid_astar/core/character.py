"""Grid agent that can be moved by hand or walked along an A* path."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .grid import Coord, Grid, Location, as_location
from ..search.pathfinder import Pathfinder

logger = logging.getLogger(__name__)


class Character:
    """A single agent occupying one grid cell."""

    def __init__(self, position: Coord, pathfinder: Optional[Pathfinder] = None) -> None:
        self._position: Location = as_location(position)
        self.pathfinder = pathfinder if pathfinder is not None else Pathfinder()
        self._path: List[Location] = []
        self.path_index: int = 0

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------
    @property
    def position(self) -> Location:
        return self._position

    @position.setter
    def position(self, pos: Coord) -> None:
        self._position = as_location(pos)

    # ------------------------------------------------------------------
    # Manual movement
    # ------------------------------------------------------------------
    def move_up(self, grid: Grid) -> bool:
        return self._try_move(grid, (self._position.x, self._position.y - 1))

    def move_down(self, grid: Grid) -> bool:
        return self._try_move(grid, (self._position.x, self._position.y + 1))

    def move_left(self, grid: Grid) -> bool:
        return self._try_move(grid, (self._position.x - 1, self._position.y))

    def move_right(self, grid: Grid) -> bool:
        return self._try_move(grid, (self._position.x + 1, self._position.y))

    def _try_move(self, grid: Grid, target: Coord) -> bool:
        if not grid.is_walkable(target):
            logger.debug("Move from %s to %s blocked", self._position, target)
            return False
        self._position = as_location(target)
        return True

    # ------------------------------------------------------------------
    # Path following
    # ------------------------------------------------------------------
    def find_path_to(self, grid: Grid, target: Coord) -> bool:
        """Plan a path to ``target``; on failure any existing path is cleared."""

        result = self.pathfinder.find_path(grid, self._position, target)
        if not result.success:
            self.clear_path()
            return False
        self._path = list(result.path)
        # Index 0 is the current position.
        self.path_index = 1
        return True

    def follow_path(self) -> None:
        """Advance one step along the current path, clearing it at the end."""

        if not self._path:
            return
        if self.path_index < len(self._path):
            self._position = self._path[self.path_index]
            self.path_index += 1
        if self.path_index >= len(self._path):
            self.clear_path()

    def clear_path(self) -> None:
        self._path = []
        self.path_index = 0

    @property
    def has_path(self) -> bool:
        return bool(self._path)

    @property
    def current_path(self) -> Tuple[Location, ...]:
        return tuple(self._path)

    @property
    def last_path_cost(self) -> float:
        return self.pathfinder.last_path_cost

    @property
    def last_search_steps(self) -> int:
        return self.pathfinder.last_search_steps


__all__ = ["Character"]
