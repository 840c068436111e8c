"""Simple world container for the grid and its character."""

from __future__ import annotations

from typing import Optional, Tuple

from .character import Character
from .grid import Coord, Grid, Location
from ..search.pathfinder import Pathfinder


class World:
    """Lightweight holder for the grid, the character and the last planned goal.

    ``pathfinder`` is shared by the character and the ``/path`` command so
    both run under the same node budget.
    """

    def __init__(
        self,
        size: Tuple[int, int],
        start: Coord = (0, 0),
        pathfinder: Optional[Pathfinder] = None,
    ) -> None:
        self.size: Tuple[int, int] = size
        width, height = size
        self.grid = Grid(width, height)
        self.pathfinder = pathfinder if pathfinder is not None else Pathfinder()
        self.character = Character(start, self.pathfinder)
        self.goal: Optional[Location] = None

    # ------------------------------------------------------------------
    # Path utilities
    # ------------------------------------------------------------------
    def plan_to(self, target: Coord) -> bool:
        """Plan a path from the character to ``target``."""

        found = self.character.find_path_to(self.grid, target)
        self.goal = self.character.current_path[-1] if found else None
        return found

    def advance(self) -> Location:
        """Move the character one step along its path and return its position."""

        self.character.follow_path()
        if not self.character.has_path:
            self.goal = None
        return self.character.position


__all__ = ["World"]
