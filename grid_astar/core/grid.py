"""Bounded 2D tile grid used as the search space for pathfinding."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union


class Location(NamedTuple):
    """Integer grid coordinate."""

    x: int
    y: int


Coord = Union[Location, Tuple[int, int]]


class CellKind(Enum):
    """Contents of a single grid cell."""

    WALKABLE = 0
    BLOCKED = 1


# North, East, South, West. Order is fixed so search results are reproducible.
DIRECTIONS: Tuple[Location, ...] = (
    Location(0, -1),
    Location(1, 0),
    Location(0, 1),
    Location(-1, 0),
)


def as_location(pos: Coord) -> Location:
    return pos if isinstance(pos, Location) else Location(int(pos[0]), int(pos[1]))


class Grid:
    """Rectangular grid of :class:`CellKind` values.

    Cells are stored row-major as ``cells[y][x]``. Anything outside the
    bounds is treated as blocked. The grid must not be edited while a
    search over it is running.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells: List[List[CellKind]] = [
            [CellKind.WALKABLE for _ in range(width)] for _ in range(height)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from text rows where ``#`` marks a blocked cell."""

        if not rows:
            raise ValueError("rows must not be empty")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("all rows must have the same length")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch == "#":
                    grid.set_cell((x, y), CellKind.BLOCKED)
        return grid

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, pos: Coord) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, pos: Coord) -> bool:
        """Return ``True`` if ``pos`` is inside the grid and not blocked."""

        if not self.in_bounds(pos):
            return False
        x, y = pos
        return self._cells[y][x] is CellKind.WALKABLE

    def get_cell(self, pos: Coord) -> CellKind:
        if not self.in_bounds(pos):
            return CellKind.BLOCKED
        x, y = pos
        return self._cells[y][x]

    def neighbors(self, pos: Coord) -> List[Location]:
        """Return walkable cardinal neighbours of ``pos`` in N, E, S, W order."""

        x, y = pos
        result: List[Location] = []
        for d in DIRECTIONS:
            n = Location(x + d.x, y + d.y)
            if self.is_walkable(n):
                result.append(n)
        return result

    def blocked_cells(self) -> List[Location]:
        return [
            Location(x, y)
            for y, row in enumerate(self._cells)
            for x, kind in enumerate(row)
            if kind is CellKind.BLOCKED
        ]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set_cell(self, pos: Coord, kind: CellKind) -> None:
        """Set the cell at ``pos``; writes outside the grid are ignored."""

        if not self.in_bounds(pos):
            return
        x, y = pos
        self._cells[y][x] = kind

    def set_blocked(self, cells: Iterable[Coord]) -> None:
        for pos in cells:
            self.set_cell(pos, CellKind.BLOCKED)

    def add_test_obstacles(self) -> None:
        """Place the demo wall layout used by the interactive tool."""

        # Horizontal wall
        for x in range(5, 15):
            self.set_cell((x, 8), CellKind.BLOCKED)
        # Vertical wall
        for y in range(3, 12):
            self.set_cell((12, y), CellKind.BLOCKED)
        # L-shaped obstacle
        for x in range(18, 25):
            self.set_cell((x, 5), CellKind.BLOCKED)
        for y in range(5, 10):
            self.set_cell((18, y), CellKind.BLOCKED)


__all__ = ["Location", "Coord", "CellKind", "DIRECTIONS", "Grid", "as_location"]
