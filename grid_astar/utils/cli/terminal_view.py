"""ASCII terminal view of a grid with an optional path overlay."""

from __future__ import annotations

from typing import Iterable, Optional

from ...core.grid import Coord, Grid, Location, as_location


GLYPH_FLOOR = "."
GLYPH_WALL = "#"
GLYPH_PATH = "*"
GLYPH_CHARACTER = "@"
GLYPH_GOAL = "G"


class TerminalView:
    """Minimal grid viewer writing one character per cell."""

    def format(
        self,
        grid: Grid,
        path: Iterable[Coord] = (),
        character: Optional[Coord] = None,
    ) -> str:
        """Return the grid as text rows, marking ``path`` and ``character``."""

        path_cells = [as_location(p) for p in path]
        on_path = set(path_cells)
        goal = path_cells[-1] if path_cells else None
        char_loc = as_location(character) if character is not None else None

        lines: list[str] = []
        for y in range(grid.height):
            row: list[str] = []
            for x in range(grid.width):
                loc = Location(x, y)
                if loc == char_loc:
                    row.append(GLYPH_CHARACTER)
                elif loc == goal:
                    row.append(GLYPH_GOAL)
                elif loc in on_path:
                    row.append(GLYPH_PATH)
                elif not grid.is_walkable(loc):
                    row.append(GLYPH_WALL)
                else:
                    row.append(GLYPH_FLOOR)
            lines.append("".join(row))
        return "\n".join(lines)


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
