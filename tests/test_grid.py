import pytest

from grid_astar.core.grid import CellKind, Grid, Location


def test_new_grid_is_walkable_everywhere():
    grid = Grid(5, 4)
    assert grid.size == (5, 4)
    assert all(grid.is_walkable((x, y)) for x in range(5) for y in range(4))
    assert grid.blocked_cells() == []


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid(0, 5)
    with pytest.raises(ValueError):
        Grid(5, -1)


def test_bounds_and_out_of_bounds_cells():
    grid = Grid(5, 5)
    assert grid.in_bounds((0, 0))
    assert grid.in_bounds(Location(4, 4))
    assert not grid.in_bounds((-1, 0))
    assert not grid.in_bounds((5, 2))
    assert not grid.is_walkable((2, 5))
    assert grid.get_cell((10, 10)) is CellKind.BLOCKED


def test_set_cell_and_get_cell():
    grid = Grid(5, 5)
    grid.set_cell((2, 3), CellKind.BLOCKED)
    assert grid.get_cell((2, 3)) is CellKind.BLOCKED
    assert not grid.is_walkable((2, 3))

    grid.set_cell((2, 3), CellKind.WALKABLE)
    assert grid.is_walkable((2, 3))


def test_set_cell_out_of_bounds_is_ignored():
    grid = Grid(3, 3)
    grid.set_cell((7, 7), CellKind.BLOCKED)
    assert grid.blocked_cells() == []


def test_neighbors_order_is_north_east_south_west():
    grid = Grid(5, 5)
    assert grid.neighbors((2, 2)) == [(2, 1), (3, 2), (2, 3), (1, 2)]


def test_neighbors_skip_walls_and_edges():
    grid = Grid(5, 5)
    grid.set_cell((1, 0), CellKind.BLOCKED)
    assert grid.neighbors((0, 0)) == [(0, 1)]
    assert grid.neighbors((4, 4)) == [(4, 3), (3, 4)]


def test_from_rows():
    grid = Grid.from_rows([
        "..#",
        "#..",
    ])
    assert grid.size == (3, 2)
    assert grid.blocked_cells() == [Location(2, 0), Location(0, 1)]


def test_from_rows_rejects_ragged_input():
    with pytest.raises(ValueError):
        Grid.from_rows(["...", ".."])


def test_add_test_obstacles_layout():
    grid = Grid(40, 30)
    grid.add_test_obstacles()
    assert not grid.is_walkable((10, 8))
    assert not grid.is_walkable((12, 3))
    assert not grid.is_walkable((24, 5))
    assert not grid.is_walkable((18, 9))
    assert grid.is_walkable((0, 0))
    assert grid.is_walkable((15, 8))
    assert len(grid.neighbors((5, 5))) == 4
