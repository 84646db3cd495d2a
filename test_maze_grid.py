#!/usr/bin/env python3
"""
Tests for the grid model: wall access, paired wall opening, bounds
"""

import pytest

from error_handling import OutOfBoundsError
from maze_grid import Direction, MazeGrid


def test_new_grid_has_all_walls_closed():
    """Every wall of a fresh grid is closed"""
    grid = MazeGrid(6, 5)
    assert len(grid.cells) == 5, f"Expected 5 rows, got {len(grid.cells)}"
    assert len(grid.cells[0]) == 6, f"Expected 6 cols, got {len(grid.cells[0])}"
    assert all(all(cell.walls.values()) for cell in grid)
    assert grid.open_edge_count() == 0


def test_cell_coordinates_are_x_y():
    grid = MazeGrid(6, 5)
    cell = grid.cell(4, 2)
    assert (cell.x, cell.y) == (4, 2)
    assert repr(cell) == "Cell(4,2)"


def test_open_wall_opens_both_sides():
    """Opening a wall clears the flag on both neighbours in one call"""
    grid = MazeGrid(5, 5)
    grid.open_wall(1, 1, Direction.RIGHT)
    assert not grid.cell(1, 1).walls['right']
    assert not grid.cell(2, 1).walls['left']

    grid.open_wall(2, 3, Direction.UP)
    assert not grid.cell(2, 3).walls['top']
    assert not grid.cell(2, 2).walls['bottom']
    assert grid.open_edge_count() == 2


def test_open_wall_leaves_other_walls_alone():
    grid = MazeGrid(5, 5)
    grid.open_wall(0, 0, Direction.DOWN)
    assert grid.cell(0, 0).walls == {'top': True, 'right': True, 'bottom': False, 'left': True}
    assert grid.cell(0, 1).walls == {'top': False, 'right': True, 'bottom': True, 'left': True}


def test_out_of_bounds_access_raises():
    """Coordinates outside the grid fail loudly"""
    grid = MazeGrid(5, 5)
    for x, y in [(-1, 0), (0, -1), (5, 0), (0, 5)]:
        with pytest.raises(OutOfBoundsError):
            grid.cell(x, y)
        with pytest.raises(OutOfBoundsError):
            grid.has_wall(x, y, Direction.UP)


def test_open_wall_toward_boundary_raises_without_change():
    grid = MazeGrid(5, 5)
    with pytest.raises(OutOfBoundsError):
        grid.open_wall(0, 0, Direction.LEFT)
    assert grid.has_wall(0, 0, Direction.LEFT)


def test_out_of_bounds_error_is_index_error():
    grid = MazeGrid(5, 5)
    with pytest.raises(IndexError):
        grid.cell(9, 9)


def test_direction_parse():
    assert Direction.parse("up") is Direction.UP
    assert Direction.parse(" Left ") is Direction.LEFT
    assert Direction.parse(Direction.DOWN) is Direction.DOWN
    for bad in ("up-left", "northeast", "", None):
        with pytest.raises(ValueError):
            Direction.parse(bad)


def test_direction_deltas():
    deltas = {d: (d.dx, d.dy) for d in Direction}
    assert deltas == {
        Direction.UP: (0, -1),
        Direction.RIGHT: (1, 0),
        Direction.DOWN: (0, 1),
        Direction.LEFT: (-1, 0),
    }


def test_wall_matrix_and_dict_match_cells():
    grid = MazeGrid(5, 6)
    grid.open_wall(3, 4, Direction.RIGHT)
    matrix = grid.wall_matrix()
    assert matrix.shape == (6, 5, 4)
    assert list(matrix[4, 3]) == [True, False, True, True]
    assert list(matrix[4, 4]) == [True, True, True, False]

    data = grid.to_dict()
    assert data['cols'] == 5 and data['rows'] == 6
    assert data['walls'][4][3] == [True, False, True, True]
    assert int(matrix.sum()) == 5 * 6 * 4 - 2
