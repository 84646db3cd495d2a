#!/usr/bin/env python3
"""
Grid model for rectangular mazes
- Each cell carries four wall flags: top, right, bottom, left
- Walls between neighbours are only ever opened in matched pairs
"""

from enum import Enum
from typing import Dict, Iterator, List, Tuple

import numpy as np

from error_handling import OutOfBoundsError

WALL_ORDER = ('top', 'right', 'bottom', 'left')


class Direction(Enum):
    """Cardinal move direction with its unit delta and the wall it crosses"""
    UP = (0, -1, 'top', 'bottom')
    RIGHT = (1, 0, 'right', 'left')
    DOWN = (0, 1, 'bottom', 'top')
    LEFT = (-1, 0, 'left', 'right')

    def __init__(self, dx, dy, wall, opposite_wall):
        self.dx = dx
        self.dy = dy
        self.wall = wall
        self.opposite_wall = opposite_wall

    @classmethod
    def parse(cls, value) -> 'Direction':
        """Accept a Direction or its case-insensitive name"""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {value!r}") from None


class Cell:
    """Represents a maze cell with walls"""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.walls = {
            'top': True,
            'right': True,
            'bottom': True,
            'left': True
        }

    def __repr__(self):
        return f"Cell({self.x},{self.y})"


class MazeGrid:
    """cols x rows grid of cells, indexed as (x, y) with (0, 0) top-left"""

    def __init__(self, cols: int, rows: int):
        self.cols = cols
        self.rows = rows
        self.cells = [[Cell(x, y) for x in range(cols)] for y in range(rows)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> Cell:
        """Get cell at coordinates, raise OutOfBoundsError outside the grid"""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.cols, self.rows)
        return self.cells[y][x]

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        return self.cell(x, y).walls[direction.wall]

    def neighbor(self, x: int, y: int, direction: Direction) -> Tuple[int, int]:
        """Coordinates one step away; may lie outside the grid"""
        return x + direction.dx, y + direction.dy

    def open_wall(self, x: int, y: int, direction: Direction):
        """Remove the wall shared by (x, y) and its neighbour in direction"""
        current = self.cell(x, y)
        neighbor = self.cell(*self.neighbor(x, y, direction))

        current.walls[direction.wall] = False
        neighbor.walls[direction.opposite_wall] = False

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def open_edges(self) -> Iterator[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Yield each open internal edge once as ((x, y), (nx, ny))"""
        for cell in self:
            if cell.x + 1 < self.cols and not cell.walls['right']:
                yield (cell.x, cell.y), (cell.x + 1, cell.y)
            if cell.y + 1 < self.rows and not cell.walls['bottom']:
                yield (cell.x, cell.y), (cell.x, cell.y + 1)

    def open_edge_count(self) -> int:
        return sum(1 for _ in self.open_edges())

    def wall_matrix(self) -> np.ndarray:
        """Boolean array of shape (rows, cols, 4) in top, right, bottom, left order"""
        matrix = np.ones((self.rows, self.cols, 4), dtype=bool)
        for cell in self:
            matrix[cell.y, cell.x] = [cell.walls[side] for side in WALL_ORDER]
        return matrix

    def to_dict(self) -> Dict[str, object]:
        """JSON-friendly form: walls[y][x] = [top, right, bottom, left]"""
        walls: List[List[List[bool]]] = [
            [[cell.walls[side] for side in WALL_ORDER] for cell in row]
            for row in self.cells
        ]
        return {'cols': self.cols, 'rows': self.rows, 'walls': walls}
