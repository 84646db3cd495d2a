#!/usr/bin/env python3
"""
Maze Generator using randomized depth-first backtracking
- Carves from (0,0), always extending the most recently visited cell
- Explicit stack instead of recursion so 51x51 grids stay within limits
- Result is a perfect maze: every cell reachable through exactly one path
"""

import logging
import random
import time
from collections import deque
from typing import List, Optional, Set, Tuple

from config import CONFIG
from error_handling import InvalidDimensionsError
from maze_grid import Direction, MazeGrid

logger = logging.getLogger(__name__)

MIN_SIZE = CONFIG["min_size"]
MAX_SIZE = CONFIG["max_size"]

# Neighbour scan order
DIRECTIONS = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


def clamp_dimensions(cols, rows, min_size: int = MIN_SIZE, max_size: int = MAX_SIZE) -> Tuple[int, int]:
    """Clamp a requested size into the supported range, truncating to int"""
    c = max(min_size, min(max_size, int(cols)))
    r = max(min_size, min(max_size, int(rows)))
    return c, r


class MazeGenerator:
    """Perfect maze generator over a MazeGrid"""

    def __init__(self, cols: int = 15, rows: int = 15, rng=None):
        if not (MIN_SIZE <= cols <= MAX_SIZE and MIN_SIZE <= rows <= MAX_SIZE):
            raise InvalidDimensionsError(cols, rows, MIN_SIZE, MAX_SIZE)
        self.cols = cols
        self.rows = rows
        # Anything with choice(seq) works, random.Random included
        self.rng = rng if rng is not None else random.Random()
        self.start = (0, 0)
        self.end = (cols - 1, rows - 1)

    def get_unvisited_neighbors(self, grid: MazeGrid, x: int, y: int,
                                visited: Set[Tuple[int, int]]) -> List[Tuple[Direction, Tuple[int, int]]]:
        """Get unvisited in-bounds neighbours with the direction leading to them"""
        neighbors = []
        for direction in DIRECTIONS:
            nx, ny = grid.neighbor(x, y, direction)
            if grid.in_bounds(nx, ny) and (nx, ny) not in visited:
                neighbors.append((direction, (nx, ny)))
        return neighbors

    def generate(self) -> MazeGrid:
        """Carve a fresh maze and return its grid"""
        t_start = time.time()
        grid = MazeGrid(self.cols, self.rows)

        visited = {self.start}
        stack = [self.start]

        while stack:
            x, y = stack[-1]
            neighbors = self.get_unvisited_neighbors(grid, x, y, visited)

            if not neighbors:
                stack.pop()
                continue

            direction, nxt = self.rng.choice(neighbors)
            grid.open_wall(x, y, direction)
            visited.add(nxt)
            stack.append(nxt)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Generated %dx%d maze in %.3fs, perfect=%s",
                self.cols, self.rows, time.time() - t_start, verify_perfect(grid)
            )
        return grid


def generate_maze(cols: int, rows: int, rng=None) -> MazeGrid:
    """Generate a perfect cols x rows maze"""
    return MazeGenerator(cols, rows, rng=rng).generate()


def reachable_cells(grid: MazeGrid, start: Tuple[int, int] = (0, 0)) -> Set[Tuple[int, int]]:
    """Cells reachable from start through open walls"""
    queue = deque([start])
    seen = {start}

    while queue:
        x, y = queue.popleft()
        for direction in DIRECTIONS:
            nx, ny = grid.neighbor(x, y, direction)
            if (grid.in_bounds(nx, ny) and not grid.has_wall(x, y, direction)
                    and (nx, ny) not in seen):
                seen.add((nx, ny))
                queue.append((nx, ny))

    return seen


def verify_perfect(grid: MazeGrid, start: Optional[Tuple[int, int]] = None) -> bool:
    """Connected with exactly cols*rows - 1 open edges, i.e. a spanning tree"""
    total = grid.cols * grid.rows
    if grid.open_edge_count() != total - 1:
        return False
    return len(reachable_cells(grid, start or (0, 0))) == total
