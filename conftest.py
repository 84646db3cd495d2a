#!/usr/bin/env python3
"""
Shared fixtures for the maze tests
"""

from collections import deque

import pytest

from maze_generator import generate_maze
from maze_grid import Direction


class FirstChoice:
    """Random source stand-in that always picks the first candidate"""

    def choice(self, seq):
        return seq[0]


class FakeClock:
    """Callable clock advanced by hand"""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def solve(grid, start, goal):
    """BFS over open walls, returns the list of directions from start to goal"""
    queue = deque([start])
    parent = {start: None}
    while queue:
        x, y = queue.popleft()
        if (x, y) == goal:
            break
        for direction in Direction:
            nx, ny = grid.neighbor(x, y, direction)
            if grid.in_bounds(nx, ny) and not grid.has_wall(x, y, direction) and (nx, ny) not in parent:
                parent[(nx, ny)] = ((x, y), direction)
                queue.append((nx, ny))

    path = []
    node = goal
    while parent[node] is not None:
        node, direction = parent[node]
        path.append(direction)
    return path[::-1]


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def snake_maze():
    """5x5 maze carved with the first-candidate chooser"""
    return generate_maze(5, 5, rng=FirstChoice())
