#!/usr/bin/env python3
"""
Navigation state machine for a single agent in a generated maze
"""

import logging
from enum import Enum
from typing import Tuple

from error_handling import OutOfBoundsError
from maze_grid import Direction, MazeGrid

logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = 'playing'
    WON = 'won'


class MoveResult:
    """Outcome of one attempted move"""

    def __init__(self, accepted: bool, position: Tuple[int, int], moves: int,
                 state: GameState, won: bool = False):
        self.accepted = accepted
        self.position = position
        self.moves = moves
        self.state = state
        # True only for the move that reached the goal
        self.won = won

    def to_dict(self):
        return {
            'accepted': self.accepted,
            'position': list(self.position),
            'moves': self.moves,
            'state': self.state.value,
            'won': self.won,
        }

    def __repr__(self):
        return (f"MoveResult(accepted={self.accepted}, position={self.position}, "
                f"moves={self.moves}, state={self.state.name})")


class NavigationSession:
    """Agent position, goal and move counter over one grid"""

    def __init__(self, grid: MazeGrid, start: Tuple[int, int] = (0, 0), goal: Tuple[int, int] = None):
        if goal is None:
            goal = (grid.cols - 1, grid.rows - 1)
        for x, y in (start, goal):
            if not grid.in_bounds(x, y):
                raise OutOfBoundsError(x, y, grid.cols, grid.rows)

        self.grid = grid
        self.start = tuple(start)
        self.goal = tuple(goal)
        self.position = tuple(start)
        self.moves = 0
        self.state = GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self.state is GameState.WON

    def _result(self, accepted: bool, won: bool = False) -> MoveResult:
        return MoveResult(accepted, self.position, self.moves, self.state, won)

    def attempt_move(self, direction) -> MoveResult:
        """Apply a move if the wall on that side is open"""
        if self.is_won:
            return self._result(False)

        direction = Direction.parse(direction)

        x, y = self.position
        nx, ny = self.grid.neighbor(x, y, direction)

        # Boundary and wall hits look the same to the caller
        if not self.grid.in_bounds(nx, ny) or self.grid.has_wall(x, y, direction):
            return self._result(False)

        self.position = (nx, ny)
        self.moves += 1

        if self.position == self.goal:
            self.state = GameState.WON
            logger.info("Goal %s reached in %d moves", self.goal, self.moves)
            return self._result(True, won=True)

        return self._result(True)
