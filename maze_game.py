#!/usr/bin/env python3
"""
Maze game: generation, navigation session, timer and best records
Glue between the maze core and the desktop/HTTP front ends
"""

import logging
import time
from typing import Any, Dict, Optional

from config import CONFIG
from maze_generator import MazeGenerator, clamp_dimensions
from navigation import GameState, MoveResult, NavigationSession

logger = logging.getLogger(__name__)


def format_time(ms: int) -> str:
    """Format milliseconds as MM:SS.cc"""
    s = int(ms) // 1000
    cs = (int(ms) % 1000) // 10
    return f"{s // 60:02d}:{s % 60:02d}.{cs:02d}"


class MazeGame:
    """One player's game, replaced maze by maze"""

    def __init__(self, cols: int = CONFIG["default_size"], rows: int = CONFIG["default_size"],
                 rng=None, clock=time.time, best_store=None):
        self.rng = rng
        self.clock = clock
        self.best_store = best_store
        self.session: Optional[NavigationSession] = None
        self.regenerate(cols, rows)

    @property
    def grid(self):
        return self.session.grid

    @property
    def state(self) -> GameState:
        return self.session.state

    def regenerate(self, cols: Optional[int] = None, rows: Optional[int] = None):
        """Build a fresh maze and session; size is clamped to the supported range"""
        cols = self.cols if cols is None else cols
        rows = self.rows if rows is None else rows
        self.cols, self.rows = clamp_dimensions(cols, rows)

        grid = MazeGenerator(self.cols, self.rows, rng=self.rng).generate()
        self.session = NavigationSession(grid, (0, 0), (self.cols - 1, self.rows - 1))
        self.start_time = self.clock()
        self.finish_ms: Optional[int] = None
        logger.info("New %dx%d maze", self.cols, self.rows)
        return self.session

    def elapsed_ms(self) -> int:
        """Time since the maze was generated, frozen once won"""
        if self.finish_ms is not None:
            return self.finish_ms
        return int((self.clock() - self.start_time) * 1000)

    def move(self, direction) -> MoveResult:
        result = self.session.attempt_move(direction)
        if result.won:
            self.finish_ms = int((self.clock() - self.start_time) * 1000)
            logger.info("Solved %dx%d in %s with %d moves",
                        self.cols, self.rows, format_time(self.finish_ms), result.moves)
            if self.best_store is not None:
                if self.best_store.submit(self.finish_ms, result.moves, self.cols, self.rows,
                                          at=int(self.clock() * 1000)):
                    logger.info("New best for %dx%d", self.cols, self.rows)
        return result

    def continue_exploring(self):
        """After a win keep the maze and position, reset moves and timer"""
        if not self.session.is_won:
            return self.session
        self.session = NavigationSession(self.session.grid, self.session.position, self.session.goal)
        self.start_time = self.clock()
        self.finish_ms = None
        return self.session

    def best(self) -> Optional[Dict[str, Any]]:
        if self.best_store is None:
            return None
        return self.best_store.get_best(self.cols, self.rows)

    def status(self) -> Dict[str, Any]:
        """JSON-friendly snapshot of the game"""
        return {
            'cols': self.cols,
            'rows': self.rows,
            'position': list(self.session.position),
            'start': list(self.session.start),
            'goal': list(self.session.goal),
            'moves': self.session.moves,
            'state': self.session.state.value,
            'elapsed_ms': self.elapsed_ms(),
            'best': self.best(),
        }
