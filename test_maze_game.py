#!/usr/bin/env python3
"""
Tests for the game layer: regeneration, timer, best records, continue
"""

import random

from best_scores import BestScoreStore
from conftest import FakeClock, FirstChoice, solve
from maze_game import MazeGame, format_time
from maze_grid import Direction
from navigation import GameState

SNAKE_SOLUTION = [Direction.RIGHT] * 4 + [Direction.DOWN] * 4


def test_format_time():
    assert format_time(0) == "00:00.00"
    assert format_time(1234) == "00:01.23"
    assert format_time(61_005) == "01:01.00"
    assert format_time(3_599_999) == "59:59.99"


def test_regenerate_clamps_size():
    game = MazeGame(3, 80)
    assert (game.cols, game.rows) == (5, 51)
    assert game.session.goal == (4, 50)

    game.regenerate(20, 1)
    assert (game.cols, game.rows) == (20, 5)
    assert game.grid.cols == 20 and game.grid.rows == 5


def test_regenerate_replaces_session():
    clock = FakeClock()
    game = MazeGame(5, 5, rng=FirstChoice(), clock=clock)
    game.move(Direction.RIGHT)
    old_session = game.session

    clock.advance(3)
    game.regenerate()
    assert game.session is not old_session
    assert game.session.position == (0, 0)
    assert game.session.moves == 0
    assert game.state is GameState.PLAYING
    assert game.elapsed_ms() == 0


def test_timer_freezes_on_win():
    clock = FakeClock()
    game = MazeGame(5, 5, rng=FirstChoice(), clock=clock)
    for direction in SNAKE_SOLUTION[:-1]:
        clock.advance(0.5)
        game.move(direction)
    assert game.elapsed_ms() == 3500

    clock.advance(0.5)
    result = game.move(SNAKE_SOLUTION[-1])
    assert result.won
    assert game.elapsed_ms() == 4000

    clock.advance(10)
    assert game.elapsed_ms() == 4000


def test_win_records_best(tmp_path):
    store = BestScoreStore(str(tmp_path / "best.db"))
    clock = FakeClock()
    game = MazeGame(5, 5, rng=FirstChoice(), clock=clock, best_store=store)

    for direction in SNAKE_SOLUTION:
        clock.advance(1)
        game.move(direction)

    best = game.best()
    assert best['time_ms'] == 8000
    assert best['moves'] == 8
    assert (best['cols'], best['rows']) == (5, 5)

    # Slower second run keeps the old record
    game.regenerate()
    for direction in SNAKE_SOLUTION:
        clock.advance(2)
        game.move(direction)
    assert game.best()['time_ms'] == 8000


def test_denied_moves_do_not_touch_best(tmp_path):
    store = BestScoreStore(str(tmp_path / "best.db"))
    game = MazeGame(5, 5, rng=FirstChoice(), clock=FakeClock(), best_store=store)
    game.move(Direction.UP)
    game.move(Direction.LEFT)
    assert game.best() is None
    assert game.session.moves == 0


def test_continue_exploring_after_win():
    clock = FakeClock()
    game = MazeGame(5, 5, rng=FirstChoice(), clock=clock)
    grid = game.grid
    for direction in SNAKE_SOLUTION:
        game.move(direction)
    assert game.state is GameState.WON

    clock.advance(5)
    game.continue_exploring()
    assert game.grid is grid
    assert game.state is GameState.PLAYING
    assert game.session.position == (4, 4)
    assert game.session.moves == 0
    assert game.elapsed_ms() == 0

    assert game.move(Direction.LEFT).accepted
    result = game.move(Direction.RIGHT)
    assert result.won and result.moves == 2


def test_continue_exploring_while_playing_is_noop():
    game = MazeGame(5, 5, rng=FirstChoice(), clock=FakeClock())
    game.move(Direction.RIGHT)
    session = game.session
    game.continue_exploring()
    assert game.session is session
    assert game.session.moves == 1


def test_status_snapshot(tmp_path):
    store = BestScoreStore(str(tmp_path / "best.db"))
    game = MazeGame(7, 9, rng=random.Random(11), clock=FakeClock(), best_store=store)
    path = solve(game.grid, (0, 0), (6, 8))
    game.move(path[0])

    status = game.status()
    assert status['cols'] == 7 and status['rows'] == 9
    assert status['start'] == [0, 0]
    assert status['goal'] == [6, 8]
    assert status['moves'] == 1
    assert status['state'] == 'playing'
    assert status['elapsed_ms'] == 0
    assert status['best'] is None
