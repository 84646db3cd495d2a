#!/usr/bin/env python3
"""
Desktop maze player in a matplotlib window
- Arrow keys / WASD move, SPACE generates a new maze
- C keeps exploring the same maze after reaching the goal
"""

import argparse
import random

import matplotlib.pyplot as plt

from best_scores import BestScoreStore
from config import load_config
from controls import direction_from_key
from error_handling import MazeLogger
from maze_game import MazeGame, format_time
from maze_renderer import MazeRenderer


def build_title(game):
    best = game.best()
    best_text = f"{format_time(best['time_ms'])} / {best['moves']} steps" if best else "--"
    title = (f"{game.cols}x{game.rows} Maze | Time {format_time(game.elapsed_ms())} | "
             f"Steps {game.session.moves} | Best {best_text}")
    if game.session.is_won:
        title += "\nCleared! SPACE: new maze, C: keep exploring"
    return title


def main():
    """Generate a maze and play it with the keyboard"""
    config = load_config()
    parser = argparse.ArgumentParser(description="Play a random maze")
    parser.add_argument('--cols', type=int, default=config['default_size'])
    parser.add_argument('--rows', type=int, default=config['default_size'])
    parser.add_argument('--seed', type=int, default=None)
    args = parser.parse_args()

    maze_logger = MazeLogger(config['log_dir'], config['log_level'])

    rng = random.Random(args.seed) if args.seed is not None else None

    game = MazeGame(args.cols, args.rows, rng=rng,
                    best_store=BestScoreStore(config['best_db_path']))
    maze_logger.logger.info(f"Playing {game.cols}x{game.rows} maze")

    # matplotlib binds s and arrow keys by default
    for keymap in ('keymap.save', 'keymap.back', 'keymap.forward'):
        plt.rcParams[keymap] = []

    renderer = MazeRenderer(cell_size=1.0)
    fig, ax = plt.subplots(figsize=(8, 8))

    def redraw():
        renderer.render(ax, game.grid, game.session.position, game.session.goal, build_title(game))
        fig.canvas.draw_idle()

    def on_key(event):
        if event.key == ' ':
            game.regenerate()
        elif event.key == 'c':
            game.continue_exploring()
        else:
            direction = direction_from_key(event.key)
            if direction is None:
                return
            game.move(direction)
        redraw()

    fig.canvas.mpl_connect('key_press_event', on_key)
    redraw()
    plt.show()


if __name__ == "__main__":
    main()
