#!/usr/bin/env python3
"""
Random Maze HTTP API
In-memory game store, best records persisted in sqlite
"""

import random
import time
import uuid

from flask import Flask, jsonify, request

from best_scores import BestScoreStore
from config import load_config
from error_handling import GameNotFoundError, MazeLogger, setup_error_handling
from maze_game import MazeGame, format_time
from maze_renderer import create_maze_image, encode_png_base64


class GameStore:
    """Live games keyed by id, dropped after a period of inactivity"""

    def __init__(self, expiry_seconds=1800, clock=time.time):
        self.expiry_seconds = expiry_seconds
        self.clock = clock
        self.games = {}

    def add(self, game):
        game_id = f"maze_{int(self.clock())}_{uuid.uuid4().hex[:8]}"
        self.games[game_id] = {'game': game, 'last_seen': self.clock()}
        return game_id

    def get(self, game_id):
        entry = self.games.get(game_id)
        if entry is None:
            raise GameNotFoundError(game_id)
        entry['last_seen'] = self.clock()
        return entry['game']

    def purge_expired(self):
        current_time = self.clock()
        old_games = [gid for gid, entry in self.games.items()
                     if current_time - entry['last_seen'] > self.expiry_seconds]
        for old_id in old_games:
            del self.games[old_id]
        return len(old_games)


def _int_arg(data, name, default):
    value = data.get(name, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("JSON body must be an object")
    return data


def _seed_arg(data):
    seed = data.get('seed')
    if seed is None or isinstance(seed, (int, str)):
        return seed
    raise ValueError(f"seed must be an integer or string, got {seed!r}")


def create_app(config=None, best_store=None, clock=time.time):
    """Build the Flask app"""
    config = config or load_config()

    app = Flask(__name__)
    app.config.update(MAZE=config)

    maze_logger = MazeLogger(config['log_dir'], config['log_level'])
    setup_error_handling(app, maze_logger)

    if best_store is None:
        best_store = BestScoreStore(config['best_db_path'])
    games = GameStore(config['game_expiry_seconds'], clock=clock)
    app.extensions['maze_games'] = games

    def game_payload(game_id, game):
        payload = game.status()
        payload['game_id'] = game_id
        payload['elapsed'] = format_time(payload['elapsed_ms'])
        payload['maze'] = game.grid.to_dict()
        return payload

    @app.route('/api/maze', methods=['POST'])
    def new_maze():
        data = _json_body()
        cols = _int_arg(data, 'cols', config['default_size'])
        rows = _int_arg(data, 'rows', config['default_size'])
        seed = _seed_arg(data)
        rng = random.Random(seed) if seed is not None else None

        removed = games.purge_expired()
        if removed:
            maze_logger.logger.info(f"Purged {removed} expired games")

        game = MazeGame(cols, rows, rng=rng, clock=clock, best_store=best_store)
        game_id = games.add(game)
        maze_logger.logger.info(f"Created game {game_id} ({game.cols}x{game.rows}), live: {len(games.games)}")
        return jsonify(game_payload(game_id, game)), 201

    @app.route('/api/maze/<game_id>', methods=['GET'])
    def get_maze(game_id):
        return jsonify(game_payload(game_id, games.get(game_id)))

    @app.route('/api/maze/<game_id>/regenerate', methods=['POST'])
    def regenerate(game_id):
        game = games.get(game_id)
        data = _json_body()
        game.regenerate(_int_arg(data, 'cols', game.cols), _int_arg(data, 'rows', game.rows))
        return jsonify(game_payload(game_id, game))

    @app.route('/api/maze/<game_id>/move', methods=['POST'])
    def move(game_id):
        game = games.get(game_id)
        data = _json_body()
        if 'direction' not in data:
            raise ValueError("Missing direction")

        result = game.move(data['direction'])
        payload = result.to_dict()
        payload['elapsed_ms'] = game.elapsed_ms()
        if result.won:
            payload['best'] = game.best()
        return jsonify(payload)

    @app.route('/api/maze/<game_id>/continue', methods=['POST'])
    def continue_exploring(game_id):
        game = games.get(game_id)
        game.continue_exploring()
        return jsonify(game.status())

    @app.route('/api/maze/<game_id>/image', methods=['GET'])
    def maze_image(game_id):
        game = games.get(game_id)
        img = create_maze_image(game.grid, game.session.position, game.session.goal,
                                config['canvas_size'])
        return jsonify({'game_id': game_id, 'maze_image': encode_png_base64(img)})

    @app.route('/api/best', methods=['GET'])
    def all_bests():
        return jsonify({'bests': best_store.all_bests()})

    @app.route('/api/best/<int:cols>x<int:rows>', methods=['GET'])
    def best_for_size(cols, rows):
        return jsonify({'cols': cols, 'rows': rows, 'best': best_store.get_best(cols, rows)})

    return app


def main():
    app_config = load_config()
    app = create_app(app_config)
    print("Starting Random Maze server...")
    print(f"Open http://{app_config['host']}:{app_config['port']}/api/best to check it is up")
    app.run(host=app_config['host'], port=app_config['port'])


if __name__ == '__main__':
    main()
