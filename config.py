#!/usr/bin/env python3
"""
Configuration for the Random Maze game
Defaults live in CONFIG, MAZE_* environment variables override them
"""

import os

CONFIG = {
    "min_size": 5,
    "max_size": 51,
    "default_size": 15,
    "canvas_size": 560,     # Pixels, square
    "swipe_threshold": 18,  # Pixels, shorter gestures are taps
    "best_db_path": "maze_best.db",
    "log_dir": "logs",
    "log_level": "INFO",
    "host": "127.0.0.1",
    "port": 8080,
    "game_expiry_seconds": 1800,
}


def _coerce(value, default):
    if isinstance(default, int):
        return int(value)
    return value


def load_config(environ=None):
    """Return a copy of CONFIG with MAZE_<KEY> environment overrides applied"""
    environ = os.environ if environ is None else environ
    config = dict(CONFIG)
    for key, default in CONFIG.items():
        env_key = f"MAZE_{key.upper()}"
        if env_key in environ:
            try:
                config[key] = _coerce(environ[env_key], default)
            except ValueError as e:
                raise ValueError(f"Invalid value for {env_key}: {environ[env_key]!r}") from e
    return config
