#!/usr/bin/env python3
"""
Input mapping: keyboard keys and touch swipes to move directions
"""

from config import CONFIG
from maze_grid import Direction

KEY_DIRECTIONS = {
    'arrowup': Direction.UP, 'up': Direction.UP, 'w': Direction.UP,
    'arrowright': Direction.RIGHT, 'right': Direction.RIGHT, 'd': Direction.RIGHT,
    'arrowdown': Direction.DOWN, 'down': Direction.DOWN, 's': Direction.DOWN,
    'arrowleft': Direction.LEFT, 'left': Direction.LEFT, 'a': Direction.LEFT,
}


def direction_from_key(key):
    """Direction for an arrow key or WASD, None for anything else"""
    if not key:
        return None
    return KEY_DIRECTIONS.get(key.lower())


def direction_from_swipe(dx, dy, threshold=CONFIG["swipe_threshold"]):
    """Direction of the dominant axis of a swipe; taps shorter than threshold give None"""
    ax, ay = abs(dx), abs(dy)
    if max(ax, ay) < threshold:
        return None
    if ax > ay:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
