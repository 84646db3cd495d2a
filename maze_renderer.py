#!/usr/bin/env python3
"""
Maze rendering
- MazeRenderer draws onto matplotlib axes for the desktop player
- create_maze_image rasterises with OpenCV for the HTTP API
"""

import base64

import cv2
import matplotlib.patches as patches
import numpy as np

from maze_grid import MazeGrid

# BGR for OpenCV
IMAGE_COLORS = {
    'background': (42, 23, 15),
    'floor': (59, 41, 30),
    'wall': (184, 163, 148),
    'goal': (129, 185, 16),
    'agent': (11, 158, 245),
}


class MazeRenderer:
    """Renders maze, goal and agent to matplotlib axes"""

    def __init__(self, cell_size: float = 1.0):
        self.cell_size = cell_size

        self.colors = {
            'background': '#1e293b',
            'wall': '#94a3b8',
            'goal': '#10b981',
            'agent': '#f59e0b',
        }

    def draw_cell_walls(self, ax, grid: MazeGrid):
        """Draw every closed wall as a line segment"""
        size = self.cell_size
        wall_color = self.colors['wall']
        wall_width = 2

        for cell in grid:
            x = cell.x * size
            y = cell.y * size

            if cell.walls['top']:
                ax.plot([x, x + size], [y, y], color=wall_color, linewidth=wall_width)
            if cell.walls['right']:
                ax.plot([x + size, x + size], [y, y + size],
                        color=wall_color, linewidth=wall_width)
            if cell.walls['bottom']:
                ax.plot([x, x + size], [y + size, y + size],
                        color=wall_color, linewidth=wall_width)
            if cell.walls['left']:
                ax.plot([x, x], [y, y + size], color=wall_color, linewidth=wall_width)

    def draw_goal_and_agent(self, ax, agent, goal):
        size = self.cell_size

        goal_rect = patches.Rectangle(
            (goal[0] * size + 0.1 * size, goal[1] * size + 0.1 * size), size * 0.8, size * 0.8,
            linewidth=0, facecolor=self.colors['goal']
        )
        ax.add_patch(goal_rect)

        agent_circle = patches.Circle(
            (agent[0] * size + size / 2, agent[1] * size + size / 2), size * 0.35,
            facecolor=self.colors['agent']
        )
        ax.add_patch(agent_circle)

    def render(self, ax, grid: MazeGrid, agent, goal, title: str = ""):
        """Render complete maze to axes"""
        ax.clear()
        ax.set_facecolor(self.colors['background'])

        self.draw_cell_walls(ax, grid)
        self.draw_goal_and_agent(ax, agent, goal)

        # y grows downwards like the grid
        ax.set_aspect('equal')
        ax.set_xlim(-0.5, grid.cols * self.cell_size + 0.5)
        ax.set_ylim(grid.rows * self.cell_size + 0.5, -0.5)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(title)


def create_maze_image(grid: MazeGrid, agent=None, goal=None, canvas_size: int = 560) -> np.ndarray:
    """Draw the maze centred on a square canvas, returns a BGR uint8 image"""
    cell_size = canvas_size // max(grid.cols, grid.rows)
    maze_w = grid.cols * cell_size
    maze_h = grid.rows * cell_size
    off_x = (canvas_size - maze_w) // 2
    off_y = (canvas_size - maze_h) // 2

    img = np.zeros((canvas_size, canvas_size, 3), dtype=np.uint8)
    img[:] = IMAGE_COLORS['background']
    img[off_y:off_y + maze_h, off_x:off_x + maze_w] = IMAGE_COLORS['floor']

    wall = IMAGE_COLORS['wall']
    for cell in grid:
        cx = off_x + cell.x * cell_size
        cy = off_y + cell.y * cell_size
        if cell.walls['top']:
            cv2.line(img, (cx, cy), (cx + cell_size, cy), wall, 2)
        if cell.walls['right']:
            cv2.line(img, (cx + cell_size, cy), (cx + cell_size, cy + cell_size), wall, 2)
        if cell.walls['bottom']:
            cv2.line(img, (cx, cy + cell_size), (cx + cell_size, cy + cell_size), wall, 2)
        if cell.walls['left']:
            cv2.line(img, (cx, cy), (cx, cy + cell_size), wall, 2)

    if goal is not None:
        gx = off_x + goal[0] * cell_size
        gy = off_y + goal[1] * cell_size
        inset = max(1, cell_size // 8)
        cv2.rectangle(img, (gx + inset, gy + inset),
                      (gx + cell_size - inset, gy + cell_size - inset),
                      IMAGE_COLORS['goal'], -1)

    if agent is not None:
        px = off_x + agent[0] * cell_size + cell_size // 2
        py = off_y + agent[1] * cell_size + cell_size // 2
        cv2.circle(img, (px, py), max(2, min(10, int(cell_size * 0.35))), IMAGE_COLORS['agent'], -1)

    return img


def encode_png_base64(img: np.ndarray) -> str:
    """PNG data URL for an image"""
    ok, buffer = cv2.imencode('.png', img)
    if not ok:
        raise RuntimeError("PNG encoding failed")
    return f"data:image/png;base64,{base64.b64encode(buffer).decode()}"
