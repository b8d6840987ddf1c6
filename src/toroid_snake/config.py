from __future__ import annotations

WIDTH, HEIGHT = 200, 200
CELL_SIZE = 20
GRID_WIDTH = WIDTH // CELL_SIZE
GRID_HEIGHT = HEIGHT // CELL_SIZE

TITLE = "Snake Game"
TICKS_PER_SECOND = 8
FPS = 60

BACKGROUND = (0, 255, 0)
SNAKE_COLOR = (255, 0, 0)
APPLE_COLOR = (255, 255, 0)
