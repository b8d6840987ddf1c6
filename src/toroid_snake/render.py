from __future__ import annotations

from . import config
from .state import Snapshot


def draw_state(
    prims,
    snap: Snapshot,
    background: tuple[int, int, int] = config.BACKGROUND,
    snake_color: tuple[int, int, int] = config.SNAKE_COLOR,
    apple_color: tuple[int, int, int] = config.APPLE_COLOR,
) -> None:
    size = snap.cell_size
    prims.clear(background)

    prims.begin_quads()
    for x, y in snap.snake:
        prims.rect(x * size, y * size, size, snake_color)

    ax, ay = snap.apple
    prims.rect(ax * size, ay * size, size, apple_color)
    prims.end_quads()
