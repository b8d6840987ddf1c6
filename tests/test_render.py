import pygame

from toroid_snake import config
from toroid_snake.primitives import SoftPrimitives
from toroid_snake.render import draw_state
from toroid_snake.state import Snapshot


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_draw_state_paints_cells():
    surface = pygame.Surface((200, 200))
    snap = Snapshot(
        snake=((3, 2), (2, 2)),
        apple=(9, 9),
        width=10,
        height=10,
        cell_size=20,
        alive=True,
    )
    draw_state(SoftPrimitives(surface), snap)

    assert pixel(surface, 3 * 20 + 10, 2 * 20 + 10) == config.SNAKE_COLOR
    assert pixel(surface, 2 * 20, 2 * 20) == config.SNAKE_COLOR
    assert pixel(surface, 9 * 20 + 19, 9 * 20 + 19) == config.APPLE_COLOR
    assert pixel(surface, 0, 0) == config.BACKGROUND
    assert pixel(surface, 4 * 20, 2 * 20) == config.BACKGROUND


def test_draw_state_clears_previous_frame():
    surface = pygame.Surface((40, 40))
    prims = SoftPrimitives(surface)
    first = Snapshot(((0, 0), (0, 1)), (1, 1), 2, 2, 20, True)
    second = Snapshot(((1, 0), (0, 0)), (1, 1), 2, 2, 20, True)
    draw_state(prims, first)
    draw_state(prims, second)
    assert pixel(surface, 5, 25) == config.BACKGROUND
    assert pixel(surface, 25, 5) == config.SNAKE_COLOR


def test_custom_colors():
    surface = pygame.Surface((20, 40))
    snap = Snapshot(((0, 0),), (0, 1), 1, 2, 20, False)
    draw_state(SoftPrimitives(surface), snap, (0, 0, 0), (1, 2, 3), (4, 5, 6))
    assert pixel(surface, 10, 10) == (1, 2, 3)
    assert pixel(surface, 10, 30) == (4, 5, 6)
