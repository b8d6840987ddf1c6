from __future__ import annotations

import pygame

from .state import Action

KEY_ACTIONS = {
    pygame.K_UP: Action.UP,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_w: Action.UP,
    pygame.K_s: Action.DOWN,
    pygame.K_a: Action.LEFT,
    pygame.K_d: Action.RIGHT,
    pygame.K_r: Action.RESET,
}
EXIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def translate(event: pygame.event.Event) -> Action | None:
    if event.type != pygame.KEYDOWN:
        return None
    return KEY_ACTIONS.get(event.key)


def wants_exit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key in EXIT_KEYS
