from __future__ import annotations

import logging

import pygame

from . import config
from .controls import translate, wants_exit
from .primitives import SoftPrimitives
from .render import draw_state
from .sim import Simulation

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


def tick_interval_ms(ticks_per_second: int) -> int:
    return max(1, 1000 // ticks_per_second)


def handle_event(sim: Simulation, event: pygame.event.Event) -> bool:
    """Feed one event to the simulation. Returns False when the game should exit."""
    if wants_exit(event):
        return False
    if event.type == TICK_EVENT:
        sim.tick()
    else:
        action = translate(event)
        if action is not None:
            sim.on_action(action)
    return True


def run(
    sim: Simulation,
    renderer: str = "soft",
    ticks_per_second: int = config.TICKS_PER_SECOND,
    fps: int = config.FPS,
) -> Simulation:
    pygame.init()
    width = sim.board.width * sim.cell_size
    height = sim.board.height * sim.cell_size
    pygame.display.set_caption(config.TITLE)

    if renderer == "gl":
        pygame.display.set_mode((width, height), pygame.OPENGL | pygame.DOUBLEBUF)
        from .gl_draw import GLPrimitives, setup_ortho

        setup_ortho(width, height)
        prims = GLPrimitives()
    else:
        screen = pygame.display.set_mode((width, height))
        prims = SoftPrimitives(screen)

    logger.info(
        "starting %dx%d board, %d ticks/s, %s renderer",
        sim.board.width,
        sim.board.height,
        ticks_per_second,
        renderer,
    )
    pygame.time.set_timer(TICK_EVENT, tick_interval_ms(ticks_per_second))
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(sim, event):
                running = False
                break

        draw_state(prims, sim.snapshot())
        pygame.display.flip()
        clock.tick(fps)

    pygame.time.set_timer(TICK_EVENT, 0)
    pygame.quit()
    return sim
