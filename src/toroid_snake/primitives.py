from __future__ import annotations

import pygame


class SoftPrimitives:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self, color: tuple[int, int, int]) -> None:
        self.surface.fill(color)

    def begin_quads(self) -> None:
        pass

    def end_quads(self) -> None:
        pass

    def rect(self, x: float, y: float, size: int, color: tuple[int, int, int]) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), size, size))
