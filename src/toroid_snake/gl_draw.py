from __future__ import annotations

from OpenGL.GL import (
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_PROJECTION,
    GL_QUADS,
    glBegin,
    glClear,
    glClearColor,
    glColor3ub,
    glDisable,
    glEnd,
    glLoadIdentity,
    glMatrixMode,
    glVertex2f,
    glViewport,
)
from OpenGL.GLU import gluOrtho2D


def setup_ortho(width: int, height: int) -> None:
    # Pixel coordinates with the origin at the top left, like pygame surfaces.
    glViewport(0, 0, width, height)
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    gluOrtho2D(0, width, height, 0)
    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()
    glDisable(GL_DEPTH_TEST)


class GLPrimitives:
    def __init__(self) -> None:
        self._quad_batch_active = False

    def clear(self, color: tuple[int, int, int]) -> None:
        r, g, b = [c / 255.0 for c in color]
        glClearColor(r, g, b, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

    def begin_quads(self) -> None:
        if self._quad_batch_active:
            return
        self._quad_batch_active = True
        glBegin(GL_QUADS)

    def end_quads(self) -> None:
        if not self._quad_batch_active:
            return
        glEnd()
        self._quad_batch_active = False

    def rect(self, x: float, y: float, size: int, color: tuple[int, int, int]) -> None:
        glColor3ub(*color)
        if self._quad_batch_active:
            glVertex2f(x, y)
            glVertex2f(x + size, y)
            glVertex2f(x + size, y + size)
            glVertex2f(x, y + size)
        else:
            glBegin(GL_QUADS)
            glVertex2f(x, y)
            glVertex2f(x + size, y)
            glVertex2f(x + size, y + size)
            glVertex2f(x, y + size)
            glEnd()
