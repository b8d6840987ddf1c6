from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass
from enum import Enum

Cell = tuple[int, int]

Snapshot = namedtuple("Snapshot", ["snake", "apple", "width", "height", "cell_size", "alive"])
# snake: tuple[(x, y)], head is first element.
# apple: (x, y)
# width, height: board size in cells
# cell_size: pixels per cell
# alive: bool


@dataclass(frozen=True)
class Board:
    """Toroidal cell space of ``width`` x ``height``."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"board must be positive, got {self.width}x{self.height}")

    def wrap(self, cell: Cell) -> Cell:
        return (cell[0] % self.width, cell[1] % self.height)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Cell:
        return self.value

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeState(Enum):
    LIVE = "live"
    DEAD = "dead"


class Action(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESET = "reset"


ACTION_DIRECTIONS = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])
