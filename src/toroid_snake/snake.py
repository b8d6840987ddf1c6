from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Iterable

from .state import Board, Cell, Direction, SnakeState, add_vectors

if TYPE_CHECKING:
    from .apple import Apple

logger = logging.getLogger(__name__)

START_BODY: tuple[Cell, ...] = ((0, 0), (0, 1))
START_DIRECTION = Direction.RIGHT


class EmptySnakeError(RuntimeError):
    """Raised when a snake with no body is asked to move."""


class Snake:
    def __init__(
        self,
        board: Board,
        body: Iterable[Cell] = START_BODY,
        direction: Direction = START_DIRECTION,
    ):
        self.board = board
        self.body: deque[Cell] = deque(body)
        if not self.body:
            raise ValueError("snake body must not be empty")
        if len(set(self.body)) != len(self.body):
            raise ValueError(f"snake body has duplicate cells: {list(self.body)}")
        for cell in self.body:
            if not board.contains(cell):
                raise ValueError(f"cell {cell} is outside a {board.width}x{board.height} board")
        # Heading used by the last advance; requests are checked against it.
        self.heading = direction
        self.direction = direction
        self.state = SnakeState.LIVE

    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self) -> Cell:
        if not self.body:
            raise EmptySnakeError("snake has no body")
        return self.board.wrap(add_vectors(self.body[0], self.direction.delta))

    def hit_self(self, new_head: Cell) -> SnakeState:
        # The tail counts even though it is about to move away.
        if new_head in self.body:
            return SnakeState.DEAD
        return SnakeState.LIVE

    def set_direction(self, requested: Direction) -> None:
        if len(self.body) > 1 and requested is self.heading.opposite:
            return
        self.direction = requested

    def advance(self, apple: Apple) -> SnakeState:
        if self.state is SnakeState.DEAD:
            return self.state

        new_head = self.next_head()
        self.heading = self.direction
        if self.hit_self(new_head) is SnakeState.DEAD:
            self.state = SnakeState.DEAD
            logger.info("snake died at %s with length %d", new_head, len(self.body))
            return self.state

        self.body.appendleft(new_head)
        if new_head == apple.pos:
            logger.debug("apple eaten at %s, length now %d", new_head, len(self.body))
            apple.relocate(self.body)
        else:
            self.body.pop()
        return self.state
