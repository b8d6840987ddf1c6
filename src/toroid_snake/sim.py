from __future__ import annotations

import logging
import random

from . import config
from .apple import Apple
from .snake import START_BODY, Snake
from .state import ACTION_DIRECTIONS, Action, Board, Direction, SnakeState, Snapshot

logger = logging.getLogger(__name__)


class Simulation:
    """Owns the snake and the apple and advances them one logic tick at a time.

    The presentation layer only talks to this class: it forwards input with
    ``on_direction_input``/``on_reset_input`` (or ``on_action``), calls
    ``tick`` at the fixed logic rate and draws from ``snapshot``.
    """

    def __init__(self, board: Board, cell_size: int = config.CELL_SIZE, rng: random.Random | None = None):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        if board.width * board.height <= len(START_BODY):
            raise ValueError(f"a {board.width}x{board.height} board leaves no room for an apple")
        self.board = board
        self.cell_size = cell_size
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake(board)
        self.apple = Apple.new(board, self.rng, forbidden=self.snake.body)

    @property
    def alive(self) -> bool:
        return self.snake.state is SnakeState.LIVE

    def tick(self) -> SnakeState:
        if self.snake.state is SnakeState.LIVE:
            self.snake.advance(self.apple)
        return self.snake.state

    def on_direction_input(self, requested) -> None:
        if not isinstance(requested, Direction):
            return
        self.snake.set_direction(requested)

    def on_reset_input(self) -> None:
        self.snake = Snake(self.board)
        self.apple = Apple.new(self.board, self.rng, forbidden=self.snake.body)
        logger.info("game reset, apple at %s", self.apple.pos)

    def on_action(self, action) -> None:
        if not isinstance(action, Action):
            return
        if action is Action.RESET:
            self.on_reset_input()
        else:
            self.on_direction_input(ACTION_DIRECTIONS[action])

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake.body),
            apple=self.apple.pos,
            width=self.board.width,
            height=self.board.height,
            cell_size=self.cell_size,
            alive=self.alive,
        )
