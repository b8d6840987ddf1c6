from __future__ import annotations

import logging
import random
from typing import Collection

from .state import Board, Cell

logger = logging.getLogger(__name__)


class Apple:
    def __init__(self, board: Board, pos: Cell, rng: random.Random | None = None):
        self.board = board
        self.pos = pos
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def new(
        cls,
        board: Board,
        rng: random.Random | None = None,
        forbidden: Collection[Cell] = (),
    ) -> Apple:
        apple = cls(board, (0, 0), rng)
        apple.relocate(forbidden)
        return apple

    def random_cell(self) -> Cell:
        return (
            self.rng.randrange(self.board.width),
            self.rng.randrange(self.board.height),
        )

    def relocate(self, forbidden: Collection[Cell] = ()) -> Cell:
        """Move to a uniformly random cell not in ``forbidden``.

        Rejection sampling with no retry limit: never returns if
        ``forbidden`` covers the whole board.
        """
        while True:
            pos = self.random_cell()
            if pos not in forbidden:
                break
        self.pos = pos
        logger.debug("apple placed at %s", pos)
        return pos
