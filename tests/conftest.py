import os
import random

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from toroid_snake.apple import Apple  # noqa: E402
from toroid_snake.state import Board  # noqa: E402


@pytest.fixture
def board():
    return Board(10, 10)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_apple(board, rng):
    def _make(pos):
        return Apple(board, pos, rng)

    return _make
