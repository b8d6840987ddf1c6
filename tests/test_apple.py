import random

from toroid_snake.apple import Apple
from toroid_snake.state import Board


def test_relocate_avoids_forbidden_cells():
    board = Board(3, 3)
    free = (2, 1)
    forbidden = [(x, y) for x in range(3) for y in range(3) if (x, y) != free]
    apple = Apple(board, (0, 0), random.Random(0))
    for _ in range(20):
        assert apple.relocate(forbidden) == free
        assert apple.pos == free


def test_new_apple_respects_forbidden():
    board = Board(2, 2)
    apple = Apple.new(board, random.Random(3), forbidden=[(0, 0), (1, 0), (0, 1)])
    assert apple.pos == (1, 1)


def test_new_apple_on_empty_board_is_on_board():
    board = Board(4, 6)
    for seed in range(50):
        apple = Apple.new(board, random.Random(seed))
        assert board.contains(apple.pos)


def test_placement_is_reproducible_with_seed():
    board = Board(20, 20)
    a = Apple.new(board, random.Random(99))
    b = Apple.new(board, random.Random(99))
    assert a.pos == b.pos
    assert a.relocate([a.pos]) == b.relocate([b.pos])


def test_relocate_reaches_every_free_cell():
    board = Board(3, 2)
    apple = Apple(board, (0, 0), random.Random(5))
    seen = {apple.relocate([(0, 0)]) for _ in range(300)}
    assert seen == {(x, y) for x in range(3) for y in range(2)} - {(0, 0)}
