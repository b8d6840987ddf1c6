from .apple import Apple
from .sim import Simulation
from .snake import EmptySnakeError, Snake
from .state import Action, Board, Direction, SnakeState, Snapshot

__all__ = [
    "Action",
    "Apple",
    "Board",
    "Direction",
    "EmptySnakeError",
    "Simulation",
    "Snake",
    "SnakeState",
    "Snapshot",
]
