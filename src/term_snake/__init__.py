"""Term Snake: a terminal snake game."""

from term_snake.controller import GameController, GameOverReason, GameResult
from term_snake.engine import GameEngine
from term_snake.events import DirectionChange, EventChannel, Quit, Tick
from term_snake.geometry import Coord, Direction, Size

__all__ = [
    "Coord",
    "Direction",
    "DirectionChange",
    "EventChannel",
    "GameController",
    "GameEngine",
    "GameOverReason",
    "GameResult",
    "Quit",
    "Size",
    "Tick",
]
