"""Tick-based game engine owning the snake body, food, and direction."""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from term_snake.food import DEFAULT_MAX_ATTEMPTS, FoodSpawner
from term_snake.geometry import Coord, Direction, Size

logger = logging.getLogger(__name__)

INITIAL_BODY: tuple[Coord, ...] = (Coord(4, 2), Coord(3, 2), Coord(2, 2))
INITIAL_DIRECTION = Direction.RIGHT
INITIAL_FOOD = Coord(10, 10)


class GameEngine:
    """Single-snake game state and its per-tick transition rule.

    The head is ``body[0]``; the tail is ``body[-1]``. The engine is not
    thread-safe and must only be driven from one thread.
    """

    def __init__(
        self,
        field_size: Size = Size(20, 20),
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        max_food_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.field_size = Size(*field_size)
        if not all(self.is_inner_field(c) for c in (*INITIAL_BODY, INITIAL_FOOD)):
            raise ValueError(
                f"Field size {self.field_size.width}x{self.field_size.height} "
                "is too small for the starting snake and food."
            )
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(
            self.field_size, rng=self.rng, max_attempts=max_food_attempts,
        )
        self.body: deque[Coord] = deque(INITIAL_BODY)
        self.food: Coord | None = INITIAL_FOOD
        self.direction = INITIAL_DIRECTION
        self.initial_length = len(INITIAL_BODY)
        self.alive = True
        self.tick = 0

    @property
    def head(self) -> Coord:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def score(self) -> int:
        """Number of food items eaten so far."""
        return len(self.body) - self.initial_length

    def is_inner_field(self, coord: Coord) -> bool:
        """Check whether *coord* lies strictly inside the wall border."""
        width, height = self.field_size
        return 1 <= coord.x < width - 1 and 1 <= coord.y < height - 1

    def set_direction(self, direction: Direction) -> None:
        """Change direction, ignoring 180° reversals."""
        if direction != self.direction.opposite():
            self.direction = direction

    def advance(self) -> bool:
        """Move the snake one cell forward.

        Returns ``False`` if the move ends the game.
        """
        if not self.alive:
            return False

        adj = self.head.adjacent(self.direction)

        # --- wall check, before touching the body ---
        if not self.is_inner_field(adj):
            self._kill_snake("wall")
            return False

        # --- move or grow ---
        self.body.appendleft(adj)
        if adj == self.food:
            self.food = self.food_spawner.spawn(self.body)
            logger.debug("Food eaten at %s, new food at %s.", adj, self.food)
        else:
            self.body.pop()

        self.tick += 1

        # --- self-collision, after the tail has moved ---
        if any(seg == adj for seg in list(self.body)[1:]):
            self._kill_snake("body")
            return False

        return True

    def _kill_snake(self, cause: str) -> None:
        """Mark the snake as dead."""
        self.alive = False
        logger.info(
            "Snake hit the %s at tick %d with score %d.",
            cause, self.tick, self.score,
        )
