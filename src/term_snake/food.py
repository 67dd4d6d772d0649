"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from term_snake.geometry import Coord, Size, rand_in_range

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 64


class FoodSpawner:
    """Places food on a uniformly random free interior cell.

    Rejection sampling is tried first since free cells usually dominate.
    After *max_attempts* misses the spawner scans an occupancy mask of the
    interior instead, so placement always terminates.
    """

    def __init__(
        self,
        field_size: Size,
        rng: np.random.Generator | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 0:
            raise ValueError("max_attempts must be >= 0.")
        self.field_size = field_size
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self._min = Coord(1, 1)
        self._max = Coord(field_size.width - 2, field_size.height - 2)

    def spawn(self, occupied: Iterable[Coord]) -> Coord | None:
        """Return a free interior cell, or ``None`` if the board is full."""
        taken = set(occupied)
        for _ in range(self.max_attempts):
            candidate = rand_in_range(self._min, self._max, self.rng)
            if candidate not in taken:
                return candidate

        free = self.free_cells(taken)
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        return free[int(self.rng.integers(len(free)))]

    def free_cells(self, occupied: Iterable[Coord]) -> list[Coord]:
        """Return every interior cell not in *occupied*, row-major."""
        width, height = self.field_size
        free = np.zeros((height, width), dtype=bool)
        free[1:-1, 1:-1] = True
        for x, y in occupied:
            free[y, x] = False
        ys, xs = np.nonzero(free)
        return [Coord(x, y) for x, y in zip(xs.tolist(), ys.tolist(), strict=True)]
