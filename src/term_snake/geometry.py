"""Grid geometry: directions, sizes, and cell coordinates."""

from __future__ import annotations

import enum
from typing import NamedTuple

import numpy as np


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Size(NamedTuple):
    """Playfield dimensions, walls included."""

    width: int
    height: int


class Coord(NamedTuple):
    """A grid cell, ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def adjacent(self, direction: Direction) -> Coord:
        """Return the neighbouring cell one step towards *direction*.

        Stepping off the low edge yields a negative component, which is
        never inside the playfield.
        """
        dx, dy = direction.value
        return Coord(self.x + dx, self.y + dy)


def rand_in_range(
    min_corner: Coord,
    max_corner: Coord,
    rng: np.random.Generator,
) -> Coord:
    """Draw a coordinate uniformly from the inclusive box between corners."""
    if min_corner.x > max_corner.x or min_corner.y > max_corner.y:
        raise ValueError(
            f"min_corner {tuple(min_corner)} must not exceed "
            f"max_corner {tuple(max_corner)}."
        )
    x = rng.integers(min_corner.x, max_corner.x, endpoint=True)
    y = rng.integers(min_corner.y, max_corner.y, endpoint=True)
    return Coord(int(x), int(y))
