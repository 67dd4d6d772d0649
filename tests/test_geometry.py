"""Tests for the geometry module."""

import numpy as np
import pytest

from term_snake.geometry import Coord, Direction, Size, rand_in_range


class TestDirection:
    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involutive(self, direction):
        assert direction.opposite().opposite() == direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_differs(self, direction):
        assert direction.opposite() != direction

    def test_opposite_pairs(self):
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.LEFT.opposite() == Direction.RIGHT


class TestCoord:
    def test_adjacent(self):
        c = Coord(5, 5)
        assert c.adjacent(Direction.UP) == Coord(5, 4)
        assert c.adjacent(Direction.DOWN) == Coord(5, 6)
        assert c.adjacent(Direction.LEFT) == Coord(4, 5)
        assert c.adjacent(Direction.RIGHT) == Coord(6, 5)

    def test_adjacent_off_low_edge_is_negative(self):
        assert Coord(0, 0).adjacent(Direction.UP) == Coord(0, -1)
        assert Coord(0, 0).adjacent(Direction.LEFT) == Coord(-1, 0)

    def test_size_fields(self):
        size = Size(20, 10)
        assert size.width == 20
        assert size.height == 10


class TestRandInRange:
    def test_covers_inclusive_box(self):
        rng = np.random.default_rng(0)
        seen = {
            rand_in_range(Coord(1, 1), Coord(2, 3), rng) for _ in range(500)
        }
        assert seen == {Coord(x, y) for x in (1, 2) for y in (1, 2, 3)}

    def test_degenerate_box(self):
        rng = np.random.default_rng(0)
        assert rand_in_range(Coord(3, 4), Coord(3, 4), rng) == Coord(3, 4)

    def test_returns_plain_ints(self):
        rng = np.random.default_rng(0)
        c = rand_in_range(Coord(1, 1), Coord(9, 9), rng)
        assert type(c.x) is int
        assert type(c.y) is int

    def test_min_above_max_fails(self):
        rng = np.random.default_rng(0)
        with pytest.raises(ValueError, match="must not exceed"):
            rand_in_range(Coord(5, 1), Coord(4, 9), rng)
