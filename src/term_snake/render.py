"""Character-grid rendering of the game state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from term_snake.geometry import Direction

if TYPE_CHECKING:
    from term_snake.engine import GameEngine

# Raw mode disables output newline translation.
LINE_END = "\r\n"

HEAD_GLYPHS: dict[Direction, str] = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}
BODY_GLYPH = "x"
FOOD_GLYPH = "@"


def build_grid(engine: GameEngine) -> np.ndarray:
    """Return a ``(height, width)`` array of single-character cells."""
    width, height = engine.field_size
    cells = np.full((height, width), " ", dtype="<U1")

    # wall
    cells[[0, -1], :] = "-"
    cells[:, [0, -1]] = "|"
    cells[[0, 0, -1, -1], [0, -1, 0, -1]] = "+"

    # head & body
    head, *rest = engine.body
    cells[head.y, head.x] = HEAD_GLYPHS[engine.direction]
    for seg in rest:
        cells[seg.y, seg.x] = BODY_GLYPH

    if engine.food is not None:
        cells[engine.food.y, engine.food.x] = FOOD_GLYPH
    return cells


def render_frame(engine: GameEngine) -> str:
    """Render the score line followed by the full grid."""
    rows = "".join("".join(row) + LINE_END for row in build_grid(engine))
    return f"score: {engine.score}{LINE_END}{rows}"
