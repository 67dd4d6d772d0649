"""Fixed game parameters."""

from __future__ import annotations

from dataclasses import dataclass

from term_snake.food import DEFAULT_MAX_ATTEMPTS
from term_snake.geometry import Size


@dataclass(frozen=True)
class GameConfig:
    """Parameters the game runs with. Not user-configurable."""

    field_width: int = 20
    field_height: int = 20
    tick_interval_ms: int = 150
    max_food_attempts: int = DEFAULT_MAX_ATTEMPTS

    @property
    def field_size(self) -> Size:
        return Size(self.field_width, self.field_height)

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000
