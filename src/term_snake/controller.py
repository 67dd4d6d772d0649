"""Game loop: consumes events, drives the engine, and renders frames."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from term_snake.config import GameConfig
from term_snake.engine import GameEngine
from term_snake.events import DirectionChange, Event, EventChannel, Quit, Tick
from term_snake.producers import KeyReader, Ticker
from term_snake.render import render_frame
from term_snake.terminal import TerminalSurface

logger = logging.getLogger(__name__)


class ControllerState(enum.Enum):
    """Lifecycle of a :class:`GameController`."""

    INITIALIZING = "initializing"
    RUNNING = "running"
    GAME_OVER = "game_over"
    SHUTTING_DOWN = "shutting_down"


class GameOverReason(enum.Enum):
    COLLISION = "collision"
    QUIT = "quit"


@dataclass(frozen=True)
class GameResult:
    """Outcome of a finished game."""

    score: int
    reason: GameOverReason
    ticks: int


class GameController:
    """Owns the engine and the terminal, and runs the event loop.

    Two background producers (a ticker and a key reader) feed a single
    :class:`EventChannel`. Events are handled one at a time on the calling
    thread, which is the only thread that touches the engine.
    """

    def __init__(
        self,
        terminal: TerminalSurface,
        engine: GameEngine | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.engine = engine if engine is not None else GameEngine(
            field_size=self.config.field_size,
            max_food_attempts=self.config.max_food_attempts,
        )
        self.terminal = terminal
        self.channel = EventChannel()
        self.state = ControllerState.INITIALIZING
        self.reason: GameOverReason | None = None
        self._error: BaseException | None = None

    def render(self) -> None:
        """Write the current frame to the terminal."""
        self.terminal.write_frame(render_frame(self.engine))

    def run(self) -> GameResult:
        """Play one game to completion and return its result.

        The terminal is restored before this returns or raises. An error
        raised while reading keys is re-raised here.
        """
        with self.terminal.immediate_mode():
            try:
                self.terminal.clear_and_hide_cursor()
                self.render()
                Ticker(self.channel, self.config.tick_interval).start()
                KeyReader(self.channel, self.terminal.key_events()).start()
                self._set_state(ControllerState.RUNNING)

                while self.handle_event(self.channel.receive()):
                    pass
            finally:
                self._set_state(ControllerState.SHUTTING_DOWN)
                # Producers notice on their next send and exit.
                self.channel.close()
                self.terminal.show_cursor()

        if self._error is not None:
            raise self._error

        result = GameResult(
            score=self.engine.score,
            reason=self.reason or GameOverReason.QUIT,
            ticks=self.engine.tick,
        )
        logger.info(
            "Game ended by %s after %d ticks with score %d.",
            result.reason.value, result.ticks, result.score,
        )
        return result

    def handle_event(self, event: Event) -> bool:
        """Apply one event. Returns ``False`` once the game is over."""
        if self.state is not ControllerState.RUNNING:
            return False

        if isinstance(event, DirectionChange):
            self.engine.set_direction(event.direction)
            return True

        if isinstance(event, Tick):
            if not self.engine.advance():
                self._game_over(GameOverReason.COLLISION)
                return False
            self.render()
            return True

        if isinstance(event, Quit):
            self._error = event.error
            self._game_over(GameOverReason.QUIT)
            return False

        raise TypeError(f"Unknown event: {event!r}")

    def _game_over(self, reason: GameOverReason) -> None:
        self.reason = reason
        self._set_state(ControllerState.GAME_OVER)

    def _set_state(self, state: ControllerState) -> None:
        logger.debug("Controller %s -> %s.", self.state.value, state.value)
        self.state = state
