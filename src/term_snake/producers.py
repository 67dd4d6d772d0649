"""Background threads feeding the event channel."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterable

from term_snake.events import DirectionChange, Event, EventChannel, Quit, Tick
from term_snake.geometry import Direction

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, Event] = {
    "h": DirectionChange(Direction.LEFT),
    "j": DirectionChange(Direction.DOWN),
    "k": DirectionChange(Direction.UP),
    "l": DirectionChange(Direction.RIGHT),
    "q": Quit(),
}


def decode_key(key: str) -> Event | None:
    """Map a key symbol to its game event, or ``None`` if unbound."""
    return KEY_BINDINGS.get(key)


class Ticker:
    """Sends a :class:`Tick` every *interval* seconds until the channel closes."""

    def __init__(self, channel: EventChannel, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self._channel = channel
        self._interval = interval
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._thread = threading.Thread(
            target=self._run, name="ticker", daemon=True,
        )
        self._thread.start()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        while True:
            time.sleep(self._interval)
            if not self._channel.send(Tick()):
                break
        logger.debug("Ticker stopped.")


class KeyReader:
    """Decodes key symbols from *keys* into events on the channel.

    Unbound keys are ignored. A failure while reading keys is forwarded as
    a :class:`Quit` carrying the exception.
    """

    def __init__(self, channel: EventChannel, keys: Iterable[str]) -> None:
        self._channel = channel
        self._keys = keys
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._thread = threading.Thread(
            target=self._run, name="key-reader", daemon=True,
        )
        self._thread.start()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        try:
            for key in self._keys:
                event = decode_key(key)
                if event is None:
                    continue
                if not self._channel.send(event):
                    break
        except Exception as e:
            logger.exception("Reading keys failed.")
            self._channel.send(Quit(error=e))
        logger.debug("Key reader stopped.")
