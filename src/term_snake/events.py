"""Game events and the channel that carries them to the controller."""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass

from term_snake.geometry import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    pass


@dataclass(frozen=True)
class DirectionChange(Event):
    direction: Direction


@dataclass(frozen=True)
class Tick(Event):
    pass


@dataclass(frozen=True)
class Quit(Event):
    # Set when the input stream failed rather than the player quitting.
    error: BaseException | None = None


class EventChannel:
    """Unbounded FIFO merging events from many producers into one consumer.

    Events are delivered in enqueue order. Once :meth:`close` is called,
    :meth:`send` returns ``False`` so producers know to stop.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue[Event] = queue.Queue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, event: Event) -> bool:
        """Enqueue *event*. Returns ``False`` if the consumer is gone."""
        if self._closed.is_set():
            return False
        self._queue.put(event)
        return True

    def receive(self, timeout: float | None = None) -> Event:
        """Block until the next event is available and return it.

        Raises :class:`queue.Empty` if *timeout* expires first.
        """
        return self._queue.get(timeout=timeout)

    def close(self) -> None:
        """Disconnect the consumer and drop any undelivered events."""
        self._closed.set()
        dropped = 0
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break
            dropped += 1
        if dropped:
            logger.debug("Dropped %d undelivered events on close.", dropped)
