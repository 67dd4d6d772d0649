"""Tests for the event channel."""

import queue
import threading

import pytest

from term_snake.events import DirectionChange, EventChannel, Quit, Tick
from term_snake.geometry import Direction


class TestEventChannel:
    def test_fifo_order(self):
        channel = EventChannel()
        events = [Tick(), DirectionChange(Direction.UP), Tick(), Quit()]
        for e in events:
            assert channel.send(e)
        assert [channel.receive(timeout=1) for _ in events] == events

    def test_no_coalescing(self):
        channel = EventChannel()
        channel.send(DirectionChange(Direction.UP))
        channel.send(DirectionChange(Direction.UP))
        assert channel.receive(timeout=1) == DirectionChange(Direction.UP)
        assert channel.receive(timeout=1) == DirectionChange(Direction.UP)

    def test_receive_timeout(self):
        channel = EventChannel()
        with pytest.raises(queue.Empty):
            channel.receive(timeout=0.01)

    def test_many_producers(self):
        channel = EventChannel()
        per_producer = 200

        def produce(direction):
            for _ in range(per_producer):
                channel.send(DirectionChange(direction))

        threads = [
            threading.Thread(target=produce, args=(d,)) for d in Direction
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        received = [
            channel.receive(timeout=1)
            for _ in range(per_producer * len(threads))
        ]
        for d in Direction:
            assert received.count(DirectionChange(d)) == per_producer


class TestEventChannelClose:
    def test_send_after_close_fails(self):
        channel = EventChannel()
        channel.close()
        assert channel.closed
        assert not channel.send(Tick())

    def test_close_drops_pending(self):
        channel = EventChannel()
        channel.send(Tick())
        channel.send(Tick())
        channel.close()
        with pytest.raises(queue.Empty):
            channel.receive(timeout=0.01)


class TestEvents:
    def test_quit_without_error(self):
        assert Quit().error is None
        assert Quit() == Quit()

    def test_events_are_frozen(self):
        event = DirectionChange(Direction.LEFT)
        with pytest.raises(AttributeError):
            event.direction = Direction.RIGHT
