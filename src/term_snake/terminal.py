"""Terminal surface: raw-mode control, frame output, and key input."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import termios
import tty
from collections.abc import Iterator
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class TerminalSurface(Protocol):
    """What the controller needs from a terminal."""

    def immediate_mode(self) -> contextlib.AbstractContextManager[None]: ...
    def clear_and_hide_cursor(self) -> None: ...
    def show_cursor(self) -> None: ...
    def write_frame(self, text: str) -> None: ...
    def key_events(self) -> Iterator[str]: ...


class AnsiTerminal:
    """A POSIX terminal driven through termios and ANSI escape codes."""

    def __init__(
        self,
        stdin_fd: int | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout = sys.stdout if stdout is None else stdout

    @contextlib.contextmanager
    def immediate_mode(self) -> Iterator[None]:
        """Put the terminal in raw mode, restoring it on every exit path."""
        saved = termios.tcgetattr(self.stdin_fd)
        tty.setraw(self.stdin_fd)
        logger.debug("Entered raw mode on fd %d.", self.stdin_fd)
        try:
            yield
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSADRAIN, saved)
            self.show_cursor()
            logger.debug("Restored terminal mode on fd %d.", self.stdin_fd)

    def clear_and_hide_cursor(self) -> None:
        self._write(CLEAR_SCREEN + HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._write(SHOW_CURSOR)

    def write_frame(self, text: str) -> None:
        """Overwrite the screen from the top-left corner with *text*."""
        self._write(CURSOR_HOME + text)

    def key_events(self) -> Iterator[str]:
        """Yield key symbols as they are typed; stops at end of input.

        Escape sequences are yielded whole, e.g. ``"\\x1b[A"``.
        """
        while True:
            ch = self._read_char()
            if not ch:
                return
            if ch != "\x1b":
                yield ch
                continue
            seq = ch + self._read_char()
            if seq == "\x1b[":
                seq += self._read_char()
            yield seq

    def _read_char(self) -> str:
        data = os.read(self.stdin_fd, 1)
        return data.decode("utf-8", errors="replace")

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()
