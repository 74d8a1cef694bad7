"""Thin wrapper around the controlling terminal.

:class:`Terminal` is a context manager: entering switches stdin to cbreak
mode (keys arrive immediately, without echo) and hides the cursor; leaving
restores the saved settings and clears the screen, whatever caused the exit.
"""

from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty
from typing import List, Optional, TextIO, Tuple


LOGGER = logging.getLogger(__name__)

# (rows, cols) used when the size cannot be queried, e.g. output is piped.
DEFAULT_SIZE = (24, 80)

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
RESET_ATTRS = "\x1b[0m"
CLEAR_SCREEN = "\x1b[H\x1b[J"


class Terminal:
    """Raw-ish terminal session bound to a pair of text streams."""

    def __init__(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self._saved: Optional[List] = None
        self._warned_size = False

    # Context management -----------------------------------------------
    def __enter__(self) -> "Terminal":
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()
        return False

    def enter(self) -> None:
        """Switch stdin to cbreak mode and hide the cursor."""

        if self.stdin.isatty():
            fd = self.stdin.fileno()
            self._saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        else:
            LOGGER.warning("stdin is not a terminal; keypresses will be line buffered")
        self.write(HIDE_CURSOR)
        self.flush()

    def restore(self) -> None:
        """Put back the saved mode, show the cursor and clear the screen."""

        if self._saved is not None:
            termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, self._saved)
            self._saved = None
        self.write(SHOW_CURSOR + RESET_ATTRS + CLEAR_SCREEN)
        self.flush()

    # Queries ------------------------------------------------------------
    def size(self) -> Tuple[int, int]:
        """Return the current ``(rows, cols)``, falling back to :data:`DEFAULT_SIZE`."""

        try:
            size = os.get_terminal_size(self.stdout.fileno())
        except (OSError, ValueError):
            if not self._warned_size:
                LOGGER.warning(
                    "Terminal size unavailable; using %dx%d", DEFAULT_SIZE[1], DEFAULT_SIZE[0]
                )
                self._warned_size = True
            return DEFAULT_SIZE
        return size.lines, size.columns

    def input_pending(self) -> bool:
        """Return ``True`` if a key is waiting, without blocking."""

        ready, _, _ = select.select([self.stdin], [], [], 0)
        return bool(ready)

    def read_char(self) -> str:
        """Block until one character can be read and return it."""

        return os.read(self.stdin.fileno(), 1).decode("latin-1")

    # Output ------------------------------------------------------------
    def write(self, text: str) -> None:
        self.stdout.write(text)

    def flush(self) -> None:
        self.stdout.flush()
