"""Frame loop gluing the engine and renderer to a terminal.

The runner only needs a terminal-like object offering ``size()``,
``input_pending()``, ``read_char()``, ``write()`` and ``flush()``; see
:class:`digirain.terminal.Terminal` for the real one.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .engine import FALL_SPEED, frame_interval
from .renderer import render
from .state import RainState
from .timing import FrameTimer, format_summary


LOGGER = logging.getLogger(__name__)

# Key that ends the animation.
ESC = "\x1b"
# Emit a timing summary every this many frames when DEBUG logging is on.
LOG_EVERY = 500


class RainRunner:
    """Drive the update/render/sleep cycle until the exit key is pressed."""

    def __init__(
        self,
        terminal,
        *,
        state: Optional[RainState] = None,
        fall_speed: float = FALL_SPEED,
        exit_key: str = ESC,
        sleep: Callable[[float], None] = time.sleep,
        timer: Optional[FrameTimer] = None,
    ) -> None:
        self.terminal = terminal
        self.state = state if state is not None else RainState()
        self.interval = frame_interval(fall_speed)
        self.exit_key = exit_key
        self._sleep = sleep
        self.timer = timer or FrameTimer(enabled=LOGGER.isEnabledFor(logging.DEBUG))
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def frame(self) -> None:
        """Advance the grid once and paint the visible rectangle."""

        rows, cols = self.terminal.size()
        with self.timer.section("update"):
            self.state.step()
        with self.timer.section("render"):
            render(self.state.grid, rows, cols, self.terminal)

    def _exit_requested(self) -> bool:
        # Only read when something is queued so the loop never blocks.
        if not self.terminal.input_pending():
            return False
        return self.terminal.read_char() == self.exit_key

    def _log_timings(self) -> None:
        if not self.timer.enabled:
            return
        LOGGER.debug(
            "Frame %d timings: %s", self.state.frames, format_summary(self.timer.summary())
        )
        self.timer.reset()

    def run(self) -> int:
        """Run until the exit key or :meth:`stop`; return the frames drawn."""

        grid = self.state.grid
        LOGGER.info(
            "Rain started: %dx%d grid, %.3fs per frame", grid.width, grid.height, self.interval
        )
        self._running = True
        drawn = 0
        while self._running:
            self.frame()
            drawn += 1
            self._sleep(self.interval)
            if self._exit_requested():
                break
            if drawn % LOG_EVERY == 0:
                self._log_timings()
        self._running = False
        LOGGER.info("Rain stopped after %d frames", drawn)
        return drawn

    def stop(self) -> None:
        """Ask the loop to finish after the current frame."""

        self._running = False
