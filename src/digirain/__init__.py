"""Falling-character terminal animation."""

from .grid import Cell, Grid, MAX_HEIGHT, MAX_WIDTH
from .glyphs import ALPHABET, random_glyph
from .engine import advance, frame_interval, start_run
from .state import RainState
from .renderer import cell_color, render, render_frame
from .runner import RainRunner
from .terminal import Terminal
from .timing import FrameTimer

__all__ = [
    "Cell",
    "Grid",
    "MAX_HEIGHT",
    "MAX_WIDTH",
    "ALPHABET",
    "random_glyph",
    "advance",
    "frame_interval",
    "start_run",
    "RainState",
    "cell_color",
    "render",
    "render_frame",
    "RainRunner",
    "Terminal",
    "FrameTimer",
]
