"""ANSI renderer for the rain grid.

Every visible cell is written as a cursor move, a colour selection and the
glyph itself.  Nothing is diffed against the previous frame.
"""

from __future__ import annotations

from typing import TextIO

import numpy as np

from .grid import Cell, Grid


RESET = "\x1b[0m"

# 256-colour greens from darkest to brightest.
RAMP = (
    "\x1b[38;5;22m",
    "\x1b[38;5;28m",
    "\x1b[38;5;34m",
    "\x1b[38;5;40m",
    "\x1b[38;5;46m",
)
RAMP_TOP = len(RAMP) - 1

_RAMP_ARRAY = np.array(RAMP, dtype=object)


def ramp_index(run: int) -> int:
    """Return the ramp entry for a cell with ``run`` frames left.

    The offset of one means an idle cell (``run == 0``) maps to entry 1 and
    entry 0 is never selected.
    """

    return min(run + 1, RAMP_TOP)


def cell_color(cell: Cell) -> str:
    """Return the escape code used to draw ``cell``."""

    if cell.bright:
        return RESET
    return RAMP[ramp_index(cell.run)]


def move_to(row: int, col: int) -> str:
    """Return the escape sequence moving the cursor to 1-indexed ``(row, col)``."""

    return f"\x1b[{row};{col}H"


def render_frame(grid: Grid, height: int, width: int) -> str:
    """Return the escape stream painting the visible part of ``grid``.

    ``height`` and ``width`` are clamped to the grid first, so any terminal
    size is accepted.
    """

    height, width = grid.visible_size(height, width)
    runs = grid.run[:height, :width].astype(np.int64)
    ramp = _RAMP_ARRAY[np.minimum(runs + 1, RAMP_TOP)]
    colors = np.where(grid.bright[:height, :width], RESET, ramp).tolist()
    glyphs = grid.glyphs[:height, :width].tolist()

    parts = []
    for row, (row_colors, row_glyphs) in enumerate(zip(colors, glyphs), start=1):
        for col, (color, glyph) in enumerate(zip(row_colors, row_glyphs), start=1):
            parts.append(f"\x1b[{row};{col}H{color}{glyph}")
    return "".join(parts)


def render(grid: Grid, height: int, width: int, stream: TextIO) -> None:
    """Write one frame to ``stream`` and flush it."""

    stream.write(render_frame(grid, height, width))
    stream.flush()
