"""Per-frame update rules for the rain field.

Each column behaves as an independent cellular automaton that shifts content
down by one row per frame.  Rows are conceptually processed from the bottom
up, so every row reads the *previous* frame's value of the row above it.  That
makes the whole body of the grid computable in one pass from a snapshot of
rows ``0..H-2`` using boolean masks; the outcome is the same as walking each
column cell by cell.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .glyphs import random_glyph, random_glyphs
from .grid import BLANK, Grid, check_run


# One in ``SPAWN_ODDS`` idle top cells starts a new streak each frame.
SPAWN_ODDS = 40
MIN_RUN = 2
MAX_RUN = 25

# Frame delay is ``BASE_INTERVAL / fall_speed`` seconds.
BASE_INTERVAL = 0.625
FALL_SPEED = 6


def frame_interval(fall_speed: float = FALL_SPEED) -> float:
    """Return the sleep between frames in seconds for ``fall_speed``."""

    if fall_speed <= 0:
        raise ValueError("fall_speed must be positive")
    return BASE_INTERVAL / fall_speed


def advance_body(grid: Grid, rng: np.random.Generator) -> None:
    """Update every row below the top one.

    For a cell with an active run the counter ticks down and the cell dims
    while keeping its glyph.  Otherwise the cell takes whatever falls from
    above: a blank stays blank, a character arrives as a fresh random glyph
    carrying the brightness and run of its source.
    """

    if grid.height < 2:
        return

    above_blank = grid.glyphs[:-1] == BLANK
    above_bright = grid.bright[:-1].copy()
    above_run = grid.run[:-1].copy()

    glyphs = grid.glyphs[1:]
    bright = grid.bright[1:]
    run = grid.run[1:]

    active = run > 0
    falls_blank = ~active & above_blank
    falls_char = ~active & ~above_blank

    run[active] -= 1
    bright[active] = False

    # Brightness is left untouched here; it is meaningless for a space.
    glyphs[falls_blank] = BLANK

    count = int(np.count_nonzero(falls_char))
    if count:
        glyphs[falls_char] = random_glyphs(rng, count)
        bright[falls_char] = above_bright[falls_char]
        run[falls_char] = above_run[falls_char]


def advance_top_row(
    grid: Grid, rng: np.random.Generator, *, spawn_odds: int = SPAWN_ODDS
) -> None:
    """Decide the fate of each column's top cell.

    A running streak head keeps counting down.  An idle cell starts a new
    streak with probability ``1 / spawn_odds`` and otherwise is cleared to a
    space flagged bright.
    """

    glyphs = grid.glyphs[0]
    bright = grid.bright[0]
    run = grid.run[0]

    active = run > 0
    spawn = ~active & (rng.integers(spawn_odds, size=grid.width) < 1)
    idle = ~active & ~spawn

    run[active] -= 1
    bright[active] = False

    count = int(np.count_nonzero(spawn))
    if count:
        glyphs[spawn] = random_glyphs(rng, count)
        bright[spawn] = rng.integers(2, size=count) < 1
        run[spawn] = rng.integers(MIN_RUN, MAX_RUN + 1, size=count)

    glyphs[idle] = BLANK
    bright[idle] = True


def advance(grid: Grid, rng: np.random.Generator) -> None:
    """Advance ``grid`` by one frame in place."""

    advance_body(grid, rng)
    advance_top_row(grid, rng)


def start_run(
    grid: Grid,
    col: int,
    rng: np.random.Generator,
    *,
    run: Optional[int] = None,
    bright: Optional[bool] = None,
) -> None:
    """Force a new streak at the top of ``col``.

    Values not supplied are drawn the same way a spontaneous spawn draws
    them.

    Raises:
        IndexError: If ``col`` is outside the grid.
        ValueError: If ``run`` is negative or too large for the grid.
    """

    if not 0 <= col < grid.width:
        raise IndexError("Column out of bounds")
    if run is None:
        run = int(rng.integers(MIN_RUN, MAX_RUN + 1))
    check_run(run)
    if bright is None:
        bright = bool(rng.integers(2) < 1)
    grid.glyphs[0, col] = random_glyph(rng)
    grid.bright[0, col] = bright
    grid.run[0, col] = run
