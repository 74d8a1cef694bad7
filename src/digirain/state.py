"""High level container for a running animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .engine import advance
from .grid import Grid


@dataclass
class RainState:
    """Mutable state for a rain session.

    The grid is allocated once and mutated in place by :meth:`step`; the
    random generator is owned here so a seeded session replays identically.
    """

    grid: Grid = field(default_factory=Grid)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    frames: int = 0

    @classmethod
    def create(
        cls,
        *,
        height: Optional[int] = None,
        width: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> "RainState":
        """Build a state with an optional custom grid size and seed."""

        kwargs = {}
        if height is not None:
            kwargs["height"] = height
        if width is not None:
            kwargs["width"] = width
        return cls(grid=Grid(**kwargs), rng=np.random.default_rng(seed))

    def step(self) -> None:
        """Advance the animation by one frame."""

        advance(self.grid, self.rng)
        self.frames += 1

    def reset(self, *, seed: Optional[int] = None) -> None:
        """Blank the grid and restart the frame counter.

        If ``seed`` is given the generator is replaced with a freshly seeded
        one.
        """

        self.grid.initialize()
        self.frames = 0
        if seed is not None:
            self.rng = np.random.default_rng(seed)
