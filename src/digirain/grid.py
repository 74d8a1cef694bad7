"""Grid representation for the rain field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray


# Maximum dimensions of the grid.  The terminal may be smaller; only the
# visible part is painted but the full grid is always updated.
MAX_WIDTH = 300
MAX_HEIGHT = 200

BLANK = " "

GlyphGrid = NDArray[np.str_]
FlagGrid = NDArray[np.bool_]
RunGrid = NDArray[np.int16]

# Largest run counter the grid can hold.
RUN_LIMIT = int(np.iinfo(np.int16).max)


@dataclass(frozen=True)
class Cell:
    """Snapshot of a single grid position."""

    glyph: str = BLANK
    bright: bool = False
    run: int = 0

    @classmethod
    def blank(cls) -> "Cell":
        return cls()

    @property
    def is_blank(self) -> bool:
        return self.glyph == BLANK


def check_run(run: int) -> None:
    """Raise ``ValueError`` unless ``run`` fits the grid's run counter."""

    if run < 0:
        raise ValueError("Run length cannot be negative")
    if run > RUN_LIMIT:
        raise ValueError(f"Run length cannot exceed {RUN_LIMIT}")


class Grid:
    """Fixed-capacity field of cells stored as three parallel arrays.

    ``glyphs`` holds the displayed characters, ``bright`` marks cells drawn at
    full brightness and ``run`` counts the frames a cell keeps its streak.
    """

    def __init__(self, height: int = MAX_HEIGHT, width: int = MAX_WIDTH) -> None:
        if height <= 0 or width <= 0:
            raise ValueError("Grid dimensions must be positive")
        self.height = height
        self.width = width
        self.glyphs: GlyphGrid = np.full((height, width), BLANK, dtype="<U1")
        self.bright: FlagGrid = np.zeros((height, width), dtype=bool)
        self.run: RunGrid = np.zeros((height, width), dtype=np.int16)

    def initialize(self) -> None:
        """Reset every cell to the blank default."""

        self.glyphs.fill(BLANK)
        self.bright.fill(False)
        self.run.fill(0)

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError("Cell out of bounds")

    def get_cell(self, row: int, col: int) -> Cell:
        """Safely return the cell at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        self._check(row, col)
        return Cell(
            glyph=str(self.glyphs[row, col]),
            bright=bool(self.bright[row, col]),
            run=int(self.run[row, col]),
        )

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        """Safely overwrite the cell at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
            ValueError: If the cell holds a run outside ``[0, RUN_LIMIT]`` or
                a glyph that is not exactly one character.
        """
        self._check(row, col)
        check_run(cell.run)
        if len(cell.glyph) != 1:
            raise ValueError("Glyph must be a single character")
        self.glyphs[row, col] = cell.glyph
        self.bright[row, col] = cell.bright
        self.run[row, col] = cell.run

    def is_blank(self, row: int, col: int) -> bool:
        """Return ``True`` if the glyph at ``(row, col)`` is a space."""

        self._check(row, col)
        return bool(self.glyphs[row, col] == BLANK)

    def visible_size(self, rows: int, cols: int) -> Tuple[int, int]:
        """Clamp a requested ``(rows, cols)`` rectangle to the grid.

        Both dimensions end up in ``[1, height]`` and ``[1, width]``, so a
        zero-sized terminal still paints a single cell.
        """

        return (
            min(max(rows, 1), self.height),
            min(max(cols, 1), self.width),
        )
