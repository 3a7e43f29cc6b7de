"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import TetrominoType


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

EMPTY = 0

Grid = NDArray[np.uint8]

# Colour tag stored in the grid for each locked piece kind.  Any non-zero value
# marks a filled cell; the value itself only selects the display colour.
PIECE_COLORS = {t: i + 1 for i, t in enumerate(TetrominoType)}


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


class Board:
    """Grid of settled cells, row 0 at the top.

    Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row.  The
    grid always holds exactly ``height`` rows of ``width`` cells.
    """

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> int:
        """Return the colour tag at ``(x, y)``; ``EMPTY`` for an empty cell.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            return int(self.grid[y, x])
        raise IndexError("Cell out of bounds")

    def is_empty(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is empty.

        Range checking is the caller's job.  Out-of-range coordinates raise
        ``IndexError`` rather than wrapping around the array.
        """

        return self.cell(x, y) == EMPTY

    def lock(self, cells: Iterable[Tuple[int, int]], color: int) -> None:
        """Fill ``cells`` with ``color``.

        Cells outside the board are dropped silently.
        """

        if color == EMPTY:
            raise ValueError("Cannot lock cells with the empty colour")
        value = np.uint8(color)
        for x, y in cells:
            if self.in_bounds(x, y):
                self.grid[y, x] = value

    def clear_full_lines(self) -> int:
        """Clear completed rows and return how many were removed.

        Remaining rows keep their relative order and empty rows are inserted at
        the top so the board height never changes.
        """

        full_rows = np.all(self.grid != EMPTY, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
        return cleared

    def filled_rows(self) -> int:
        """Return the number of rows containing at least one filled cell."""

        return int(np.count_nonzero(np.any(self.grid != EMPTY, axis=1)))

    def rows(self) -> list[list[int]]:
        """Return the grid as nested lists of colour tags, top row first."""

        return self.grid.tolist()
