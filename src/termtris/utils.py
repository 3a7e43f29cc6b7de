"""Utility helpers for the Tetris engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board, PIECE_COLORS
from .tetromino import Tetromino


# Reserved colour tag for the falling piece in rendered grids.  Board cells
# never hold it since locked pieces use their kind's tag.
ACTIVE_CELL = max(PIECE_COLORS.values()) + 1


def can_place(board: Board, tetromino: Tetromino) -> bool:
    """Return ``True`` if every block of ``tetromino`` may sit on ``board``.

    A block fails when it lies left of column 0, right of the last column,
    below the last row, or on a filled cell.  Blocks above the top row
    (``y < 0``) are accepted without consulting the grid so pieces can poke out
    of the top while spawning or rotating.
    """

    for x, y in tetromino.blocks():
        if x < 0 or x >= board.width or y >= board.height:
            return False
        if y >= 0 and not board.is_empty(x, y):
            return False
    return True


def render_grid(board: Board, active: Optional[Tetromino] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece).  Cells occupied by the active piece receive ``ACTIVE_CELL``;
    blocks above the top row are not drawn.
    """

    grid = board.rows()
    if active is not None:
        for x, y in active.blocks():
            if board.in_bounds(x, y):
                grid[y][x] = ACTIVE_CELL
    return grid
