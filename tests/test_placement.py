from __future__ import annotations

import pytest

from termtris.board import Board
from termtris.tetromino import Tetromino, TetrominoType, rotation_period
from termtris.utils import can_place


POSES = [
    (kind, rotation)
    for kind in TetrominoType
    for rotation in range(rotation_period(kind))
]


def _piece_with_cell_at(kind, rotation, target_x, target_y) -> Tetromino:
    """Return a piece whose first block lands on ``(target_x, target_y)``."""

    probe = Tetromino(kind, rotation=rotation)
    dx, dy = probe.blocks()[0]
    return Tetromino(kind, x=target_x - dx, y=target_y - dy, rotation=rotation)


@pytest.mark.parametrize("kind, rotation", POSES)
def test_rejects_cells_left_of_board(kind, rotation) -> None:
    piece = _piece_with_cell_at(kind, rotation, -1, 10)
    assert not can_place(Board(), piece)


@pytest.mark.parametrize("kind, rotation", POSES)
def test_rejects_cells_right_of_board(kind, rotation) -> None:
    board = Board()
    piece = _piece_with_cell_at(kind, rotation, board.width, 10)
    assert not can_place(board, piece)


@pytest.mark.parametrize("kind, rotation", POSES)
def test_rejects_cells_below_board(kind, rotation) -> None:
    board = Board()
    piece = _piece_with_cell_at(kind, rotation, 4, board.height)
    assert not can_place(board, piece)


@pytest.mark.parametrize("kind, rotation", POSES)
def test_rejects_overlap_with_filled_cell(kind, rotation) -> None:
    board = Board()
    piece = Tetromino(kind, x=3, y=8, rotation=rotation)
    assert can_place(board, piece)
    board.lock([piece.blocks()[-1]], 1)
    assert not can_place(board, piece)


@pytest.mark.parametrize("kind, rotation", POSES)
def test_cells_above_top_row_are_unobstructed(kind, rotation) -> None:
    board = Board()
    # Fill the whole top row; blocks above it must not be checked against it.
    board.lock([(x, 0) for x in range(board.width)], 1)
    piece = Tetromino(kind, x=3, y=-4, rotation=rotation)
    assert all(y < 0 for _, y in piece.blocks())
    assert can_place(board, piece)


def test_piece_flush_with_walls_and_floor_is_valid() -> None:
    board = Board()
    # Vertical I occupies column x + 2, rows y..y + 3.
    assert can_place(board, Tetromino(TetrominoType.I, x=-2, y=16, rotation=1))
    assert can_place(board, Tetromino(TetrominoType.I, x=7, y=16, rotation=1))
    assert not can_place(board, Tetromino(TetrominoType.I, x=7, y=17, rotation=1))
