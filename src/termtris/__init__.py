"""Terminal falling-block puzzle game."""

from .board import Board, HEIGHT, PIECE_COLORS, WIDTH
from .tetromino import Tetromino, TetrominoType, rotation_period, shape_blocks
from .game_state import Command, GameState
from .runner import Runner
from .utils import ACTIVE_CELL, can_place, render_grid

__all__ = [
    "ACTIVE_CELL",
    "Board",
    "Command",
    "GameState",
    "HEIGHT",
    "PIECE_COLORS",
    "Runner",
    "Tetromino",
    "TetrominoType",
    "WIDTH",
    "can_place",
    "render_grid",
    "rotation_period",
    "shape_blocks",
]
