"""Tetromino definitions and basic behaviour.

This module holds the shape catalog (the exact cell offsets of every piece in
each of its orientations) and the data structure representing the falling
piece.  Offsets are ``(dx, dy)`` pairs inside a small local frame anchored at
the piece's ``(x, y)`` origin; they are not centred, so the tables below are
the source of truth for collision and rendering alike.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

Offset = Tuple[int, int]
RotationState = FrozenSet[Offset]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    L = "L"
    J = "J"


def _state(*offsets: Offset) -> RotationState:
    return frozenset(offsets)


# Every orientation is listed explicitly; there is no rotation maths and no
# wall kick.  ``O`` has a single orientation so any rotation maps onto it.
TETROMINO_SHAPES: Dict[TetrominoType, List[RotationState]] = {
    TetrominoType.I: [
        _state((0, 1), (1, 1), (2, 1), (3, 1)),
        _state((2, 0), (2, 1), (2, 2), (2, 3)),
    ],
    TetrominoType.O: [
        _state((1, 0), (2, 0), (1, 1), (2, 1)),
    ],
    TetrominoType.T: [
        _state((1, 0), (0, 1), (1, 1), (2, 1)),
        _state((1, 0), (1, 1), (1, 2), (2, 1)),
        _state((0, 1), (1, 1), (2, 1), (1, 2)),
        _state((1, 0), (1, 1), (1, 2), (0, 1)),
    ],
    TetrominoType.S: [
        _state((1, 0), (2, 0), (0, 1), (1, 1)),
        _state((1, 0), (1, 1), (2, 1), (2, 2)),
    ],
    TetrominoType.Z: [
        _state((0, 0), (1, 0), (1, 1), (2, 1)),
        _state((2, 0), (1, 1), (2, 1), (1, 2)),
    ],
    TetrominoType.L: [
        _state((0, 0), (0, 1), (1, 1), (2, 1)),
        _state((1, 0), (1, 1), (1, 2), (2, 2)),
        _state((0, 1), (1, 1), (2, 1), (2, 2)),
        _state((1, 0), (1, 1), (1, 2), (0, 0)),
    ],
    TetrominoType.J: [
        _state((2, 0), (0, 1), (1, 1), (2, 1)),
        _state((1, 0), (1, 1), (1, 2), (2, 0)),
        _state((0, 1), (1, 1), (2, 1), (0, 2)),
        _state((1, 0), (1, 1), (1, 2), (0, 2)),
    ],
}


def rotation_period(shape: TetrominoType) -> int:
    """Return the number of distinct orientations of ``shape``."""

    return len(TETROMINO_SHAPES[shape])


def shape_blocks(shape: TetrominoType, rotation: int) -> RotationState:
    """Return the block offsets for ``shape`` at ``rotation``.

    Parameters
    ----------
    shape:
        The :class:`TetrominoType` to query.
    rotation:
        Rotation counter.  Only its residue modulo the shape's period matters,
        so any integer is accepted.
    """

    states = TETROMINO_SHAPES[shape]
    return states[rotation % len(states)]


@dataclass
class Tetromino:
    """Active falling piece in the game.

    ``rotation`` is a plain counter.  It is never reduced in place; the
    period is applied only when looking up the shape.
    """

    kind: TetrominoType
    x: int = 0
    y: int = 0
    rotation: int = 0

    @classmethod
    def spawn(cls, kind: TetrominoType, board_width: int) -> "Tetromino":
        """Return ``kind`` at the canonical spawn pose for a board."""

        return cls(kind, x=board_width // 2 - 1, y=0, rotation=0)

    def moved(self, dx: int, dy: int) -> "Tetromino":
        """Return a copy translated by ``dx`` columns and ``dy`` rows."""

        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, steps: int = 1) -> "Tetromino":
        return replace(self, rotation=self.rotation + steps)

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the absolute ``(x, y)`` coordinates of the piece's cells."""

        return [
            (self.x + dx, self.y + dy)
            for dx, dy in sorted(shape_blocks(self.kind, self.rotation))
        ]
