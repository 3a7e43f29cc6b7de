"""High level game state container.

``GameState`` owns the board and the falling piece and is the only thing that
mutates them.  Each command builds a candidate piece, validates it against the
board and either commits it or discards it, so an invalid command is simply a
no-op.  A failed downward move is what locks a piece.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board, PIECE_COLORS
from .tetromino import Tetromino, TetrominoType
from .utils import can_place


LOGGER = logging.getLogger(__name__)

POINTS_PER_LINE = 100


class Command(str, Enum):
    """Discrete player commands understood by :meth:`GameState.apply`."""

    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE = "rotate"
    QUIT = "quit"


@dataclass
class GameState:
    """Mutable state for a Tetris game session.

    A new instance starts running with a freshly spawned piece unless
    ``active`` is supplied.  ``running`` only ever goes from ``True`` to
    ``False``: on :meth:`quit` or when a spawned piece has nowhere to go.

    ``rng`` picks the next piece kind; pass a seeded ``random.Random`` for a
    reproducible sequence.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    score: int = 0
    lines: int = 0
    pieces: int = 0
    running: bool = True
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        if self.active is None:
            self.spawn_tetromino()

    @classmethod
    def seeded(cls, seed: int) -> "GameState":
        """Return a new game whose piece sequence is fixed by ``seed``."""

        return cls(rng=random.Random(seed))

    def _random_type(self) -> TetrominoType:
        """Return a tetromino type drawn uniformly from the seven kinds."""

        return self.rng.choice(list(TetrominoType))

    def spawn_tetromino(self) -> Tetromino:
        """Spawn and return a new active tetromino.

        The piece appears at the top centre of the board with rotation ``0``.
        If it overlaps settled cells the game is over and nothing else
        changes.
        """

        piece = Tetromino.spawn(self._random_type(), self.board.width)
        self.active = piece
        LOGGER.debug("Spawned %s at (%d, %d)", piece.kind.value, piece.x, piece.y)
        if not can_place(self.board, piece):
            LOGGER.info("Top-out: no room for %s. Final score %d", piece.kind.value, self.score)
            self.running = False
        return piece

    def _commit(self, candidate: Tetromino) -> bool:
        if can_place(self.board, candidate):
            self.active = candidate
            return True
        return False

    def move_horizontal(self, delta: int) -> bool:
        """Shift the active piece one column left (``-1``) or right (``+1``).

        Returns ``True`` if the piece moved.
        """

        if delta not in (-1, 1):
            raise ValueError(f"Horizontal move must be -1 or +1, got {delta}")
        if not self.running or self.active is None:
            return False
        return self._commit(self.active.moved(delta, 0))

    def soft_drop(self) -> bool:
        """Move the active piece down one row, locking it if it cannot move.

        Returns ``True`` if the piece descended and ``False`` if it was locked
        (or the game is no longer running).
        """

        if not self.running or self.active is None:
            return False
        if self._commit(self.active.moved(0, 1)):
            return True
        self._lock_active()
        return False

    def rotate(self) -> bool:
        """Advance the rotation counter, reverting if the new pose does not fit."""

        if not self.running or self.active is None:
            return False
        return self._commit(self.active.rotated())

    def quit(self) -> None:
        if self.running:
            LOGGER.info("Quit requested. Final score %d", self.score)
        self.running = False

    def _lock_active(self) -> None:
        """Lock the active piece, clear rows and spawn the next piece."""

        piece = self.active
        assert piece is not None
        self.board.lock(piece.blocks(), PIECE_COLORS[piece.kind])
        self.pieces += 1
        LOGGER.debug("Locked %s at (%d, %d)", piece.kind.value, piece.x, piece.y)

        cleared = self.board.clear_full_lines()
        if cleared:
            self.lines += cleared
            self.score += POINTS_PER_LINE * cleared
            LOGGER.info("Cleared %d row(s). Score: %d", cleared, self.score)

        self.spawn_tetromino()

    def apply(self, command: Command) -> None:
        """Apply a single player command."""

        if command is Command.LEFT:
            self.move_horizontal(-1)
        elif command is Command.RIGHT:
            self.move_horizontal(1)
        elif command is Command.DOWN:
            self.soft_drop()
        elif command is Command.ROTATE:
            self.rotate()
        elif command is Command.QUIT:
            self.quit()
        else:
            raise ValueError(f"Unknown command: {command!r}")

    def step(self, gravity: bool = False, command: Optional[Command] = None) -> bool:
        """Advance one loop iteration and return whether the game is running.

        Gravity is applied first when due, then the player's command, if any.
        """

        if gravity:
            self.soft_drop()
        if command is not None:
            self.apply(command)
        return self.running
