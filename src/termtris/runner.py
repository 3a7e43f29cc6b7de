"""Fixed-tick game loop.

The runner merges timed gravity with keyboard input.  It is independent of the
terminal: any object with a ``poll(timeout_ms)`` method can supply keys and
any object with a ``draw(state)`` method can paint frames, which keeps the
loop testable with a fake clock and scripted input.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .controls import command_for_key
from .game_state import GameState


LOGGER = logging.getLogger(__name__)

# Milliseconds between automatic downward moves
GRAVITY_MS = 500
# Upper bound on how long a frame waits for a key
POLL_MS = 10
# Pause at the end of every frame to cap the frame rate
FRAME_MS = 50


class InputSource(Protocol):
    def poll(self, timeout_ms: int) -> Optional[int]:
        """Return one pending key code, or ``None`` after ``timeout_ms``."""


class Renderer(Protocol):
    def draw(self, state: GameState) -> None:
        """Paint a full frame for ``state``."""


@dataclass
class Runner:
    """Drive a :class:`GameState` once per frame until it stops."""

    state: GameState
    input_source: InputSource
    renderer: Renderer
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], None] = time.sleep
    last_drop: Optional[float] = None
    frames: int = 0

    def _gravity_due(self) -> bool:
        now = self.clock()
        if self.last_drop is None:
            self.last_drop = now
        if (now - self.last_drop) * 1000.0 >= GRAVITY_MS:
            self.last_drop = now
            return True
        return False

    def run_frame(self) -> bool:
        """Run a single loop iteration and return whether the game continues.

        Gravity is checked first, then at most one key is read and applied,
        then the frame is drawn and the loop pauses for ``FRAME_MS``.
        """

        gravity = self._gravity_due()
        key = self.input_source.poll(POLL_MS)
        self.state.step(gravity=gravity, command=command_for_key(key))
        self.renderer.draw(self.state)
        self.frames += 1
        self.sleep(FRAME_MS / 1000.0)
        return self.state.running

    def run(self) -> GameState:
        """Loop until the player quits or the board tops out."""

        LOGGER.info("Game started")
        self.last_drop = self.clock()
        while self.state.running:
            self.run_frame()
        LOGGER.info(
            "Game stopped after %d frame(s). Score: %d, lines: %d",
            self.frames,
            self.state.score,
            self.state.lines,
        )
        return self.state
