"""Shared fakes for the engine and loop tests."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from termtris.tetromino import TetrominoType


class ScriptedRandom(random.Random):
    """Random source that hands out a fixed, repeating sequence of kinds."""

    def __init__(self, kinds: Iterable[TetrominoType]) -> None:
        super().__init__(0)
        self.kinds = list(kinds)
        self.calls = 0

    def choice(self, seq):
        kind = self.kinds[self.calls % len(self.kinds)]
        self.calls += 1
        assert kind in seq
        return kind


class FakeClock:
    def __init__(self, step: float = 0.0) -> None:
        self.current = 0.0
        self.step = step

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        value = self.current
        self.current += self.step
        return value


class ScriptedInput:
    def __init__(self, keys: Iterable[Optional[int]] = ()) -> None:
        self.keys = list(keys)
        self.timeouts: List[int] = []

    def poll(self, timeout_ms: int) -> Optional[int]:
        self.timeouts.append(timeout_ms)
        if self.keys:
            return self.keys.pop(0)
        return None


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames: List[tuple] = []

    def draw(self, state) -> None:
        self.frames.append((state.running, state.score, list(state.active.blocks())))
