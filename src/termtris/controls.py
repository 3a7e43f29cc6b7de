"""Keyboard mapping from decoded curses key codes to game commands."""

from __future__ import annotations

import curses
from typing import Dict, Optional

from .game_state import Command


QUIT_KEY = ord("q")

KEY_COMMANDS: Dict[int, Command] = {
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_UP: Command.ROTATE,
    QUIT_KEY: Command.QUIT,
}


def command_for_key(key: Optional[int]) -> Optional[Command]:
    """Return the command bound to ``key`` or ``None`` for anything else."""

    if key is None:
        return None
    return KEY_COMMANDS.get(key)
