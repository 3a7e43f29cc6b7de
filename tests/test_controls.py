from __future__ import annotations

import curses

import pytest

from termtris.controls import QUIT_KEY, command_for_key
from termtris.game_state import Command


@pytest.mark.parametrize(
    "key, command",
    [
        (curses.KEY_LEFT, Command.LEFT),
        (curses.KEY_RIGHT, Command.RIGHT),
        (curses.KEY_DOWN, Command.DOWN),
        (curses.KEY_UP, Command.ROTATE),
        (ord("q"), Command.QUIT),
    ],
)
def test_bound_keys(key, command) -> None:
    assert command_for_key(key) is command


@pytest.mark.parametrize("key", [None, -1, ord("Q"), ord("a"), ord(" "), curses.KEY_RESIZE])
def test_everything_else_is_ignored(key) -> None:
    assert command_for_key(key) is None


def test_quit_key_is_lowercase_q() -> None:
    assert QUIT_KEY == ord("q")
