from __future__ import annotations

import curses
import logging

from helpers import ScriptedRandom
from termtris import __main__ as entry
from termtris.game_state import GameState
from termtris.tetromino import TetrominoType


def test_main_prints_final_score(monkeypatch, capsys) -> None:
    state = GameState(rng=ScriptedRandom([TetrominoType.I]))
    state.score = 200
    state.lines = 2
    state.quit()
    monkeypatch.setattr(curses, "wrapper", lambda func: state)

    assert entry.main() == 0
    assert "Score: 200" in capsys.readouterr().out


def test_terminal_failure_is_fatal(monkeypatch, caplog) -> None:
    def no_terminal(_func):
        raise curses.error("setupterm: could not find terminal")

    monkeypatch.setattr(curses, "wrapper", no_terminal)
    with caplog.at_level(logging.ERROR, logger="termtris"):
        assert entry.main() == 1
    assert "Terminal I/O failed" in caplog.text


def test_crash_in_loop_is_logged(monkeypatch, caplog) -> None:
    def boom(_func):
        raise RuntimeError("boom")

    monkeypatch.setattr(curses, "wrapper", boom)
    with caplog.at_level(logging.ERROR, logger="termtris"):
        assert entry.main() == 1
    assert "Game crashed" in caplog.text


def test_ctrl_c_exits_quietly(monkeypatch) -> None:
    def interrupted(_func):
        raise KeyboardInterrupt

    monkeypatch.setattr(curses, "wrapper", interrupted)
    assert entry.main() == 130
