"""Curses front-end for the Tetris engine.

``play`` is meant to be handed to :func:`curses.wrapper`, which switches the
terminal into full-screen cbreak mode with echo off and puts it back on every
exit path, including exceptions raised from inside the game loop.
"""

from __future__ import annotations

import curses
import logging
from typing import Dict, Optional

from .board import Board, EMPTY, PIECE_COLORS
from .game_state import GameState
from .runner import Runner
from .tetromino import TetrominoType
from .utils import ACTIVE_CELL, render_grid


LOGGER = logging.getLogger(__name__)

# Each board cell is two characters wide so blocks look square.
CELL = "  "
FRAME_ROWS = Board.height + 2
FRAME_COLS = Board.width * len(CELL) + 2
PANEL_GAP = 3

SHAPE_COLORS = {
    TetrominoType.I: curses.COLOR_CYAN,
    TetrominoType.O: curses.COLOR_YELLOW,
    TetrominoType.T: curses.COLOR_MAGENTA,
    TetrominoType.S: curses.COLOR_GREEN,
    TetrominoType.Z: curses.COLOR_RED,
    TetrominoType.L: curses.COLOR_WHITE,
    TetrominoType.J: curses.COLOR_BLUE,
}
# Fixed colour of the falling piece
HIGHLIGHT_COLOR = curses.COLOR_BLUE

# Mapping from the colour tag stored in a rendered grid to a curses colour
CELL_COLORS = {value: SHAPE_COLORS[shape] for shape, value in PIECE_COLORS.items()}
CELL_COLORS[ACTIVE_CELL] = HIGHLIGHT_COLOR

LEGEND = (
    "Left/Right  move",
    "Up          rotate",
    "Down        drop",
    "q           quit",
)


class CursesInput:
    """Non-blocking keyboard source backed by a curses window."""

    def __init__(self, window) -> None:
        self.window = window
        self.window.keypad(True)

    def poll(self, timeout_ms: int) -> Optional[int]:
        self.window.timeout(timeout_ms)
        key = self.window.getch()
        if key == -1:
            return None
        return key


class CursesRenderer:
    """Paint the board, the falling piece and a score panel every frame."""

    def __init__(self, window) -> None:
        self.window = window
        self._attrs: Dict[int, int] = {}
        self._init_colors()

    def _init_colors(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            LOGGER.debug("Terminal cannot hide the cursor")

        if not curses.has_colors():
            self._attrs = {tag: curses.A_REVERSE for tag in CELL_COLORS}
            return
        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            LOGGER.debug("Terminal has no default colours")
        for tag, color in CELL_COLORS.items():
            curses.init_pair(tag, color, color)
            self._attrs[tag] = curses.color_pair(tag)

    def attr_for(self, tag: int) -> int:
        """Return the curses attribute used to paint a cell holding ``tag``."""

        if tag == EMPTY:
            return curses.A_NORMAL
        return self._attrs.get(tag, curses.A_REVERSE)

    def _draw_board(self, state: GameState) -> None:
        grid = render_grid(state.board, state.active)
        inner = len(CELL) * state.board.width
        self.window.addstr(0, 0, "╔" + "═" * inner + "╗")
        for y, row in enumerate(grid, start=1):
            self.window.addstr(y, 0, "║")
            for x, tag in enumerate(row):
                self.window.addstr(y, 1 + x * len(CELL), CELL, self.attr_for(tag))
            self.window.addstr(y, 1 + inner, "║")
        self.window.addstr(len(grid) + 1, 0, "╚" + "═" * inner + "╝")

    def _draw_panel(self, state: GameState, max_cols: int) -> None:
        left = FRAME_COLS + PANEL_GAP
        room = max_cols - left - 1
        if room <= 0:
            return
        lines = [f"Score: {state.score}", f"Lines: {state.lines}", ""]
        lines.extend(LEGEND)
        if not state.running:
            lines.extend(["", "GAME OVER"])
        for offset, text in enumerate(lines, start=1):
            self.window.addstr(offset, left, text[:room])

    def draw(self, state: GameState) -> None:
        self.window.erase()
        max_rows, max_cols = self.window.getmaxyx()
        if max_rows < FRAME_ROWS or max_cols <= FRAME_COLS:
            notice = f"Enlarge the terminal to {FRAME_COLS + 1}x{FRAME_ROWS}"
            self.window.addstr(0, 0, notice[: max(0, max_cols - 1)])
        else:
            self._draw_board(state)
            self._draw_panel(state, max_cols)
        self.window.refresh()


def play(stdscr, state: Optional[GameState] = None) -> GameState:
    """Run a full game inside the curses screen ``stdscr``.

    The game state is only created once the terminal has been set up.
    """

    renderer = CursesRenderer(stdscr)
    keyboard = CursesInput(stdscr)
    if state is None:
        state = GameState()
    return Runner(state, keyboard, renderer).run()
