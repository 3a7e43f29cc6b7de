"""Terminal entry point for the Tetris engine.

Run with: `python -m termtris`

Controls are the arrow keys (Up rotates) and ``q`` to quit.  The terminal is
restored before anything is printed, whichever way the game ends.
"""

from __future__ import annotations

import curses
import locale
import logging
import sys

from .run_curses import play


LOGGER = logging.getLogger("termtris")


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    # Needed for the box-drawing border glyphs.
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        LOGGER.warning("Could not apply the user's locale; borders may render incorrectly")
    try:
        state = curses.wrapper(play)
    except KeyboardInterrupt:
        return 130
    except curses.error:
        LOGGER.exception("Terminal I/O failed")
        return 1
    except Exception:
        LOGGER.exception("Game crashed")
        return 1

    print(f"Game over. Score: {state.score} ({state.lines} line(s), {state.pieces} piece(s))")
    return 0


if __name__ == "__main__":
    sys.exit(main())
