from __future__ import annotations

import curses
from typing import Iterator

from jpgame.game.types import KeyEvent
from jpgame.tui.keys import normalize_key


def curses_key_events(window: curses.window) -> Iterator[KeyEvent]:
    # curses reports key presses only; there are no release events to filter.
    window.keypad(True)
    while True:
        code = window.getch()
        if code == -1:
            continue
        yield normalize_key(code)
