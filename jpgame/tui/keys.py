from __future__ import annotations

import curses

from jpgame.game.types import KeyEvent

ESCAPE = 27

KEY_BINDINGS: dict[int, KeyEvent] = {
    curses.KEY_UP: KeyEvent.UP,
    ord("k"): KeyEvent.UP,
    ord("w"): KeyEvent.UP,
    curses.KEY_DOWN: KeyEvent.DOWN,
    ord("j"): KeyEvent.DOWN,
    ord("s"): KeyEvent.DOWN,
    curses.KEY_ENTER: KeyEvent.CONFIRM,
    ord("\n"): KeyEvent.CONFIRM,
    ord("\r"): KeyEvent.CONFIRM,
    ord(" "): KeyEvent.CONFIRM,
    ESCAPE: KeyEvent.CANCEL,
    ord("q"): KeyEvent.CANCEL,
}


def normalize_key(code: int) -> KeyEvent:
    """Maps a curses key code to a key event; unbound keys become IGNORED."""

    return KEY_BINDINGS.get(code, KeyEvent.IGNORED)
