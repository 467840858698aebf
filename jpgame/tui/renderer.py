from __future__ import annotations

import curses
import unicodedata
from dataclasses import dataclass

from jpgame.game.options import option_label
from jpgame.game.types import AppState, ScreenSnapshot

PROMPT_AREA_RATIO = 0.4

STATE_TITLES: dict[AppState, str] = {
    AppState.MAIN_MENU: "Menu",
    AppState.PLAYING: "Game",
    AppState.CONFIRM_EXIT: "Exit",
    AppState.TERMINATED: "Bye",
}


@dataclass(frozen=True, slots=True)
class FrameLine:
    y: int
    x: int
    text: str
    highlighted: bool = False
    bold: bool = False


def format_option_line(index: int, label: str, *, selected: bool) -> str:
    if selected:
        return f"{index + 1}. [{label}]"
    return f"{index + 1}.  {label} "


def display_width(text: str) -> int:
    """Counts wide (CJK) characters as two terminal cells."""
    return sum(2 if unicodedata.east_asian_width(char) in ("W", "F") else 1 for char in text)


def _centered_x(text: str, width: int) -> int:
    return max(0, (width - display_width(text)) // 2)


def build_frame(snapshot: ScreenSnapshot, *, height: int, width: int) -> list[FrameLine]:
    """Lays out a snapshot: header row, prompt in the top 40%, options below."""

    lines: list[FrameLine] = []
    header = f"{STATE_TITLES[snapshot.state]}  |  Score: {snapshot.score}"
    lines.append(FrameLine(y=0, x=0, text=header, bold=True))

    prompt_area = max(2, int(height * PROMPT_AREA_RATIO))
    prompt_y = min(height - 1, max(1, prompt_area // 2))
    lines.append(FrameLine(y=prompt_y, x=_centered_x(snapshot.prompt, width), text=snapshot.prompt, bold=True))

    option_lines = [
        format_option_line(index, option_label(option), selected=index == snapshot.selected)
        for index, option in enumerate(snapshot.options)
    ]
    block_width = max((display_width(text) for text in option_lines), default=0)
    block_x = max(0, (width - block_width) // 2)
    for offset, text in enumerate(option_lines):
        y = prompt_area + offset
        if y >= height:
            break
        lines.append(FrameLine(y=y, x=block_x, text=text, highlighted=offset == snapshot.selected))
    return lines


class CursesRenderer:
    def __init__(self, window: curses.window) -> None:
        self.window = window
        curses.curs_set(0)

    def __call__(self, snapshot: ScreenSnapshot) -> None:
        self.draw(snapshot)

    def draw(self, snapshot: ScreenSnapshot) -> None:
        self.window.erase()
        height, width = self.window.getmaxyx()
        for line in build_frame(snapshot, height=height, width=width):
            attrs = curses.A_NORMAL
            if line.bold:
                attrs |= curses.A_BOLD
            if line.highlighted:
                attrs |= curses.A_REVERSE
            try:
                self.window.addnstr(line.y, line.x, line.text, max(0, width - line.x - 1), attrs)
            except curses.error:
                # Terminal too small for this line; skip it.
                continue
        self.window.refresh()
