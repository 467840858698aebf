from __future__ import annotations

from typing import Iterable

from jpgame.game.errors import EmptyListError
from jpgame.game.options import Option


class ChoiceList:
    """Ordered options with a single highlighted index.

    Navigation saturates at both ends instead of wrapping. `replace` is the
    only operation that resets the highlight.
    """

    __slots__ = ("_options", "_selected")

    def __init__(self, options: Iterable[Option] = ()) -> None:
        self._options: tuple[Option, ...] = tuple(options)
        self._selected = 0

    @property
    def options(self) -> tuple[Option, ...]:
        return self._options

    @property
    def selected(self) -> int:
        return self._selected

    def __len__(self) -> int:
        return len(self._options)

    def move_up(self) -> None:
        if self._selected > 0:
            self._selected -= 1

    def move_down(self) -> None:
        if self._selected < len(self._options) - 1:
            self._selected += 1

    def current(self) -> Option:
        if not self._options:
            raise EmptyListError("choice list has no options")
        return self._options[self._selected]

    def replace(self, new_options: Iterable[Option]) -> None:
        self._options = tuple(new_options)
        self._selected = 0

    def __repr__(self) -> str:
        return f"ChoiceList(options={self._options!r}, selected={self._selected})"
