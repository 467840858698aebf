from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from jpgame.game.options import Option


class AppState(str, Enum):
    MAIN_MENU = "MAIN_MENU"
    PLAYING = "PLAYING"
    CONFIRM_EXIT = "CONFIRM_EXIT"
    TERMINATED = "TERMINATED"


class KeyEvent(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    CONFIRM = "CONFIRM"
    CANCEL = "CANCEL"
    IGNORED = "IGNORED"


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    prompt: str
    options: tuple[str, ...]
    correct_index: int


@dataclass(frozen=True, slots=True)
class ScreenSnapshot:
    state: AppState
    prompt: str
    options: tuple[Option, ...]
    selected: int
    score: int


class QuestionProvider(Protocol):
    def load_records(self) -> Sequence[QuestionRecord]:
        """Returns every available record or raises DictionaryUnavailableError."""
        ...
