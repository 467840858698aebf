from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class FixedLabel(str, Enum):
    START = "Start"
    EXIT = "Exit"
    YES = "Yes"
    NO = "No"


@dataclass(frozen=True, slots=True)
class AnswerText:
    text: str


Option = Union[FixedLabel, AnswerText]

MAIN_MENU_OPTIONS: tuple[Option, ...] = (FixedLabel.START, FixedLabel.EXIT)
CONFIRM_EXIT_OPTIONS: tuple[Option, ...] = (FixedLabel.YES, FixedLabel.NO)


def option_label(option: Option) -> str:
    if isinstance(option, FixedLabel):
        return option.value
    return option.text


def answer_options(texts: tuple[str, ...]) -> tuple[Option, ...]:
    return tuple(AnswerText(text) for text in texts)
