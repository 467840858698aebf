from __future__ import annotations

import random

from jpgame.dictionary.provider import InMemoryQuestionProvider
from jpgame.game.errors import DictionaryUnavailableError
from jpgame.game.screen import Screen
from jpgame.game.types import KeyEvent, QuestionRecord

CAT_RECORD = QuestionRecord(prompt="猫", options=("cat", "dog", "bird"), correct_index=0)
DOG_RECORD = QuestionRecord(prompt="犬", options=("cat", "dog"), correct_index=1)


class FailingProvider:
    def __init__(self) -> None:
        self.calls = 0

    def load_records(self) -> list[QuestionRecord]:
        self.calls += 1
        raise DictionaryUnavailableError("dictionary missing")


class EmptyProvider:
    def load_records(self) -> list[QuestionRecord]:
        return []


def make_screen(*records: QuestionRecord, seed: int = 7) -> Screen:
    provider = InMemoryQuestionProvider(records or (CAT_RECORD,))
    return Screen(provider, rng=random.Random(seed))


def press(screen: Screen, *events: KeyEvent) -> None:
    for event in events:
        screen.handle(event)


class FailAfterProvider:
    """Serves records for the first `successes` requests, then fails."""

    def __init__(self, records: list[QuestionRecord], *, successes: int) -> None:
        self.records = records
        self.successes = successes
        self.calls = 0

    def load_records(self) -> list[QuestionRecord]:
        self.calls += 1
        if self.calls > self.successes:
            raise DictionaryUnavailableError("dictionary went away")
        return self.records
