from __future__ import annotations

import random
from dataclasses import dataclass

import structlog

from jpgame.game.choices import ChoiceList
from jpgame.game.errors import DictionaryUnavailableError
from jpgame.game.options import (
    CONFIRM_EXIT_OPTIONS,
    MAIN_MENU_OPTIONS,
    FixedLabel,
    answer_options,
)
from jpgame.game.types import (
    AppState,
    KeyEvent,
    QuestionProvider,
    QuestionRecord,
    ScreenSnapshot,
)

logger = structlog.get_logger("jpgame.game.screen")

DEFAULT_TITLE = "JPGAME"
CONFIRM_EXIT_PROMPT = "Quit the game?"


@dataclass(slots=True)
class _SavedView:
    state: AppState
    prompt: str
    choices: ChoiceList


class Screen:
    """Quiz state machine: menu, question loop and exit confirmation.

    Every key event goes through `handle`. The only errors that escape are
    `DictionaryUnavailableError` from question loading and `EmptyListError`
    if the choice list is ever read while empty.
    """

    def __init__(
        self,
        provider: QuestionProvider,
        *,
        rng: random.Random | None = None,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self._provider = provider
        self._rng = rng or random.Random()
        self.state = AppState.MAIN_MENU
        self.prompt = title
        self.choices = ChoiceList(MAIN_MENU_OPTIONS)
        self.score = 0
        self.correct_index = 0
        self._saved: _SavedView | None = None

    @property
    def is_terminated(self) -> bool:
        return self.state is AppState.TERMINATED

    def snapshot(self) -> ScreenSnapshot:
        return ScreenSnapshot(
            state=self.state,
            prompt=self.prompt,
            options=self.choices.options,
            selected=self.choices.selected,
            score=self.score,
        )

    def handle(self, event: KeyEvent) -> None:
        if self.state is AppState.TERMINATED or event is KeyEvent.IGNORED:
            return

        if event is KeyEvent.UP:
            self.choices.move_up()
        elif event is KeyEvent.DOWN:
            self.choices.move_down()
        elif event is KeyEvent.CANCEL:
            self._on_cancel()
        elif event is KeyEvent.CONFIRM:
            self._on_confirm()

    def _on_cancel(self) -> None:
        if self.state is AppState.CONFIRM_EXIT:
            self._restore_saved_view()
        else:
            self._open_exit_confirmation()

    def _on_confirm(self) -> None:
        if self.state is AppState.MAIN_MENU:
            if self.choices.current() is FixedLabel.START:
                self._start_game()
            else:
                self._open_exit_confirmation()
        elif self.state is AppState.PLAYING:
            self._answer()
        elif self.state is AppState.CONFIRM_EXIT:
            if self.choices.current() is FixedLabel.YES:
                self._set_state(AppState.TERMINATED)
            else:
                self._restore_saved_view()

    def _start_game(self) -> None:
        self._load_question()
        self.score = 0
        self._set_state(AppState.PLAYING)

    def _answer(self) -> None:
        is_correct = self.choices.selected == self.correct_index
        if is_correct:
            self.score += 1
        logger.info(
            "answer_checked",
            selected=self.choices.selected,
            correct_index=self.correct_index,
            is_correct=is_correct,
            score=self.score,
        )
        self._load_question()

    def _load_question(self) -> QuestionRecord:
        """Draws one record uniformly at random and makes it the active question.

        Nothing on the screen changes when the provider fails.
        """
        records = self._provider.load_records()
        if not records:
            raise DictionaryUnavailableError("dictionary contains no records")

        record = self._rng.choice(records)
        if not record.options or not 0 <= record.correct_index < len(record.options):
            raise DictionaryUnavailableError(f"malformed record for prompt {record.prompt!r}")

        self.prompt = record.prompt
        self.correct_index = record.correct_index
        self.choices.replace(answer_options(record.options))
        logger.debug("question_loaded", prompt=record.prompt, options_total=len(record.options))
        return record

    def _open_exit_confirmation(self) -> None:
        self._saved = _SavedView(state=self.state, prompt=self.prompt, choices=self.choices)
        self.prompt = CONFIRM_EXIT_PROMPT
        self.choices = ChoiceList(CONFIRM_EXIT_OPTIONS)
        self._set_state(AppState.CONFIRM_EXIT)

    def _restore_saved_view(self) -> None:
        saved = self._saved
        if saved is None:
            return
        self._saved = None
        self.prompt = saved.prompt
        self.choices = saved.choices
        self._set_state(saved.state)

    def _set_state(self, state: AppState) -> None:
        if state is self.state:
            return
        logger.debug("state_changed", from_state=self.state.value, to_state=state.value)
        self.state = state
