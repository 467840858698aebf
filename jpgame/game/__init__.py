from jpgame.game.choices import ChoiceList
from jpgame.game.errors import DictionaryUnavailableError, EmptyListError, QuizError
from jpgame.game.options import AnswerText, FixedLabel, Option, option_label
from jpgame.game.run_loop import run_loop
from jpgame.game.screen import Screen
from jpgame.game.types import (
    AppState,
    KeyEvent,
    QuestionProvider,
    QuestionRecord,
    ScreenSnapshot,
)

__all__ = [
    "AnswerText",
    "AppState",
    "ChoiceList",
    "DictionaryUnavailableError",
    "EmptyListError",
    "FixedLabel",
    "KeyEvent",
    "Option",
    "QuestionProvider",
    "QuestionRecord",
    "QuizError",
    "Screen",
    "ScreenSnapshot",
    "option_label",
    "run_loop",
]
