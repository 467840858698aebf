from __future__ import annotations

import curses
import random
import sys

from jpgame.core.config import Settings, get_settings
from jpgame.core.logging import configure_logging
from jpgame.dictionary.provider import JsonFileQuestionProvider
from jpgame.game.errors import DictionaryUnavailableError
from jpgame.game.run_loop import run_loop
from jpgame.game.screen import Screen
from jpgame.tui.input import curses_key_events
from jpgame.tui.renderer import CursesRenderer

EXIT_OK = 0
EXIT_DICTIONARY_UNAVAILABLE = 1
EXIT_LOG_UNAVAILABLE = 2
EXIT_INTERRUPTED = 130


def create_screen(settings: Settings, *, rng: random.Random | None = None) -> Screen:
    provider = JsonFileQuestionProvider(settings.dictionary_path)
    return Screen(provider, rng=rng, title=settings.title)


def _play(window: curses.window, screen: Screen) -> int:
    return run_loop(screen, curses_key_events(window), CursesRenderer(window))


def run() -> int:
    settings = get_settings()
    try:
        configure_logging(settings.log_level, settings.log_file)
    except OSError as exc:
        print(  # noqa: T201
            f"jpgame: cannot open log file {settings.log_file}: {exc.strerror} "
            "(set JPGAME_LOG_FILE to a writable path, or to an empty value for stderr)",
            file=sys.stderr,
        )
        return EXIT_LOG_UNAVAILABLE

    screen = create_screen(settings)
    try:
        score = curses.wrapper(_play, screen)
    except DictionaryUnavailableError as exc:
        # Already logged by the provider and the run loop.
        print(  # noqa: T201
            f"jpgame: {exc} (set JPGAME_DICTIONARY_PATH to a dictionary file)",
            file=sys.stderr,
        )
        return EXIT_DICTIONARY_UNAVAILABLE
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    print(f"Final score: {score}")  # noqa: T201
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(run())
