from __future__ import annotations

from typing import Callable, Iterable

import structlog

from jpgame.game.errors import QuizError
from jpgame.game.screen import Screen
from jpgame.game.types import KeyEvent, ScreenSnapshot

logger = structlog.get_logger("jpgame.game.run_loop")

RenderFn = Callable[[ScreenSnapshot], None]


def run_loop(screen: Screen, events: Iterable[KeyEvent], render: RenderFn) -> int:
    """Renders, waits for the next event and applies it until the screen terminates.

    Returns the final score. Errors raised by the screen are logged and re-raised
    so the caller decides how the process exits.
    """

    render(screen.snapshot())
    for event in events:
        try:
            screen.handle(event)
        except QuizError as exc:
            logger.error(
                "run_loop_aborted",
                state=screen.state.value,
                event=event.value,
                error_type=type(exc).__name__,
                exc_info=exc,
            )
            raise
        if screen.is_terminated:
            break
        render(screen.snapshot())

    logger.info("session_finished", score=screen.score, terminated=screen.is_terminated)
    return screen.score
