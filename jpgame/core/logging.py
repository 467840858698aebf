import logging
import sys

import structlog


def configure_logging(log_level: str = "INFO", log_file: str = "") -> None:
    """Routes structlog JSON lines to `log_file`, or to stderr when it is empty.

    Raises OSError when the log file cannot be opened.
    """
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    # curses owns stdout while the quiz runs, so the default target is a file.
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        format="%(message)s",
        handlers=[handler],
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
