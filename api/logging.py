"""structlog setup shared by the API and the CLI."""

import logging
import sys
from typing import Any

import structlog

from api.config import get_settings

# Third-party loggers that are noisy below WARNING
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Logs go to stderr so CLI output on stdout (including --json) stays clean.
    Production renders JSON lines; every other environment renders for a console.

    Args:
        level: Overrides ``settings.log_level`` (the CLI passes WARNING or DEBUG)
    """
    settings = get_settings()
    log_level = logging.getLevelNamesMapping().get(
        (level or settings.log_level).upper(), logging.INFO
    )

    renderer: Any
    if settings.is_production:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
