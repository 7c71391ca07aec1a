"""
structlog setup for keycalc. Logs go to stderr so results on stdout stay clean.
"""

import logging
import sys

import structlog

from keycalc.config import settings


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog with a level filter and renderer. Idempotent."""
    level_name = (level or settings.log_level).upper()
    level_value = getattr(logging, level_name, logging.WARNING)

    if (fmt or settings.log_format) == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
