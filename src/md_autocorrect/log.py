"""Structured logging setup for md-autocorrect."""

from __future__ import annotations
import logging
import sys

import structlog

_DEFAULT_LEVEL = "warning"


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for command-line use.

    Log lines go to stderr; stdout is reserved for document output.
    """
    log_level = (level or _DEFAULT_LEVEL).upper()
    numeric_level = logging.getLevelName(log_level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )
