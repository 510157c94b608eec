"""Structured logging helpers."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    level: int | str = logging.INFO, *, json: bool = True, file: TextIO | None = None
) -> None:
    """Route dbstrings events through structlog.

    Events go to ``file``, standard error by default, so command output on
    standard out stays clean. ``resource_searched`` and the other cache
    events are emitted at debug level, so pass ``"DEBUG"`` to see every lookup.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    stream = file if file is not None else sys.stderr
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(stream)],
    )
    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger("dbstrings")

__all__ = ["configure_logging", "logger"]
