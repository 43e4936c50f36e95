"""Logging setup for resume-insight.

Modules log through ``logging.getLogger(__name__)``; everything below the
``resume_insight`` namespace reaches the single console handler installed
here. Log records go to stderr because stdout carries the CLI's results.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "resume_insight"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "resume_insight.console"


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _console_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def configure_logging(
    level: str | int | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Install the console handler on the package logger and set its level.

    Repeated calls only change the level. Passing ``stream`` swaps the
    handler for one writing to that stream.

    Args:
        level: Level name or number; INFO when omitted.
        stream: Destination for log records; stderr when omitted.

    Returns:
        The ``resume_insight`` logger.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    log_level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    handler = _console_handler(logger)
    if handler is None or stream is not None:
        if handler is not None:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    handler.setLevel(log_level)
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Detach every handler and hand records back to the root logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
