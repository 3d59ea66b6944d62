"""Logging configuration for the dairyops command line."""

import logging
import sys
from typing import Union

LOGGER_NAME = "dairyops"
LOG_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: Union[str, int] = "WARNING") -> logging.Logger:
    """Send dairyops log records to stderr.

    Safe to call more than once: earlier handlers are replaced.

    Args:
        level: Level name (case-insensitive) or number

    Returns:
        The package logger

    Raises:
        ValueError: If the level name is unknown
    """
    if isinstance(level, str):
        name = level.strip().upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{level}'. Choose from: {', '.join(LOG_LEVELS)}")
        level = getattr(logging, name)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
