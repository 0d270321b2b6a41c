"""Logger setup for command-line runs."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def create_logger(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Return the package logger with a single stderr handler attached."""
    logger = logging.getLogger(name if name is not None else "bufselect")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
