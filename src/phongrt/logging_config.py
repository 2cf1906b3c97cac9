"""Logging configuration for phongrt."""

import logging
from typing import Optional

from phongrt.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set up console logging for the ``phongrt`` package.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``config.LOG_LEVEL``.

    Returns:
        The package logger.
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("phongrt")
    logger.setLevel(numeric_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger
