"""Logging helpers shared by all AI Megarepo modules."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "ai_megarepo"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; call as ``get_logger(__name__)``."""
    return logging.getLogger(name)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger with a single stream handler.

    Safe to call more than once; the handler is only added the first time.
    Entry points call this, library code never does.

    Args:
        level: Log level as an int or a name such as ``"DEBUG"``
        fmt: Optional format string (defaults to ``LOG_FORMAT``)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
        logger.addHandler(handler)

    return logger
