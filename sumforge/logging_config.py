"""
Logging configuration for SumForge.

Usage:
    from sumforge.logging_config import setup_logging

    setup_logging("INFO")  # Call once at startup
    logger = logging.getLogger(__name__)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

ROOT_LOGGER = "sumforge"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: int | str = logging.WARNING, stream: Any = None) -> logging.Logger:
    """
    Configure the sumforge logger with a single stream handler.

    Calling again replaces the previous handler, so repeated setup never
    duplicates output.

    Args:
        level: Logging level as a number or name.
        stream: Output stream (default stderr).

    Returns:
        The configured package logger.
    """
    if stream is None:
        stream = sys.stderr
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(handler)

    return logger
