"""Logging setup."""

import sys
from typing import Optional

from loguru import logger

from .config import TraceLevel

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function}:{line} - {message}"


def configure_logging(level: TraceLevel = TraceLevel.INFO, log_file: Optional[str] = None) -> None:
    """Route loguru output to stderr (and optionally a file) at the given trace level."""
    logger.remove()

    log_level = TraceLevel(level).log_level
    if log_level is None:
        return

    logger.add(sys.stderr, format=LOG_FORMAT, level=log_level)
    if log_file:
        logger.add(log_file, level=log_level, rotation="10 MB")
