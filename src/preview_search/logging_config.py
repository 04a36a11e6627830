"""Logging configuration for preview-search."""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> None:
    """Log to stderr, at DEBUG when ``verbose``.

    The interactive browser redraws the terminal, so ``log_file`` can take
    a full DEBUG trace of rebuilds and navigation instead.
    """
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
    if log_file is not None:
        logger.add(log_file, level="DEBUG", format="{time:HH:mm:ss.SSS} {level} {name}: {message}")
