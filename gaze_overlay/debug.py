"""
Logging helpers for the gaze demos.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

PACKAGE_LOGGER = "gaze_overlay"
LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

_handler: logging.Handler | None = None


def setup_debug_logging(level: int = logging.DEBUG) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again only changes the level; handlers are never duplicated.

    Returns:
        The package logger
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    _handler.setLevel(level)
    logger.setLevel(level)
    return logger


def disable_debug_logging() -> None:
    """Remove the handler installed by setup_debug_logging."""
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)


def format_point(point: Sequence[float], precision: int = 1) -> str:
    """Format an (x, y) point as ``(12.3, 45.6)``."""
    return f"({point[0]:.{precision}f}, {point[1]:.{precision}f})"


def format_seconds(seconds: float) -> str:
    return f"{seconds:.2f}s"
