"""
Tests for the logging helpers.
"""

import logging

from gaze_overlay.debug import (
    PACKAGE_LOGGER,
    disable_debug_logging,
    format_point,
    format_seconds,
    setup_debug_logging,
)


def test_setup_does_not_duplicate_handlers() -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    before = len(logger.handlers)
    try:
        setup_debug_logging(logging.INFO)
        setup_debug_logging(logging.DEBUG)

        assert len(logger.handlers) == before + 1
        assert logger.level == logging.DEBUG
    finally:
        disable_debug_logging()

    assert len(logger.handlers) == before
    assert logger.level == logging.NOTSET


def test_child_loggers_propagate_to_package_logger() -> None:
    logger = setup_debug_logging(logging.INFO)
    try:
        child = logging.getLogger("gaze_overlay.aoi_demo")
        assert child.getEffectiveLevel() == logging.INFO
        assert logger.name == PACKAGE_LOGGER
    finally:
        disable_debug_logging()


def test_format_helpers() -> None:
    assert format_point((1.234, 5.678)) == "(1.2, 5.7)"
    assert format_point((1.0, 2.0), precision=0) == "(1, 2)"
    assert format_seconds(0.5) == "0.50s"
