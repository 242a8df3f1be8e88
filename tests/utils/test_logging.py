"""Tests for genotables logging helpers."""

import logging

from genotables.utils.logging import configure_logging, get_logger


def test_get_logger_default_name():
    assert get_logger().name == "genotables"
    assert get_logger("genotables.tables").name == "genotables.tables"


def test_configure_logging_adds_single_handler(monkeypatch):
    logger = logging.getLogger("genotables")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    try:
        monkeypatch.setenv("GENOTABLES_LOG_LEVEL", "DEBUG")
        configure_logging(force=True)
        assert logger.level == logging.DEBUG
        n = len(logger.handlers)
        configure_logging()
        assert len(logger.handlers) == n
    finally:
        for h in logger.handlers[:]:
            logger.removeHandler(h)
        for h in saved_handlers:
            logger.addHandler(h)
        logger.setLevel(saved_level)
