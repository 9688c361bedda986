"""Tests for logging setup."""

import logging

import pytest

from hexcube.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("hexcube")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    def test_returns_package_logger(self):
        logger = setup_logging()
        assert logger.name == "hexcube"
        assert logger.level == logging.INFO

    def test_repeated_calls_do_not_duplicate(self):
        setup_logging()
        logger = setup_logging(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "hexcube.log"
        logger = setup_logging(log_file=str(log_file))
        assert len(logger.handlers) == 2
        logging.getLogger("hexcube.layout").info("laid out")
        for handler in logger.handlers:
            handler.flush()
        assert "hexcube.layout - INFO - laid out" in log_file.read_text()
