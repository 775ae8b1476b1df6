"""Tests for the logging setup helper."""

import logging

import pytest

from latticeview.logging_config import setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("latticeview")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    def test_returns_package_logger(self, restore_logger):
        logger = setup_logging()
        assert logger.name == "latticeview"
        assert logger.level == logging.INFO

    def test_repeated_calls_do_not_duplicate(self, restore_logger):
        setup_logging()
        logger = setup_logging(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_log_file(self, restore_logger, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(log_file=str(log_file))
        assert len(logger.handlers) == 2
        logging.getLogger("latticeview.session").info("hello file")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text()
        assert "latticeview.session - INFO - hello file" in text
        for handler in logger.handlers:
            handler.close()
