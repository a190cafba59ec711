import logging

import pytest

from core.config import Settings
from core.logger import LOGGER_NAME, setup_logging


@pytest.fixture
def a2a_logger():
    """Yields the package root logger and removes any handlers the test added."""
    logger = logging.getLogger(LOGGER_NAME)
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in original_handlers:
            handler.close()
    logger.handlers = original_handlers
    logger.setLevel(original_level)


def test_setup_logging_console_only(a2a_logger):
    a2a_logger.handlers = []
    logger = setup_logging(Settings(log_level="WARNING"))
    assert logger is a2a_logger
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], logging.FileHandler)


def test_setup_logging_is_idempotent(a2a_logger, tmp_path):
    a2a_logger.handlers = []
    settings = Settings(log_level="INFO", log_file=str(tmp_path / "logs" / "a2a.log"))
    setup_logging(settings)
    setup_logging(settings)
    assert len(a2a_logger.handlers) == 2


def test_file_handler_writes_formatted_records(a2a_logger, tmp_path):
    a2a_logger.handlers = []
    log_file = tmp_path / "logs" / "a2a.log"
    setup_logging(Settings(log_level="DEBUG", log_file=str(log_file)))

    logging.getLogger(f"{LOGGER_NAME}.tests").info("task moved to working")
    for handler in a2a_logger.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip()
    assert " | INFO | a2aProtocol.tests | " in line
    assert line.endswith("task moved to working")
