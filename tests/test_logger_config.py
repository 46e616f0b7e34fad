"""Tests for the service logger setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from config import settings
from services.logger_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging()


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "logs" / "service.log"
    for _ in range(3):
        logger = setup_logging(log_file=str(log_file), to_file=True)

    assert logger.name == settings.LOGGER_NAME
    assert len(logger.handlers) == 2
    assert len(_file_handlers(logger)) == 1


def test_file_handler_writes_to_given_path(tmp_path):
    log_file = tmp_path / "logs" / "service.log"
    logger = setup_logging(level="info", log_file=str(log_file), to_file=True)
    logger.info("stored 3 document(s)")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.INFO
    assert "stored 3 document(s)" in log_file.read_text(encoding="utf-8")


def test_console_only(tmp_path):
    logger = setup_logging(level="debug", log_file=str(tmp_path / "unused.log"), to_file=False)

    assert logger.level == logging.DEBUG
    assert _file_handlers(logger) == []
    assert len(logger.handlers) == 1
    assert not (tmp_path / "unused.log").exists()
