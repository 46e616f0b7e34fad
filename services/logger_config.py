# services/logger_config.py
"""
Logging for the search service.

Everything logs through the single `settings.LOGGER_NAME` logger. The console
always gets a handler; the rotating log file is optional so the service can
run from a read-only directory.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def _file_handler(path: str, formatter: logging.Formatter) -> Optional[logging.Handler]:
    log_dir = os.path.dirname(path)
    try:
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        # Console logging still works without the file
        print(f"Log file {path} unavailable: {e}")
        return None
    handler.setFormatter(formatter)
    return handler


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    to_file: Optional[bool] = None,
) -> logging.Logger:
    """
    Configure the service logger. Safe to call more than once.

    Args:
        level: Level name, defaults to settings.LOG_LEVEL
        log_file: Rotating log path, defaults to settings.LOG_FILE_PATH
        to_file: Whether to write the log file, defaults to settings.LOG_TO_FILE

    Returns:
        The configured logger
    """
    logger = logging.getLogger(settings.LOGGER_NAME)
    _reset_handlers(logger)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if to_file is None:
        to_file = settings.LOG_TO_FILE
    if to_file:
        handler = _file_handler(log_file or settings.LOG_FILE_PATH, formatter)
        if handler is not None:
            logger.addHandler(handler)

    logger.debug(f"Logging configured with {len(logger.handlers)} handler(s)")
    return logger
