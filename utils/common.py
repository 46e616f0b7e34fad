# utils/common.py
"""Common utilities: path management and uploaded content validation"""
import os
import re
import logging
from functools import lru_cache
from typing import Optional

# ⚠️ DO NOT import settings here - causes circular import with config.py
# Settings is imported lazily inside functions that need it

def _get_logger():
    """Lazy logger initialization to avoid circular import"""
    from config import settings
    return logging.getLogger(settings.LOGGER_NAME)


# ============= Path Management =============

def get_project_root() -> str:
    """Returns the absolute path to the project's root directory."""
    return os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def get_log_file_path() -> str:
    """Creates the log directory if it doesn't exist and returns the full log file path."""
    project_root = get_project_root()
    log_dir = os.path.join(project_root, 'log')

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    return os.path.join(log_dir, 'docsearch.log')


# ============= Content Validation =============

@lru_cache(maxsize=8)
def _compile_content_pattern(pattern: str) -> re.Pattern:
    # ASCII mode keeps \s to [ \t\n\r\f\v]
    return re.compile(pattern, re.ASCII)


def normalize_content(raw: bytes) -> str:
    """Decodes uploaded bytes and lower-cases them for storage."""
    return raw.decode("utf-8", errors="replace").lower()


def validate_document_content(name: str, content: str) -> Optional[str]:
    """
    Checks normalized document content against the upload rules.

    Returns a user-facing error message, or None when the content is accepted.
    """
    from config import settings  # Lazy import

    if not content.strip():
        return f"File '{name}' is empty"

    if not _compile_content_pattern(settings.CONTENT_PATTERN).fullmatch(content):
        _get_logger().debug(f"Rejected '{name}': content does not match {settings.CONTENT_PATTERN!r}")
        return f"File '{name}' ignored: invalid characters."

    return None
