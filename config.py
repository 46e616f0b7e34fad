# config.py
"""Application configuration"""
from pydantic_settings import BaseSettings
from utils.common import get_log_file_path

class Settings(BaseSettings):
    """Application configuration"""

    # Logger configuration
    LOGGER_NAME: str = "docsearch"
    LOG_FILE_PATH: str = get_log_file_path()
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB before rotation
    LOG_BACKUP_COUNT: int = 5

    # App metadata
    APP_TITLE: str = "Document Search Service"
    APP_VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Document upload
    MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10MB per file
    CONTENT_PATTERN: str = r"[a-z0-9\s]+"  # Matched against the whole lower-cased content

    # Search
    MAX_QUERY_LENGTH: int = 2000
    REQUIRE_TERMS_FOR_BOOLEAN: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
