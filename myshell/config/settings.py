"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from myshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("MYSHELL_LOG_LEVEL", "WARNING")
        self.max_line_length: int = self._get_positive_int(
            "MYSHELL_MAX_LINE_LENGTH", 255
        )
        self.cat_chunk_size: int = self._get_positive_int(
            "MYSHELL_CAT_CHUNK_SIZE", 2048
        )
        self.mkdir_mode: int = self._get_octal("MYSHELL_MKDIR_MODE", "755")
        self.list_column_width: int = self._get_positive_int(
            "MYSHELL_LIST_COLUMN_WIDTH", 30
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get an environment variable that must be a positive integer."""
        raw = self._get_env(key, str(default)).strip()
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got {value}")
        return value

    def _get_octal(self, key: str, default: str) -> int:
        """Get an environment variable holding octal permission bits."""
        raw = self._get_env(key, default).strip()
        try:
            value = int(raw, 8)
        except ValueError:
            raise ConfigurationError(f"{key} must be an octal mode, got {raw!r}")
        if not 0 <= value <= 0o7777:
            raise ConfigurationError(f"{key} is out of range: {raw}")
        return value

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, validated against the logging module."""
        level = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"{key} is not a logging level: {level}")
        return level


# Global settings instance
settings = Settings()
