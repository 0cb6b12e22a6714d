"""
Tenpin - Application Settings

Loads configuration from environment variables using Pydantic Settings,
and wires the package logger to the configured level.
"""

import logging
import sys
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from TENPIN_* environment variables."""

    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "TENPIN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {value!r}.")
        return level

    @property
    def effective_log_level(self) -> int:
        """DEBUG when debug mode is on, otherwise the configured level."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        settings: Settings to use (default: cached environment settings)

    Returns:
        The configured `tenpin` logger
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger("tenpin")
    logger.setLevel(settings.effective_log_level)
    logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(settings.effective_log_level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)

    return logger
