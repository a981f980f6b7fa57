"""Environment-based configuration using pydantic-settings.

Example:
    >>> from resultcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.retry.times
    3

    # Or with environment variables:
    # RESULTCASE_RETRY_TIMES=5
    # RESULTCASE_RETRY_BACKOFF=exponential
    # RESULTCASE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, NonNegativeFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BackoffMode = Literal["constant", "linear", "exponential"]


class RetrySettings(BaseSettings):
    """Default retry policy used by RetryPolicy.from_settings()."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_RETRY_",
        extra="ignore",
    )

    times: Annotated[int, Field(ge=0, le=10)] = 3
    delay: NonNegativeFloat = Field(default=0.1, description="Base delay in seconds")
    backoff: BackoffMode = "constant"

    @field_validator("backoff", mode="before")
    @classmethod
    def _normalize_backoff(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class LoggingSettings(BaseSettings):
    """Logging configuration for the resultcase logger hierarchy."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ResultcaseSettings(BaseSettings):
    """Root settings, loaded from RESULTCASE_* environment variables and .env.

    Example environment variables:
        RESULTCASE_RETRY_TIMES=5
        RESULTCASE_RETRY_DELAY=0.25
        RESULTCASE_LOG_LEVEL=INFO
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ResultcaseSettings:
    """Get the global settings instance (cached)."""
    return ResultcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def configure_logging(settings: ResultcaseSettings | None = None) -> logging.Logger:
    """Apply the configured level to the ``resultcase`` logger. Handlers are left to the application."""
    settings = settings or get_settings()
    logger = logging.getLogger("resultcase")
    logger.setLevel(settings.logging.level)
    return logger
