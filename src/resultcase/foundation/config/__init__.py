"""Configuration management using pydantic-settings."""

from .settings import (
    BackoffMode,
    LoggingSettings,
    ResultcaseSettings,
    RetrySettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

__all__ = [
    "BackoffMode",
    "LoggingSettings",
    "ResultcaseSettings",
    "RetrySettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
