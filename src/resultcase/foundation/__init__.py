"""Foundation - Result container, error taxonomy, configuration."""

from __future__ import annotations

from .config import (
    LoggingSettings,
    ResultcaseSettings,
    RetrySettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)
from .errors import (
    ERROR_KINDS,
    ERROR_TAGS,
    CommonError,
    DeadlineError,
    Err,
    ErrorTag,
    HttpError,
    MissingHandlerError,
    NetworkError,
    NotFoundError,
    Ok,
    ParseError,
    Result,
    ResultcaseError,
    UnwrapError,
    ValidationError,
    classify_exception,
    error_matcher,
    match_error,
)

__all__ = [
    # Errors
    "Result", "Ok", "Err",
    "CommonError", "NetworkError", "HttpError", "ValidationError", "NotFoundError", "ParseError", "DeadlineError",
    "ErrorTag", "ERROR_TAGS", "ERROR_KINDS", "match_error", "error_matcher", "classify_exception",
    "ResultcaseError", "UnwrapError", "MissingHandlerError",
    # Config
    "ResultcaseSettings", "RetrySettings", "LoggingSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
