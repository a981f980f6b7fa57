"""Library exceptions and exception classification.

Exceptions defined here signal programmer defects (unwrapping the wrong
variant, non-exhaustive dispatch). Carried failures never raise; they travel
as Err values.
"""

from __future__ import annotations

import asyncio
import json
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .kinds import CommonError
    from .result import Result


class ErrorTag(StrEnum):
    """Tags of the closed error taxonomy. One per error kind."""
    NETWORK = "NetworkError"
    HTTP = "HttpError"
    VALIDATION = "ValidationError"
    NOT_FOUND = "NotFoundError"
    PARSE = "ParseError"
    DEADLINE = "DeadlineError"


ERROR_TAGS: frozenset[str] = frozenset(t.value for t in ErrorTag)


class ResultcaseError(Exception):
    """Base class for resultcase defects."""


class UnwrapError(ResultcaseError, RuntimeError):
    """Raised by unwrap()/unwrap_err()/expect() on the wrong variant."""

    __slots__ = ("result",)

    def __init__(self, message: str, result: Result[Any, Any]) -> None:
        self.result = result
        super().__init__(message)


class MissingHandlerError(ResultcaseError, TypeError):
    """Raised when an error dispatcher is not exhaustive over the taxonomy."""

    __slots__ = ("missing", "unknown")

    def __init__(self, missing: Iterable[str] = (), unknown: Iterable[str] = ()) -> None:
        self.missing = tuple(sorted(missing))
        self.unknown = tuple(sorted(unknown))
        parts = []
        if self.missing:
            parts.append(f"missing handlers for {', '.join(self.missing)}")
        if self.unknown:
            parts.append(f"unknown error tags {', '.join(self.unknown)}")
        super().__init__("; ".join(parts) or "non-exhaustive error dispatch")


def classify_exception(
    exc: BaseException,
    *,
    operation: str = "",
    timeout: float = 0.0,
    url: str | None = None,
) -> CommonError:
    """Map a host exception onto the closed error taxonomy.

    Order matters: TimeoutError and ConnectionError are OSError subclasses,
    JSONDecodeError and UnicodeDecodeError are ValueError subclasses.

    Example:
        >>> classify_exception(KeyError("user")).tag
        'NotFoundError'
    """
    from .kinds import DeadlineError, NetworkError, NotFoundError, ParseError, ValidationError

    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return DeadlineError(operation=operation or type(exc).__name__, timeout=timeout)
    if isinstance(exc, json.JSONDecodeError):
        return ParseError(cause=exc, input=exc.doc)
    if isinstance(exc, UnicodeDecodeError):
        return ParseError(cause=exc)
    if isinstance(exc, OSError):
        return NetworkError(cause=exc, url=url)
    if isinstance(exc, LookupError):
        resource = str(exc.args[0]) if exc.args else type(exc).__name__
        return NotFoundError(resource=resource)
    if isinstance(exc, (ValueError, TypeError)):
        return ValidationError(messages=(str(exc) or type(exc).__name__,))
    return NetworkError(cause=exc, url=url)
