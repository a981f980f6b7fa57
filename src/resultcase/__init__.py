"""resultcase - exception-free error propagation for Python.

A Result container with railway-oriented combinators, a closed taxonomy of
common failure kinds, generator/coroutine driven early return, index-ordered
batch collection, and a retrying boundary that turns raising code into Result.

Quick Start:
    >>> from resultcase import Ok, Err, Result
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     return Err("division by zero") if b == 0 else Ok(a / b)
    >>>
    >>> divide(10, 2).map(lambda x: x * 2).unwrap_or(0.0)
    10.0

Early return without exceptions:
    >>> from resultcase import do, unwrap
    >>>
    >>> @do
    ... def ratio_sum(a: int, b: int, c: int):
    ...     x = yield from unwrap(divide(a, b))
    ...     y = yield from unwrap(divide(a, c))
    ...     return Ok(x + y)
    >>>
    >>> ratio_sum(4, 2, 0)
    Err('division by zero')

Crossing the exception boundary with retry:
    >>> from resultcase import RetryPolicy, classify_exception, try_async
    >>>
    >>> profile = await try_async(
    ...     lambda: client.get_profile(user_id),
    ...     catch=classify_exception,
    ...     retry=RetryPolicy(times=3, delay=0.2, backoff="exponential"),
    ... )  # doctest: +SKIP

Exhaustive error handling:
    >>> from resultcase import match_error
    >>> message = match_error(
    ...     profile.unwrap_err(),
    ...     NetworkError=lambda e: "offline",
    ...     HttpError=lambda e: f"server said {e.status}",
    ...     ValidationError=lambda e: "; ".join(e.messages),
    ...     NotFoundError=lambda e: f"no such {e.resource}",
    ...     ParseError=lambda e: "bad payload",
    ...     DeadlineError=lambda e: f"{e.operation} took too long",
    ... )  # doctest: +SKIP
"""

from __future__ import annotations

__version__ = "0.1.0"

# Result container & error taxonomy
from .foundation.errors import (
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

# Configuration
from .foundation.config import (
    LoggingSettings,
    ResultcaseSettings,
    RetrySettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

# Sequencing
from .runtime.flow import bind, do, do_async, run, run_async, unwrap

# Batch collection
from .runtime.batch import collect, collect_all, collect_async, partition, traverse

# Retry & boundary
from .runtime.retry import (
    NO_RETRY,
    Backoff,
    ConstantBackoff,
    ExponentialBackoff,
    LinearBackoff,
    RetryPolicy,
    backoff_for,
    retry,
    try_async,
    try_sync,
)

__all__ = [
    "__version__",
    # Result
    "Result", "Ok", "Err",
    # Error taxonomy
    "CommonError", "NetworkError", "HttpError", "ValidationError", "NotFoundError", "ParseError", "DeadlineError",
    "ErrorTag", "ERROR_TAGS", "ERROR_KINDS", "match_error", "error_matcher", "classify_exception",
    # Exceptions
    "ResultcaseError", "UnwrapError", "MissingHandlerError",
    # Sequencing
    "run", "unwrap", "do", "run_async", "bind", "do_async",
    # Batch
    "collect", "collect_async", "traverse", "collect_all", "partition",
    # Retry & boundary
    "RetryPolicy", "NO_RETRY", "Backoff", "ConstantBackoff", "LinearBackoff", "ExponentialBackoff", "backoff_for",
    "try_sync", "try_async", "retry",
    # Config
    "ResultcaseSettings", "RetrySettings", "LoggingSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
