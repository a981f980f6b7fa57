"""Retry policies and the exception-to-Result boundary.

Example:
    >>> from resultcase.runtime.retry import RetryPolicy, try_async
    >>> from resultcase import classify_exception
    >>>
    >>> result = await try_async(
    ...     fetch_profile,
    ...     catch=classify_exception,
    ...     retry=RetryPolicy(times=3, delay=0.2, backoff="exponential"),
    ... )  # doctest: +SKIP
"""

from .backoff import (
    Backoff,
    ConstantBackoff,
    ExponentialBackoff,
    LinearBackoff,
    backoff_for,
)
from .boundary import retry, try_async, try_sync
from .policy import NO_RETRY, RetryPolicy

__all__ = [
    # Backoff strategies
    "Backoff",
    "ConstantBackoff",
    "LinearBackoff",
    "ExponentialBackoff",
    "backoff_for",
    # Policy
    "RetryPolicy",
    "NO_RETRY",
    # Boundary
    "try_sync",
    "try_async",
    "retry",
]
