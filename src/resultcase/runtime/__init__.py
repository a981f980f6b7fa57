"""Runtime - sequencing, batching and retry over Result."""

from __future__ import annotations

from .batch import collect, collect_all, collect_async, partition, traverse
from .flow import bind, do, do_async, run, run_async, unwrap
from .retry import (
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
    # Flow
    "run", "unwrap", "do", "run_async", "bind", "do_async",
    # Batch
    "collect", "collect_async", "traverse", "collect_all", "partition",
    # Retry
    "RetryPolicy", "NO_RETRY", "Backoff", "ConstantBackoff", "LinearBackoff", "ExponentialBackoff", "backoff_for",
    "try_sync", "try_async", "retry",
]
