"""Boundary between raising code and Result.

The only place where exceptions from the surrounding environment are turned
into Err values:
- try_sync: run a callable once, Ok(value) or Err(on_error(exc))
- try_async: await a callable, optionally with bounded retry and backoff
- retry: the bare retry loop, re-raising the last exception when exhausted

Only ``Exception`` is absorbed; ``asyncio.CancelledError``, ``KeyboardInterrupt``
and other ``BaseException``s always propagate.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeAlias, TypeVar

from resultcase.foundation.errors import Err, Ok, Result

from .policy import RetryPolicy

T = TypeVar("T")
E = TypeVar("E")

Sleep: TypeAlias = Callable[[float], Awaitable[Any]]
PolicyLike: TypeAlias = RetryPolicy | Mapping[str, Any]

logger = logging.getLogger("resultcase.retry")
_boundary_log = logging.getLogger("resultcase.boundary")


def _as_policy(policy: PolicyLike) -> RetryPolicy:
    return policy if isinstance(policy, RetryPolicy) else RetryPolicy.model_validate(policy)


async def _call(fn: Callable[[], Awaitable[T] | T]) -> T:
    value = fn()
    return await value if inspect.isawaitable(value) else value  # type: ignore[return-value]


async def _attempt_loop(fn: Callable[[], Awaitable[T] | T], policy: RetryPolicy, sleep: Sleep) -> T:
    attempt = 0
    while True:
        try:
            return await _call(fn)
        except Exception as exc:
            attempt += 1
            if attempt > policy.times:
                if policy.times:
                    logger.warning(f"Giving up after {policy.max_attempts} attempts ({type(exc).__name__}: {exc})")
                raise
            delay = policy.delay_for(attempt)
            logger.info(f"Retry {attempt}/{policy.times} after {delay:.3f}s ({type(exc).__name__}: {exc})")
        await sleep(delay)


async def retry(fn: Callable[[], Awaitable[T] | T], policy: PolicyLike, *, sleep: Sleep = asyncio.sleep) -> T:
    """Invoke ``fn`` up to ``policy.times + 1`` times, sequentially.

    Returns the first successful value. When every attempt raises, the last
    exception is re-raised. Each attempt fully settles before the delay starts;
    ``sleep`` is injectable so tests can record delays without waiting.

    Example:
        >>> await retry(fetch, {"times": 3, "delay": 0.05, "backoff": "exponential"})  # doctest: +SKIP
    """
    return await _attempt_loop(fn, _as_policy(policy), sleep)


def try_sync(fn: Callable[[], T], on_error: Callable[[Exception], E]) -> Result[T, E]:
    """Run ``fn``; Ok(value) if it returns, Err(on_error(exc)) if it raises.

    Example:
        >>> import json
        >>> try_sync(lambda: json.loads('{"a": 1}'), lambda exc: "parse error")
        Ok({'a': 1})
        >>> try_sync(lambda: json.loads("nope"), lambda exc: "parse error")
        Err('parse error')
    """
    try:
        return Ok(fn())
    except Exception as exc:
        _boundary_log.debug("converted %s to Err", type(exc).__name__, exc_info=exc)
        return Err(on_error(exc))


async def try_async(
    fn: Callable[[], Awaitable[T] | T],
    *,
    catch: Callable[[Exception], E],
    retry: PolicyLike | None = None,
    sleep: Sleep = asyncio.sleep,
) -> Result[T, E]:
    """Await ``fn``, converting a raised exception into Err(catch(exc)).

    With ``retry``, a failing call is retried per the policy; ``catch``
    receives the exception of the final attempt only. Success at any attempt
    returns immediately.

    Example:
        >>> result = await try_async(
        ...     lambda: client.get("/users/1"),
        ...     catch=classify_exception,
        ...     retry=RetryPolicy(times=2, delay=0.1, backoff="linear"),
        ... )  # doctest: +SKIP
    """
    policy = _as_policy(retry) if retry is not None else None
    try:
        value = await (_attempt_loop(fn, policy, sleep) if policy is not None else _call(fn))
    except Exception as exc:
        _boundary_log.debug("converted %s to Err", type(exc).__name__, exc_info=exc)
        return Err(catch(exc))
    return Ok(value)
