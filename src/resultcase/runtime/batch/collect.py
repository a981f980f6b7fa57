"""Fixed-order collection of many Results into one.

- collect: fail-fast, the reported Err is the earliest by index
- collect_async: waits for every pending Result concurrently, then applies
  the same index-order rule regardless of settlement order
- traverse: map a Result-returning function over items, then collect
- collect_all / partition: keep every error instead of only the first
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

from resultcase.foundation.errors import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


def collect(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """[Result[T,E]] → Result[[T], E]. Fail-fast on the first Err by index.

    Example:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> collect([Ok(1), Err("x"), Err("y")])
        Err('x')
        >>> collect([])
        Ok([])
    """
    values: list[T] = []
    for r in results:
        if r.is_err():
            return r  # type: ignore[return-value]
        values.append(r.unwrap())
    return Ok(values)


async def collect_async(pending: Iterable[Awaitable[Result[T, E]]]) -> Result[list[T], E]:
    """Await all pending Results concurrently, then collect them in index order.

    Every awaitable is started and allowed to settle before anything is
    reported, so the Err returned is the lowest-index one, not the first to
    finish. Exceptions are faults, not Errs: once everything has settled, the
    lowest-index exception is re-raised. Cancelling the caller cancels every
    element still running.
    """
    tasks = [asyncio.ensure_future(p) for p in pending]
    try:
        settled = await asyncio.gather(*tasks, return_exceptions=True)
    except asyncio.CancelledError:
        for t in tasks: t.cancel()
        raise

    for outcome in settled:
        if isinstance(outcome, BaseException):
            raise outcome
    return collect(settled)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items, stopping at the first Err. f is not called past it."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if r.is_err():
            return r  # type: ignore[return-value]
        values.append(r.unwrap())
    return Ok(values)


def collect_all(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast)."""
    values, errors = partition(results)
    return Err(errors) if errors else Ok(values)


def partition(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split Results into (ok values, err values), each in original order."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        if r.is_ok():
            values.append(r.unwrap())
        else:
            errors.append(r.unwrap_err())
    return values, errors
