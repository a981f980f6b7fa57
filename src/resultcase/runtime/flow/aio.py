"""Coroutine-driven early return over pending Results.

The async counterpart of ``flow.sync``. Inside a body run by ``run_async``,
``await bind(x)`` waits for ``x`` (an awaitable resolving to a Result, or a
settled Result) and evaluates to its Ok value. On Err the driver stops the
body at that ``await`` and returns the Err as the outcome of the sequence.

Two error channels stay separate: an Err is a value and becomes the result;
an exception raised by a pending computation is a fault and propagates out of
``run_async`` untouched.

Example:
    >>> async def fetch_user(uid: int) -> Result[dict, str]:
    ...     return Ok({"id": uid, "name": "Alice"}) if uid > 0 else Err("invalid id")
    >>>
    >>> @do_async
    ... async def greeting(uid: int):
    ...     user = await bind(fetch_user(uid))
    ...     return Ok(f"hello {user['name']}")
    >>>
    >>> await greeting(1)
    Ok('hello Alice')
    >>> await greeting(0)
    Err('invalid id')

How it works: ``bind`` yields a private short-circuit signal up the awaiting
chain instead of raising. ``run_async`` sits between the body and the event
loop, forwards every other yield (futures, bare yields) to the loop, and
consumes the signal itself. Awaiting a failing ``bind`` outside of
``run_async`` hands the signal to the event loop, which rejects it with
RuntimeError.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any, Generic, ParamSpec, TypeVar

from resultcase.foundation.errors import Result

from .sync import _final

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger("resultcase.flow")


class _ShortCircuit:
    """Signal carried from a failing ``bind`` to the enclosing driver."""

    __slots__ = ("failure",)

    def __init__(self, failure: Result[Any, Any]) -> None:
        self.failure = failure

    def __repr__(self) -> str:
        return f"<short-circuit {self.failure!r} outside run_async>"


class bind(Generic[T, E]):  # noqa: N801
    """Awaitable step: settles ``source`` and evaluates to its Ok value.

    ``source`` is awaited only when the step itself is awaited, so steps run
    strictly one after another.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Awaitable[Result[T, E]] | Result[T, E]) -> None:
        self._source = source

    def __await__(self) -> Generator[Any, Any, T]:
        source = self._source
        result = source if isinstance(source, Result) else (yield from source.__await__())
        if not isinstance(result, Result):
            raise TypeError(f"bind() expects a Result, got {type(result).__name__}")
        if result.is_ok():
            return result.unwrap()
        yield _ShortCircuit(result)
        raise RuntimeError("sequence resumed after a failing step")


class _Driver:
    """Awaitable wrapper that steps the body coroutine on behalf of the event loop."""

    __slots__ = ("_coro",)

    def __init__(self, coro: Coroutine[Any, Any, Any]) -> None:
        self._coro = coro

    def __await__(self) -> Generator[Any, Any, Result[Any, Any]]:
        coro = self._coro
        value: Any = None
        fault: BaseException | None = None
        while True:
            try:
                signal = coro.send(value) if fault is None else coro.throw(fault)
            except StopIteration as stop:
                return _final(stop.value)
            if isinstance(signal, _ShortCircuit):
                coro.close()
                logger.debug("async sequence short-circuited: %r", signal.failure)
                return signal.failure
            try:
                value, fault = (yield signal), None
            except GeneratorExit:
                coro.close()
                raise
            except BaseException as exc:  # noqa: BLE001 - forwarded into the body, e.g. CancelledError
                value, fault = None, exc


async def run_async(
    body: Callable[[], Coroutine[Any, Any, Result[T, E]]] | Coroutine[Any, Any, Result[T, E]],
) -> Result[T, E]:
    """Drive ``body`` to its explicit final Result or to its first Err.

    ``body`` is a coroutine function taking no arguments, or a coroutine
    object. Only one step of the body is ever in flight.
    """
    coro = body() if callable(body) else body
    if not inspect.iscoroutine(coro):
        raise TypeError(f"run_async() expects a coroutine, got {type(coro).__name__}")
    return await _Driver(coro)


def do_async(fn: Callable[P, Coroutine[Any, Any, Result[T, E]]]) -> Callable[P, Coroutine[Any, Any, Result[T, E]]]:
    """Decorator: turn a coroutine function into one returning its driven Result."""

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        return await run_async(fn(*args, **kwargs))

    return wrapper
