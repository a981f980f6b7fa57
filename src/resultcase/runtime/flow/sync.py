"""Generator-driven early return over Result.

Lets a sequence of fallible steps be written as straight-line code. Each step
hands a Result to the driver with ``yield``; an Ok sends its value back into
the body, the first Err ends the whole sequence and becomes its outcome.

Example:
    >>> def parse(s: str) -> Result[int, str]:
    ...     return Ok(int(s)) if s.isdigit() else Err(f"not a number: {s}")
    >>>
    >>> @do
    ... def add(a: str, b: str):
    ...     x = yield from unwrap(parse(a))
    ...     y = yield parse(b)              # short form
    ...     return Ok(x + y)
    >>>
    >>> add("1", "2")
    Ok(3)
    >>> add("1", "two")
    Err('not a number: two')
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Generator
from typing import Any, ParamSpec, TypeAlias, TypeVar

from resultcase.foundation.errors import Result

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger("resultcase.flow")

Body: TypeAlias = Generator[Result[Any, E], Any, Result[T, E]]


def unwrap(result: Result[T, E]) -> Generator[Result[T, E], Any, T]:
    """Step for ``yield from``: evaluates to the Ok value, or suspends with the Err.

    The Err is yielded exactly once; a driver never resumes a body after it.
    """
    if result.is_ok():
        return result.unwrap()
    yield result
    raise RuntimeError("sequence resumed after a failing step")


def _final(outcome: object) -> Result[Any, Any]:
    if not isinstance(outcome, Result):
        raise TypeError(f"sequence body must return a Result, got {type(outcome).__name__}")
    return outcome


def run(body: Callable[[], Body[T, E]] | Body[T, E]) -> Result[T, E]:
    """Drive ``body`` to its explicit final Result or to its first Err.

    ``body`` is a generator function taking no arguments, or an already
    created generator. Yielded Ok values are sent back into the body; the first
    yielded Err closes the generator (only its ``finally`` blocks still run)
    and is returned unchanged. Exceptions raised inside the body propagate.
    """
    gen = body() if callable(body) else body
    try:
        step = next(gen)
        while True:
            if not isinstance(step, Result):
                gen.close()
                raise TypeError(f"sequence step must yield a Result, got {type(step).__name__}")
            if step.is_err():
                gen.close()
                logger.debug("sequence short-circuited: %r", step)
                return step
            step = gen.send(step.unwrap())
    except StopIteration as stop:
        return _final(stop.value)


def do(fn: Callable[P, Body[T, E]]) -> Callable[P, Result[T, E]]:
    """Decorator: turn a generator function into one returning its driven Result."""

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        return run(fn(*args, **kwargs))

    return wrapper
