"""Short-circuiting sequential evaluation over Result.

Sync form (generators):
    >>> from resultcase.runtime.flow import run, unwrap
    >>> def body():
    ...     a = yield from unwrap(Ok(1))
    ...     b = yield from unwrap(Ok(2))
    ...     return Ok(a + b)
    >>> run(body)
    Ok(3)

Async form (coroutines):
    >>> async def body():
    ...     a = await bind(fetch_a())
    ...     b = await bind(fetch_b(a))
    ...     return Ok(a + b)
    >>> await run_async(body)  # doctest: +SKIP
"""

from .aio import bind, do_async, run_async
from .sync import do, run, unwrap

__all__ = [
    "run", "unwrap", "do",
    "run_async", "bind", "do_async",
]
