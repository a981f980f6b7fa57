"""Batch collection of Results.

Example:
    >>> from resultcase.runtime.batch import collect, collect_async
    >>> collect([Ok(1), Err("x"), Ok(3)])
    Err('x')
    >>> await collect_async([fetch(1), fetch(2)])  # doctest: +SKIP
"""

from .collect import collect, collect_all, collect_async, partition, traverse

__all__ = [
    "collect",
    "collect_async",
    "traverse",
    "collect_all",
    "partition",
]
