"""Backoff strategies for retry policies.

Provides delay calculation between attempts:
- ConstantBackoff: same delay before every retry
- LinearBackoff: base * attempt
- ExponentialBackoff: base * 2^(attempt - 1)

Attempt numbers are 1-indexed: attempt 1 is the first retry, i.e. the
second invocation overall.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from resultcase.foundation.config import BackoffMode


@runtime_checkable
class Backoff(Protocol):
    """Protocol for backoff delay calculation."""

    def delay(self, attempt: int) -> float:
        """Delay in seconds before retry number ``attempt`` (1-indexed)."""
        ...


@dataclass(frozen=True, slots=True)
class ConstantBackoff:
    """Fixed delay between retries.

    Simple strategy for rate-limited APIs with known cooldown.
    """

    base: float = 1.0

    def delay(self, attempt: int) -> float:
        return self.base


@dataclass(frozen=True, slots=True)
class LinearBackoff:
    """Delay = base * attempt."""

    base: float = 1.0

    def delay(self, attempt: int) -> float:
        return self.base * attempt


@dataclass(frozen=True, slots=True)
class ExponentialBackoff:
    """Delay = base * multiplier^(attempt - 1); the first retry waits ``base``."""

    base: float = 1.0
    multiplier: float = 2.0

    def delay(self, attempt: int) -> float:
        return self.base * (self.multiplier ** (attempt - 1))


_STRATEGIES: dict[str, type[ConstantBackoff | LinearBackoff | ExponentialBackoff]] = {
    "constant": ConstantBackoff,
    "linear": LinearBackoff,
    "exponential": ExponentialBackoff,
}


def backoff_for(mode: BackoffMode, base: float) -> Backoff:
    """Strategy instance for a named backoff mode."""
    try:
        return _STRATEGIES[mode](base=base)
    except KeyError:
        raise ValueError(f"unknown backoff mode {mode!r}; expected one of {sorted(_STRATEGIES)}") from None
