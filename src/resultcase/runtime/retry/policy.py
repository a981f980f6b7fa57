"""Retry policy configuration.

A RetryPolicy is pure configuration: how many retries follow the first
attempt, the base delay, and the backoff mode. It holds no counters; every
retrying call keeps its own attempt count.

Optimizations:
- Frozen for immutability and hashability
- Backoff strategy resolved from the mode name on demand
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from resultcase.foundation.config import BackoffMode, RetrySettings, get_settings

from .backoff import Backoff, backoff_for


class RetryPolicy(BaseModel):
    """Bounded retry with backoff.

    Attributes:
        times: Retries after the first attempt (0 = single attempt)
        delay: Base delay in seconds
        backoff: constant | linear | exponential

    Example:
        >>> policy = RetryPolicy(times=3, delay=0.02, backoff="exponential")
        >>> [policy.delay_for(n) for n in (1, 2, 3)]
        [0.02, 0.04, 0.08]
        >>> policy.max_attempts
        4
    """

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
        extra="forbid",
        revalidate_instances="never",
        json_schema_extra={
            "title": "Retry Policy",
            "description": "Configuration for bounded retry with backoff",
            "examples": [{"times": 3, "delay": 0.1, "backoff": "exponential"}],
        },
    )

    times: Annotated[int, Field(ge=0)] = 3
    delay: Annotated[float, Field(ge=0.0)] = 0.1
    backoff: BackoffMode = "constant"

    @field_validator("backoff", mode="before")
    @classmethod
    def _normalize_backoff(cls, v: BackoffMode | None) -> str:
        """None and mixed case both accepted; None means constant."""
        if v is None:
            return "constant"
        return v.lower() if isinstance(v, str) else v

    @computed_field
    @property
    def max_attempts(self) -> int:
        """Total invocations possible: the first attempt plus every retry."""
        return self.times + 1

    @property
    def strategy(self) -> Backoff:
        return backoff_for(self.backoff, self.delay)

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait before retry number ``attempt`` (1-indexed)."""
        if attempt < 1:
            raise ValueError(f"retry attempts are 1-indexed, got {attempt}")
        return self.strategy.delay(attempt)

    @classmethod
    def from_settings(cls, settings: RetrySettings | None = None) -> RetryPolicy:
        """Build a policy from RESULTCASE_RETRY_* configuration."""
        s = settings or get_settings().retry
        return cls(times=s.times, delay=s.delay, backoff=s.backoff)

    def __hash__(self) -> int:
        return hash((self.times, self.delay, self.backoff))


# Singleton for no-retry policy
NO_RETRY = RetryPolicy(times=0, delay=0.0)
