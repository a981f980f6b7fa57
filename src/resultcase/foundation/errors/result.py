"""Result/Either container for exception-free error propagation.

A two-variant discriminated union (Ok | Err) with the combinators needed for
railway-oriented composition:
- Functor: map, map_err
- Bifunctor: bimap
- Monad: flat_map (aliases and_then, chain)
- Recovery: or_else, unwrap_or, unwrap_or_else
- Case analysis: match

Performance notes:
- Uses __slots__ for minimal memory footprint
- Pass-through branches return self instead of allocating
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

# Sentinel for faster Ok/Err construction
_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Exactly one variant is active and the discriminant never changes after
    construction. T and E are unconstrained. Combinators never mutate: they
    build a new Result, or hand back ``self`` when the variant passes through
    untouched.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> Ok(5).flat_map(lambda x: Ok(x * 2) if x > 0 else Err("neg")).unwrap()
        10
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def ok(self) -> T | None:
        """Ok value, or None on Err."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Err value, or None on Ok."""
        return None if self._is_ok else self._value  # type: ignore[return-value]

    def unwrap(self) -> T:
        """Extract Ok value. Raises UnwrapError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"unwrap() on Err: {self._value!r}", self)

    def unwrap_err(self) -> E:
        """Extract Err value. Raises UnwrapError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"unwrap_err() on Ok: {self._value!r}", self)

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom error message."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"{msg}: {self._value!r}", self)

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default. Never raises."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute one from the error via f."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    # ─── Functor Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return self if self._is_ok else Result(f(self._value), _ERR)  # type: ignore[arg-type,return-value]

    # ─── Bifunctor Operations ──────────────────────────────────────────

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Apply ok_fn if Ok, err_fn if Err. Signature: Result[T,E] → (T→U, E→F) → Result[U,F]"""
        return Result(ok_fn(self._value), _OK) if self._is_ok else Result(err_fn(self._value), _ERR)  # type: ignore[arg-type]

    # ─── Monad Operations ──────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Monadic bind (>>=). Chain operations that can fail.

        The first Err short-circuits the rest of the chain; its error type is
        widened to the union of the original and the new error types.

        Example:
            >>> def parse(s: str) -> Result[int, str]:
            ...     return Ok(int(s)) if s.isdigit() else Err(f"invalid: {s}")
            >>> Ok("42").flat_map(parse).flat_map(lambda n: Ok(n + 1)).unwrap()
            43
        """
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def and_then(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Alias for flat_map."""
        return self.flat_map(f)

    chain = and_then

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Err via f. Ok passes through unchanged."""
        return self if self._is_ok else f(self._value)  # type: ignore[arg-type,return-value]

    # ─── Inspection ────────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], None]) -> Result[T, E]:
        """Call f with Ok value for side effects, return self."""
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[E], None]) -> Result[T, E]:
        """Call f with Err value for side effects, return self."""
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    # ─── Pattern Matching ──────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis; both handlers are required.

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")
            'success: 42'
        """
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)
