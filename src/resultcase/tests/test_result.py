"""Tests for the Result container.

Validates:
- Functor laws
- Monad laws
- Variant exclusivity and immutability
- Combinator pass-through behaviour
"""

from __future__ import annotations

from typing import Callable

import pytest

from resultcase import Err, Ok, Result, UnwrapError


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════

_inc: Callable[[int], int] = lambda x: x + 1
_dbl: Callable[[int], int] = lambda x: x * 2
_half: Callable[[int], Result[int, str]] = lambda x: Ok(x // 2) if x % 2 == 0 else Err(f"odd: {x}")
_neg: Callable[[int], Result[int, str]] = lambda x: Ok(-x) if x > 0 else Err("not positive")

_SAMPLES: list[Result[int, str]] = [Ok(8), Ok(3), Ok(0), Err("upstream")]


@pytest.mark.parametrize("m", _SAMPLES)
def test_functor_identity(m: Result[int, str]) -> None:
    """Functor law: fmap id = id, and an Err is passed through untouched."""
    assert m.map(lambda x: x) == m
    if m.is_err():
        assert m.map(lambda x: x) is m


@pytest.mark.parametrize("m", _SAMPLES)
def test_functor_composition(m: Result[int, str]) -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    assert m.map(lambda x: _inc(_dbl(x))) == m.map(_dbl).map(_inc)


def test_map_err_functor_laws() -> None:
    failure: Result[int, str] = Err("io")
    assert failure.map_err(lambda e: e) == failure
    assert failure.map_err(lambda e: (e + "!").upper()) == failure.map_err(lambda e: e + "!").map_err(str.upper)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("a", [4, 3, -2])
def test_monad_left_identity(a: int) -> None:
    """Monad law: return a >>= f = f a, whichever variant f produces."""
    assert Ok(a).flat_map(_half) == _half(a)


@pytest.mark.parametrize("m", _SAMPLES)
def test_monad_right_identity(m: Result[int, str]) -> None:
    """Monad law: m >>= return = m; an Err comes back as the same instance."""
    assert m.flat_map(Ok) == m
    if m.is_err():
        assert m.flat_map(Ok) is m


@pytest.mark.parametrize("m", _SAMPLES)
def test_monad_associativity(m: Result[int, str]) -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    assert m.flat_map(_half).flat_map(_neg) == m.flat_map(lambda x: _half(x).flat_map(_neg))


def test_err_passes_through_bind_chain_unchanged() -> None:
    failure: Result[int, str] = Err("upstream")
    assert failure.flat_map(_half).flat_map(_neg) is failure
    assert failure.and_then(_half).map(_inc) is failure


# ═════════════════════════════════════════════════════════════════════════════
# Variants
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("result", [Ok(0), Ok(None), Err(None), Err("x"), Ok(Err("nested"))])
def test_exactly_one_variant(result: Result[object, object]) -> None:
    assert result.is_ok() != result.is_err()


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert result.ok() == 42
    assert result.err() is None


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert not result.is_ok()
    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert result.ok() is None
    assert result.err() == "failed"


def test_immutable() -> None:
    result = Ok(1)
    with pytest.raises(AttributeError):
        result._is_ok = False  # type: ignore[misc]
    assert result.is_ok()


def test_unwrap_on_err_raises() -> None:
    failure = Err("boom")
    with pytest.raises(UnwrapError, match="boom") as info:
        failure.unwrap()
    assert info.value.result is failure


def test_unwrap_err_on_ok_raises() -> None:
    with pytest.raises(UnwrapError):
        Ok(1).unwrap_err()


def test_expect_message() -> None:
    with pytest.raises(RuntimeError, match="loading config: 'missing'"):
        Err("missing").expect("loading config")


# ═════════════════════════════════════════════════════════════════════════════
# Combinators
# ═════════════════════════════════════════════════════════════════════════════


def test_map_ok() -> None:
    assert Ok(5).map(lambda x: x * 2) == Ok(10)


def test_map_err_passes_through_same_instance() -> None:
    failure: Result[int, str] = Err("fail")
    calls: list[int] = []
    mapped = failure.map(lambda x: calls.append(x) or x * 2)

    assert mapped is failure
    assert calls == []


def test_map_err_on_err() -> None:
    assert Err("fail").map_err(lambda e: f"Error: {e}") == Err("Error: fail")


def test_map_err_on_ok() -> None:
    success: Result[int, str] = Ok(5)
    assert success.map_err(lambda e: f"Error: {e}") is success


def test_bimap() -> None:
    assert Ok(5).bimap(lambda x: x * 2, str.upper) == Ok(10)
    assert Err("fail").bimap(lambda x: x * 2, str.upper) == Err("FAIL")


def test_flat_map_ok_to_ok() -> None:
    assert Ok(5).flat_map(lambda x: Ok(x * 2)) == Ok(10)


def test_flat_map_ok_to_err() -> None:
    assert Ok(5).flat_map(lambda x: Err(f"rejected {x}")) == Err("rejected 5")


def test_flat_map_err_short_circuits() -> None:
    failure: Result[int, str] = Err("first")
    called = False

    def step(x: int) -> Result[int, int]:
        nonlocal called
        called = True
        return Ok(x)

    assert failure.flat_map(step) is failure
    assert not called


def test_chain_and_then_aliases() -> None:
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    assert Ok(1).chain(f) == Ok(1).and_then(f) == Ok(1).flat_map(f) == Ok(2)


def test_or_else() -> None:
    assert Err("fail").or_else(lambda e: Ok(f"recovered from {e}")) == Ok("recovered from fail")
    success: Result[int, str] = Ok(5)
    assert success.or_else(lambda e: Ok(0)) is success


def test_unwrap_or() -> None:
    assert Ok(42).unwrap_or(0) == 42
    assert Err("fail").unwrap_or(0) == 0


def test_unwrap_or_else() -> None:
    assert Ok(42).unwrap_or_else(len) == 42
    assert Err("fail").unwrap_or_else(len) == 4


def test_match() -> None:
    handlers = {"ok": lambda x: f"success: {x}", "err": lambda e: f"failed: {e}"}
    assert Ok(42).match(**handlers) == "success: 42"
    assert Err("boom").match(**handlers) == "failed: boom"


def test_match_requires_both_handlers() -> None:
    with pytest.raises(TypeError):
        Ok(1).match(ok=str)  # type: ignore[call-arg]


def test_inspect() -> None:
    seen: list[object] = []
    Ok(1).inspect(seen.append)
    Err("x").inspect(seen.append)
    Err("y").inspect_err(seen.append)
    Ok(2).inspect_err(seen.append)
    assert seen == [1, "y"]


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_truthiness() -> None:
    assert Ok(0)
    assert not Err("x")


def test_equality_distinguishes_variants() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert Ok(1) != 1
    assert len({Ok(1), Ok(1), Err(1)}) == 2


def test_repr() -> None:
    assert repr(Ok(1)) == "Ok(1)"
    assert str(Err("x")) == "Err('x')"


def test_iteration() -> None:
    assert list(Ok(5)) == [5]
    assert list(Err("x")) == []


def test_structural_pattern_matching() -> None:
    match Ok(3):
        case Result(value) if value > 2:
            matched = value
        case _:
            matched = None
    assert matched == 3


# ═════════════════════════════════════════════════════════════════════════════
# Railway-Oriented Programming Patterns
# ═════════════════════════════════════════════════════════════════════════════


def _parse_int(s: str) -> Result[int, str]:
    return Ok(int(s)) if s.lstrip("-").isdigit() else Err(f"invalid: {s}")


def _validate_positive(n: int) -> Result[int, str]:
    return Ok(n) if n > 0 else Err("must be positive")


def test_railway_success_path() -> None:
    result = Ok("42").flat_map(_parse_int).flat_map(_validate_positive).map(lambda n: n * 2)
    assert result == Ok(84)


def test_railway_error_path() -> None:
    assert Ok("bad").flat_map(_parse_int).flat_map(_validate_positive) == Err("invalid: bad")
    assert Ok("-5").flat_map(_parse_int).flat_map(_validate_positive) == Err("must be positive")


def test_fallback_chain() -> None:
    result = (
        Err("primary unavailable")
        .or_else(lambda _: Err("backup unavailable"))
        .or_else(lambda _: Ok("cached data"))
    )
    assert result == Ok("cached data")
