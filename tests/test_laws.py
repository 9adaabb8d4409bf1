"""Property tests: the algebraic laws both wrappers must obey."""

from __future__ import annotations

import asyncio
from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from verdict import AsyncResult, Result

pytestmark = pytest.mark.unit

values = st.one_of(
    st.none(), st.integers(), st.text(max_size=8), st.lists(st.integers(), max_size=3)
)
ints = st.integers(min_value=-(10**6), max_value=10**6)
results = st.one_of(ints.map(Result.ok), st.text(max_size=8).map(Result.err))


def _f(x: int) -> Result[str, int]:
    return Result.ok(x + 1) if x % 3 else Result.err(f"f:{x}")


def _g(x: int) -> Result[str, int]:
    return Result.ok(x * 2) if x % 2 else Result.err(f"g:{x}")


@given(v=values)
def test_ok_roundtrips_value(v: Any) -> None:
    r = Result.ok(v)
    assert r.is_ok()
    assert r.unwrap() == v


@given(e=values)
def test_err_roundtrips_error(e: Any) -> None:
    r = Result.err(e)
    assert r.is_err()
    assert r.unwrap_err() == e


@given(v=ints)
def test_map_applies_function(v: int) -> None:
    assert Result.ok(v).map(lambda x: x * 3 - 1).unwrap() == v * 3 - 1


@given(r=results)
def test_map_identity(r: Result[str, int]) -> None:
    assert r.map(lambda x: x) == r


@given(r=results)
def test_map_composition(r: Result[str, int]) -> None:
    def inc(x: int) -> int:
        return x + 1

    def dbl(x: int) -> int:
        return x * 2

    assert r.map(inc).map(dbl) == r.map(lambda x: dbl(inc(x)))


@given(e=st.text(max_size=8))
def test_chain_short_circuits(e: str) -> None:
    called = False

    def f(x: int) -> Result[str, int]:
        nonlocal called
        called = True
        return Result.ok(x)

    assert Result.err(e).chain(f) == Result.err(e)
    assert not called


@given(v=ints)
def test_chain_left_identity(v: int) -> None:
    assert Result.ok(v).chain(_f) == _f(v)


@given(r=results)
def test_chain_right_identity(r: Result[str, int]) -> None:
    assert r.chain(Result.ok) == r


@given(r=results)
def test_chain_associativity(r: Result[str, int]) -> None:
    assert r.chain(_f).chain(_g) == r.chain(lambda x: _f(x).chain(_g))


@given(r=results, default=values)
def test_unwrap_or_returns_payload_or_default(r: Result[str, int], default: Any) -> None:
    expected = r.unwrap() if r.is_ok() else default
    assert r.unwrap_or(default) == expected


@given(r=results)
def test_match_agrees_with_predicates(r: Result[str, int]) -> None:
    assert r.match(lambda _: "err", lambda _: "ok") == ("ok" if r.is_ok() else "err")


@given(v=values.filter(lambda x: x is not None), e=st.text(max_size=8))
def test_from_nullable_with_error_succeeds_for_present_values(v: Any, e: str) -> None:
    assert Result.from_nullable_with_error(e, v) == Result.ok(v)


@settings(max_examples=50)
@given(v=ints)
def test_async_map_matches_sync_map(v: int) -> None:
    async def scenario() -> tuple[int, int]:
        base = await AsyncResult.ok(v)
        mapped = await base.map(lambda x: x * 3 - 1)
        chained = await mapped.chain(lambda x: AsyncResult.ok(x + 1))
        return await mapped.unwrap(), await chained.unwrap()

    sync = Result.ok(v).map(lambda x: x * 3 - 1)
    expected = (sync.unwrap(), sync.chain(lambda x: Result.ok(x + 1)).unwrap())
    assert asyncio.run(scenario()) == expected


@settings(max_examples=50)
@given(e=st.text(max_size=8))
def test_async_failure_short_circuits(e: str) -> None:
    calls: list[int] = []

    async def scenario() -> str:
        base = await AsyncResult.err(e)
        mapped = await base.map(calls.append)
        chained = await mapped.chain(lambda x: AsyncResult.ok(calls.append(x)))
        return await chained.unwrap_err()

    assert asyncio.run(scenario()) == e
    assert calls == []
