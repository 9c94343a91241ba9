from __future__ import annotations

from wavelab.core import Cache


def test_get_or_compute_runs_once_per_invalidation() -> None:
    calls: list[int] = []

    def compute() -> list[int]:
        calls.append(1)
        return [len(calls)]

    cache: Cache[list[int]] = Cache()
    assert not cache.is_valid

    first = cache.get_or_compute(compute)
    second = cache.get_or_compute(compute)
    assert first is second
    assert len(calls) == 1
    assert cache.is_valid
    assert cache.computations == 1

    cache.invalidate()
    assert not cache.is_valid
    assert cache.peek() is None
    third = cache.get_or_compute(compute)
    assert third == [2]
    assert cache.computations == 2


def test_invalidate_is_idempotent() -> None:
    cache: Cache[str] = Cache()
    cache.invalidate()
    cache.invalidate()
    assert not cache.is_valid
    assert cache.get_or_compute(lambda: "x") == "x"
    cache.invalidate()
    cache.invalidate()
    assert not cache.is_valid


def test_cache_can_start_filled() -> None:
    cache = Cache("ready")
    assert cache.is_valid
    assert cache.get_or_compute(lambda: "unused") == "ready"
    assert cache.computations == 0


def test_none_is_a_cacheable_value() -> None:
    calls: list[int] = []

    def compute() -> None:
        calls.append(1)
        return None

    cache: Cache[None] = Cache()
    assert cache.get_or_compute(compute) is None
    assert cache.get_or_compute(compute) is None
    assert cache.is_valid
    assert len(calls) == 1
    assert cache.computations == 1

    cache.invalidate()
    assert not cache.is_valid
