from __future__ import annotations

import logging
from dataclasses import fields

import pytest

from math_machines.cache import CacheEntry, LRUTermCache


def _assert_invariants(cache: LRUTermCache) -> None:
    assert len(cache) <= cache.capacity
    for entry in cache.entries():
        assert cache.clock - entry.last_access <= cache.max_age


def test_first_inserted_index_is_evicted_first():
    cache = LRUTermCache(3, 100)
    for index in (1, 2, 3, 4):
        cache.insert(index, index * 10)

    assert len(cache) == 3
    assert not cache.contains(1)
    assert [entry.index for entry in cache.entries()] == [2, 3, 4]


def test_hit_refreshes_recency_before_capacity_eviction():
    cache = LRUTermCache(2, 100)
    cache.insert(1, "one")
    cache.insert(2, "two")

    assert cache.get(1) == "one"
    cache.insert(3, "three")

    assert 1 in cache
    assert 2 not in cache
    assert 3 in cache


def test_reinsert_keeps_count_and_refreshes_recency():
    cache = LRUTermCache(2, 100)
    cache.insert(1, 10)
    cache.insert(2, 20)
    cache.insert(1, 10)

    assert len(cache) == 2
    assert cache.clock == 3
    assert cache.age(1) == 0
    assert [entry.index for entry in cache.entries()] == [2, 1]

    cache.insert(3, 30)
    assert sorted(entry.index for entry in cache.entries()) == [1, 3]


def test_reinsert_overwrites_value():
    cache = LRUTermCache(4, 100)
    cache.insert(7, "old")
    cache.insert(7, "new")
    assert cache.get(7) == "new"
    assert cache.stats.inserts == 1


def test_miss_does_not_advance_clock():
    cache = LRUTermCache(4, 100)
    cache.insert(1, 1)

    assert cache.get(99) is None
    assert cache.clock == 1
    assert cache.stats.misses == 1
    assert cache.stats.hits == 0


def test_zero_capacity_retains_nothing():
    cache = LRUTermCache(0, 100)
    cache.insert(5, 8)

    assert len(cache) == 0
    assert cache.get(5) is None
    assert cache.stats.evictions == 1


def test_zero_max_age_expires_entry_after_another_access():
    cache = LRUTermCache(10, 0)
    cache.insert(1, "a")
    assert cache.get(1) == "a"

    cache.insert(2, "b")

    assert cache.get(1) is None
    assert cache.contains(2)
    assert cache.stats.expirations == 1


def test_age_ceiling_fires_below_capacity():
    cache = LRUTermCache(10, 2)
    for index in (1, 2, 3):
        cache.insert(index, index)
    assert cache.contains(1)
    assert cache.oldest_age() == 2

    cache.insert(4, 4)

    assert not cache.contains(1)
    assert cache.contains(2)
    assert len(cache) == 3


def test_invariants_hold_across_mixed_operations():
    cache = LRUTermCache(3, 4)
    operations = [
        ("insert", 1), ("insert", 2), ("get", 1), ("insert", 3), ("insert", 4),
        ("get", 2), ("get", 3), ("insert", 5), ("get", 9), ("insert", 1),
        ("get", 4), ("get", 5), ("get", 5), ("get", 5), ("get", 5),
        ("insert", 6), ("get", 1),
    ]
    for op, index in operations:
        if op == "insert":
            cache.insert(index, index * index)
        else:
            value = cache.get(index)
            assert value is None or value == index * index
        _assert_invariants(cache)


def test_discard_is_idempotent():
    cache = LRUTermCache(2, 100)
    cache.insert(1, 1)

    assert cache.discard(1) is True
    assert cache.discard(1) is False
    assert len(cache) == 0


def test_sweep_returns_nothing_when_fresh():
    cache = LRUTermCache(2, 100)
    cache.insert(1, 1)
    assert cache.sweep() == []


def test_entries_are_snapshots():
    cache = LRUTermCache(2, 100)
    cache.insert(1, 1)

    snapshot = cache.entries()
    snapshot[0].value = "tampered"

    assert cache.get(1) == 1


def test_entry_records_index_value_and_last_access():
    cache = LRUTermCache(2, 100)
    cache.insert(4, 3)
    cache.insert(5, 5)
    cache.get(4)

    assert [(e.index, e.value, e.last_access) for e in cache.entries()] == [
        (5, 5, 2),
        (4, 3, 3),
    ]
    assert [f.name for f in fields(CacheEntry)] == ["index", "value", "last_access"]


def test_clear_keeps_clock_running():
    cache = LRUTermCache(2, 100)
    cache.insert(1, 1)
    cache.insert(2, 2)
    cache.clear()

    assert len(cache) == 0
    assert cache.clock == 2


@pytest.mark.parametrize(
    ("capacity", "max_age", "match"),
    [(-1, 1, "capacity"), (1, -1, "max_age"), (1.5, 1, "capacity"), (1, True, "max_age")],
)
def test_rejects_invalid_bounds(capacity, max_age, match):
    with pytest.raises(ValueError, match=match):
        LRUTermCache(capacity, max_age)


def test_evictions_are_logged(caplog):
    cache = LRUTermCache(1, 100)
    with caplog.at_level(logging.DEBUG, logger="math_machines.cache"):
        cache.insert(1, 1)
        cache.insert(2, 2)
    assert any("Evicted index 1" in record.getMessage() for record in caplog.records)


def test_closest_returns_greatest_index_at_or_below():
    cache = LRUTermCache(8, 100)
    for index in (2, 5, 9):
        cache.insert(index, index * 10)

    assert cache.closest(8) == (5, 50)
    assert cache.closest(9) == (9, 90)
    assert cache.closest(100) == (9, 90)


def test_closest_refreshes_only_the_returned_entry():
    cache = LRUTermCache(3, 100)
    for index in (2, 5, 9):
        cache.insert(index, index)

    cache.closest(6)

    assert cache.age(5) == 0
    assert [entry.index for entry in cache.entries()] == [2, 9, 5]
    cache.insert(11, 11)
    assert not cache.contains(2)
    assert cache.contains(5)


def test_closest_miss_does_not_advance_clock():
    cache = LRUTermCache(4, 100)
    cache.insert(7, 7)

    assert cache.closest(6) is None
    assert cache.clock == 1
    assert cache.stats.misses == 1
