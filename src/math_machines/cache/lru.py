"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/lru.py.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import replace
from typing import Any

from .base import CacheEntry, CacheStats

logger = logging.getLogger("math_machines.cache")


class LRUTermCache:
    """
    Bounded index -> term store with LRU eviction and a staleness ceiling.

    Recency is measured on a logical clock. Every hit or insert advances the
    clock by one and stamps the touched entry with the new tick, so that
    entry has age 0. An entry whose age (`clock - last_access`) exceeds
    `max_age` is expired regardless of capacity.

    Entries are kept in recency order (LRU first), so capacity eviction pops
    from the front and entries stamped on the same tick leave in insertion
    order. Lookups that miss do not move the clock.
    """

    def __init__(self, capacity: int, max_age: int) -> None:
        """
        Args:
            capacity: Maximum number of live entries. 0 retains nothing.
            max_age: Maximum ticks since last access. 0 keeps only the entry
                touched most recently.
        """
        for label, bound in (("capacity", capacity), ("max_age", max_age)):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise ValueError(f"{label} must be an int")
            if bound < 0:
                raise ValueError(f"{label} must be >= 0")
        self._capacity = capacity
        self._max_age = max_age
        self._clock = 0
        self._rows: OrderedDict[int, CacheEntry] = OrderedDict()
        self._stats = CacheStats()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def max_age(self) -> int:
        return self._max_age

    @property
    def clock(self) -> int:
        """Current logical tick."""
        return self._clock

    @property
    def stats(self) -> CacheStats:
        """Snapshot of hit/miss/eviction counters."""
        return replace(self._stats)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, index: object) -> bool:
        return index in self._rows

    def contains(self, index: int) -> bool:
        """Membership test; never refreshes recency."""
        return index in self._rows

    def age(self, index: int) -> int | None:
        """Ticks since `index` was last accessed, or `None` when absent."""
        row = self._rows.get(index)
        if row is None:
            return None
        return self._clock - row.last_access

    def oldest_age(self) -> int:
        """Largest age of any live entry (0 when empty)."""
        if not self._rows:
            return 0
        row = next(iter(self._rows.values()))
        return self._clock - row.last_access

    def entries(self) -> list[CacheEntry]:
        """Copies of the live entries, least recently used first."""
        return [replace(row) for row in self._rows.values()]

    def get(self, index: int) -> Any | None:
        """Return the cached term for `index` and mark it most recently used."""
        row = self._rows.get(index)
        if row is not None and self._is_stale(row):
            self._expire(row)
            row = None
        if row is None:
            self._stats.misses += 1
            logger.debug("Cache miss for index %s", index)
            return None

        self._touch(row)
        self._stats.hits += 1
        self.sweep()
        return row.value

    def closest(self, index: int) -> tuple[int, Any] | None:
        """
        Return `(k, term)` for the greatest cached `k <= index`.

        Only the returned entry is refreshed. A miss leaves the clock alone.
        """
        best: CacheEntry | None = None
        for row in self._rows.values():
            if row.index <= index and (best is None or row.index > best.index):
                best = row
        if best is None:
            self._stats.misses += 1
            logger.debug("No cached index at or below %s", index)
            return None

        self._touch(best)
        self._stats.hits += 1
        self.sweep()
        return best.index, best.value

    def insert(self, index: int, value: Any) -> None:
        """
        Store `value` under `index`.

        Re-inserting a live index overwrites its value and refreshes it
        without changing the entry count.
        """
        row = self._rows.get(index)
        if row is not None:
            row.value = value
            self._touch(row)
            self.sweep()
            return

        self._clock += 1
        self._rows[index] = CacheEntry(
            index=index,
            value=value,
            last_access=self._clock,
        )
        self._stats.inserts += 1
        while len(self._rows) > self._capacity:
            _, evicted = self._rows.popitem(last=False)
            self._stats.evictions += 1
            logger.debug(
                "Evicted index %s (capacity=%d)", evicted.index, self._capacity
            )
        self.sweep()

    def discard(self, index: int) -> bool:
        """Remove `index` if present. Returns whether an entry was removed."""
        return self._rows.pop(index, None) is not None

    def sweep(self) -> list[CacheEntry]:
        """Expire every entry older than `max_age`. Returns the expired entries."""
        expired: list[CacheEntry] = []
        while self._rows:
            row = next(iter(self._rows.values()))
            if not self._is_stale(row):
                break
            self._expire(row)
            expired.append(row)
        return expired

    def clear(self) -> None:
        """Drop all entries. The clock keeps running."""
        self._rows.clear()

    def _touch(self, row: CacheEntry) -> None:
        self._clock += 1
        row.last_access = self._clock
        self._rows.move_to_end(row.index)

    def _is_stale(self, row: CacheEntry) -> bool:
        return self._clock - row.last_access > self._max_age

    def _expire(self, row: CacheEntry) -> None:
        self._rows.pop(row.index, None)
        self._stats.expirations += 1
        logger.debug(
            "Expired index %s (age=%d, max_age=%d)",
            row.index,
            self._clock - row.last_access,
            self._max_age,
        )

    def __repr__(self) -> str:
        return (
            f"LRUTermCache(capacity={self._capacity}, max_age={self._max_age}, "
            f"size={len(self._rows)}, clock={self._clock})"
        )
