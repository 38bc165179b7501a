"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Machine binding a sequence strategy to its term cache, plus evaluation entry points.
"""

from __future__ import annotations

import copy
import logging
from threading import RLock
from typing import Any

from .cache import CacheStats, LRUTermCache, TermCache
from .errors import DomainError, MachineBusyError
from .metrics import MachineMetrics, NoOpMachineMetrics
from .strategies.base import SequenceStrategy, never_cached, validate_index

logger = logging.getLogger("math_machines.machine")


class Machine:
    """
    One strategy and the cache that memoizes its terms.

    The machine owns its cache exclusively. Evaluation goes through
    `lru_calculate`, which needs the machine to itself for the duration of
    the call; callers sharing a machine across threads must serialize access
    (see `LockedMachine`).
    """

    def __init__(
        self,
        strategy: SequenceStrategy,
        capacity: int,
        max_age: int,
        *,
        metrics: MachineMetrics | None = None,
    ) -> None:
        self._strategy = strategy
        self._cache = LRUTermCache(capacity, max_age)
        self._metrics: MachineMetrics = metrics or NoOpMachineMetrics()
        self._busy = False

    @property
    def strategy(self) -> SequenceStrategy:
        return self._strategy

    @property
    def cache(self) -> LRUTermCache:
        return self._cache

    @property
    def metrics(self) -> MachineMetrics:
        return self._metrics

    def clone(self, *, reset_cache: bool = False) -> "Machine":
        """
        Return an independent machine with the same strategy and bounds.

        The cache is deep-copied, or left empty when `reset_cache` is set.
        """
        twin = Machine(
            self._strategy,
            self._cache.capacity,
            self._cache.max_age,
            metrics=self._metrics,
        )
        if not reset_cache:
            twin._cache = copy.deepcopy(self._cache)
        return twin

    def __repr__(self) -> str:
        return f"Machine(strategy={self._strategy.name!r}, cache={self._cache!r})"


class _CacheLookup:
    """Read-through lookup restricted to indices below `ceiling`."""

    def __init__(self, cache: TermCache, ceiling: int) -> None:
        self._cache = cache
        self._ceiling = ceiling

    def __call__(self, index: int) -> Any | None:
        if index < 0 or index >= self._ceiling:
            return None
        return self._cache.get(index)

    def closest(self, index: int) -> tuple[int, Any] | None:
        bound = min(index, self._ceiling - 1)
        if bound < 0:
            return None
        return self._cache.closest(bound)


def lru_calculate(machine: Machine, n: int) -> Any:
    """
    Return term `n`, serving it from the machine's cache when possible.

    On a miss the strategy computes the term (reading lower indices through
    the same cache) and the result is inserted before returning.

    Raises:
        InvalidIndexError: `n` is outside the strategy's domain.
        TermOverflowError: the term exceeds the strategy's range.
        MachineBusyError: the machine is already evaluating.
    """
    strategy = machine.strategy
    tags = {"strategy": strategy.name}
    try:
        validate_index(n, strategy=strategy.name)
    except DomainError:
        machine.metrics.incr("domain_errors", tags=tags)
        raise
    if machine._busy:
        raise MachineBusyError(
            f"Machine for '{strategy.name}' is already evaluating; "
            "concurrent or re-entrant use must be serialized by the caller"
        )

    machine._busy = True
    cache = machine.cache
    before = cache.stats
    try:
        cached = cache.get(n)
        if cached is not None:
            machine.metrics.incr("cache_hits", tags=tags)
            logger.debug("%s(%s) served from cache", strategy.name, n)
            return cached

        machine.metrics.incr("cache_misses", tags=tags)
        try:
            value = strategy.compute(n, _CacheLookup(cache, n))
        except DomainError as exc:
            machine.metrics.incr("domain_errors", tags=tags)
            logger.debug("%s(%s) rejected: %s", strategy.name, n, exc)
            raise

        machine.metrics.incr("computations", tags=tags)
        cache.insert(n, value)
        return value
    finally:
        machine._busy = False
        _publish_cache_metrics(machine, before, tags)


def _publish_cache_metrics(
    machine: Machine, before: CacheStats, tags: dict[str, str]
) -> None:
    """Report evictions and expirations caused by one evaluation, and the store size."""
    after = machine.cache.stats
    evicted = after.evictions - before.evictions
    if evicted:
        machine.metrics.incr("cache_evictions", evicted, tags=tags)
    expired = after.expirations - before.expirations
    if expired:
        machine.metrics.incr("cache_expirations", expired, tags=tags)
    machine.metrics.gauge("cache_entries", len(machine.cache), tags=tags)


def raw_calculate(machine: Machine, n: int) -> Any:
    """Compute term `n` with the machine's strategy, bypassing the cache entirely."""
    return machine.strategy.compute(n, never_cached)


class LockedMachine:
    """
    Serializes evaluation of one machine across threads.

    The lock is re-entrant, so a strategy calling back through the same
    wrapper reaches `lru_calculate` and gets `MachineBusyError` instead of
    blocking on itself.
    """

    def __init__(self, machine: Machine) -> None:
        self._machine = machine
        self._lock = RLock()

    @property
    def machine(self) -> Machine:
        return self._machine

    def calculate(self, n: int) -> Any:
        with self._lock:
            return lru_calculate(self._machine, n)
