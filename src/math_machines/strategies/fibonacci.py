"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Fibonacci sequence strategy.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import MAX_TERM, Lookup, ensure_within, validate_index


@dataclass(frozen=True, slots=True)
class Fibonacci:
    """
    Zero-indexed Fibonacci numbers: F(0) = 0, F(1) = 1, F(n) = F(n-1) + F(n-2).

    When both predecessors are cached the term is their sum. Otherwise the
    highest cached pair F(k-1), F(k) below `n` is located and iterated
    forward, starting from the base cases when no pair is cached.

    Attributes:
        max_value: Largest acceptable term, or `None` for no bound.
    """

    name: str = "fibonacci"
    max_value: int | None = MAX_TERM

    def compute(self, n: int, lookup: Lookup) -> int:
        validate_index(n, strategy=self.name)
        if n < 2:
            return n

        # n-2 first so n-1 ends up the more recently used of the pair.
        before = lookup(n - 2)
        previous = lookup(n - 1)
        if before is not None and previous is not None:
            return ensure_within(
                before + previous, self.max_value, index=n, strategy=self.name
            )

        # F(n-1) is missing or F(n-2) is, so the best pair tops out lower.
        ceiling = n - 2 if before is not None else n - 3
        k, a, b = self._closest_pair(ceiling, lookup) or (1, 0, 1)
        for i in range(k + 1, n + 1):
            a, b = b, a + b
            ensure_within(b, self.max_value, index=i, strategy=self.name)
        return b

    def _closest_pair(self, ceiling: int, lookup: Lookup) -> tuple[int, int, int] | None:
        """Return `(k, F(k-1), F(k))` for the greatest cached pair with `k <= ceiling`."""
        candidate = ceiling
        while candidate >= 2:
            found = lookup.closest(candidate)
            if found is None:
                return None
            k, current = found
            if k < 2:
                return None
            earlier = lookup(k - 1)
            if earlier is not None:
                return k, earlier, current
            # F(k-1) is absent, so no pair can end at k-1 either.
            candidate = k - 2
        return None
