"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Harmonic series strategy.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .base import Lookup, validate_index


@dataclass(frozen=True, slots=True)
class Harmonic:
    """Partial sums H(n) = 1 + 1/2 + ... + 1/n as exact fractions, H(0) = 0."""

    name: str = "harmonic"

    def compute(self, n: int, lookup: Lookup) -> Fraction:
        validate_index(n, strategy=self.name)
        if n == 0:
            return Fraction(0)

        k, total = 0, Fraction(0)
        found = lookup.closest(n - 1)
        if found is not None:
            k, total = found
        for j in range(k + 1, n + 1):
            total += Fraction(1, j)
        return total
