"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Prime number sequence strategy and primality helpers.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import MAX_TERM, Lookup, ensure_within, validate_index


def is_prime(n: int) -> bool:
    """Return whether `n` is prime using 6k +/- 1 trial division."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    stepper = 5
    while stepper * stepper <= n:
        if n % stepper == 0 or n % (stepper + 2) == 0:
            return False
        stepper += 6
    return True


def next_prime(n: int) -> int:
    """
    Return the smallest prime strictly greater than `n`.

    `n` is expected to be 0, 1 or a prime; odd candidates are stepped from it.
    """
    if n < 2:
        return 2
    if n == 2:
        return 3
    candidate = n + 2 if n % 2 else n + 1
    while not is_prime(candidate):
        candidate += 2
    return candidate


@dataclass(frozen=True, slots=True)
class Primes:
    """
    One-indexed primes in ascending order: P(1) = 2, P(10) = 29.

    Index 0 is outside the sequence. The closest cached P(k) with k < n seeds
    the search, so a warm machine needs only n - k `next_prime` steps.

    Attributes:
        max_value: Largest acceptable term, or `None` for no bound.
    """

    name: str = "primes"
    max_value: int | None = MAX_TERM

    def compute(self, n: int, lookup: Lookup) -> int:
        validate_index(n, minimum=1, strategy=self.name)

        k, value = 0, 0
        if n > 1:
            found = lookup.closest(n - 1)
            if found is not None:
                k, value = found
        for i in range(k + 1, n + 1):
            value = self._step(value, i)
        return value

    def _step(self, value: int, index: int) -> int:
        return ensure_within(
            next_prime(value), self.max_value, index=index, strategy=self.name
        )
