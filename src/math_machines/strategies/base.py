"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Strategy protocol and index validation shared by sequence implementations.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..errors import InvalidIndexError, TermOverflowError

# Largest term the strategies accept by default (unsigned 128-bit).
MAX_TERM = 2**128 - 1


class Lookup(Protocol):
    """
    Read-through access to terms already cached for smaller indices.

    Both reads return `None` on a miss; a hit refreshes only the entry read.
    """

    def __call__(self, index: int) -> Any | None:
        """Return the cached term for exactly `index`."""
        ...

    def closest(self, index: int) -> tuple[int, Any] | None:
        """Return `(k, term)` for the greatest cached `k <= index`."""
        ...


class SequenceStrategy(Protocol):
    """Protocol implemented by sequence strategies used by machines."""

    name: str

    def compute(self, n: int, lookup: Lookup) -> Any:
        """
        Return term `n` of the sequence.

        `lookup` may be consulted for smaller indices; it returns `None` on a
        miss and strategies must fall back to computing the value directly.
        """
        ...


def validate_index(n: Any, *, minimum: int = 0, strategy: str | None = None) -> int:
    """
    Return `n` unchanged when it is a usable sequence index.

    Raises:
        InvalidIndexError: `n` is not an int (bools included) or is below
            `minimum`.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidIndexError(
            f"Index must be an integer, got {type(n).__name__}",
            index=n,
            strategy=strategy,
        )
    if n < minimum:
        raise InvalidIndexError(
            f"Index must be >= {minimum}, got {n}",
            index=n,
            strategy=strategy,
        )
    return n


def ensure_within(
    value: int,
    max_value: int | None,
    *,
    index: int,
    strategy: str,
) -> int:
    """Raise `TermOverflowError` when `value` exceeds `max_value`."""
    if max_value is not None and value > max_value:
        raise TermOverflowError(
            f"{strategy}({index}) exceeds the maximum term value {max_value}",
            index=index,
            strategy=strategy,
        )
    return value


class _NeverCached:
    """Lookup that always misses."""

    def __call__(self, index: int) -> None:
        _ = index
        return None

    def closest(self, index: int) -> None:
        _ = index
        return None


never_cached = _NeverCached()
