"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/base.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(slots=True)
class CacheEntry:
    """One cached term with logical-clock access metadata."""

    index: int
    value: Any
    last_access: int


@dataclass(slots=True)
class CacheStats:
    """Running counters for one cache store."""

    hits: int = 0
    misses: int = 0
    inserts: int = 0
    evictions: int = 0
    expirations: int = 0


class TermCache(Protocol):
    """Protocol implemented by term caches owned by a machine."""

    def get(self, index: int) -> Any | None: ...

    def insert(self, index: int, value: Any) -> None: ...

    def closest(self, index: int) -> tuple[int, Any] | None: ...

    def contains(self, index: int) -> bool: ...

    def __len__(self) -> int: ...
