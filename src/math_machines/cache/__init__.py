"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/__init__.py.
"""

from .base import CacheEntry, CacheStats, TermCache
from .lru import LRUTermCache

__all__ = [
    "CacheEntry",
    "CacheStats",
    "TermCache",
    "LRUTermCache",
]
