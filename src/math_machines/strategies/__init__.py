"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Sequence strategies and the strategy registry.
"""

from .base import MAX_TERM, Lookup, SequenceStrategy, never_cached, validate_index
from .fibonacci import Fibonacci
from .harmonic import Harmonic
from .primes import Primes, is_prime, next_prime
from .registry import (
    StrategyRegistryError,
    get_strategy,
    list_strategies,
    register_strategy,
)

# Register built-ins at import time.
register_strategy(Fibonacci(), overwrite=True)
register_strategy(Primes(), overwrite=True)
register_strategy(Harmonic(), overwrite=True)

__all__ = [
    "MAX_TERM",
    "Lookup",
    "SequenceStrategy",
    "validate_index",
    "never_cached",
    "Fibonacci",
    "Primes",
    "Harmonic",
    "is_prime",
    "next_prime",
    "StrategyRegistryError",
    "register_strategy",
    "get_strategy",
    "list_strategies",
]
