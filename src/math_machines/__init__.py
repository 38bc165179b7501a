"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Memoizing evaluators for integer sequences.

Terms are cached per index in an LRU store with a logical-clock age ceiling;
strategies may read lower-index terms through that cache while computing.

Quick start::

    from math_machines import Fibonacci, Machine, lru_calculate

    machine = Machine(Fibonacci(), 128, 50)
    lru_calculate(machine, 26)  # 121393
"""

from .cache import CacheEntry, CacheStats, LRUTermCache, TermCache
from .errors import (
    DomainError,
    InvalidIndexError,
    MachineBusyError,
    MachineError,
    TermOverflowError,
)
from .factory import create_machine, create_machine_from_env
from .machine import LockedMachine, Machine, lru_calculate, raw_calculate
from .metrics import MachineMetrics, NoOpMachineMetrics, PrometheusMachineMetrics
from .settings import MachineSettings
from .strategies import (
    MAX_TERM,
    Fibonacci,
    Harmonic,
    Lookup,
    Primes,
    SequenceStrategy,
    StrategyRegistryError,
    get_strategy,
    is_prime,
    list_strategies,
    next_prime,
    register_strategy,
)

__all__ = [
    "Machine",
    "LockedMachine",
    "lru_calculate",
    "raw_calculate",
    "LRUTermCache",
    "CacheEntry",
    "CacheStats",
    "TermCache",
    "SequenceStrategy",
    "Lookup",
    "MAX_TERM",
    "Fibonacci",
    "Primes",
    "Harmonic",
    "is_prime",
    "next_prime",
    "StrategyRegistryError",
    "register_strategy",
    "get_strategy",
    "list_strategies",
    "MachineError",
    "DomainError",
    "InvalidIndexError",
    "TermOverflowError",
    "MachineBusyError",
    "MachineSettings",
    "create_machine",
    "create_machine_from_env",
    "MachineMetrics",
    "NoOpMachineMetrics",
    "PrometheusMachineMetrics",
]
