"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Registry for named sequence strategies.
"""

from __future__ import annotations

from threading import Lock

from .base import SequenceStrategy

_REGISTRY: dict[str, SequenceStrategy] = {}
_LOCK = Lock()


class StrategyRegistryError(RuntimeError):
    """Raised when strategy registration/resolution fails."""


def register_strategy(
    strategy: SequenceStrategy,
    *,
    overwrite: bool = False,
) -> None:
    """Register one strategy instance by its `name`."""
    key = str(strategy.name).strip().lower()
    if not key:
        raise StrategyRegistryError("Strategy name must be non-empty")

    with _LOCK:
        if key in _REGISTRY and not overwrite:
            raise StrategyRegistryError(f"Strategy already registered: {key}")
        _REGISTRY[key] = strategy


def get_strategy(name: str) -> SequenceStrategy:
    """Resolve one registered strategy by name."""
    key = str(name).strip().lower()
    with _LOCK:
        resolved = _REGISTRY.get(key)
    if resolved is None:
        raise StrategyRegistryError(f"Unknown sequence strategy '{name}'")
    return resolved


def list_strategies() -> list[str]:
    """List registered strategy names."""
    with _LOCK:
        return sorted(_REGISTRY.keys())
