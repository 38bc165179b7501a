"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Factory helpers for building machines from strategy ids or environment variables.
"""

from __future__ import annotations

from .machine import Machine
from .metrics import MachineMetrics
from .settings import MachineSettings
from .strategies import SequenceStrategy, get_strategy


def create_machine(
    strategy: str | SequenceStrategy = "fibonacci",
    *,
    capacity: int = 128,
    max_age: int = 50,
    metrics: MachineMetrics | None = None,
) -> Machine:
    """
    Build a machine from a registered strategy id or a strategy instance.

    Raises:
        StrategyRegistryError: `strategy` is an unknown id.
        ValueError: `capacity` or `max_age` is negative.
    """
    resolved = get_strategy(strategy) if isinstance(strategy, str) else strategy
    return Machine(resolved, capacity, max_age, metrics=metrics)


def create_machine_from_env(*, metrics: MachineMetrics | None = None) -> Machine:
    """Build a machine from `MATH_MACHINES_*` environment variables."""
    settings = MachineSettings.from_env()
    return create_machine(
        settings.strategy,
        capacity=settings.capacity,
        max_age=settings.max_age,
        metrics=metrics,
    )
