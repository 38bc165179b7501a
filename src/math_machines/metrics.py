"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metrics hooks for machine evaluation.

`lru_calculate` reports, tagged by strategy name:

- counters `cache_hits`, `cache_misses`, `computations`, `domain_errors`
- counters `cache_evictions`, `cache_expirations` (entries dropped by one call)
- gauge `cache_entries` (live entries after the call)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class MachineMetrics(Protocol):
    """Minimal metrics interface for machine instrumentation."""

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        """Increment a counter metric."""

    def gauge(
        self, name: str, value: float, *, tags: Mapping[str, str] | None = None
    ) -> None:
        """Set a gauge metric to `value`."""


class NoOpMachineMetrics:
    """Default metrics sink when no metrics backend is provided."""

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        _ = name
        _ = value
        _ = tags

    def gauge(
        self, name: str, value: float, *, tags: Mapping[str, str] | None = None
    ) -> None:
        _ = name
        _ = value
        _ = tags


class PrometheusMachineMetrics(MachineMetrics):
    """
    Prometheus-backed machine metrics adapter.

    Counters are exported as `<namespace>_<name>_total` and gauges as
    `<namespace>_<name>`, labelled with the tag keys. Requires
    `prometheus_client` package.
    """

    def __init__(self, *, namespace: str = "math_machines", registry=None) -> None:
        try:
            import prometheus_client
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise RuntimeError(
                "PrometheusMachineMetrics requires `prometheus_client` to be installed."
            ) from exc

        self._client = prometheus_client
        self._namespace = namespace
        self._registry = registry if registry is not None else prometheus_client.REGISTRY
        self._collectors: dict[tuple[str, str, tuple[str, ...]], Any] = {}

    def incr(self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None) -> None:
        self._child(self._client.Counter, name, tags).inc(value)

    def gauge(self, name: str, value: float, *, tags: Mapping[str, str] | None = None) -> None:
        self._child(self._client.Gauge, name, tags).set(value)

    def _child(self, kind, name: str, tags: Mapping[str, str] | None):
        """Return the collector (or its labelled child) for `name` and tag keys."""
        labels = dict(tags or {})
        label_names = tuple(sorted(labels))
        key = (kind.__name__, name, label_names)
        collector = self._collectors.get(key)
        if collector is None:
            collector = kind(
                name=name,
                documentation=f"math_machines {kind.__name__.lower()} {name}",
                namespace=self._namespace,
                labelnames=label_names,
                registry=self._registry,
            )
            self._collectors[key] = collector

        if label_names:
            return collector.labels(*(str(labels[label]) for label in label_names))
        return collector
