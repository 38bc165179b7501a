"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error taxonomy for sequence evaluation.
"""

from __future__ import annotations

from typing import Any


class MachineError(RuntimeError):
    """Base class for errors raised while evaluating a machine."""


class DomainError(MachineError):
    """
    Raised when a strategy cannot produce a term for the requested index.

    Attributes:
        index: The index that was requested.
        strategy: Name of the strategy that rejected it, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        index: Any = None,
        strategy: str | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.strategy = strategy


class InvalidIndexError(DomainError):
    """Raised when an index is negative, not an integer, or outside the sequence."""


class TermOverflowError(DomainError):
    """Raised when a term would exceed the strategy's representable range."""


class MachineBusyError(MachineError):
    """Raised when a machine is evaluated again while an evaluation is in flight."""
