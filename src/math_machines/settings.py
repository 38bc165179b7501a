"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Machine settings and explicit config loading.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field


def _env_first(*names: str, default: str | None = None) -> str | None:
    """
    Return the first non-empty environment variable in `names`.

    Args:
        *names: Environment variable names to check in order.
        default: Value returned if no non-empty variable is found.
    """
    for name in names:
        raw = os.getenv(name)
        if raw is None:
            continue
        value = raw.strip()
        if value:
            return value
    return default


class MachineSettings(BaseModel):
    """Validated settings used to build a machine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: str = Field(default="fibonacci", min_length=1)
    capacity: int = Field(default=128, ge=0)
    max_age: int = Field(default=50, ge=0)

    @staticmethod
    def from_env() -> "MachineSettings":
        """
        Load settings from `MATH_MACHINES_*` environment variables.

        Blank or unset variables keep their defaults; malformed values raise
        `pydantic.ValidationError`.
        """
        values: dict[str, str] = {}
        for field_name, env_name in (
            ("strategy", "MATH_MACHINES_STRATEGY"),
            ("capacity", "MATH_MACHINES_CAPACITY"),
            ("max_age", "MATH_MACHINES_MAX_AGE"),
        ):
            raw = _env_first(env_name)
            if raw is not None:
                values[field_name] = raw
        return MachineSettings.model_validate(values)
