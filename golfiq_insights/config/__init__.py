"""Configuration helpers for the insights engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any


__all__ = [
    "InsightsSettings",
    "coerce_boolish",
    "get_settings",
    "reset_settings_cache",
]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

PRODUCTION_ENV = "production"


@dataclass(frozen=True)
class InsightsSettings:
    environment: str = "development"
    copy_guard_enabled: bool = True


@lru_cache(maxsize=1)
def get_settings() -> InsightsSettings:
    """Return cached insights settings."""

    environment = (os.getenv("GOLFIQ_ENV") or "development").strip().lower()
    guard_override = coerce_boolish(os.getenv("INSIGHTS_COPY_GUARD"))
    copy_guard_enabled = (
        guard_override if guard_override is not None else environment != PRODUCTION_ENV
    )
    return InsightsSettings(
        environment=environment,
        copy_guard_enabled=copy_guard_enabled,
    )


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def coerce_boolish(value: Any) -> bool | None:
    """Attempt to coerce *value* into a boolean."""

    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return None
