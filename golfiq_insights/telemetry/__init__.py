"""Telemetry hooks for the insights engine."""

from .events import (
    record_post_round_insights_generated,
    set_insights_telemetry_emitter,
)

__all__ = [
    "record_post_round_insights_generated",
    "set_insights_telemetry_emitter",
]
