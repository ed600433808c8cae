"""Telemetry helpers for post-round insight generation."""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Mapping, MutableMapping, Optional, Sequence

InsightsTelemetryEmitter = Callable[[str, Mapping[str, object]], None]

POST_ROUND_INSIGHTS_GENERATED = "post_round.insights.generated"

_emitter: Optional[InsightsTelemetryEmitter] = None
_logger = logging.getLogger("golfiq_insights.telemetry.events")


def set_insights_telemetry_emitter(candidate: InsightsTelemetryEmitter | None) -> None:
    """Register a telemetry emitter used for insights instrumentation."""

    global _emitter
    _emitter = candidate if callable(candidate) else None


def _now_ms() -> int:
    return int(time.time() * 1000)


def _safe_emit(event: str, payload: MutableMapping[str, object]) -> None:
    if not _emitter:
        _logger.debug("telemetry emitter not configured for event %s", event)
        return
    try:
        _emitter(event, dict(payload))
    except Exception:  # pragma: no cover - defensive logging only
        _logger.exception("failed to emit telemetry event %s", event)


def record_post_round_insights_generated(
    round_id: str,
    *,
    mode: str,
    outcomes: Sequence[str],
    variant_offset: int,
    regenerated: bool = False,
) -> None:
    payload: Dict[str, object] = {
        "roundId": round_id,
        "mode": mode,
        "outcomes": list(outcomes),
        "variantOffset": int(variant_offset),
        "ts": _now_ms(),
    }
    if regenerated:
        payload["regenerated"] = True
    _safe_emit(POST_ROUND_INSIGHTS_GENERATED, payload)


__all__ = [
    "POST_ROUND_INSIGHTS_GENERATED",
    "record_post_round_insights_generated",
    "set_insights_telemetry_emitter",
]
