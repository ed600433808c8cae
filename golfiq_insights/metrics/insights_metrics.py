from __future__ import annotations

from typing import Sequence

from prometheus_client import Counter, Histogram

from . import REGISTRY

POST_ROUND_INSIGHTS_TOTAL = Counter(
    "post_round_insights_total",
    "Post-round insight messages generated, by mode, message slot and outcome code",
    ["mode", "slot", "outcome"],
    registry=REGISTRY,
)

POST_ROUND_COPY_GUARD_VIOLATIONS_TOTAL = Counter(
    "post_round_copy_guard_violations_total",
    "Rendered insight copy rejected by the banned-token guard",
    ["message_key"],
    registry=REGISTRY,
)

POST_ROUND_MESSAGE_CHARS = Histogram(
    "post_round_message_chars",
    "Length of rendered post-round insight messages (characters)",
    buckets=(40, 80, 120, 160, 200, 240, 280, 320),
    registry=REGISTRY,
)


def observe_post_round_insights(
    mode: str, outcomes: Sequence[str], messages: Sequence[str]
) -> None:
    """Record one generated insight set."""

    for slot, outcome in enumerate(outcomes, start=1):
        POST_ROUND_INSIGHTS_TOTAL.labels(mode=mode, slot=f"m{slot}", outcome=outcome).inc()
    for message in messages:
        POST_ROUND_MESSAGE_CHARS.observe(len(message))


def observe_copy_guard_violation(message_key: str) -> None:
    POST_ROUND_COPY_GUARD_VIOLATIONS_TOTAL.labels(message_key=message_key).inc()


__all__ = [
    "POST_ROUND_COPY_GUARD_VIOLATIONS_TOTAL",
    "POST_ROUND_INSIGHTS_TOTAL",
    "POST_ROUND_MESSAGE_CHARS",
    "observe_copy_guard_violation",
    "observe_post_round_insights",
]
