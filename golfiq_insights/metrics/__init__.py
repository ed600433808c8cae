from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

REGISTRY = CollectorRegistry()


def render_latest() -> tuple[bytes, str]:
    """Exposition body and content type for whichever host process serves /metrics."""

    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST


__all__ = [
    "REGISTRY",
    "render_latest",
]
