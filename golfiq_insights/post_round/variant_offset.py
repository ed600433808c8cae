from __future__ import annotations

import math
from typing import Any, Mapping


def _stored_offset(existing: Any) -> int:
    if existing is None:
        return 0
    if isinstance(existing, Mapping):
        raw = existing.get("variant_offset")
    else:
        raw = getattr(existing, "variant_offset", None)

    if isinstance(raw, bool) or raw is None:
        return 0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return math.floor(value)


def resolve_post_round_variant_offset(
    existing: Any,
    *,
    force_regenerate: bool = False,
    bump_variant: bool = False,
) -> int:
    """Offset for the next render of a round's insights.

    Only an explicit regenerate-with-bump moves to the next wording; everything else
    keeps the stored offset so repeated reads render the same text.
    """

    previous = _stored_offset(existing)
    if force_regenerate is True and bump_variant is True:
        return previous + 1
    return previous


__all__ = ["resolve_post_round_variant_offset"]
