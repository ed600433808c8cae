"""Deterministic choice between interchangeable phrasings of one outcome."""

from __future__ import annotations

import hashlib
import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class VariantPick:
    text: str
    index: int
    count: int


def variant_hash(seed: str, outcome: str) -> int:
    """First four bytes of sha256("<seed>|<outcome>") as an unsigned integer."""

    digest = hashlib.sha256(f"{seed}|{outcome}".encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big")


def _resolve_index(
    outcome: str,
    count: int,
    *,
    seed: str | None,
    offset: float,
    fixed_index: float | None,
) -> int:
    if fixed_index is not None and math.isfinite(fixed_index):
        return math.floor(fixed_index) % count

    step = math.floor(offset) if math.isfinite(offset) else 0
    if not seed:
        return step % count

    return (variant_hash(seed, outcome) + step) % count


def pick_outcome_variant_meta(
    outcome: str,
    variants: Sequence[str],
    *,
    seed: str | None = None,
    offset: float = 0,
    fixed_index: float | None = None,
) -> VariantPick:
    if not variants:
        return VariantPick(text="", index=0, count=0)

    index = _resolve_index(
        outcome, len(variants), seed=seed, offset=offset, fixed_index=fixed_index
    )
    return VariantPick(text=variants[index], index=index, count=len(variants))


def pick_outcome_variant(
    outcome: str,
    variants: Sequence[str],
    *,
    seed: str | None = None,
    offset: float = 0,
    fixed_index: float | None = None,
) -> str:
    return pick_outcome_variant_meta(
        outcome, variants, seed=seed, offset=offset, fixed_index=fixed_index
    ).text


__all__ = [
    "VariantPick",
    "pick_outcome_variant",
    "pick_outcome_variant_meta",
    "variant_hash",
]
