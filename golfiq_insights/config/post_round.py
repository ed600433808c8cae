"""Threshold constants for post-round insights.

Values are expressed for an 18-hole round. Partial rounds scale them down through
:func:`stroke_scale` so a 9-hole card is judged on the same footing.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import _float_env

FULL_ROUND_HOLES = 18


@dataclass(frozen=True)
class PostRoundThresholds:
    sg_weakness: float = -1.0
    sg_below_expectations: float = -2.0
    sg_above_expectations: float = 2.0
    sg_neutral_eps: float = 0.3


@dataclass(frozen=True)
class PostRoundResidual:
    dominance_ratio: float = 0.6
    dominance_absolute_floor: float = 1.0
    weak_separation_delta: float = 0.4
    measured_leak_strong: float = -1.0
    sentence_threshold: float = 1.5


POST_ROUND_THRESHOLDS = PostRoundThresholds(
    sg_weakness=_float_env("INSIGHTS_SG_WEAKNESS", -1.0),
)
POST_ROUND_RESIDUAL = PostRoundResidual()

SCORE_ONLY_NEAR_DELTA = 1.5
POST_ROUND_MESSAGE_MAX_CHARS = 320
POST_ROUND_SENTENCE_MAX_CHARS = 170


def stroke_scale(holes_played: int | None) -> float:
    """Fraction of a full round represented by *holes_played*."""

    if holes_played is None or holes_played <= 0:
        return 1.0
    return min(holes_played, FULL_ROUND_HOLES) / FULL_ROUND_HOLES


__all__ = [
    "FULL_ROUND_HOLES",
    "POST_ROUND_MESSAGE_MAX_CHARS",
    "POST_ROUND_RESIDUAL",
    "POST_ROUND_SENTENCE_MAX_CHARS",
    "POST_ROUND_THRESHOLDS",
    "PostRoundResidual",
    "PostRoundThresholds",
    "SCORE_ONLY_NEAR_DELTA",
    "stroke_scale",
]
