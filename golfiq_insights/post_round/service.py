"""Caller-side flow: round facts in, stored insight payload out.

Persistence and HTTP stay with the host application. This module decides which engine a
round goes to, applies the strokes-gained entitlement gate and records telemetry.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from golfiq_insights.config import InsightsSettings, get_settings
from golfiq_insights.config.post_round import POST_ROUND_THRESHOLDS, stroke_scale
from golfiq_insights.metrics.insights_metrics import observe_post_round_insights
from golfiq_insights.telemetry.events import record_post_round_insights_generated

from .missing_stats import get_missing_stats
from .onboarding import ONBOARDING_ROUNDS, build_onboarding_post_round_insights
from .policy import build_deterministic_post_round_insights
from .schemas import (
    InsightsMode,
    MissingStats,
    OnboardingInput,
    PerformanceBand,
    PolicyInput,
    PolicyOutput,
    PostRoundInsightsPayload,
    RoundEvidence,
    VariantOptions,
)
from .sg_selection import (
    MeasuredSgInputs,
    SelectionThresholds,
    run_measured_sg_selection,
)
from .variant_offset import resolve_post_round_variant_offset

_logger = logging.getLogger(__name__)


class RoundFacts(BaseModel):
    """Stored round data the insights are computed from."""

    round_id: str = Field(serialization_alias="roundId")
    round_number: int = Field(ge=1, serialization_alias="roundNumber")
    score: float
    to_par: int = Field(serialization_alias="toPar")
    avg_score: Optional[float] = Field(default=None, serialization_alias="avgScore")
    previous_score: Optional[float] = Field(
        default=None, serialization_alias="previousScore"
    )
    holes_played: Optional[int] = Field(default=None, serialization_alias="holesPlayed")
    fir_hit: Optional[int] = Field(default=None, serialization_alias="firHit")
    fir_possible: Optional[int] = Field(default=None, serialization_alias="firPossible")
    gir_hit: Optional[int] = Field(default=None, serialization_alias="girHit")
    gir_possible: Optional[int] = Field(default=None, serialization_alias="girPossible")
    putts: Optional[int] = None
    penalties: Optional[int] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class StrokesGainedComponents(BaseModel):
    """Output of the external strokes-gained model for one round."""

    off_tee: Optional[float] = None
    approach: Optional[float] = None
    putting: Optional[float] = None
    penalties: Optional[float] = None
    residual: Optional[float] = None
    total: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class ViewerEntitlements(BaseModel):
    is_premium: bool = False
    show_strokes_gained: bool = True

    model_config = ConfigDict(frozen=True)

    @property
    def strokes_gained_allowed(self) -> bool:
        return self.is_premium and self.show_strokes_gained


def classify_band(sg_total: float | None, scale: float = 1.0) -> PerformanceBand:
    """Place a round above, at or below expectation from its total strokes gained."""

    if sg_total is None or not math.isfinite(sg_total):
        return "expected"
    if sg_total <= POST_ROUND_THRESHOLDS.sg_below_expectations * scale:
        return "below"
    if sg_total >= POST_ROUND_THRESHOLDS.sg_above_expectations * scale:
        return "above"
    return "expected"


def _recorded_only(
    strokes_gained: StrokesGainedComponents, missing: MissingStats
) -> MeasuredSgInputs:
    # a component is only measured when the stat feeding it was recorded
    return MeasuredSgInputs(
        off_tee=None if missing.fir else strokes_gained.off_tee,
        approach=None if missing.gir else strokes_gained.approach,
        putting=None if missing.putts else strokes_gained.putting,
        penalties=None if missing.penalties else strokes_gained.penalties,
        residual=strokes_gained.residual,
        total=strokes_gained.total,
    )


def build_round_evidence(round_facts: RoundFacts) -> RoundEvidence:
    return RoundEvidence(
        fairways_hit=round_facts.fir_hit,
        fairways_possible=round_facts.fir_possible,
        greens_hit=round_facts.gir_hit,
        greens_possible=round_facts.gir_possible,
        putts_total=round_facts.putts,
        penalties_total=round_facts.penalties,
    )


def build_policy_input(
    round_facts: RoundFacts,
    strokes_gained: StrokesGainedComponents | None,
    entitlements: ViewerEntitlements,
) -> PolicyInput:
    missing = get_missing_stats(round_facts)
    scale = stroke_scale(round_facts.holes_played)
    sg = strokes_gained if entitlements.strokes_gained_allowed else None

    inputs = _recorded_only(sg, missing) if sg is not None else MeasuredSgInputs()
    selection = run_measured_sg_selection(inputs, SelectionThresholds().scaled(scale))

    return PolicyInput(
        score=round_facts.score,
        to_par=round_facts.to_par,
        avg_score=round_facts.avg_score,
        band=classify_band(sg.total if sg else None, scale),
        measured_components=selection.components,
        best_measured=selection.best,
        worst_measured=selection.opportunity,
        opportunity_is_weak=selection.opportunity_is_weak,
        residual_dominant=selection.residual_dominant,
        weak_separation=selection.weak_separation,
        missing=missing,
        residual_value=sg.residual if sg else None,
        round_evidence=build_round_evidence(round_facts),
        holes_played=round_facts.holes_played,
    )


def build_post_round_insights(
    round_facts: RoundFacts,
    strokes_gained: StrokesGainedComponents | None,
    entitlements: ViewerEntitlements,
    *,
    existing_payload: Any = None,
    force_regenerate: bool = False,
    bump_variant: bool = False,
    settings: InsightsSettings | None = None,
) -> PostRoundInsightsPayload:
    """Compute the insight payload to upsert for ``round_facts.round_id``.

    ``existing_payload`` is whatever the store returned for the round last time (a
    payload model, a mapping or ``None``); only its ``variant_offset`` is read.
    """

    active = settings or get_settings()
    offset = resolve_post_round_variant_offset(
        existing_payload,
        force_regenerate=force_regenerate,
        bump_variant=bump_variant,
    )

    mode: InsightsMode
    output: PolicyOutput
    if round_facts.round_number in ONBOARDING_ROUNDS:
        mode = "onboarding"
        output = build_onboarding_post_round_insights(
            OnboardingInput(
                round_number=round_facts.round_number,
                score=round_facts.score,
                to_par=round_facts.to_par,
                previous_score=round_facts.previous_score,
            ),
            settings=active,
        )
    else:
        mode = "deterministic"
        output = build_deterministic_post_round_insights(
            build_policy_input(round_facts, strokes_gained, entitlements),
            VariantOptions(seed=round_facts.round_id, offset=offset),
            settings=active,
        )

    _logger.info(
        "post-round insights for round %s: mode=%s outcomes=%s offset=%s",
        round_facts.round_id,
        mode,
        list(output.outcomes),
        offset,
    )
    observe_post_round_insights(mode, output.outcomes, output.messages)
    record_post_round_insights_generated(
        round_facts.round_id,
        mode=mode,
        outcomes=output.outcomes,
        variant_offset=offset,
        regenerated=force_regenerate,
    )

    return PostRoundInsightsPayload(
        round_id=round_facts.round_id,
        mode=mode,
        outcomes=output.outcomes,
        message_levels=output.message_levels,
        messages=output.messages,
        variant_offset=offset,
    )


__all__ = [
    "RoundFacts",
    "StrokesGainedComponents",
    "ViewerEntitlements",
    "build_policy_input",
    "build_post_round_insights",
    "build_round_evidence",
    "classify_band",
]
