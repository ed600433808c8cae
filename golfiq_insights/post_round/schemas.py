"""Pydantic models for post-round insight inputs and outputs."""

from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

MeasuredComponentName = Literal["off_tee", "approach", "putting", "penalties"]
AdvancedStatKey = Literal["fir", "gir", "putts", "penalties"]
PerformanceBand = Literal["above", "expected", "below"]
InsightLevel = Literal["success", "warning", "info"]
InsightsMode = Literal["onboarding", "deterministic"]

COMPONENT_LABELS: dict[MeasuredComponentName, str] = {
    "off_tee": "Off The Tee",
    "approach": "Approach",
    "putting": "Putting",
    "penalties": "Penalties",
}


class MissingStats(BaseModel):
    """Which of the four advanced stats were not recorded for a round."""

    fir: bool
    gir: bool
    putts: bool
    penalties: bool

    model_config = ConfigDict(frozen=True)


class MeasuredComponent(BaseModel):
    name: MeasuredComponentName
    label: str
    value: float

    model_config = ConfigDict(frozen=True)


class RoundEvidence(BaseModel):
    """Raw round counts used to decorate messages with a parenthetical."""

    fairways_hit: Optional[int] = None
    fairways_possible: Optional[int] = None
    greens_hit: Optional[int] = None
    greens_possible: Optional[int] = None
    putts_total: Optional[int] = None
    penalties_total: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class PolicyInput(BaseModel):
    score: float
    to_par: int
    avg_score: Optional[float] = None
    band: PerformanceBand = "expected"
    measured_components: Tuple[MeasuredComponent, ...] = ()
    best_measured: Optional[MeasuredComponent] = None
    worst_measured: Optional[MeasuredComponent] = None
    opportunity_is_weak: bool = False
    residual_dominant: bool = False
    weak_separation: bool = False
    missing: MissingStats
    residual_value: Optional[float] = None
    round_evidence: Optional[RoundEvidence] = None
    holes_played: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class OnboardingInput(BaseModel):
    round_number: int
    score: float
    to_par: int
    previous_score: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class VariantOptions(BaseModel):
    """Seed/offset pair, or a fixed index for tests and debugging."""

    seed: Optional[str] = None
    offset: int = 0
    fixed_index: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class PolicyOutput(BaseModel):
    outcomes: Tuple[str, str, str]
    message_levels: Tuple[InsightLevel, InsightLevel, InsightLevel] = Field(
        serialization_alias="messageLevels"
    )
    messages: Tuple[str, str, str]

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PostRoundInsightsPayload(BaseModel):
    """Record handed to the persistence layer, keyed by round id."""

    round_id: str = Field(serialization_alias="roundId")
    mode: InsightsMode
    outcomes: Tuple[str, str, str]
    message_levels: Tuple[InsightLevel, InsightLevel, InsightLevel] = Field(
        serialization_alias="messageLevels"
    )
    messages: Tuple[str, str, str]
    variant_offset: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)


__all__ = [
    "AdvancedStatKey",
    "COMPONENT_LABELS",
    "InsightLevel",
    "InsightsMode",
    "MeasuredComponent",
    "MeasuredComponentName",
    "MissingStats",
    "OnboardingInput",
    "PerformanceBand",
    "PolicyInput",
    "PolicyOutput",
    "PostRoundInsightsPayload",
    "RoundEvidence",
    "VariantOptions",
]
