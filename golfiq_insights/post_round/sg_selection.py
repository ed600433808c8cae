"""Best/opportunity selection over measured strokes-gained components."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Optional

from golfiq_insights.config.post_round import POST_ROUND_RESIDUAL, POST_ROUND_THRESHOLDS

from .schemas import COMPONENT_LABELS, MeasuredComponent, MeasuredComponentName

CANONICAL_ORDER: tuple[MeasuredComponentName, ...] = (
    "off_tee",
    "approach",
    "putting",
    "penalties",
)


@dataclass(frozen=True)
class MeasuredSgInputs:
    off_tee: Optional[float] = None
    approach: Optional[float] = None
    putting: Optional[float] = None
    penalties: Optional[float] = None
    residual: Optional[float] = None
    total: Optional[float] = None


@dataclass(frozen=True)
class SelectionThresholds:
    weakness_threshold: float = POST_ROUND_THRESHOLDS.sg_weakness
    weak_separation_delta: float = POST_ROUND_RESIDUAL.weak_separation_delta
    dominance_absolute_floor: float = POST_ROUND_RESIDUAL.dominance_absolute_floor
    dominance_ratio: float = POST_ROUND_RESIDUAL.dominance_ratio

    def scaled(self, scale: float) -> "SelectionThresholds":
        """Stroke-denominated thresholds shrink with the round length; the ratio does not."""

        return replace(
            self,
            weakness_threshold=self.weakness_threshold * scale,
            weak_separation_delta=self.weak_separation_delta * scale,
            dominance_absolute_floor=self.dominance_absolute_floor * scale,
        )


@dataclass(frozen=True)
class MeasuredSgSelection:
    components: tuple[MeasuredComponent, ...]
    best: MeasuredComponent | None
    opportunity: MeasuredComponent | None
    opportunity_is_weak: bool
    component_count: int
    residual_dominant: bool
    weak_separation: bool


def _finite(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def build_measured_components(inputs: MeasuredSgInputs) -> list[MeasuredComponent]:
    components: list[MeasuredComponent] = []
    for name in CANONICAL_ORDER:
        value = _finite(getattr(inputs, name))
        if value is None:
            continue
        components.append(
            MeasuredComponent(name=name, label=COMPONENT_LABELS[name], value=value)
        )
    return components


def _pick_best(components: list[MeasuredComponent]) -> MeasuredComponent | None:
    if not components:
        return None
    # max() keeps the first maximum, i.e. the earliest canonical slot
    return max(components, key=lambda component: component.value)


def _pick_opportunity(
    components: list[MeasuredComponent], best: MeasuredComponent | None
) -> MeasuredComponent | None:
    if len(components) < 2 or best is None:
        return None
    alternatives = [c for c in components if c.name != best.name]
    # all values equal: contrast the first slot with the last
    if all(component.value == best.value for component in components):
        return alternatives[-1]
    # min() keeps the first minimum, i.e. the earliest canonical slot
    return min(alternatives, key=lambda component: component.value)


def _residual_dominant(
    residual: float | None,
    components: list[MeasuredComponent],
    thresholds: SelectionThresholds,
) -> bool:
    if residual is None:
        return False
    residual_abs = abs(residual)
    measured_abs = sum(abs(component.value) for component in components)
    return (
        residual_abs > thresholds.dominance_absolute_floor
        and residual_abs > thresholds.dominance_ratio * measured_abs
    )


def _weak_separation(
    best: MeasuredComponent | None,
    opportunity: MeasuredComponent | None,
    thresholds: SelectionThresholds,
) -> bool:
    if best is None or opportunity is None:
        return False
    return (best.value - opportunity.value) < thresholds.weak_separation_delta


def run_measured_sg_selection(
    inputs: MeasuredSgInputs,
    thresholds: SelectionThresholds | None = None,
) -> MeasuredSgSelection:
    limits = thresholds or SelectionThresholds()
    components = build_measured_components(inputs)
    best = _pick_best(components)
    opportunity = _pick_opportunity(components, best)

    return MeasuredSgSelection(
        components=tuple(components),
        best=best,
        opportunity=opportunity,
        opportunity_is_weak=bool(
            opportunity is not None and opportunity.value <= limits.weakness_threshold
        ),
        component_count=len(components),
        residual_dominant=_residual_dominant(
            _finite(inputs.residual), components, limits
        ),
        weak_separation=_weak_separation(best, opportunity, limits),
    )


__all__ = [
    "CANONICAL_ORDER",
    "MeasuredSgInputs",
    "MeasuredSgSelection",
    "SelectionThresholds",
    "build_measured_components",
    "run_measured_sg_selection",
]
