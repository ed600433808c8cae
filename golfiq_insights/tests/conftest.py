"""Shared pytest fixtures for insights tests."""

from __future__ import annotations

from typing import Callable, Iterable

import pytest

from golfiq_insights.config import InsightsSettings, reset_settings_cache
from golfiq_insights.post_round.schemas import (
    MissingStats,
    PolicyInput,
    RoundEvidence,
)
from golfiq_insights.post_round.sg_selection import (
    MeasuredSgInputs,
    run_measured_sg_selection,
)
from golfiq_insights.telemetry import events as telemetry

ALL_RECORDED = MissingStats(fir=False, gir=False, putts=False, penalties=False)


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> Iterable[None]:
    monkeypatch.delenv("INSIGHTS_COPY_GUARD", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture(autouse=True)
def _reset_emitter() -> Iterable[None]:
    telemetry.set_insights_telemetry_emitter(None)
    yield
    telemetry.set_insights_telemetry_emitter(None)


@pytest.fixture
def guard_settings() -> InsightsSettings:
    return InsightsSettings(environment="test", copy_guard_enabled=True)


@pytest.fixture
def make_policy_input() -> Callable[..., PolicyInput]:
    """Build a PolicyInput the way the service does, from raw SG values."""

    def _make(
        *,
        score: float = 80,
        to_par: int = 8,
        avg_score: float | None = 82.0,
        band: str = "expected",
        missing: MissingStats = ALL_RECORDED,
        residual: float | None = None,
        evidence: RoundEvidence | None = None,
        holes_played: int | None = None,
        **components: float | None,
    ) -> PolicyInput:
        selection = run_measured_sg_selection(
            MeasuredSgInputs(
                off_tee=components.get("off_tee"),
                approach=components.get("approach"),
                putting=components.get("putting"),
                penalties=components.get("penalties"),
                residual=residual,
            )
        )
        return PolicyInput(
            score=score,
            to_par=to_par,
            avg_score=avg_score,
            band=band,
            measured_components=selection.components,
            best_measured=selection.best,
            worst_measured=selection.opportunity,
            opportunity_is_weak=selection.opportunity_is_weak,
            residual_dominant=selection.residual_dominant,
            weak_separation=selection.weak_separation,
            missing=missing,
            residual_value=residual,
            round_evidence=evidence,
            holes_played=holes_played,
        )

    return _make

