"""Closing "next round" recommendation for the third insight message."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Literal, Optional, Sequence

from golfiq_insights.config import InsightsSettings
from golfiq_insights.config.post_round import POST_ROUND_RESIDUAL

from .copy_guard import assert_no_banned_copy
from .missing_stats import format_missing_stats_list, get_missing_count
from .schemas import MeasuredComponentName, MissingStats, VariantOptions
from .variants import pick_outcome_variant_meta

_logger = logging.getLogger(__name__)

FocusOutcome = Literal["M3-A", "M3-B", "M3-C", "M3-E"]

DEFAULT_FOCUS_PREFIX = "Next round: "

TRACKING_CLAUSE_VARIANTS: tuple[str, ...] = (
    "Track {missingList} so the next breakdown shows what helped and what hurt.",
    "To sharpen the feedback, track {missingList}.",
    "Start to track {missingList} so shots won and lost land in the right place.",
    "Make it a habit to track {missingList} on every hole.",
    "For a fuller breakdown, track {missingList}.",
    "Remember to track {missingList} so each part of the game separates cleanly.",
    "Track {missingList} to take the guesswork out of the takeaways.",
    "Keep the card complete and track {missingList}.",
    "To see where strokes come from, track {missingList}.",
    "Please track {missingList} so the numbers cover the whole round.",
)

GENERIC_ACTION_VARIANTS: tuple[str, ...] = (
    "Play to the widest target on each hole and commit to the start line you pick.",
    "Choose lines that keep your usual miss playable, even when that leaves a longer approach.",
    "When trouble sits in play, shift your target until your normal miss stays safe.",
    "Before every full swing, name the safe side and commit to it.",
    "Plan each hole in two steps by keeping the first shot in play and then attacking from position.",
    "When unsure, aim for the center of the fairway or green and accept the longer putt.",
    "If a target looks tight, widen it until a miss still leaves a playable shot.",
    "Pick the target that takes penalty out of play first, then swing with commitment.",
    "Favor position over distance whenever the landing area narrows.",
    "Settle on the shot early, pick a specific start line, and swing without second guessing.",
)

OFF_TEE_ACTION_VARIANTS: tuple[str, ...] = (
    "Pick a tee target that keeps your common miss in the fairway or first cut.",
    "On tight holes, tee off with the club that keeps trouble out of reach.",
    "Aim away from the penalty side off the tee and accept a longer approach.",
    "When the landing zone narrows, value the fairway over an extra 20 yards.",
    "Pick a conservative tee target and swing to it without steering.",
    "If driver brings out of bounds into range, hit the club that keeps the hole simple.",
    "Set one goal on every tee shot, which is to keep the ball in play.",
    "On nervy tee shots, widen the target and make a committed swing.",
    "Tee up on the side of the box that opens the safe half of the fairway.",
    "Club down on narrow holes when it keeps your next shot coming from short grass.",
)

APPROACH_ACTION_VARIANTS: tuple[str, ...] = (
    "Aim approaches at the center of the green unless the flag sits well inside your dispersion.",
    "When the pin is tucked, play to the fat side and take your two putts.",
    "Choose the club that carries the front edge and finishes in the middle of the green.",
    "If a short miss brings trouble, take one more club and make a smooth swing.",
    "Play to the widest part of each green and accept longer birdie putts.",
    "Keep approach misses on the green or fringe by aiming at the safe half.",
    "When in doubt, pick the middle of the green and take the 25-foot look.",
    "Avoid short-siding yourself by favoring targets that leave an uphill chip or a long putt.",
    "Against a tucked flag, aim for the center and let a good swing earn the closer look.",
    "Pick a conservative approach target and commit to your stock ball flight.",
)

PUTTING_ACTION_VARIANTS: tuple[str, ...] = (
    "On lag putts, make speed the priority and finish inside three feet.",
    "Pick a leave zone on long putts and roll the ball to that window.",
    "From outside 15 feet, roll it hole-high so the second putt is short.",
    "On downhill putts, let the ball die at the hole so the comeback stays simple.",
    "Build your putting around pace control and leave long putts within three feet.",
    "On mid-range putts, choose a start line and match the speed to it.",
    "Treat every long putt as a two-putt plan with an easy second putt.",
    "When the read is unclear, take the simplest line and focus on pace.",
    "On quick greens, favor dying speed and protect against the three-putt.",
    "Commit to your read and roll the putt with a stroke you can repeat.",
)

PENALTIES_ACTION_VARIANTS: tuple[str, ...] = (
    "When a hazard is in play, aim so your miss stays dry and accept the longer next shot.",
    "If you are out of position, take the punch-out that guarantees a clean next swing.",
    "On holes lined with hazards, pick the club and target that keep your big miss short of trouble.",
    "Before each full shot, find the penalty side and choose a target that takes it out of play.",
    "Choose conservative lines near trouble and protect the card from doubles.",
    "When the window is narrow, take the safe side or the lay-up and keep the ball in play.",
    "Play for the safe miss whenever a bad swing brings a penalty drop into play.",
    "When trouble lines both sides, favor the side that still leaves a playable shot.",
    "Treat no penalty as worth extra distance and keep the ball in play.",
    "When a forced line tempts you, step back and pick the option that avoids a penalty.",
)

AREA_ACTION_VARIANTS: dict[MeasuredComponentName, tuple[str, ...]] = {
    "off_tee": OFF_TEE_ACTION_VARIANTS,
    "approach": APPROACH_ACTION_VARIANTS,
    "putting": PUTTING_ACTION_VARIANTS,
    "penalties": PENALTIES_ACTION_VARIANTS,
}


@dataclass(frozen=True)
class NextRoundFocus:
    outcome: FocusOutcome
    text: str


def _slot_seed(options: VariantOptions, suffix: str) -> Optional[str]:
    return f"{options.seed}|{suffix}" if options.seed else None


def _pick_guarded(
    *,
    message_key: str,
    outcome: str,
    variants: Sequence[str],
    seed: Optional[str],
    options: VariantOptions,
    settings: InsightsSettings | None,
    missing_list: str = "",
) -> str:
    picked = pick_outcome_variant_meta(
        outcome,
        variants,
        seed=seed,
        offset=options.offset,
        fixed_index=options.fixed_index,
    )
    text = picked.text.replace("{missingList}", missing_list)
    assert_no_banned_copy(
        text,
        message_key=message_key,
        outcome=outcome,
        variant_index=picked.index,
        settings=settings,
    )
    return text


def _tracking_clause(
    missing: MissingStats, options: VariantOptions, settings: InsightsSettings | None
) -> str:
    return _pick_guarded(
        message_key="message3-tracking",
        outcome="M3-TRACK",
        variants=TRACKING_CLAUSE_VARIANTS,
        seed=_slot_seed(options, "m3track"),
        options=options,
        settings=settings,
        missing_list=format_missing_stats_list(missing),
    )


def _action_sentence(
    area: MeasuredComponentName | None,
    outcome: FocusOutcome,
    options: VariantOptions,
    settings: InsightsSettings | None,
) -> str:
    variants = AREA_ACTION_VARIANTS[area] if area else GENERIC_ACTION_VARIANTS
    return _pick_guarded(
        message_key="message3-action",
        outcome=outcome,
        variants=variants,
        seed=_slot_seed(options, f"m3action|{area or 'generic'}"),
        options=options,
        settings=settings,
    )


def build_next_round_focus_text(
    missing: MissingStats,
    worst_measured: MeasuredComponentName | None,
    opportunity_is_weak: bool,
    weak_separation: bool,
    *,
    worst_measured_value: float | None = None,
    measured_leak_strong_threshold: float = POST_ROUND_RESIDUAL.measured_leak_strong,
    variant_options: VariantOptions | None = None,
    prefix: str = DEFAULT_FOCUS_PREFIX,
    settings: InsightsSettings | None = None,
) -> NextRoundFocus:
    """Pick the M3 outcome and render "<prefix><tracking clause> <action sentence>".

    Missing stats always lead with a request to record them. With a complete card the
    sentence targets the weakest measured area, unless that area is not clearly worse
    than the rest, in which case a round-wide action is used.
    """

    options = variant_options or VariantOptions()
    missing_count = get_missing_count(missing)
    strong_leak = (
        worst_measured_value is not None
        and math.isfinite(worst_measured_value)
        and worst_measured_value <= measured_leak_strong_threshold
    )

    tracking = ""
    outcome: FocusOutcome
    if missing_count >= 2:
        outcome = "M3-A"
        tracking = _tracking_clause(missing, options, settings)
        action = _action_sentence(None, outcome, options, settings)
    elif missing_count == 1:
        outcome = "M3-B"
        tracking = _tracking_clause(missing, options, settings)
        area = worst_measured if worst_measured and (opportunity_is_weak or strong_leak) else None
        action = _action_sentence(area, outcome, options, settings)
    elif (
        worst_measured is None
        or not opportunity_is_weak
        or (weak_separation and not strong_leak)
    ):
        outcome = "M3-E"
        action = _action_sentence(None, outcome, options, settings)
    else:
        outcome = "M3-C"
        action = _action_sentence(worst_measured, outcome, options, settings)

    _logger.debug("next round focus %s (missing=%s, area=%s)", outcome, missing_count, worst_measured)
    body = f"{tracking} {action}" if tracking else action
    return NextRoundFocus(outcome=outcome, text=f"{prefix}{body}".strip())


__all__ = [
    "AREA_ACTION_VARIANTS",
    "DEFAULT_FOCUS_PREFIX",
    "GENERIC_ACTION_VARIANTS",
    "NextRoundFocus",
    "TRACKING_CLAUSE_VARIANTS",
    "build_next_round_focus_text",
]
