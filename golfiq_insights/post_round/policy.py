"""Steady-state post-round insights (round four onward).

Each message slot is an ordered list of rules. A rule inspects the round and returns a
built message or ``None``; the first built message wins. Wording is chosen by the variant
picker after the outcome is fixed, so regenerating with a new offset changes phrasing only.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Literal, Mapping, Optional, Sequence

from golfiq_insights.config import InsightsSettings
from golfiq_insights.config.post_round import (
    POST_ROUND_RESIDUAL,
    POST_ROUND_THRESHOLDS,
    SCORE_ONLY_NEAR_DELTA,
    stroke_scale,
)

from .copy_guard import assert_no_banned_copy
from .next_round_focus import build_next_round_focus_text
from .schemas import (
    InsightLevel,
    MeasuredComponent,
    PolicyInput,
    PolicyOutput,
    RoundEvidence,
    VariantOptions,
)
from .variants import pick_outcome_variant_meta

_logger = logging.getLogger(__name__)

STEADY_STATE_FOCUS_PREFIX = "Next round focus: "

ScoreOnlyBucket = Literal["better", "near", "worse"]

M1_A_VARIANTS = (
    "{scoreSentence} Only the score was logged, so there is no component breakdown for this round.",
    "{scoreSentence} With score-only logging, the round is not split into strengths and weaknesses.",
    "{scoreSentence} No fairways, greens, putts, or penalties were logged, so the score stands on its own.",
    "{scoreSentence} The score is in, but no supporting stats were logged to explain it.",
    "{scoreSentence} This was a score-only round, so the takeaways stay broad.",
    "{scoreSentence} Without supporting stats, there is no single part of the game to point to.",
)

M1_B_VARIANTS = (
    "{scoreSentence} {BestLabel} held up best among the measured areas, losing only {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the steadiest measured area at {bestAbs1} strokes lost{evidence}.",
    "{scoreSentence} Of the measured areas, {BestLabel} gave up the fewest strokes at {bestAbs1}{evidence}.",
    "{scoreSentence} {BestLabel} was the least costly area at {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the most stable area, dropping {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} came closest to even at {bestSigned1} strokes{evidence}.",
)

M1_C_VARIANTS = (
    "{scoreSentence} {BestLabel} was the clearest strength, gaining {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Your best measured area was {BestLabel} at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} carried the round, picking up {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} gave you the biggest lift at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} The largest gain came from {BestLabel} at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} led the measured areas with {bestAbs1} strokes gained{evidence}.",
)

M1_C_PENALTIES_VARIANTS = (
    "{scoreSentence} Penalties stayed under control and saved {bestAbs1} strokes{evidence}.",
    "{scoreSentence} You kept penalty strokes off the card and gained {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Clean risk control made penalties a strength at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} Penalties were the bright spot, worth {bestAbs1} strokes{evidence}.",
)

M1_D_VARIANTS = (
    "{scoreSentence} {BestLabel} was the top measured area and finished near even at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} led the measured areas while staying close to neutral at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} No area stood out, and {BestLabel} topped the list at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} finished flat at {bestSigned1} strokes{evidence}, a steady baseline.",
    "{scoreSentence} {BestLabel} held around even at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} stayed level at {bestSigned1} strokes{evidence}.",
)

M1_SINGLE_B_VARIANTS = (
    "{scoreSentence} Only {BestLabel} was measured, and it cost {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the one measured area and finished {bestAbs1} strokes down{evidence}.",
    "{scoreSentence} With {BestLabel} as the only measured area, it gave away {bestAbs1} strokes{evidence}.",
    "{scoreSentence} The single measured area, {BestLabel}, lost {bestAbs1} strokes{evidence}.",
)

M1_SINGLE_C_VARIANTS = (
    "{scoreSentence} Only {BestLabel} was measured, and it gained {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the one measured area and added {bestAbs1} strokes{evidence}.",
    "{scoreSentence} With {BestLabel} as the only measured area, it was a clear positive at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} The single measured area, {BestLabel}, picked up {bestAbs1} strokes{evidence}.",
)

M1_SINGLE_D_VARIANTS = (
    "{scoreSentence} Only {BestLabel} was measured, and it finished near even at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the one measured area and came in flat at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} With {BestLabel} as the only measured area, it stayed close to neutral at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} The single measured area, {BestLabel}, landed at {bestSigned1} strokes{evidence}.",
)

M2_A_VARIANTS = (
    "Not enough of the round was measured to name one clear focus.",
    "The measured detail is too thin to rank one area above the rest.",
    "Too few areas were measured to say what mattered most.",
    "With limited detail, the next focus is not tied to one area yet.",
)

M2_A_SINGLE_VARIANTS = (
    "Only one area was measured, so there is nothing to compare it against yet.",
    "With one measured area, there is not enough detail to rank what cost the most.",
    "A focus area needs at least two measured areas to compare.",
    "One measured area is a good start, but it does not point to a clear next focus yet.",
    "With a single measured area, the round is not ranked by what mattered most.",
)

M2_A_SCORE_ONLY_BETTER_VARIANTS = (
    "You beat your recent scoring baseline. With score-only logging, the gain is not tied to one part of the game.",
    "This round came in well under your recent average. Only the score was logged, so the source of the gain stays hidden.",
    "Scoring improved on your recent pattern. Without supporting stats, what drove it is not visible.",
    "This was a clear step forward from your recent rounds. The score-only card keeps the breakdown out of reach.",
    "You finished below your recent average. With score-only data, the margin is not traced to one area.",
)

M2_A_SCORE_ONLY_NEAR_VARIANTS = (
    "You finished in line with your recent scoring baseline. With score-only logging, strengths and trouble spots are not separated.",
    "This result sits inside your normal scoring range. Only the score was logged, so no single area stands out.",
    "Scoring held steady against your recent average. Without supporting stats, there is no component breakdown.",
    "This round matched your recent scoring pattern. The score-only card keeps the story broad.",
    "You landed in your typical scoring window. With score-only data, the round is not split into parts.",
)

M2_A_SCORE_ONLY_WORSE_VARIANTS = (
    "You finished above your recent scoring baseline. With score-only logging, the source of the extra strokes is not visible.",
    "This round came in higher than your recent average. Only the score was logged, so the lost strokes are not tied to one area.",
    "Scoring slipped against your recent pattern. Without supporting stats, the added strokes are not isolated.",
    "This score sits above your recent trend. The score-only card keeps the reason out of view.",
    "You gave back ground on your recent baseline. With score-only data, the weak spot is not identified.",
)

M2_C_VARIANTS = (
    "{WorstLabel} finished close to even at {worstSigned1} strokes{evidence}.",
    "{WorstLabel} came in near neutral at {worstSigned1} strokes{evidence}.",
    "Even the lowest measured area, {WorstLabel}, was flat at {worstSigned1} strokes{evidence}.",
    "{WorstLabel} held steady at {worstSigned1} strokes{evidence}.",
    "{WorstLabel} stayed around even at {worstSigned1} strokes{evidence}.",
)

M2_D_VARIANTS = (
    "{WorstLabel} was where the most strokes went, {worstAbs1} in total{evidence}.",
    "{WorstLabel} accounted for the largest loss at {worstAbs1} strokes{evidence}.",
    "{WorstLabel} is the clearest place to tighten up after losing {worstAbs1} strokes{evidence}.",
    "{WorstLabel} drove the biggest loss at {worstSigned1} strokes{evidence}.",
    "{WorstLabel} cost the most at {worstAbs1} strokes{evidence}.",
    "The biggest drop came from {WorstLabel} at {worstSigned1} strokes{evidence}.",
)

M2_D_PENALTIES_VARIANTS = (
    "Penalties cost the most at {worstAbs1} strokes{evidence}.",
    "Penalty shots accounted for the largest loss at {worstAbs1} strokes{evidence}.",
    "Penalties are the clearest area to tighten after costing {worstAbs1} strokes{evidence}.",
    "The biggest drop came from penalties at {worstSigned1} strokes{evidence}.",
)

M2_E_VARIANTS = (
    "{WorstLabel} still finished as a net positive at {worstSigned1} strokes{evidence}. {followUp}",
    "Even your lowest measured area, {WorstLabel}, gained {worstAbs1} strokes{evidence}. {followUp}",
    "{WorstLabel} held up as a strength at {worstSigned1} strokes{evidence}. {followUp}",
    "Every measured area gained strokes, with {WorstLabel} lowest at {worstSigned1}{evidence}. {followUp}",
    "{WorstLabel} stayed on the positive side at {worstSigned1} strokes{evidence}. {followUp}",
)

M2_E_PENALTIES_VARIANTS = (
    "Penalties remained a net positive at {worstSigned1} strokes{evidence}. Risk control held up.",
    "Penalties stayed positive at {worstSigned1} strokes{evidence}, which kept extra shots off the card.",
    "Even penalties, the lowest measured area, gained {worstAbs1} strokes{evidence}.",
    "Penalties finished ahead at {worstSigned1} strokes{evidence}. Controlled misses paid off.",
)

RESIDUAL_POSITIVE_VARIANTS = (
    "Residual was {residualSigned1} strokes, coming from parts of the round the stats do not cover.",
    "About {residualSigned1} strokes came from areas outside the measured stats.",
    "Another {residualSigned1} strokes came from shots the measured stats do not capture.",
    "Part of the swing, {residualSigned1} strokes, came from areas not measured here.",
    "The measured stats explain some of the round, and {residualSigned1} strokes came from outside them.",
)

RESIDUAL_NEGATIVE_VARIANTS = (
    "Residual was {residualSigned1} strokes, lost in parts of the round the stats do not cover.",
    "About {residualSigned1} strokes of loss came from areas outside the measured stats.",
    "Another {residualSigned1} strokes went to shots the measured stats do not capture.",
    "Part of the loss, {residualSigned1} strokes, came from areas not measured here.",
    "The measured stats explain some of the round, and {residualSigned1} strokes came from outside them.",
)

_SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([.,!?;:])")
_REPEATED_PERIODS = re.compile(r"\.{2,}")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class PolicyThresholds:
    neutral_eps: float
    residual_sentence_threshold: float
    measured_leak_strong: float
    score_only_near_delta: float

    @classmethod
    def for_holes(cls, holes_played: int | None) -> "PolicyThresholds":
        scale = stroke_scale(holes_played)
        return cls(
            neutral_eps=POST_ROUND_THRESHOLDS.sg_neutral_eps * scale,
            residual_sentence_threshold=POST_ROUND_RESIDUAL.sentence_threshold * scale,
            measured_leak_strong=POST_ROUND_RESIDUAL.measured_leak_strong * scale,
            score_only_near_delta=SCORE_ONLY_NEAR_DELTA * scale,
        )


@dataclass(frozen=True)
class BuiltMessage:
    text: str
    level: InsightLevel
    outcome: str


def sanitize_whitespace(text: str) -> str:
    normalized = _SPACE_BEFORE_PUNCTUATION.sub(r"\1", str(text or ""))
    normalized = _REPEATED_PERIODS.sub(".", normalized)
    return _WHITESPACE.sub(" ", normalized).strip()


def apply_template(template: str, replacements: Mapping[str, str]) -> str:
    rendered = template
    for key, value in replacements.items():
        rendered = rendered.replace("{" + key + "}", value)
    return sanitize_whitespace(rendered)


def _round_one(value: float) -> float:
    # half away from zero, matching how scorecards round
    rounded = math.floor(abs(value) * 10 + 0.5) / 10
    return rounded if value >= 0 else -rounded


def format_one_decimal(value: float) -> str:
    return f"{_round_one(value):.1f}"


def format_signed_one_decimal(value: float) -> str:
    rounded = _round_one(value)
    if rounded == 0:
        return "0.0"
    return f"+{rounded:.1f}" if rounded > 0 else f"{rounded:.1f}"


def format_abs_one_decimal(value: float) -> str:
    return f"{_round_one(abs(value)):.1f}"


def format_to_par(to_par: int) -> str:
    if to_par == 0:
        return "E"
    return f"+{to_par}" if to_par > 0 else str(to_par)


def _format_score(score: float) -> str:
    return str(int(score)) if float(score).is_integer() else f"{score:g}"


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def build_score_sentence(score: float, to_par: int, avg_score: float | None) -> str:
    compact = f"{_format_score(score)} ({format_to_par(to_par)})"
    if avg_score is None or not math.isfinite(avg_score):
        return f"You shot {compact}."

    delta = score - avg_score
    magnitude = format_one_decimal(abs(delta))
    if abs(delta) < 0.1:
        return f"You shot {compact}, which matches your recent average."
    word = "stroke" if magnitude == "1.0" else "strokes"
    direction = "above" if delta > 0 else "better than"
    return (
        f"You shot {compact}, which is {magnitude} {word} {direction} "
        f"your recent average of {format_one_decimal(avg_score)}."
    )


def build_component_evidence(
    component: MeasuredComponent, evidence: RoundEvidence | None
) -> str:
    """Literal round counts backing a component, e.g. ``7/14 fairways``."""

    if evidence is None:
        return ""

    if component.name == "off_tee" and evidence.fairways_hit is not None:
        hit = evidence.fairways_hit
        possible = evidence.fairways_possible
        if possible:
            return f"{hit}/{possible} {_plural(possible, 'fairway', 'fairways')}"
        return f"{hit} {_plural(hit, 'fairway', 'fairways')}"
    if component.name == "approach" and evidence.greens_hit is not None:
        possible = evidence.greens_possible
        if possible:
            return f"{evidence.greens_hit}/{possible} greens in regulation"
        return f"{evidence.greens_hit} greens in regulation"
    if component.name == "putting" and evidence.putts_total is not None:
        return f"{evidence.putts_total} total putts"
    if component.name == "penalties" and evidence.penalties_total is not None:
        count = evidence.penalties_total
        return f"{count} {_plural(count, 'penalty', 'penalties')}"
    return ""


def resolve_score_only_bucket(
    score: float, avg_score: float | None, near_delta: float
) -> ScoreOnlyBucket:
    if avg_score is None or not math.isfinite(avg_score):
        return "near"
    delta = score - avg_score
    if delta < -near_delta:
        return "better"
    if delta > near_delta:
        return "worse"
    return "near"


@dataclass(frozen=True)
class _PolicyContext:
    data: PolicyInput
    options: VariantOptions
    thresholds: PolicyThresholds
    settings: InsightsSettings | None

    def render(
        self,
        message_key: str,
        outcome: str,
        variants: Sequence[str],
        replacements: Mapping[str, str],
        *,
        seed_suffix: str,
    ) -> str:
        seed = f"{self.options.seed}|{seed_suffix}" if self.options.seed else None
        picked = pick_outcome_variant_meta(
            outcome,
            variants,
            seed=seed,
            offset=self.options.offset,
            fixed_index=self.options.fixed_index,
        )
        rendered = apply_template(picked.text, replacements)
        assert_no_banned_copy(
            rendered,
            message_key=message_key,
            outcome=outcome,
            variant_index=picked.index,
            settings=self.settings,
        )
        return rendered

    @property
    def component_count(self) -> int:
        return len(self.data.measured_components)

    def is_neutral(self, value: float) -> bool:
        return abs(value) <= self.thresholds.neutral_eps


Rule = Callable[[_PolicyContext], Optional[BuiltMessage]]


def _best_replacements(
    ctx: _PolicyContext, best: MeasuredComponent
) -> dict[str, str]:
    evidence = build_component_evidence(best, ctx.data.round_evidence)
    return {
        "scoreSentence": build_score_sentence(
            ctx.data.score, ctx.data.to_par, ctx.data.avg_score
        ),
        "BestLabel": best.label,
        "bestSigned1": format_signed_one_decimal(best.value),
        "bestAbs1": format_abs_one_decimal(best.value),
        "evidence": f" ({evidence})" if evidence else "",
    }


def _m1_score_only(ctx: _PolicyContext) -> BuiltMessage | None:
    if ctx.component_count and ctx.data.best_measured is not None:
        return None
    score_sentence = build_score_sentence(ctx.data.score, ctx.data.to_par, ctx.data.avg_score)
    text = ctx.render(
        "message1", "M1-A", M1_A_VARIANTS, {"scoreSentence": score_sentence}, seed_suffix="m1"
    )
    return BuiltMessage(text=text, level="success", outcome="M1-A")


def _m1_neutral_best(ctx: _PolicyContext) -> BuiltMessage | None:
    best = ctx.data.best_measured
    if best is None or not ctx.is_neutral(best.value):
        return None
    variants = M1_SINGLE_D_VARIANTS if ctx.component_count == 1 else M1_D_VARIANTS
    text = ctx.render(
        "message1", "M1-D", variants, _best_replacements(ctx, best), seed_suffix="m1"
    )
    return BuiltMessage(text=text, level="success", outcome="M1-D")


def _m1_positive_best(ctx: _PolicyContext) -> BuiltMessage | None:
    best = ctx.data.best_measured
    if best is None or best.value <= 0:
        return None
    if ctx.component_count == 1:
        variants = M1_SINGLE_C_VARIANTS
    elif best.name == "penalties":
        variants = M1_C_PENALTIES_VARIANTS
    else:
        variants = M1_C_VARIANTS
    text = ctx.render(
        "message1", "M1-C", variants, _best_replacements(ctx, best), seed_suffix="m1"
    )
    return BuiltMessage(text=text, level="success", outcome="M1-C")


def _m1_mixed(ctx: _PolicyContext) -> BuiltMessage | None:
    best = ctx.data.best_measured
    if best is None:
        return None
    variants = M1_SINGLE_B_VARIANTS if ctx.component_count == 1 else M1_B_VARIANTS
    text = ctx.render(
        "message1", "M1-B", variants, _best_replacements(ctx, best), seed_suffix="m1"
    )
    return BuiltMessage(text=text, level="success", outcome="M1-B")


MESSAGE1_RULES: list[Rule] = [
    _m1_score_only,
    _m1_neutral_best,
    _m1_positive_best,
    _m1_mixed,
]


def _residual_sentence(ctx: _PolicyContext) -> str:
    residual = ctx.data.residual_value
    if residual is None or not math.isfinite(residual) or residual == 0:
        return ""
    if not (
        abs(residual) >= ctx.thresholds.residual_sentence_threshold
        or ctx.data.residual_dominant
    ):
        return ""

    positive = residual > 0
    return ctx.render(
        "message2-residual",
        "M2-RESIDUAL-POS" if positive else "M2-RESIDUAL-NEG",
        RESIDUAL_POSITIVE_VARIANTS if positive else RESIDUAL_NEGATIVE_VARIANTS,
        {"residualSigned1": format_signed_one_decimal(residual)},
        seed_suffix="m2residual",
    )


def _worst_message(
    ctx: _PolicyContext,
    worst: MeasuredComponent,
    outcome: str,
    level: InsightLevel,
    variants: Sequence[str],
) -> BuiltMessage:
    evidence = build_component_evidence(worst, ctx.data.round_evidence)
    replacements = {
        "WorstLabel": worst.label,
        "worstSigned1": format_signed_one_decimal(worst.value),
        "worstAbs1": format_abs_one_decimal(worst.value),
        "evidence": f" ({evidence})" if evidence else "",
        "followUp": "Holding that level keeps the scoring steady.",
    }
    text = ctx.render("message2", outcome, variants, replacements, seed_suffix="m2")
    residual = _residual_sentence(ctx)
    if residual:
        text = f"{text} {residual}"
    return BuiltMessage(text=text, level=level, outcome=outcome)


def _m2_limited_detail(ctx: _PolicyContext) -> BuiltMessage | None:
    if ctx.component_count >= 2 and ctx.data.worst_measured is not None:
        return None

    level: InsightLevel = "warning"
    if ctx.component_count == 0:
        bucket = resolve_score_only_bucket(
            ctx.data.score, ctx.data.avg_score, ctx.thresholds.score_only_near_delta
        )
        variants = {
            "better": M2_A_SCORE_ONLY_BETTER_VARIANTS,
            "near": M2_A_SCORE_ONLY_NEAR_VARIANTS,
            "worse": M2_A_SCORE_ONLY_WORSE_VARIANTS,
        }[bucket]
        if bucket != "worse":
            level = "success"
    elif ctx.component_count == 1:
        variants = M2_A_SINGLE_VARIANTS
    else:
        variants = M2_A_VARIANTS

    text = ctx.render("message2", "M2-A", variants, {}, seed_suffix="m2")
    return BuiltMessage(text=text, level=level, outcome="M2-A")


def _m2_neutral_worst(ctx: _PolicyContext) -> BuiltMessage | None:
    worst = ctx.data.worst_measured
    if worst is None or not ctx.is_neutral(worst.value):
        return None
    return _worst_message(ctx, worst, "M2-C", "success", M2_C_VARIANTS)


def _m2_losing_worst(ctx: _PolicyContext) -> BuiltMessage | None:
    worst = ctx.data.worst_measured
    if worst is None or worst.value >= 0:
        return None
    variants = M2_D_PENALTIES_VARIANTS if worst.name == "penalties" else M2_D_VARIANTS
    return _worst_message(ctx, worst, "M2-D", "warning", variants)


def _m2_positive_worst(ctx: _PolicyContext) -> BuiltMessage | None:
    worst = ctx.data.worst_measured
    if worst is None:
        return None
    variants = M2_E_PENALTIES_VARIANTS if worst.name == "penalties" else M2_E_VARIANTS
    return _worst_message(ctx, worst, "M2-E", "success", variants)


MESSAGE2_RULES: list[Rule] = [
    _m2_limited_detail,
    _m2_neutral_worst,
    _m2_losing_worst,
    _m2_positive_worst,
]


def _first_match(rules: Sequence[Rule], ctx: _PolicyContext) -> BuiltMessage:
    for rule in rules:
        built = rule(ctx)
        if built is not None:
            return built
    raise RuntimeError("no post-round rule matched")


def _message3(ctx: _PolicyContext) -> BuiltMessage:
    worst = ctx.data.worst_measured
    focus = build_next_round_focus_text(
        ctx.data.missing,
        worst.name if worst else None,
        ctx.data.opportunity_is_weak,
        ctx.data.weak_separation,
        worst_measured_value=worst.value if worst else None,
        measured_leak_strong_threshold=ctx.thresholds.measured_leak_strong,
        variant_options=ctx.options,
        prefix=STEADY_STATE_FOCUS_PREFIX,
        settings=ctx.settings,
    )
    return BuiltMessage(text=focus.text, level="info", outcome=focus.outcome)


def build_deterministic_post_round_insights(
    policy_input: PolicyInput,
    variant_options: VariantOptions | None = None,
    *,
    settings: InsightsSettings | None = None,
) -> PolicyOutput:
    """Classify a steady-state round into M1/M2/M3 outcomes and render the messages."""

    ctx = _PolicyContext(
        data=policy_input,
        options=variant_options or VariantOptions(),
        thresholds=PolicyThresholds.for_holes(policy_input.holes_played),
        settings=settings,
    )
    built = (
        _first_match(MESSAGE1_RULES, ctx),
        _first_match(MESSAGE2_RULES, ctx),
        _message3(ctx),
    )
    _logger.debug(
        "post-round outcomes %s (components=%s, offset=%s)",
        [message.outcome for message in built],
        ctx.component_count,
        ctx.options.offset,
    )
    return PolicyOutput(
        outcomes=tuple(message.outcome for message in built),
        message_levels=tuple(message.level for message in built),
        messages=tuple(sanitize_whitespace(message.text) for message in built),
    )


__all__ = [
    "BuiltMessage",
    "MESSAGE1_RULES",
    "MESSAGE2_RULES",
    "PolicyThresholds",
    "STEADY_STATE_FOCUS_PREFIX",
    "build_component_evidence",
    "build_deterministic_post_round_insights",
    "build_score_sentence",
    "format_signed_one_decimal",
    "format_to_par",
    "resolve_score_only_bucket",
    "sanitize_whitespace",
]
