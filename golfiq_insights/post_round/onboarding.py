"""Fixed messaging for a player's first three rounds."""

from __future__ import annotations

import logging

from golfiq_insights.config import InsightsSettings

from .copy_guard import assert_no_banned_copy
from .policy import format_one_decimal, format_to_par, sanitize_whitespace
from .schemas import OnboardingInput, PolicyOutput

_logger = logging.getLogger(__name__)

ONBOARDING_ROUNDS = (1, 2, 3)
ONBOARDING_FOCUS_PREFIX = "Next round: "

_ROUND_ONE_MESSAGES = (
    "You shot {scoreLine} in your first logged round, which sets your starting point.",
    "Two more rounds unlock trend-based insights, so keep logging every round you play.",
    ONBOARDING_FOCUS_PREFIX
    + "Log your score again and track fairways, greens, putts, and penalties on every hole.",
)

_COMPARISON_LINES = {
    "BETTER": "You shot {scoreLine}, {delta} {strokeWord} better than your {reference}.",
    "SAME": "You shot {scoreLine}, matching your {reference}.",
    "WORSE": "You shot {scoreLine}, {delta} {strokeWord} higher than your {reference}.",
}

_ROUND_TWO_FOLLOW_UPS = {
    "BETTER": "A good early sign. One more round and trend-based insights unlock.",
    "SAME": "That consistency helps. One more round and trend-based insights unlock.",
    "WORSE": "Early rounds swing around. One more round and trend-based insights unlock.",
}

_ROUND_TWO_FOCUS = (
    ONBOARDING_FOCUS_PREFIX
    + "Log your score once more and track fairways, greens, putts, and penalties "
    "so the first full breakdown has real detail."
)

_ROUND_THREE_FOLLOW_UP = (
    "Three rounds are in, so your trend now has a baseline to build from."
)

_ROUND_THREE_FOCUS = (
    ONBOARDING_FOCUS_PREFIX
    + "Full post-round insights start with your next round, "
    "so keep logging fairways, greens, putts, and penalties."
)


class UnsupportedOnboardingRoundError(ValueError):
    """Raised when onboarding copy is requested outside rounds one to three."""

    def __init__(self, round_number: int) -> None:
        self.round_number = round_number
        super().__init__(f"Unsupported onboarding round number: {round_number}")


def _format_delta(value: float) -> str:
    text = format_one_decimal(abs(value))
    return text[:-2] if text.endswith(".0") else text


def _comparison(score: float, previous_score: float | None) -> str:
    if previous_score is None or score == previous_score:
        return "SAME"
    return "BETTER" if score < previous_score else "WORSE"


def _guarded(text: str, outcome: str, settings: InsightsSettings | None) -> str:
    clean = sanitize_whitespace(text)
    assert_no_banned_copy(
        clean, message_key="onboarding", outcome=outcome, variant_index=0, settings=settings
    )
    return clean


def build_onboarding_post_round_insights(
    onboarding_input: OnboardingInput,
    *,
    settings: InsightsSettings | None = None,
) -> PolicyOutput:
    round_number = onboarding_input.round_number
    if round_number not in ONBOARDING_ROUNDS:
        raise UnsupportedOnboardingRoundError(round_number)

    score_line = (
        f"{onboarding_input.score:g} ({format_to_par(onboarding_input.to_par)})"
    )

    if round_number == 1:
        outcome = "OB-1"
        templates = _ROUND_ONE_MESSAGES
        delta_text, stroke_word, reference = "", "", ""
    else:
        comparison = _comparison(onboarding_input.score, onboarding_input.previous_score)
        outcome = f"OB-{round_number}-{comparison}"
        previous = onboarding_input.previous_score
        delta = onboarding_input.score - previous if previous is not None else 0.0
        delta_text = _format_delta(delta)
        stroke_word = "stroke" if delta_text == "1" else "strokes"
        reference = "first round" if round_number == 2 else "last round"
        if round_number == 2:
            templates = (
                _COMPARISON_LINES[comparison],
                _ROUND_TWO_FOLLOW_UPS[comparison],
                _ROUND_TWO_FOCUS,
            )
        else:
            templates = (
                _COMPARISON_LINES[comparison],
                _ROUND_THREE_FOLLOW_UP,
                _ROUND_THREE_FOCUS,
            )

    messages = tuple(
        _guarded(
            template.format(
                scoreLine=score_line,
                delta=delta_text,
                strokeWord=stroke_word,
                reference=reference,
            ),
            outcome,
            settings,
        )
        for template in templates
    )
    _logger.debug("onboarding round %s resolved to %s", round_number, outcome)
    return PolicyOutput(
        outcomes=(outcome, outcome, outcome),
        message_levels=("success", "info", "info"),
        messages=messages,
    )


__all__ = [
    "ONBOARDING_FOCUS_PREFIX",
    "UnsupportedOnboardingRoundError",
    "build_onboarding_post_round_insights",
]
