"""Post-round insight engine exports."""

from .copy_guard import BannedCopyError, assert_no_banned_copy, find_copy_issues
from .missing_stats import format_missing_stats_list, get_missing_stats
from .next_round_focus import NextRoundFocus, build_next_round_focus_text
from .onboarding import (
    UnsupportedOnboardingRoundError,
    build_onboarding_post_round_insights,
)
from .policy import build_deterministic_post_round_insights
from .schemas import (
    MissingStats,
    OnboardingInput,
    PolicyInput,
    PolicyOutput,
    PostRoundInsightsPayload,
    VariantOptions,
)
from .service import (
    RoundFacts,
    StrokesGainedComponents,
    ViewerEntitlements,
    build_post_round_insights,
    classify_band,
)
from .sg_selection import MeasuredSgInputs, run_measured_sg_selection
from .variant_offset import resolve_post_round_variant_offset
from .variants import pick_outcome_variant, pick_outcome_variant_meta

__all__ = [
    "BannedCopyError",
    "MeasuredSgInputs",
    "MissingStats",
    "NextRoundFocus",
    "OnboardingInput",
    "PolicyInput",
    "PolicyOutput",
    "PostRoundInsightsPayload",
    "RoundFacts",
    "StrokesGainedComponents",
    "UnsupportedOnboardingRoundError",
    "VariantOptions",
    "ViewerEntitlements",
    "assert_no_banned_copy",
    "build_deterministic_post_round_insights",
    "build_next_round_focus_text",
    "build_onboarding_post_round_insights",
    "build_post_round_insights",
    "classify_band",
    "find_copy_issues",
    "format_missing_stats_list",
    "get_missing_stats",
    "pick_outcome_variant",
    "pick_outcome_variant_meta",
    "resolve_post_round_variant_offset",
    "run_measured_sg_selection",
]
