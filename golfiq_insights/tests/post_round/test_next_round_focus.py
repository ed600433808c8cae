from __future__ import annotations

from collections import Counter

import pytest

from golfiq_insights.post_round.next_round_focus import (
    AREA_ACTION_VARIANTS,
    DEFAULT_FOCUS_PREFIX,
    GENERIC_ACTION_VARIANTS,
    TRACKING_CLAUSE_VARIANTS,
    build_next_round_focus_text,
)
from golfiq_insights.post_round.schemas import MissingStats, VariantOptions

ALL_RECORDED = MissingStats(fir=False, gir=False, putts=False, penalties=False)
PUTTS_MISSING = MissingStats(fir=False, gir=False, putts=True, penalties=False)
PENALTIES_MISSING = MissingStats(fir=False, gir=False, putts=False, penalties=True)
NOTHING_RECORDED = MissingStats(fir=True, gir=True, putts=True, penalties=True)


def _ends_with_one_of(text: str, variants) -> bool:
    return any(text.endswith(variant) for variant in variants)


def test_two_or_more_missing_is_m3a_with_generic_action():
    focus = build_next_round_focus_text(
        NOTHING_RECORDED, None, False, False, variant_options=VariantOptions(fixed_index=0)
    )

    assert focus.outcome == "M3-A"
    assert focus.text.startswith(DEFAULT_FOCUS_PREFIX)
    assert "track fir, gir, putts, and penalties" in focus.text.lower()
    assert focus.text.endswith(GENERIC_ACTION_VARIANTS[0])


def test_single_missing_stat_names_it_with_area_action_when_weak():
    focus = build_next_round_focus_text(
        PENALTIES_MISSING,
        "putting",
        True,
        False,
        worst_measured_value=-1.6,
        variant_options=VariantOptions(fixed_index=0),
    )

    assert focus.outcome == "M3-B"
    assert focus.text.startswith("Next round: Track penalties")
    assert focus.text.endswith(AREA_ACTION_VARIANTS["putting"][0])


def test_single_missing_stat_uses_area_action_for_strong_leak():
    focus = build_next_round_focus_text(
        PUTTS_MISSING,
        "approach",
        False,
        False,
        worst_measured_value=-1.2,
        variant_options=VariantOptions(fixed_index=2),
    )

    assert focus.outcome == "M3-B"
    assert focus.text.endswith(AREA_ACTION_VARIANTS["approach"][2])


def test_single_missing_stat_without_leak_falls_back_to_generic():
    focus = build_next_round_focus_text(
        PUTTS_MISSING,
        "approach",
        False,
        False,
        worst_measured_value=-0.4,
        variant_options=VariantOptions(fixed_index=1),
    )

    assert focus.outcome == "M3-B"
    assert focus.text.endswith(GENERIC_ACTION_VARIANTS[1])


@pytest.mark.parametrize(
    "worst, weak, separation, value",
    [
        (None, False, False, None),
        ("putting", False, False, -0.6),
        ("putting", True, True, -0.9),
    ],
)
def test_complete_card_without_clear_opportunity_is_m3e(worst, weak, separation, value):
    focus = build_next_round_focus_text(
        ALL_RECORDED,
        worst,
        weak,
        separation,
        worst_measured_value=value,
        variant_options=VariantOptions(fixed_index=4),
    )

    assert focus.outcome == "M3-E"
    assert focus.text == DEFAULT_FOCUS_PREFIX + GENERIC_ACTION_VARIANTS[4]
    assert "track" not in focus.text.lower()


@pytest.mark.parametrize("separation", [False, True])
def test_complete_card_with_weak_opportunity_is_m3c(separation):
    focus = build_next_round_focus_text(
        ALL_RECORDED,
        "off_tee",
        True,
        separation,
        worst_measured_value=-1.4,
        variant_options=VariantOptions(fixed_index=3),
    )

    assert focus.outcome == "M3-C"
    assert focus.text == DEFAULT_FOCUS_PREFIX + AREA_ACTION_VARIANTS["off_tee"][3]


def test_leak_threshold_is_configurable():
    focus = build_next_round_focus_text(
        ALL_RECORDED,
        "penalties",
        True,
        True,
        worst_measured_value=-0.6,
        measured_leak_strong_threshold=-0.5,
    )

    assert focus.outcome == "M3-C"


def test_custom_prefix_appears_once():
    focus = build_next_round_focus_text(
        ALL_RECORDED, None, False, False, prefix="Next round focus: "
    )

    assert focus.text.startswith("Next round focus: ")
    assert focus.text.count("Next round") == 1


def test_seeded_focus_is_stable_and_offset_changes_wording():
    first = build_next_round_focus_text(
        PUTTS_MISSING, "approach", True, False,
        variant_options=VariantOptions(seed="round-11", offset=0),
    )
    again = build_next_round_focus_text(
        PUTTS_MISSING, "approach", True, False,
        variant_options=VariantOptions(seed="round-11", offset=0),
    )
    bumped = build_next_round_focus_text(
        PUTTS_MISSING, "approach", True, False,
        variant_options=VariantOptions(seed="round-11", offset=1),
    )

    assert first == again
    assert bumped.outcome == first.outcome
    assert bumped.text != first.text


def test_tracking_clauses_always_ask_to_track_and_vary_their_opening():
    assert TRACKING_CLAUSE_VARIANTS[0].startswith("Track {missingList}")
    for clause in TRACKING_CLAUSE_VARIANTS:
        assert "track {missingList}" in clause.lower().replace("{missinglist}", "{missingList}")
        assert clause.count(".") == 1

    openers = Counter(clause.split()[0] for clause in TRACKING_CLAUSE_VARIANTS)
    assert max(openers.values()) <= 6


def test_action_sentences_are_single_sentences_without_tracking_language():
    tables = [GENERIC_ACTION_VARIANTS, *AREA_ACTION_VARIANTS.values()]
    for table in tables:
        assert len(table) == 10
        for sentence in table:
            assert "track" not in sentence.lower()
            assert sentence.endswith(".")
            assert sentence.count(".") == 1
