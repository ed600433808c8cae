from __future__ import annotations

import hashlib

import pytest

from golfiq_insights.post_round.variants import (
    VariantPick,
    pick_outcome_variant,
    pick_outcome_variant_meta,
    variant_hash,
)

VARIANTS = ("alpha", "bravo", "charlie")


def test_empty_variant_list_returns_blank_pick():
    assert pick_outcome_variant_meta("M1-A", []) == VariantPick(text="", index=0, count=0)
    assert pick_outcome_variant("M1-A", [], seed="round-1") == ""


@pytest.mark.parametrize("fixed_index, expected", [(0, 0), (4, 1), (-1, 2), (2.9, 2)])
def test_fixed_index_wraps_and_stays_non_negative(fixed_index, expected):
    picked = pick_outcome_variant_meta(
        "M2-D", VARIANTS, seed="ignored", offset=5, fixed_index=fixed_index
    )

    assert picked.index == expected
    assert picked.text == VARIANTS[expected]
    assert picked.count == 3


@pytest.mark.parametrize("offset, expected", [(0, 0), (1, 1), (4, 1), (-1, 2), (2.5, 2)])
def test_offset_without_seed(offset, expected):
    assert pick_outcome_variant_meta("M3-C", VARIANTS, offset=offset).index == expected


def test_hash_uses_first_four_digest_bytes():
    digest = hashlib.sha256(b"round-7|M1-C").digest()

    assert variant_hash("round-7", "M1-C") == int.from_bytes(digest[:4], "big")


def test_seeded_pick_is_deterministic_and_offset_steps_through_variants():
    base = pick_outcome_variant_meta("M1-C", VARIANTS, seed="round-7")
    again = pick_outcome_variant_meta("M1-C", VARIANTS, seed="round-7")
    bumped = pick_outcome_variant_meta("M1-C", VARIANTS, seed="round-7", offset=1)

    assert base == again
    assert base.index == variant_hash("round-7", "M1-C") % 3
    assert bumped.index == (base.index + 1) % 3


def test_outcome_is_part_of_the_hash_key():
    variants = tuple(f"v{index}" for index in range(1000))
    first = pick_outcome_variant_meta("M1-B", variants, seed="round-7")
    second = pick_outcome_variant_meta("M1-C", variants, seed="round-7")

    assert first.index == variant_hash("round-7", "M1-B") % 1000
    assert second.index == variant_hash("round-7", "M1-C") % 1000
