from __future__ import annotations

import pytest

from golfiq_insights.config import InsightsSettings, get_settings, reset_settings_cache
from golfiq_insights.metrics import insights_metrics
from golfiq_insights.post_round import next_round_focus, onboarding, policy
from golfiq_insights.post_round.copy_guard import (
    BANNED_TOKENS,
    BannedCopyError,
    assert_no_banned_copy,
    find_banned_token,
    find_copy_issues,
)


def _variant_tables():
    for module in (policy, next_round_focus):
        for name, value in vars(module).items():
            if name.endswith("_VARIANTS") and isinstance(value, tuple):
                yield f"{module.__name__}.{name}", value


def _guard_violations(message_key: str) -> float:
    return insights_metrics.POST_ROUND_COPY_GUARD_VIOLATIONS_TOTAL.labels(
        message_key=message_key
    )._value.get()


def test_find_banned_token_is_case_insensitive():
    assert find_banned_token("You Might want to lay up.") == "might"
    assert find_banned_token("Moving Forward, aim left.") == "moving forward"
    assert find_banned_token("Aim left — then commit.") == "—"
    assert find_banned_token("Aim at the middle of the green.") is None


def test_every_variant_table_is_free_of_banned_tokens():
    tables = dict(_variant_tables())

    assert tables
    for table_name, variants in tables.items():
        for index, text in enumerate(variants):
            assert find_banned_token(text) is None, (table_name, index, text)


def test_onboarding_copy_is_free_of_banned_tokens():
    for name, value in vars(onboarding).items():
        if name.startswith("_ROUND") or name.startswith("_COMPARISON"):
            texts = value.values() if isinstance(value, dict) else (
                value if isinstance(value, tuple) else (value,)
            )
            for text in texts:
                assert find_banned_token(text) is None, (name, text)


def test_guard_raises_with_context_and_records_violation(guard_settings, caplog):
    before = _guard_violations("message2")

    with caplog.at_level("WARNING", logger="golfiq_insights.post_round.copy_guard"):
        with pytest.raises(BannedCopyError) as excinfo:
            assert_no_banned_copy(
                "Putting seems off.",
                message_key="message2",
                outcome="M2-D",
                variant_index=3,
                settings=guard_settings,
            )

    error = excinfo.value
    assert isinstance(error, ValueError)
    assert error.token == "seems"
    assert error.message_key == "message2"
    assert error.outcome == "M2-D"
    assert error.variant_index == 3
    assert "M2-D" in str(error)
    assert "banned copy token" in caplog.text
    assert _guard_violations("message2") == before + 1


def test_disabled_guard_lets_text_through():
    settings = InsightsSettings(environment="production", copy_guard_enabled=False)

    assert_no_banned_copy(
        "You could consider a challenge.",
        message_key="message1",
        outcome="M1-B",
        variant_index=0,
        settings=settings,
    )


def test_production_environment_disables_guard(monkeypatch):
    monkeypatch.setenv("GOLFIQ_ENV", "production")
    reset_settings_cache()

    assert get_settings().copy_guard_enabled is False
    assert_no_banned_copy("This might help.", message_key="m", outcome="M1-A", variant_index=0)


def test_guard_override_wins_over_environment(monkeypatch):
    monkeypatch.setenv("GOLFIQ_ENV", "production")
    monkeypatch.setenv("INSIGHTS_COPY_GUARD", "on")
    reset_settings_cache()

    with pytest.raises(BannedCopyError):
        assert_no_banned_copy("This might help.", message_key="m", outcome="M1-A", variant_index=0)


def test_banned_list_includes_dash_characters():
    assert "—" in BANNED_TOKENS
    assert "–" in BANNED_TOKENS
    assert "&mdash;" in BANNED_TOKENS


@pytest.mark.parametrize(
    "text, issue",
    [
        ("Aim left.  Commit to it.", "double_space"),
        ("Aim left . Commit to it.", "space_before_punctuation"),
        ("Aim left.. Commit to it.", "double_period"),
        ("A" * 171 + ".", "sentence_too_long"),
        (" ".join(["B" * 80 + "."] * 4), "message_too_long"),
    ],
)
def test_find_copy_issues_flags_structure(text, issue):
    assert issue in find_copy_issues(text)


def test_find_copy_issues_accepts_clean_copy():
    text = "You shot 75 (+3), which matches your recent average. Putting cost the most at 2.1 strokes."

    assert find_copy_issues(text) == []
