"""Development-time contract check for generated insight copy.

Variant tables are vetted before release, so production skips the scan entirely.
Everywhere else a banned phrase is a hard failure that names the offending table entry.
"""

from __future__ import annotations

import logging
import re

from golfiq_insights.config import InsightsSettings, get_settings
from golfiq_insights.config.post_round import (
    POST_ROUND_MESSAGE_MAX_CHARS,
    POST_ROUND_SENTENCE_MAX_CHARS,
)
from golfiq_insights.metrics.insights_metrics import observe_copy_guard_violation

_logger = logging.getLogger("golfiq_insights.post_round.copy_guard")

BANNED_TOKENS: tuple[str, ...] = (
    "consider",
    "could",
    "might",
    "seems",
    "challenge",
    "needs more focus",
    "significant impact",
    "crucial",
    "moving forward",
    "opportunity for success",
    "enhance scoring",
    "decision-making on the greens",
    "improve your efficiency",
    "keep a close eye on",
    "round context",
    "—",
    "–",
    "&mdash;",
)

_SENTENCE_SPLIT = re.compile(r"[.!?]+\s*")


class BannedCopyError(ValueError):
    """Raised when rendered copy contains a banned token."""

    def __init__(
        self, token: str, *, message_key: str, outcome: str, variant_index: int, text: str
    ) -> None:
        self.token = token
        self.message_key = message_key
        self.outcome = outcome
        self.variant_index = variant_index
        self.text = text
        super().__init__(
            f'Banned copy token "{token}" in {message_key} ({outcome}) '
            f"variant {variant_index}: {text}"
        )


def find_banned_token(text: str) -> str | None:
    lowered = str(text or "").lower()
    for token in BANNED_TOKENS:
        if token.lower() in lowered:
            return token
    return None


def assert_no_banned_copy(
    text: str,
    *,
    message_key: str,
    outcome: str,
    variant_index: int,
    settings: InsightsSettings | None = None,
) -> None:
    active = settings or get_settings()
    if not active.copy_guard_enabled:
        return

    token = find_banned_token(text)
    if token is None:
        return

    observe_copy_guard_violation(message_key)
    _logger.warning(
        "banned copy token %r in %s (%s) variant %s", token, message_key, outcome, variant_index
    )
    raise BannedCopyError(
        token,
        message_key=message_key,
        outcome=outcome,
        variant_index=variant_index,
        text=text,
    )


def find_copy_issues(
    text: str,
    *,
    max_sentence_chars: int = POST_ROUND_SENTENCE_MAX_CHARS,
    max_message_chars: int = POST_ROUND_MESSAGE_MAX_CHARS,
) -> list[str]:
    """Structural problems in a rendered message; empty when the copy is clean."""

    issues: list[str] = []
    if "  " in text:
        issues.append("double_space")
    if re.search(r"\s[.,!?;:]", text):
        issues.append("space_before_punctuation")
    if ".." in text:
        issues.append("double_period")
    if len(text) > max_message_chars:
        issues.append("message_too_long")
    sentences = [part.strip() for part in _SENTENCE_SPLIT.split(text) if part.strip()]
    if any(len(sentence) > max_sentence_chars for sentence in sentences):
        issues.append("sentence_too_long")
    return issues


__all__ = [
    "BANNED_TOKENS",
    "BannedCopyError",
    "assert_no_banned_copy",
    "find_banned_token",
    "find_copy_issues",
]
