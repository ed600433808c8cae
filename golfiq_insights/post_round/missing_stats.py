from __future__ import annotations

from typing import Any, Mapping, Sequence

from .schemas import AdvancedStatKey, MissingStats

STAT_LABELS: dict[AdvancedStatKey, str] = {
    "fir": "FIR",
    "gir": "GIR",
    "putts": "putts",
    "penalties": "penalties",
}

_STAT_FIELDS: dict[AdvancedStatKey, tuple[str, ...]] = {
    "fir": ("fir_hit", "firHit"),
    "gir": ("gir_hit", "girHit"),
    "putts": ("putts",),
    "penalties": ("penalties",),
}


def _read_stat(round_like: Any, names: tuple[str, ...]) -> Any:
    for name in names:
        if isinstance(round_like, Mapping):
            if name in round_like:
                return round_like[name]
        elif hasattr(round_like, name):
            return getattr(round_like, name)
    return None


def get_missing_stats(round_like: Any) -> MissingStats:
    """A stat is missing when it was never recorded; zero is a real value."""

    return MissingStats(
        **{
            key: _read_stat(round_like, fields) is None
            for key, fields in _STAT_FIELDS.items()
        }
    )


def get_missing_stat_keys(missing: MissingStats) -> list[AdvancedStatKey]:
    return [key for key in _STAT_FIELDS if getattr(missing, key)]


def get_missing_count(missing: MissingStats) -> int:
    return len(get_missing_stat_keys(missing))


def join_with_oxford_comma(items: Sequence[str]) -> str:
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def format_missing_stats_list(missing: MissingStats) -> str:
    return join_with_oxford_comma(
        [STAT_LABELS[key] for key in get_missing_stat_keys(missing)]
    )


__all__ = [
    "STAT_LABELS",
    "format_missing_stats_list",
    "get_missing_count",
    "get_missing_stat_keys",
    "get_missing_stats",
    "join_with_oxford_comma",
]
