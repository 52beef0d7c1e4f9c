"""Seed derivation from date labels or arbitrary strings."""

from __future__ import annotations

from datetime import date, datetime, timezone

from cluegrid.domain.enums import Difficulty

_MASK32 = 0xFFFFFFFF


def string_hash(text: str) -> int:
    """Java-style 31-multiplier hash folded to a non-negative 32-bit value."""
    value = 0
    for char in text:
        value = (value * 31 + ord(char)) & _MASK32
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


def _parse_date(label: str) -> date | None:
    try:
        return date.fromisoformat(label.strip())
    except ValueError:
        return None


def seed_from_label(label: str) -> int:
    parsed = _parse_date(label)
    if parsed is not None:
        midnight = datetime(parsed.year, parsed.month, parsed.day, tzinfo=timezone.utc)
        return int(midnight.timestamp() * 1000) & _MASK32
    return string_hash(label) & _MASK32


def grid_size_for_seed(seed: int) -> int:
    roll = ((seed * 9301 + 49297) % 233280) / 233280
    return 4 if roll > 0.5 else 3


def difficulty_for_size(grid_size: int) -> Difficulty:
    return Difficulty.EASY if grid_size <= 3 else Difficulty.NORMAL
