"""Shared enums for the puzzle domain."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    SUSPECT = "suspect"
    WEAPON = "weapon"
    LOCATION = "location"


class Relation(StrEnum):
    SUSPECT_WEAPON = "suspect_weapon"
    SUSPECT_LOCATION = "suspect_location"
    WEAPON_LOCATION = "weapon_location"

    @property
    def categories(self) -> tuple[Category, Category]:
        return RELATION_CATEGORIES[self]


RELATION_CATEGORIES = {
    Relation.SUSPECT_WEAPON: (Category.SUSPECT, Category.WEAPON),
    Relation.SUSPECT_LOCATION: (Category.SUSPECT, Category.LOCATION),
    Relation.WEAPON_LOCATION: (Category.WEAPON, Category.LOCATION),
}


class Polarity(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class CellState(StrEnum):
    UNDETERMINED = "undetermined"
    CONFIRMED = "confirmed"
    EXCLUDED = "excluded"


class ClueType(StrEnum):
    NORMAL = "normal"
    IDENTITY = "identity"


class Difficulty(StrEnum):
    EASY = "easy"
    NORMAL = "normal"
