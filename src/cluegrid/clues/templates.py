"""Clue phrasing shared by the synthesizer and the solver.

Each template is rendered from a structured fact, and the same literal text is
compiled into an anchored pattern so clue strings can be read back.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Sequence

from cluegrid.domain.enums import Category, Polarity, Relation
from cluegrid.domain.models import ClueFact, Entity, IdentityFact
from cluegrid.util.grammar import capitalize_first, with_article

FACT_TEMPLATES: dict[tuple[Relation, Polarity], str] = {
    (Relation.SUSPECT_WEAPON, Polarity.POSITIVE): "{row} used {col}.",
    (Relation.SUSPECT_WEAPON, Polarity.NEGATIVE): "{row} did not use {col}.",
    (Relation.WEAPON_LOCATION, Polarity.POSITIVE): "{row} was found in {col}.",
    (Relation.WEAPON_LOCATION, Polarity.NEGATIVE): "{row} was not used in {col}.",
    (Relation.SUSPECT_LOCATION, Polarity.POSITIVE): "{row} was in {col}.",
    (Relation.SUSPECT_LOCATION, Polarity.NEGATIVE): "{row} was not in {col}.",
}

IDENTITY_TEMPLATES: dict[Category, str] = {
    Category.WEAPON: "The culprit left traces of {col}.",
    Category.LOCATION: "The culprit was seen in {col}.",
}


def _compile(template: str) -> re.Pattern[str]:
    pattern = re.escape(template)
    pattern = pattern.replace(re.escape("{row}"), "(?P<row>.+)")
    pattern = pattern.replace(re.escape("{col}"), "(?P<col>.+)")
    return re.compile(f"^{pattern}$")


def _literal_length(template: str) -> int:
    return len(template.replace("{row}", "").replace("{col}", ""))


# Longer literals first so "did not use" is tried before "used".
_FACT_PATTERNS: list[tuple[Relation, Polarity, re.Pattern[str]]] = [
    (relation, polarity, _compile(template))
    for (relation, polarity), template in sorted(
        FACT_TEMPLATES.items(), key=lambda item: -_literal_length(item[1])
    )
]
_IDENTITY_PATTERNS: list[tuple[Category, re.Pattern[str]]] = [
    (category, _compile(template)) for category, template in IDENTITY_TEMPLATES.items()
]


def entity_phrase(entity: Entity) -> str:
    if entity.category == Category.SUSPECT:
        return entity.name
    return with_article(entity.name)


def render_fact(fact: ClueFact, entities: Mapping[str, Entity]) -> str:
    template = FACT_TEMPLATES[(fact.relation, fact.polarity)]
    row = entity_phrase(entities[fact.row_id])
    col = entity_phrase(entities[fact.col_id])
    return capitalize_first(template.format(row=row, col=col))


def render_identity(fact: IdentityFact, entities: Mapping[str, Entity]) -> str:
    template = IDENTITY_TEMPLATES[fact.category]
    return template.format(col=entity_phrase(entities[fact.entity_id]))


class _NameIndex:
    def __init__(self, entities: Iterable[Entity]) -> None:
        self._by_category: dict[Category, dict[str, Entity]] = {
            category: {} for category in Category
        }
        for entity in entities:
            bucket = self._by_category[entity.category]
            bucket[entity.name.casefold()] = entity
            bucket[entity_phrase(entity).casefold()] = entity

    def lookup(self, phrase: str, category: Category) -> Entity | None:
        return self._by_category[category].get(phrase.strip().casefold())


def parse_clue_text(
    text: str,
    suspects: Sequence[Entity],
    weapons: Sequence[Entity],
    locations: Sequence[Entity],
) -> ClueFact | None:
    """Recover the pairwise fact stated by ``text``, or None if it states none."""
    index = _NameIndex([*suspects, *weapons, *locations])
    cleaned = " ".join(text.strip().split())
    for relation, polarity, pattern in _FACT_PATTERNS:
        match = pattern.match(cleaned)
        if not match:
            continue
        row_category, col_category = relation.categories
        row = index.lookup(match.group("row"), row_category)
        col = index.lookup(match.group("col"), col_category)
        if row is None or col is None:
            continue
        return ClueFact(relation=relation, row_id=row.id, col_id=col.id, polarity=polarity)
    return None


def parse_identity_text(
    text: str, weapons: Sequence[Entity], locations: Sequence[Entity]
) -> IdentityFact | None:
    index = _NameIndex([*weapons, *locations])
    cleaned = " ".join(text.strip().split())
    for category, pattern in _IDENTITY_PATTERNS:
        match = pattern.match(cleaned)
        if not match:
            continue
        entity = index.lookup(match.group("col"), category)
        if entity is not None:
            return IdentityFact(category=category, entity_id=entity.id)
    return None
