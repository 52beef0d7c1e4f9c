"""Turn a scenario into a pool of candidate clues."""

from __future__ import annotations

import logging
from typing import Sequence

from cluegrid.cases.scenario import Scenario
from cluegrid.clues.templates import render_fact, render_identity
from cluegrid.domain.enums import Category, ClueType, Polarity, Relation
from cluegrid.domain.errors import ContradictionError
from cluegrid.domain.models import Clue, ClueFact, Entity, IdentityFact
from cluegrid.util.rng import Rng

logger = logging.getLogger(__name__)


def fact_clue(fact: ClueFact, entities: dict[str, Entity]) -> Clue:
    return Clue(text=render_fact(fact, entities), fact=fact)


def _positive_facts(scenario: Scenario) -> list[ClueFact]:
    facts: list[ClueFact] = []
    for row in scenario.rows:
        facts.append(
            ClueFact(
                relation=Relation.SUSPECT_WEAPON,
                row_id=row.suspect.id,
                col_id=row.weapon.id,
                polarity=Polarity.POSITIVE,
            )
        )
        facts.append(
            ClueFact(
                relation=Relation.WEAPON_LOCATION,
                row_id=row.weapon.id,
                col_id=row.location.id,
                polarity=Polarity.POSITIVE,
            )
        )
        facts.append(
            ClueFact(
                relation=Relation.SUSPECT_LOCATION,
                row_id=row.suspect.id,
                col_id=row.location.id,
                polarity=Polarity.POSITIVE,
            )
        )
    return facts


def _negative_facts(
    scenario: Scenario,
    relation: Relation,
    rows: Sequence[Entity],
    cols: Sequence[Entity],
) -> list[ClueFact]:
    return [
        ClueFact(
            relation=relation,
            row_id=row.id,
            col_id=col.id,
            polarity=Polarity.NEGATIVE,
        )
        for row in rows
        for col in cols
        if not scenario.graph.related(row.id, col.id)
    ]


def build_clue_pool(
    scenario: Scenario,
    suspects: Sequence[Entity],
    weapons: Sequence[Entity],
    locations: Sequence[Entity],
) -> list[Clue]:
    """Every true positive fact, then every true negative fact.

    The pool holds 3N positive and 3N(N-1) negative clues.
    """
    entities = {entity.id: entity for entity in [*suspects, *weapons, *locations]}
    facts = _positive_facts(scenario)
    facts += _negative_facts(scenario, Relation.SUSPECT_WEAPON, suspects, weapons)
    facts += _negative_facts(scenario, Relation.SUSPECT_LOCATION, suspects, locations)
    facts += _negative_facts(scenario, Relation.WEAPON_LOCATION, weapons, locations)
    pool = [fact_clue(fact, entities) for fact in facts]
    logger.debug("Generated %d clue candidates", len(pool))
    return pool


def positive_fallbacks(scenario: Scenario) -> list[Clue]:
    """Positive clues in row order, used when accumulation stalls."""
    entities = dict(scenario.graph.entities)
    return [fact_clue(fact, entities) for fact in _positive_facts(scenario)]


def build_identity_clue(scenario: Scenario, rng: Rng) -> Clue:
    """Point at the culprit's weapon or location without naming the suspect."""
    culprit = scenario.solution_row.suspect
    category = Category.WEAPON if rng.coin() else Category.LOCATION
    partner = scenario.graph.partner(culprit.id, category)
    if partner is None:
        raise ContradictionError(f"culprit {culprit.id} has no {category} in the scenario")
    identity = IdentityFact(category=category, entity_id=partner.id)
    text = render_identity(identity, scenario.graph.entities)
    return Clue(text=text, type=ClueType.IDENTITY, identity=identity)
