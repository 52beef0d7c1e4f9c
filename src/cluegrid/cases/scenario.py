"""Scenario builder: the hidden one-to-one-to-one assignment."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Sequence

from cluegrid.domain import rules
from cluegrid.domain.models import Entity, Solution
from cluegrid.truth.graph import ScenarioGraph
from cluegrid.util.rng import Rng

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioRow:
    suspect: Entity
    weapon: Entity
    location: Entity


@dataclass
class Scenario:
    rows: list[ScenarioRow]
    graph: ScenarioGraph = field(default_factory=ScenarioGraph)

    @property
    def solution_row(self) -> ScenarioRow:
        return self.rows[0]

    @property
    def solution(self) -> Solution:
        row = self.solution_row
        return Solution(
            suspect_id=row.suspect.id,
            weapon_id=row.weapon.id,
            location_id=row.location.id,
        )

    @property
    def grid_size(self) -> int:
        return len(self.rows)


def build_scenario(
    suspects: Sequence[Entity],
    weapons: Sequence[Entity],
    locations: Sequence[Entity],
    rng: Rng,
) -> Scenario:
    rules.ensure_entity_lists(suspects, weapons, locations)

    shuffled_suspects = rng.fork("suspects").shuffle(suspects)
    shuffled_weapons = rng.fork("weapons").shuffle(weapons)
    shuffled_locations = rng.fork("locations").shuffle(locations)

    scenario = Scenario(rows=[])
    for suspect, weapon, location in zip(
        shuffled_suspects, shuffled_weapons, shuffled_locations
    ):
        scenario.rows.append(ScenarioRow(suspect=suspect, weapon=weapon, location=location))
        scenario.graph.add_row(suspect, weapon, location)
    scenario.graph.ensure_bijection()

    for index, row in enumerate(scenario.rows):
        marker = "*" if index == 0 else " "
        logger.debug(
            "%s %s + %s @ %s", marker, row.suspect.name, row.weapon.name, row.location.name
        )
    return scenario
