"""Scenario graph wrapper around NetworkX."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

import networkx as nx

from cluegrid.domain.enums import Category, Relation
from cluegrid.domain.errors import ContradictionError
from cluegrid.domain.models import Entity


@dataclass
class ScenarioGraph:
    """Hidden assignment: every scenario row is a triangle of relation edges."""

    graph: nx.Graph = field(default_factory=nx.Graph)
    entities: Dict[str, Entity] = field(default_factory=dict)

    def add_entity(self, entity: Entity) -> None:
        self.entities[entity.id] = entity
        self.graph.add_node(entity.id, category=entity.category, name=entity.name)

    def add_row(self, suspect: Entity, weapon: Entity, location: Entity) -> None:
        for entity in (suspect, weapon, location):
            if entity.id not in self.entities:
                self.add_entity(entity)
        self.graph.add_edge(suspect.id, weapon.id, relation=Relation.SUSPECT_WEAPON)
        self.graph.add_edge(suspect.id, location.id, relation=Relation.SUSPECT_LOCATION)
        self.graph.add_edge(weapon.id, location.id, relation=Relation.WEAPON_LOCATION)

    def related(self, first_id: str, second_id: str) -> bool:
        return self.graph.has_edge(first_id, second_id)

    def partner(self, entity_id: str, category: Category) -> Entity | None:
        for neighbor in self.graph.neighbors(entity_id):
            if self.graph.nodes[neighbor]["category"] == category:
                return self.entities[neighbor]
        return None

    def ensure_bijection(self) -> None:
        """Every component must be exactly one suspect, weapon and location."""
        for component in nx.connected_components(self.graph):
            categories = sorted(self.graph.nodes[node]["category"] for node in component)
            if categories != sorted(Category):
                names = ", ".join(sorted(component))
                raise ContradictionError(f"scenario row is not a triple: {names}")
            if self.graph.subgraph(component).number_of_edges() != 3:
                raise ContradictionError("scenario row is not a closed triangle")
