"""Entity pools and seeded sub-selection."""

from .pools import EntityPools, load_entity_pools, parse_entity_pools, select_entities

__all__ = [
    "EntityPools",
    "load_entity_pools",
    "parse_entity_pools",
    "select_entities",
]
