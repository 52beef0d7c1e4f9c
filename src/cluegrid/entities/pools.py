"""Load entity pools and pick the per-puzzle subsets."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any

import yaml

from cluegrid import config
from cluegrid.domain import rules
from cluegrid.domain.enums import Category
from cluegrid.domain.errors import PuzzleInputError
from cluegrid.domain.models import Entity
from cluegrid.util.rng import Rng

logger = logging.getLogger(__name__)

_POOL_KEYS = {
    Category.SUSPECT: "suspects",
    Category.WEAPON: "weapons",
    Category.LOCATION: "locations",
}


@dataclass(frozen=True)
class EntityPools:
    suspects: list[Entity]
    weapons: list[Entity]
    locations: list[Entity]

    def for_category(self, category: Category) -> list[Entity]:
        return getattr(self, _POOL_KEYS[category])


_POOL_CACHE: dict[Path, EntityPools] = {}


def _parse_pool(data: dict[str, Any], category: Category) -> list[Entity]:
    raw = data.get(_POOL_KEYS[category]) or []
    if not raw:
        raise PuzzleInputError(f"entity pool '{_POOL_KEYS[category]}' is empty")
    entities = [
        Entity(id=str(item["id"]), name=str(item["name"]), category=category)
        for item in raw
    ]
    rules.ensure_unique_ids(entities, category.value)
    return entities


def parse_entity_pools(data: dict[str, Any]) -> EntityPools:
    return EntityPools(
        suspects=_parse_pool(data, Category.SUSPECT),
        weapons=_parse_pool(data, Category.WEAPON),
        locations=_parse_pool(data, Category.LOCATION),
    )


def load_entity_pools(path: Path | None = None) -> EntityPools:
    """Load entity pools from YAML once per path and cache them."""
    pool_path = Path(path or config.ENTITY_POOL_PATH)
    cached = _POOL_CACHE.get(pool_path)
    if cached is not None:
        return cached
    data = yaml.safe_load(pool_path.read_text(encoding="utf-8")) or {}
    pools = parse_entity_pools(data)
    logger.debug(
        "Loaded entity pools from %s (%d/%d/%d)",
        pool_path,
        len(pools.suspects),
        len(pools.weapons),
        len(pools.locations),
    )
    _POOL_CACHE[pool_path] = pools
    return pools


def select_entities(
    rng: Rng, grid_size: int, pools: EntityPools | None = None
) -> tuple[list[Entity], list[Entity], list[Entity]]:
    rules.ensure_grid_size(grid_size)
    pools = pools or load_entity_pools()
    picked: dict[Category, list[Entity]] = {}
    for category in Category:
        pool = pools.for_category(category)
        if len(pool) < grid_size:
            raise PuzzleInputError(
                f"{_POOL_KEYS[category]} pool has {len(pool)} entries, need {grid_size}"
            )
        picked[category] = rng.fork(_POOL_KEYS[category]).shuffle(pool)[:grid_size]
    return picked[Category.SUSPECT], picked[Category.WEAPON], picked[Category.LOCATION]
