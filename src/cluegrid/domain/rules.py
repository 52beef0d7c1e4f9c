"""Invariant checks for puzzle inputs."""

from __future__ import annotations

from typing import Sequence

from cluegrid import config
from cluegrid.domain.enums import Category
from cluegrid.domain.errors import PuzzleInputError
from cluegrid.domain.models import Entity


def ensure_grid_size(grid_size: int) -> None:
    if not config.MIN_GRID_SIZE <= grid_size <= config.MAX_GRID_SIZE:
        raise PuzzleInputError(
            f"grid size must be between {config.MIN_GRID_SIZE} and "
            f"{config.MAX_GRID_SIZE}, got {grid_size}"
        )


def ensure_category(entities: Sequence[Entity], category: Category) -> None:
    for entity in entities:
        if entity.category != category:
            raise PuzzleInputError(
                f"{entity.id} is a {entity.category}, expected {category}"
            )


def ensure_unique_ids(entities: Sequence[Entity], label: str) -> None:
    seen: set[str] = set()
    for entity in entities:
        if entity.id in seen:
            raise PuzzleInputError(f"Duplicate {label} id: {entity.id}")
        seen.add(entity.id)


def ensure_entity_lists(
    suspects: Sequence[Entity],
    weapons: Sequence[Entity],
    locations: Sequence[Entity],
) -> int:
    """Validate the three entity lists and return the grid size they form."""
    sizes = {len(suspects), len(weapons), len(locations)}
    if len(sizes) != 1:
        raise PuzzleInputError(
            "entity lists must have equal length, got "
            f"{len(suspects)}/{len(weapons)}/{len(locations)}"
        )
    size = sizes.pop()
    if size == 0:
        raise PuzzleInputError("entity lists are empty")
    ensure_grid_size(size)
    ensure_category(suspects, Category.SUSPECT)
    ensure_category(weapons, Category.WEAPON)
    ensure_category(locations, Category.LOCATION)
    ensure_unique_ids(list(suspects) + list(weapons) + list(locations), "entity")
    return size
