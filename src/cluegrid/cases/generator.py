"""Puzzle assembly: seed in, finished puzzle record out."""

from __future__ import annotations

import logging
from typing import Sequence

from cluegrid import config
from cluegrid.cases.scenario import Scenario, build_scenario
from cluegrid.clues.synthesizer import build_clue_pool
from cluegrid.deduction.selection import EntitySet, select_clues
from cluegrid.domain.models import Entity, PuzzleData
from cluegrid.entities import EntityPools, select_entities
from cluegrid.util.rng import Rng
from cluegrid.util.seeds import difficulty_for_size, grid_size_for_seed, seed_from_label

logger = logging.getLogger(__name__)


def build_puzzle(
    suspects: Sequence[Entity],
    weapons: Sequence[Entity],
    locations: Sequence[Entity],
    seed: int,
    label: str | None = None,
    front_load_positive: bool = config.FRONT_LOAD_POSITIVE,
) -> tuple[PuzzleData, Scenario]:
    """Like ``generate_puzzle`` but also hands back the hidden scenario."""
    rng = Rng(seed)
    scenario = build_scenario(suspects, weapons, locations, rng.fork("scenario"))
    grid_size = scenario.grid_size
    pool = build_clue_pool(scenario, suspects, weapons, locations)
    entities = EntitySet(suspects=suspects, weapons=weapons, locations=locations)
    clues = select_clues(
        pool, scenario, entities, rng.fork("clues"), front_load_positive=front_load_positive
    )
    puzzle = PuzzleData(
        label=label if label is not None else str(seed),
        seed=rng.seed,
        difficulty=difficulty_for_size(grid_size),
        grid_size=grid_size,
        suspects=tuple(suspects),
        weapons=tuple(weapons),
        locations=tuple(locations),
        solution=scenario.solution,
        clues=tuple(clues),
    )
    logger.info(
        "Generated puzzle %s (seed %d, %dx%d) with %d clues",
        puzzle.label,
        puzzle.seed,
        grid_size,
        grid_size,
        len(clues),
    )
    return puzzle, scenario


def generate_puzzle(
    suspects: Sequence[Entity],
    weapons: Sequence[Entity],
    locations: Sequence[Entity],
    seed: int,
    label: str | None = None,
) -> PuzzleData:
    puzzle, _ = build_puzzle(suspects, weapons, locations, seed, label=label)
    return puzzle


def build_daily_puzzle(
    label: str, pools: EntityPools | None = None
) -> tuple[PuzzleData, Scenario]:
    seed = seed_from_label(label)
    grid_size = grid_size_for_seed(seed)
    logger.debug("Label %r -> seed %d, grid size %d", label, seed, grid_size)
    suspects, weapons, locations = select_entities(Rng(seed).fork("entities"), grid_size, pools)
    return build_puzzle(suspects, weapons, locations, seed, label=label)


def generate_daily_puzzle(label: str, pools: EntityPools | None = None) -> PuzzleData:
    """Puzzle for a date label such as ``2026-10-19`` or any other string."""
    puzzle, _ = build_daily_puzzle(label, pools)
    return puzzle
