"""Pick a sufficient, locally minimal clue set from the candidate pool.

Redundancy is judged in scan order, so the result is locally minimal
(no single clue can be dropped) rather than a globally smallest set.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from cluegrid import config
from cluegrid.cases.scenario import Scenario
from cluegrid.clues.synthesizer import build_identity_clue, positive_fallbacks
from cluegrid.deduction.solver import SolveResult, solve
from cluegrid.domain.models import Clue, Entity
from cluegrid.util.rng import Rng

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntitySet:
    suspects: Sequence[Entity]
    weapons: Sequence[Entity]
    locations: Sequence[Entity]

    def solve(self, clues: Sequence[Clue]) -> SolveResult:
        return solve(self.suspects, self.weapons, self.locations, clues)


def _order_candidates(pool: Sequence[Clue], rng: Rng, front_load_positive: bool) -> list[Clue]:
    shuffled = rng.shuffle(pool)
    if not front_load_positive:
        return shuffled
    positive = [clue for clue in shuffled if clue.is_positive]
    negative = [clue for clue in shuffled if not clue.is_positive]
    return positive + negative


def accumulate(
    pool: Sequence[Clue],
    entities: EntitySet,
    rng: Rng,
    front_load_positive: bool = config.FRONT_LOAD_POSITIVE,
) -> list[Clue]:
    """Keep each candidate only if it strictly shrinks the open cells."""
    selected: list[Clue] = []
    current = entities.solve(selected)
    accepted = 0
    rejected = 0
    for clue in _order_candidates(pool, rng, front_load_positive):
        if current.solved:
            break
        trial = entities.solve([*selected, clue])
        if trial.undetermined < current.undetermined:
            selected.append(clue)
            current = trial
            accepted += 1
            logger.debug("Accepted [%d] %r (%d open)", len(selected), clue.text, trial.undetermined)
        else:
            rejected += 1
            logger.debug("Rejected %r (no change)", clue.text)
    logger.debug(
        "Accumulation accepted %d, rejected %d, solved=%s", accepted, rejected, current.solved
    )
    return selected


def ensure_solvable(
    selected: Sequence[Clue], scenario: Scenario, entities: EntitySet
) -> list[Clue]:
    """Append positive facts in row order until the grid is fully determined."""
    clues = list(selected)
    result = entities.solve(clues)
    if result.solved:
        return clues
    logger.warning(
        "Clue pool exhausted with %d open cells; adding fallback clues", result.undetermined
    )
    for fallback in positive_fallbacks(scenario):
        if fallback.text in {clue.text for clue in clues}:
            continue
        clues.append(fallback)
        if entities.solve(clues).solved:
            return clues
    raise RuntimeError("positive fallback clues did not determine the grid")


def prune(selected: Sequence[Clue], entities: EntitySet) -> list[Clue]:
    """Single backward pass dropping every clue the rest can do without.

    Identity clues are kept as-is and never tested.
    """
    kept = list(selected)
    pruned = 0
    for clue in reversed(list(selected)):
        if clue.is_identity:
            continue
        trial = [other for other in kept if other is not clue]
        if entities.solve(trial).solved:
            kept = trial
            pruned += 1
            logger.debug("Pruned %r", clue.text)
        else:
            logger.debug("Essential %r", clue.text)
    logger.debug("Pruning removed %d of %d clues", pruned, len(selected))
    return kept


def select_clues(
    pool: Sequence[Clue],
    scenario: Scenario,
    entities: EntitySet,
    rng: Rng,
    front_load_positive: bool = config.FRONT_LOAD_POSITIVE,
) -> list[Clue]:
    """Accumulate, inject the identity clue, prune and order for presentation."""
    selected = accumulate(pool, entities, rng.fork("accumulate"), front_load_positive)
    selected = ensure_solvable(selected, scenario, entities)
    selected.append(build_identity_clue(scenario, rng.fork("identity")))
    kept = prune(selected, entities)

    normal = [clue for clue in kept if not clue.is_identity]
    identity = [clue for clue in kept if clue.is_identity]
    ordered = rng.fork("presentation").shuffle(normal) + identity
    return [
        clue.model_copy(update={"id": f"c{index}"})
        for index, clue in enumerate(ordered, start=1)
    ]
