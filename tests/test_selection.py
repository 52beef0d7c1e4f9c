import pytest

from cluegrid.cases.scenario import build_scenario
from cluegrid.clues.synthesizer import build_clue_pool
from cluegrid.deduction.selection import (
    EntitySet,
    accumulate,
    ensure_solvable,
    prune,
    select_clues,
)
from cluegrid.domain.enums import ClueType
from cluegrid.util.rng import Rng


@pytest.fixture()
def setup(mansion):
    scenario = build_scenario(*mansion, Rng(77))
    pool = build_clue_pool(scenario, *mansion)
    return scenario, pool, EntitySet(*mansion)


def test_accumulation_reaches_solved(setup):
    _, pool, entities = setup
    selected = accumulate(pool, entities, Rng(1))
    assert entities.solve(selected).solved
    assert len(selected) < len(pool)


def test_every_accepted_clue_made_progress(setup):
    _, pool, entities = setup
    selected = accumulate(pool, entities, Rng(2))
    previous = entities.solve([]).undetermined
    for index in range(1, len(selected) + 1):
        current = entities.solve(selected[:index]).undetermined
        assert current < previous
        previous = current


def test_front_loaded_positive_clue_comes_first(setup):
    _, pool, entities = setup
    selected = accumulate(pool, entities, Rng(3), front_load_positive=True)
    assert selected[0].is_positive


def test_fallback_fills_an_exhausted_pool(setup):
    scenario, _, entities = setup
    clues = ensure_solvable([], scenario, entities)
    assert clues
    assert all(clue.is_positive for clue in clues)
    assert entities.solve(clues).solved


def test_accumulation_over_negatives_only_then_fallback(setup):
    scenario, pool, entities = setup
    negatives = [clue for clue in pool if not clue.is_positive][:3]
    selected = accumulate(negatives, entities, Rng(4))
    clues = ensure_solvable(selected, scenario, entities)
    assert entities.solve(clues).solved


def test_prune_leaves_only_essential_clues(setup):
    _, pool, entities = setup
    kept = prune(list(pool), entities)
    assert entities.solve(kept).solved
    for clue in kept:
        assert not entities.solve([other for other in kept if other is not clue]).solved


def test_select_clues_orders_identity_last(setup):
    scenario, pool, entities = setup
    clues = select_clues(pool, scenario, entities, Rng(5))
    assert clues[-1].type == ClueType.IDENTITY
    assert sum(1 for clue in clues if clue.is_identity) == 1
    assert [clue.id for clue in clues] == [f"c{index}" for index in range(1, len(clues) + 1)]


def test_select_clues_is_deterministic(setup):
    scenario, pool, entities = setup
    assert select_clues(pool, scenario, entities, Rng(6)) == select_clues(
        pool, scenario, entities, Rng(6)
    )
