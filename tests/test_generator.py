import pytest
from pydantic import ValidationError

from cluegrid import generate_daily_puzzle, generate_puzzle
from cluegrid.deduction.solver import solve
from cluegrid.deduction.validation import verify_puzzle
from cluegrid.domain import rules
from cluegrid.domain.enums import Category, ClueType, Difficulty
from cluegrid.domain.errors import PuzzleInputError

from conftest import make_entities


def test_seed_42_concrete_scenario(entities):
    puzzle = generate_puzzle(*entities, seed=42)
    normal = puzzle.normal_clues
    assert solve(*entities, normal).solved
    for clue in normal:
        trial = [other for other in puzzle.clues if other.id != clue.id]
        assert not solve(*entities, trial).solved
    assert solve(*entities, normal).solved


def test_generation_is_deterministic(mansion):
    first = generate_puzzle(*mansion, seed=2024)
    second = generate_puzzle(*mansion, seed=2024)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_solution_uses_selected_entities(mansion):
    suspects, weapons, locations = mansion
    puzzle = generate_puzzle(*mansion, seed=9)
    assert puzzle.solution.suspect_id in {entity.id for entity in suspects}
    assert puzzle.solution.weapon_id in {entity.id for entity in weapons}
    assert puzzle.solution.location_id in {entity.id for entity in locations}
    assert puzzle.difficulty == Difficulty.NORMAL
    assert puzzle.grid_size == 4


def test_identity_clue_never_names_the_culprit(mansion):
    names = {entity.id: entity.name for entity in mansion[0]}
    for seed in range(15):
        puzzle = generate_puzzle(*mansion, seed=seed)
        identity = puzzle.identity_clue
        assert identity is not None
        assert puzzle.clues[-1] == identity
        assert names[puzzle.solution.suspect_id] not in identity.text


@pytest.mark.parametrize("label", ["2026-10-19", "2026-10-20", "random-abc", "42"])
def test_daily_puzzles_are_solvable(label):
    puzzle = generate_daily_puzzle(label)
    assert puzzle.label == label
    assert puzzle.grid_size in (3, 4)
    result = solve(puzzle.suspects, puzzle.weapons, puzzle.locations, puzzle.normal_clues)
    assert result.solved
    result.grids.check_bijection()


def test_daily_puzzle_is_regenerable():
    assert generate_daily_puzzle("2026-10-19") == generate_daily_puzzle("2026-10-19")


def test_puzzle_record_is_frozen(entities):
    puzzle = generate_puzzle(*entities, seed=1)
    with pytest.raises(ValidationError):
        puzzle.label = "changed"


def test_short_lists_fail_before_generation(suspects, weapons, locations):
    with pytest.raises(PuzzleInputError):
        generate_puzzle(suspects[:2], weapons, locations, seed=1)


def test_single_row_puzzle_needs_only_the_identity_clue(suspects, weapons, locations):
    puzzle = generate_puzzle(suspects[:1], weapons[:1], locations[:1], seed=42)
    assert puzzle.grid_size == 1
    assert [clue.type for clue in puzzle.clues] == [ClueType.IDENTITY]
    assert verify_puzzle(puzzle).ok


def test_oversized_lists_are_rejected():
    extra = [
        make_entities(Category.SUSPECT, [f"S{index}" for index in range(7)], "xs"),
        make_entities(Category.WEAPON, [f"W{index}" for index in range(7)], "xw"),
        make_entities(Category.LOCATION, [f"L{index}" for index in range(7)], "xl"),
    ]
    with pytest.raises(PuzzleInputError):
        generate_puzzle(*extra, seed=1)


def test_puzzle_collections_cannot_be_mutated(entities):
    puzzle = generate_puzzle(*entities, seed=1)
    assert isinstance(puzzle.clues, tuple)
    assert isinstance(puzzle.suspects, tuple)
    with pytest.raises(AttributeError):
        puzzle.clues.append(puzzle.clues[0])


def test_inputs_are_validated_once_per_puzzle(monkeypatch, entities):
    calls = []
    original = rules.ensure_entity_lists

    def counting(*args, **kwargs):
        calls.append(args)
        return original(*args, **kwargs)

    monkeypatch.setattr(rules, "ensure_entity_lists", counting)
    generate_puzzle(*entities, seed=5)
    assert len(calls) == 1
