from cluegrid import generate_puzzle
from cluegrid.cases.generator import build_puzzle
from cluegrid.clues.synthesizer import build_clue_pool
from cluegrid.deduction.solver import solve
from cluegrid.deduction.validation import check_accusation, identify_culprit, verify_puzzle


def test_generated_puzzles_verify(mansion):
    for seed in range(25):
        result = verify_puzzle(generate_puzzle(*mansion, seed=seed))
        assert result.ok, (seed, result.notes)
        assert result.redundant_clue_ids == []


def test_identity_clue_resolves_the_solution(entities):
    for seed in range(20):
        puzzle = generate_puzzle(*entities, seed=seed)
        grids = solve(*entities, puzzle.normal_clues).grids
        assert identify_culprit(grids, puzzle.identity_clue.identity) == puzzle.solution


def test_extra_clue_is_reported_redundant(mansion):
    puzzle, scenario = build_puzzle(*mansion, seed=31)
    used = {clue.text for clue in puzzle.clues}
    extra = next(
        clue for clue in build_clue_pool(scenario, *mansion) if clue.text not in used
    )
    extra = extra.model_copy(update={"id": "extra"})
    padded = puzzle.model_copy(update={"clues": [extra, *puzzle.clues]})
    result = verify_puzzle(padded)
    assert result.solved
    assert not result.minimal
    assert "extra" in result.redundant_clue_ids
    assert not result.ok


def test_missing_clue_fails_verification(mansion):
    puzzle = generate_puzzle(*mansion, seed=12)
    trimmed = puzzle.model_copy(update={"clues": puzzle.clues[1:]})
    result = verify_puzzle(trimmed)
    assert not result.solved
    assert result.deduced_solution is None
    assert not result.ok


def test_missing_identity_clue_cannot_single_out_culprit(entities):
    puzzle = generate_puzzle(*entities, seed=3)
    result = verify_puzzle(puzzle.model_copy(update={"clues": puzzle.normal_clues}))
    assert result.solved
    assert not result.matches_solution


def test_identity_text_alone_is_enough(mansion):
    puzzle = generate_puzzle(*mansion, seed=44)
    bare = puzzle.identity_clue.model_copy(update={"identity": None})
    result = verify_puzzle(puzzle.model_copy(update={"clues": [*puzzle.normal_clues, bare]}))
    assert result.ok
    assert result.deduced_solution == puzzle.solution


def test_check_accusation(entities):
    puzzle = generate_puzzle(*entities, seed=8)
    solution = puzzle.solution
    assert check_accusation(
        puzzle, solution.suspect_id, solution.weapon_id, solution.location_id
    )
    wrong_weapon = next(
        entity.id for entity in puzzle.weapons if entity.id != solution.weapon_id
    )
    assert not check_accusation(
        puzzle, solution.suspect_id, wrong_weapon, solution.location_id
    )
