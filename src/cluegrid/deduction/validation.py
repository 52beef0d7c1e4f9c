"""Independent checks on a finished puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field

from cluegrid.clues.templates import parse_identity_text
from cluegrid.deduction.grid import GridSet
from cluegrid.deduction.solver import solve
from cluegrid.domain.enums import Category, Relation
from cluegrid.domain.models import IdentityFact, PuzzleData, Solution


@dataclass
class VerificationResult:
    solved: bool
    minimal: bool
    matches_solution: bool
    summary: str
    deduced_solution: Solution | None = None
    redundant_clue_ids: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.solved and self.minimal and self.matches_solution


def identify_culprit(grids: GridSet, identity: IdentityFact) -> Solution | None:
    """Resolve the culprit's row from the identity fact and a finished grid."""
    if identity.category == Category.WEAPON:
        weapon_id = identity.entity_id
        suspect_id = grids.partner(Relation.SUSPECT_WEAPON, weapon_id)
        location_id = grids.partner(Relation.WEAPON_LOCATION, weapon_id)
    else:
        location_id = identity.entity_id
        suspect_id = grids.partner(Relation.SUSPECT_LOCATION, location_id)
        weapon_id = grids.partner(Relation.WEAPON_LOCATION, location_id)
    if suspect_id is None or weapon_id is None or location_id is None:
        return None
    return Solution(suspect_id=suspect_id, weapon_id=weapon_id, location_id=location_id)


def verify_puzzle(puzzle: PuzzleData) -> VerificationResult:
    entities = (puzzle.suspects, puzzle.weapons, puzzle.locations)
    normal = puzzle.normal_clues
    notes: list[str] = []

    result = solve(*entities, normal)
    if result.solved:
        result.grids.check_bijection()
    else:
        notes.append(f"{result.undetermined} cells stay open after deduction.")

    redundant: list[str] = []
    for clue in normal:
        trial = [other for other in normal if other.id != clue.id]
        if solve(*entities, trial).solved:
            redundant.append(clue.id)
    if redundant:
        notes.append(f"Redundant clues: {', '.join(redundant)}.")

    identity_clue = puzzle.identity_clue
    identity = None
    if identity_clue is not None:
        identity = identity_clue.identity or parse_identity_text(
            identity_clue.text, puzzle.weapons, puzzle.locations
        )
    deduced: Solution | None = None
    if identity is None:
        notes.append("No identity clue; the culprit's row cannot be singled out.")
    elif result.solved:
        deduced = identify_culprit(result.grids, identity)
    matches = deduced == puzzle.solution
    if deduced is not None and not matches:
        notes.append("Clues point at a different culprit than the stored solution.")

    if result.solved and not redundant and matches:
        summary = "Puzzle holds. Clues determine the culprit without slack."
    elif result.solved and matches:
        summary = "Puzzle is solvable but carries redundant clues."
    else:
        summary = "Puzzle fails. Clues do not determine the stored culprit."

    return VerificationResult(
        solved=result.solved,
        minimal=not redundant,
        matches_solution=matches,
        summary=summary,
        deduced_solution=deduced,
        redundant_clue_ids=redundant,
        notes=notes,
    )


def check_accusation(
    puzzle: PuzzleData, suspect_id: str, weapon_id: str, location_id: str
) -> bool:
    accused = Solution(suspect_id=suspect_id, weapon_id=weapon_id, location_id=location_id)
    return accused == puzzle.solution
