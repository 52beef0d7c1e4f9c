"""Deductive solver that mimics a human working the grid.

A run starts from an empty grid set, applies the stated marks of each clue
and then repeats the deduction rules until a full pass changes nothing:

* exclusion: a confirmed cell excludes the rest of its row and column
* last cell: a line with one open cell and no confirmation confirms it
* triangulation: two confirmed pairs sharing an entity confirm the third

Solvers keep no state between runs; callers build a fresh one per trial.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Sequence

from cluegrid import config
from cluegrid.clues.templates import parse_clue_text
from cluegrid.deduction.grid import GridSet, RelationGrid
from cluegrid.domain.enums import CellState, Polarity, Relation
from cluegrid.domain.errors import ContradictionError
from cluegrid.domain.models import Clue, ClueFact, Entity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResult:
    grids: GridSet
    solved: bool
    undetermined: int
    passes: int


class DeductiveSolver:
    def __init__(
        self,
        suspects: Sequence[Entity],
        weapons: Sequence[Entity],
        locations: Sequence[Entity],
        max_passes: int = config.MAX_DEDUCTION_PASSES,
    ) -> None:
        self.suspects = list(suspects)
        self.weapons = list(weapons)
        self.locations = list(locations)
        self.max_passes = max_passes
        self.grids = GridSet.empty(self.suspects, self.weapons, self.locations)

    def apply_clue(self, clue: Clue) -> bool:
        """Set the cell a clue states directly. Returns True if a cell changed."""
        if clue.is_identity:
            return False
        fact = clue.fact or parse_clue_text(
            clue.text, self.suspects, self.weapons, self.locations
        )
        if fact is None:
            logger.debug("Ignoring unparseable clue: %r", clue.text)
            return False
        return self.apply_fact(fact)

    def apply_fact(self, fact: ClueFact) -> bool:
        grid = self.grids[fact.relation]
        row = grid.row_index(fact.row_id)
        col = grid.col_index(fact.col_id)
        if row is None or col is None:
            logger.debug("Ignoring fact about unknown entities: %s", fact)
            return False
        state = CellState.CONFIRMED if fact.polarity == Polarity.POSITIVE else CellState.EXCLUDED
        cell = grid.cell(row, col)
        if not cell.is_open:
            return False
        if state == CellState.CONFIRMED:
            self._ensure_free(grid, row, col)
        cell.state = state
        cell.inferred = False
        return True

    def apply_clues(self, clues: Iterable[Clue]) -> None:
        for clue in clues:
            self.apply_clue(clue)

    def deduce(self) -> int:
        """Run the rules to a fixed point. Returns the number of passes used."""
        passes = 0
        while passes < self.max_passes:
            passes += 1
            changed = False
            for grid in self.grids:
                changed = self._exclude_around_confirmed(grid) or changed
                changed = self._confirm_last_cells(grid) or changed
            changed = self._triangulate() or changed
            if not changed:
                return passes
        logger.warning("Deduction hit the pass cap (%d)", self.max_passes)
        return passes

    def is_solved(self) -> bool:
        return self.grids.is_solved()

    def undetermined_count(self) -> int:
        return self.grids.undetermined_count()

    def _ensure_free(self, grid: RelationGrid, row: int, col: int) -> None:
        other_col = grid.confirmed_col(row)
        other_row = grid.confirmed_row(col)
        if (other_col is not None and other_col != col) or (
            other_row is not None and other_row != row
        ):
            raise ContradictionError(
                f"{grid.relation}: {grid.row_ids[row]}:{grid.col_ids[col]} "
                "would be a second confirmed cell in its line"
            )

    def _infer(self, grid: RelationGrid, row: int, col: int, state: CellState) -> bool:
        cell = grid.cell(row, col)
        if cell.state == state:
            return False
        if not cell.is_open:
            raise ContradictionError(
                f"{grid.relation}: {grid.row_ids[row]}:{grid.col_ids[col]} "
                f"is {cell.state}, deduction wants {state}"
            )
        if state == CellState.CONFIRMED:
            self._ensure_free(grid, row, col)
        cell.state = state
        cell.inferred = True
        return True

    def _exclude_around_confirmed(self, grid: RelationGrid) -> bool:
        changed = False
        for line in grid.lines():
            confirmed = grid.confirmed_in(line)
            if confirmed is None:
                continue
            for pos in line:
                if pos != confirmed and grid.cell(*pos).is_open:
                    changed = self._infer(grid, *pos, CellState.EXCLUDED) or changed
        return changed

    def _confirm_last_cells(self, grid: RelationGrid) -> bool:
        changed = False
        for line in grid.lines():
            if grid.confirmed_in(line) is not None:
                continue
            open_cells = [pos for pos in line if grid.cell(*pos).is_open]
            if not open_cells:
                raise ContradictionError(f"{grid.relation}: every cell in a line is excluded")
            if len(open_cells) == 1:
                changed = self._infer(grid, *open_cells[0], CellState.CONFIRMED) or changed
        return changed

    def _confirm_pair(self, relation: Relation, row_id: str, col_id: str) -> bool:
        grid = self.grids[relation]
        row = grid.row_index(row_id)
        col = grid.col_index(col_id)
        return self._infer(grid, row, col, CellState.CONFIRMED)

    def _triangulate(self) -> bool:
        changed = False
        for suspect in self.suspects:
            weapon_id = self.grids.partner(Relation.SUSPECT_WEAPON, suspect.id)
            location_id = self.grids.partner(Relation.SUSPECT_LOCATION, suspect.id)
            if weapon_id and location_id:
                changed = (
                    self._confirm_pair(Relation.WEAPON_LOCATION, weapon_id, location_id)
                    or changed
                )
                continue
            if weapon_id:
                found = self.grids.partner(Relation.WEAPON_LOCATION, weapon_id)
                if found:
                    changed = (
                        self._confirm_pair(Relation.SUSPECT_LOCATION, suspect.id, found)
                        or changed
                    )
            elif location_id:
                found = self.grids.partner(Relation.WEAPON_LOCATION, location_id)
                if found:
                    changed = (
                        self._confirm_pair(Relation.SUSPECT_WEAPON, suspect.id, found)
                        or changed
                    )
        return changed


def solve(
    suspects: Sequence[Entity],
    weapons: Sequence[Entity],
    locations: Sequence[Entity],
    clues: Iterable[Clue],
    max_passes: int = config.MAX_DEDUCTION_PASSES,
) -> SolveResult:
    """Solve ``clues`` from an empty grid set."""
    solver = DeductiveSolver(suspects, weapons, locations, max_passes=max_passes)
    solver.apply_clues(clues)
    passes = solver.deduce()
    return SolveResult(
        grids=solver.grids,
        solved=solver.is_solved(),
        undetermined=solver.undetermined_count(),
        passes=passes,
    )
