"""Relation grids: tri-state cells addressed by (relation, row, column)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from cluegrid.domain.enums import CellState, Relation
from cluegrid.domain.errors import ContradictionError
from cluegrid.domain.models import Entity


@dataclass
class Cell:
    state: CellState = CellState.UNDETERMINED
    # True when the mark came from deduction rather than a stated clue.
    inferred: bool = False

    @property
    def is_open(self) -> bool:
        return self.state == CellState.UNDETERMINED


@dataclass
class RelationGrid:
    relation: Relation
    row_ids: list[str]
    col_ids: list[str]
    cells: list[list[Cell]] = field(init=False)

    def __post_init__(self) -> None:
        self.cells = [[Cell() for _ in self.col_ids] for _ in self.row_ids]
        self._row_index = {entity_id: idx for idx, entity_id in enumerate(self.row_ids)}
        self._col_index = {entity_id: idx for idx, entity_id in enumerate(self.col_ids)}

    def row_index(self, entity_id: str) -> int | None:
        return self._row_index.get(entity_id)

    def col_index(self, entity_id: str) -> int | None:
        return self._col_index.get(entity_id)

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def lookup(self, row_id: str, col_id: str) -> Cell:
        """Cell by entity ids, for inspecting a grid from outside the solver."""
        row = self.row_index(row_id)
        col = self.col_index(col_id)
        if row is None or col is None:
            raise KeyError(f"{row_id}:{col_id} is not in the {self.relation} grid")
        return self.cells[row][col]

    def row_cells(self, row: int) -> list[tuple[int, int]]:
        return [(row, col) for col in range(len(self.col_ids))]

    def col_cells(self, col: int) -> list[tuple[int, int]]:
        return [(row, col) for row in range(len(self.row_ids))]

    def lines(self) -> Iterator[list[tuple[int, int]]]:
        """Every row, then every column, as lists of coordinates."""
        for row in range(len(self.row_ids)):
            yield self.row_cells(row)
        for col in range(len(self.col_ids)):
            yield self.col_cells(col)

    def confirmed_in(self, line: Sequence[tuple[int, int]]) -> tuple[int, int] | None:
        confirmed = [pos for pos in line if self.cell(*pos).state == CellState.CONFIRMED]
        if len(confirmed) > 1:
            raise ContradictionError(
                f"{self.relation}: more than one confirmed cell in {self._describe(line)}"
            )
        return confirmed[0] if confirmed else None

    def confirmed_col(self, row: int) -> int | None:
        pos = self.confirmed_in(self.row_cells(row))
        return pos[1] if pos else None

    def confirmed_row(self, col: int) -> int | None:
        pos = self.confirmed_in(self.col_cells(col))
        return pos[0] if pos else None

    def undetermined_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.is_open)

    def is_solved(self) -> bool:
        return self.undetermined_count() == 0

    def check_bijection(self) -> None:
        """Raise unless every row and column holds exactly one confirmed cell."""
        for line in self.lines():
            if self.confirmed_in(line) is None:
                raise ContradictionError(
                    f"{self.relation}: no confirmed cell in {self._describe(line)}"
                )

    def _describe(self, line: Sequence[tuple[int, int]]) -> str:
        rows = {row for row, _ in line}
        if len(rows) == 1:
            return f"row {self.row_ids[next(iter(rows))]}"
        cols = {col for _, col in line}
        return f"column {self.col_ids[next(iter(cols))]}"


@dataclass
class GridSet:
    """The suspect-weapon, suspect-location and weapon-location grids."""

    grids: dict[Relation, RelationGrid]

    @classmethod
    def empty(
        cls,
        suspects: Sequence[Entity],
        weapons: Sequence[Entity],
        locations: Sequence[Entity],
    ) -> "GridSet":
        suspect_ids = [entity.id for entity in suspects]
        weapon_ids = [entity.id for entity in weapons]
        location_ids = [entity.id for entity in locations]
        return cls(
            grids={
                Relation.SUSPECT_WEAPON: RelationGrid(
                    Relation.SUSPECT_WEAPON, suspect_ids, weapon_ids
                ),
                Relation.SUSPECT_LOCATION: RelationGrid(
                    Relation.SUSPECT_LOCATION, suspect_ids, location_ids
                ),
                Relation.WEAPON_LOCATION: RelationGrid(
                    Relation.WEAPON_LOCATION, weapon_ids, location_ids
                ),
            }
        )

    def __getitem__(self, relation: Relation) -> RelationGrid:
        return self.grids[relation]

    def __iter__(self) -> Iterator[RelationGrid]:
        return iter(self.grids.values())

    def undetermined_count(self) -> int:
        return sum(grid.undetermined_count() for grid in self)

    def is_solved(self) -> bool:
        return all(grid.is_solved() for grid in self)

    def check_bijection(self) -> None:
        for grid in self:
            grid.check_bijection()

    def partner(self, relation: Relation, entity_id: str) -> str | None:
        """Confirmed partner of ``entity_id`` on either axis of a grid."""
        grid = self.grids[relation]
        row = grid.row_index(entity_id)
        if row is not None:
            col = grid.confirmed_col(row)
            return grid.col_ids[col] if col is not None else None
        col = grid.col_index(entity_id)
        if col is not None:
            found = grid.confirmed_row(col)
            return grid.row_ids[found] if found is not None else None
        return None
