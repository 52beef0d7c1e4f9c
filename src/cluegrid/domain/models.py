"""Domain models for entities, clues and finished puzzles."""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict

from cluegrid.domain.enums import Category, ClueType, Difficulty, Polarity, Relation


class Entity(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    category: Category


class ClueFact(BaseModel):
    """One pairwise statement, e.g. suspect s1 did not use weapon w2."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    relation: Relation
    row_id: str
    col_id: str
    polarity: Polarity


class IdentityFact(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    category: Category
    entity_id: str


class Clue(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = ""
    text: str
    type: ClueType = ClueType.NORMAL
    fact: ClueFact | None = None
    identity: IdentityFact | None = None

    @property
    def is_identity(self) -> bool:
        return self.type == ClueType.IDENTITY

    @property
    def is_positive(self) -> bool:
        return self.fact is not None and self.fact.polarity == Polarity.POSITIVE


class Solution(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    suspect_id: str
    weapon_id: str
    location_id: str


class PuzzleData(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    seed: int
    difficulty: Difficulty
    grid_size: int
    suspects: tuple[Entity, ...]
    weapons: tuple[Entity, ...]
    locations: tuple[Entity, ...]
    solution: Solution
    clues: tuple[Clue, ...]

    @property
    def identity_clue(self) -> Clue | None:
        return next((clue for clue in self.clues if clue.is_identity), None)

    @property
    def normal_clues(self) -> list[Clue]:
        return [clue for clue in self.clues if not clue.is_identity]
