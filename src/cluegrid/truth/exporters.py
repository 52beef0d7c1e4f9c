"""Puzzle dump helpers for debugging."""

from __future__ import annotations

from cluegrid.cases.scenario import Scenario
from cluegrid.domain.models import PuzzleData


def dump_puzzle(puzzle: PuzzleData, scenario: Scenario | None = None) -> str:
    names = {
        entity.id: entity.name
        for entity in [*puzzle.suspects, *puzzle.weapons, *puzzle.locations]
    }
    lines: list[str] = []
    lines.append(f"Puzzle: {puzzle.label} (seed {puzzle.seed})")
    lines.append(f"Difficulty: {puzzle.difficulty} ({puzzle.grid_size}x{puzzle.grid_size})")
    lines.append("")
    for title, entities in (
        ("Suspects", puzzle.suspects),
        ("Weapons", puzzle.weapons),
        ("Locations", puzzle.locations),
    ):
        lines.append(f"{title}:")
        for entity in entities:
            lines.append(f"- {entity.name} [{entity.id}]")
        lines.append("")
    if scenario is not None:
        lines.append("Scenario:")
        for index, row in enumerate(scenario.rows):
            marker = "*" if index == 0 else "-"
            lines.append(
                f"{marker} {row.suspect.name} + {row.weapon.name} @ {row.location.name}"
            )
        lines.append("")
    solution = puzzle.solution
    lines.append(
        "Solution: "
        f"{names[solution.suspect_id]} / {names[solution.weapon_id]} / "
        f"{names[solution.location_id]}"
    )
    lines.append("")
    lines.append("Clues:")
    for clue in puzzle.clues:
        lines.append(f"{clue.id}. [{clue.type}] {clue.text}")
    return "\n".join(lines)
