from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from cluegrid import config
from cluegrid.cases.generator import generate_daily_puzzle, generate_puzzle
from cluegrid.entities import load_entity_pools, select_entities
from cluegrid.util.rng import Rng


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a seeded logic puzzle.")
    parser.add_argument("--label", type=str, default=None, help="date or any string")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--size", type=int, default=config.GRID_SIZES[0])
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level="DEBUG" if args.verbose else config.LOG_LEVEL, format=config.LOG_FORMAT
    )

    if args.label:
        puzzle = generate_daily_puzzle(args.label)
    else:
        pools = load_entity_pools()
        suspects, weapons, locations = select_entities(
            Rng(args.seed).fork("entities"), args.size, pools
        )
        puzzle = generate_puzzle(suspects, weapons, locations, args.seed)

    print(f"Puzzle: {puzzle.label} (seed {puzzle.seed}, {puzzle.difficulty})")
    print("Suspects: " + ", ".join(entity.name for entity in puzzle.suspects))
    print("Weapons: " + ", ".join(entity.name for entity in puzzle.weapons))
    print("Locations: " + ", ".join(entity.name for entity in puzzle.locations))
    for clue in puzzle.clues:
        print(f"- {clue.text}")


if __name__ == "__main__":
    main()
