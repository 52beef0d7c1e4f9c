from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from cluegrid import config
from cluegrid.cases.generator import generate_daily_puzzle
from cluegrid.deduction.validation import verify_puzzle


def main() -> None:
    parser = argparse.ArgumentParser(description="Verify puzzles over a range of seeds.")
    parser.add_argument("--start", type=int, default=config.SEED)
    parser.add_argument("--count", type=int, default=100)
    args = parser.parse_args()

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    failures = 0
    for seed in range(args.start, args.start + args.count):
        puzzle = generate_daily_puzzle(str(seed))
        result = verify_puzzle(puzzle)
        if result.ok:
            continue
        failures += 1
        print(f"[seed {seed}] {result.summary}")
        for note in result.notes:
            print(f"  - {note}")

    print(f"Checked {args.count} seeds, {failures} failed.")
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
