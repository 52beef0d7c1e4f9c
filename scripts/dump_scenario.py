from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from cluegrid import config
from cluegrid.cases.generator import build_daily_puzzle
from cluegrid.truth.exporters import dump_puzzle


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump a puzzle with its hidden scenario.")
    parser.add_argument("--label", type=str, default=str(config.SEED))
    parser.add_argument("--out", type=str, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    puzzle, scenario = build_daily_puzzle(args.label)
    output = dump_puzzle(puzzle, scenario)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as handle:
            handle.write(output)
        print(f"Wrote puzzle dump to {args.out}")
        return

    print(output)


if __name__ == "__main__":
    main()
