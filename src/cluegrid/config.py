"""Project-wide defaults."""

from __future__ import annotations

from pathlib import Path

SEED = 42

GRID_SIZES = (3, 4)
MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 6

# Fixed-point cap for the deduction loop.
MAX_DEDUCTION_PASSES = 50

FRONT_LOAD_POSITIVE = False

ENTITY_POOL_PATH = Path(__file__).resolve().parents[2] / "data" / "entities.yml"

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
