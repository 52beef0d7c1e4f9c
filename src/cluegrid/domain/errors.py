"""Error types raised by the puzzle core."""

from __future__ import annotations


class PuzzleInputError(ValueError):
    """Entity lists or grid sizes that cannot form a puzzle."""


class ContradictionError(RuntimeError):
    """Deduction reached a state that breaks the one-to-one relation."""
