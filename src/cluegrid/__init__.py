"""Deterministic Clue-style logic puzzle generation."""

from cluegrid.cases.generator import generate_daily_puzzle, generate_puzzle

__all__ = ["generate_daily_puzzle", "generate_puzzle"]
