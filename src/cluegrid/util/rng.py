"""Deterministic RNG wrapper for reproducible puzzles."""

from __future__ import annotations

from dataclasses import dataclass, field
import hashlib
from typing import Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


def _mulberry32(state: int) -> tuple[int, float]:
    state = (state + _INCREMENT) & _MASK32
    t = _imul(state ^ (state >> 15), state | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
    t = (t ^ (t >> 14)) & _MASK32
    return state, t / 4294967296


@dataclass
class Rng:
    """Mulberry32 stream seeded with a 32-bit integer.

    The stream only depends on the seed, so the same seed yields the same
    floats on every platform.
    """

    seed: int
    _state: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.seed = self.seed & _MASK32
        self._state = self.seed

    def fork(self, salt: str) -> "Rng":
        digest = hashlib.sha256(f"{self.seed}:{salt}".encode("utf-8")).hexdigest()
        new_seed = int(digest[:8], 16)
        return Rng(new_seed)

    def random(self) -> float:
        self._state, value = _mulberry32(self._state)
        return value

    def coin(self) -> bool:
        return self.random() > 0.5

    def shuffle(self, seq: Sequence[T]) -> list[T]:
        """Return a Fisher-Yates permuted copy of ``seq``."""
        items = list(seq)
        for i in range(len(items) - 1, 0, -1):
            j = int(self.random() * (i + 1))
            items[i], items[j] = items[j], items[i]
        return items
