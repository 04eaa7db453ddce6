"""Process-wide random number source."""

from __future__ import annotations

import random
from typing import ClassVar


class Random:
    """Mersenne-Twister backed random source shared by the whole game."""

    _instance: ClassVar[Random | None] = None

    def __init__(self) -> None:
        self._generator = random.Random()

    @classmethod
    def get(cls) -> Random:
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_seed(self, seed: int) -> None:
        """Reseed the generator so that later draws are reproducible."""
        self._generator.seed(seed)

    def value(self) -> float:
        """Return a float drawn uniformly from [0, 1)."""
        return self._generator.random()

    def range_float(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from [low, high)."""
        return low + (high - low) * self._generator.random()

    def range_int(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from [low, high], both inclusive."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        return self._generator.randint(low, high)