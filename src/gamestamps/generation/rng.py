from __future__ import annotations
from typing import Protocol
import numpy as np

class UniformSource(Protocol):
    def next_uniform_double(self) -> float:
        """Next value in [0, 1)."""
        ...

class SeededUniform:
    """numpy-backed uniform stream; same seed, same draws."""

    def __init__(self, seed: int | None = None):
        self._rng = np.random.default_rng(seed)

    def next_uniform_double(self) -> float:
        return float(self._rng.random())
