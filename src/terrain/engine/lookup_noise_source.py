"""Mock noise source reading values from a fixed table."""

import math

import numpy as np

from .noise_source import NoiseSource


class LookupNoiseSource(NoiseSource):
    """Noise source that returns entries of a fixed 2D table.

    Coordinates are floored and wrapped onto the table, ``table[y, x]``.
    The seed is carried along but does not change the output, which makes
    this source useful for tests and reproducible fixtures.
    """

    def __init__(self, table: np.ndarray, seed: int = 0):
        """Initializes the mock source.

        Args:
            table: 2D array of values in [0, 1].
            seed: Seed reported by this source.
        """
        table = np.asarray(table, dtype=float)
        if table.ndim != 2 or table.size == 0:
            raise ValueError(f"table must be a non-empty 2D array, got {table.shape}")
        if table.min() < 0.0 or table.max() > 1.0:
            raise ValueError("table values must lie in [0, 1]")

        self.table = table
        self.seed = seed
        self._rows = table.tolist()

    def sample(self, x: float, y: float) -> float:
        """Returns the table entry covering (x, y)."""
        rows, cols = self.table.shape
        return self._rows[math.floor(y) % rows][math.floor(x) % cols]

    def with_seed(self, seed: int) -> "LookupNoiseSource":
        """Returns a lookup source over the same table reporting ``seed``."""
        return LookupNoiseSource(self.table, seed=seed)
