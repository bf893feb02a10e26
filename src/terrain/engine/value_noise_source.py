"""Lattice value noise implemented with numpy-seeded tables."""

import math

from .noise_source import NoiseSource, seeded_rng

TABLE_SIZE = 256


def _smoothstep(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


class ValueNoiseSource(NoiseSource):
    """Value noise on an integer lattice with smoothstep interpolation.

    Each lattice corner gets a pseudo-random value in [0, 1) picked through a
    seeded permutation table. Values between corners are blended bilinearly
    with smoothstep weights, so the output never leaves [0, 1].

    Attributes:
        seed: The seed this source is bound to.
    """

    def __init__(self, seed: int = 0):
        """Initializes the lattice tables for ``seed``.

        Args:
            seed: Seed for the permutation and lattice values.
        """
        self.seed = seed
        rng = seeded_rng(seed)
        # Plain lists: sample() is called per grid point and list indexing
        # is much faster than numpy scalar access.
        self._perm = rng.permutation(TABLE_SIZE).tolist()
        self._values = rng.random(TABLE_SIZE).tolist()

    def _lattice(self, i: int, j: int) -> float:
        perm = self._perm
        return self._values[perm[(perm[i & 255] + j) & 255]]

    def sample(self, x: float, y: float) -> float:
        """Samples value noise at (x, y)."""
        xi = math.floor(x)
        yi = math.floor(y)
        u = _smoothstep(x - xi)
        v = _smoothstep(y - yi)

        v00 = self._lattice(xi, yi)
        v10 = self._lattice(xi + 1, yi)
        v01 = self._lattice(xi, yi + 1)
        v11 = self._lattice(xi + 1, yi + 1)

        top = v00 + u * (v10 - v00)
        bottom = v01 + u * (v11 - v01)
        return top + v * (bottom - top)

    def with_seed(self, seed: int) -> "ValueNoiseSource":
        """Returns a value noise source bound to ``seed``."""
        return ValueNoiseSource(seed)

    def __repr__(self) -> str:
        return f"ValueNoiseSource(seed={self.seed})"
