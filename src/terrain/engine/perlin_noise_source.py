"""Perlin noise source backed by the ``noise`` package."""

import noise

from .noise_source import NoiseSource, seeded_rng

# Perlin gradients repeat every 256 lattice units regardless of repeatx/y.
NOISE_PERIOD = 256
NOISE_REPEAT_X = 1024
NOISE_REPEAT_Y = 1024


class PerlinNoiseSource(NoiseSource):
    """Single-octave Perlin noise remapped to [0, 1].

    The seed selects a coordinate offset into the Perlin lattice, so every
    seed looks at a different part of the same underlying noise.

    Attributes:
        seed: The seed this source is bound to.
        x_offset: Offset added to x before sampling.
        y_offset: Offset added to y before sampling.
    """

    def __init__(self, seed: int = 0):
        """Initializes the source.

        Args:
            seed: Seed used to derive the lattice offset.
        """
        self.seed = seed
        rng = seeded_rng(seed)
        self.x_offset, self.y_offset = (
            float(v) for v in rng.uniform(0.0, NOISE_PERIOD, size=2)
        )

    def sample(self, x: float, y: float) -> float:
        """Samples Perlin noise at (x, y), remapped from [-1, 1] to [0, 1]."""
        n = noise.pnoise2(
            x + self.x_offset,
            y + self.y_offset,
            octaves=1,
            repeatx=NOISE_REPEAT_X,
            repeaty=NOISE_REPEAT_Y,
            # pnoise2 adds base to permutation indices without wrapping them.
            base=0,
        )
        return min(1.0, max(0.0, 0.5 + 0.5 * n))

    def with_seed(self, seed: int) -> "PerlinNoiseSource":
        """Returns a Perlin source bound to ``seed``."""
        return PerlinNoiseSource(seed)

    def __repr__(self) -> str:
        return f"PerlinNoiseSource(seed={self.seed})"
