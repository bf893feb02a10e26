"""Abstract base class for seeded 2D noise sources."""

from abc import ABC, abstractmethod

import numpy as np


def seeded_rng(seed: int) -> np.random.Generator:
    """Returns a numpy generator for any integer seed, negative ones included.

    numpy only accepts non-negative entropy, so the sign is passed as a
    separate word. Distinct seeds map to distinct generators.
    """
    return np.random.default_rng(np.random.SeedSequence([abs(seed), int(seed < 0)]))


class NoiseSource(ABC):
    """Abstract base class for noise sources.

    A noise source is a continuous pseudo-random scalar function of (x, y)
    bound to a seed. The same seed and coordinate always produce the same
    value, which the fbm, warp and grid code rely on for reproducibility.

    Attributes:
        seed: The seed this source is bound to.
    """

    seed: int

    @abstractmethod
    def sample(self, x: float, y: float) -> float:
        """Samples the noise at (x, y).

        Args:
            x: Horizontal coordinate in noise space.
            y: Vertical coordinate in noise space.

        Returns:
            A value in [0, 1].
        """
        pass

    @abstractmethod
    def with_seed(self, seed: int) -> "NoiseSource":
        """Returns a new source of the same kind bound to ``seed``.

        The current source is left untouched.
        """
        pass
