"""Height grid generation over a canvas."""

import logging
import random
from dataclasses import dataclass

import numpy as np

from .config import ContourMapConfig
from .engine.noise_source import NoiseSource
from .engine.perlin_noise_source import PerlinNoiseSource
from .fbm import height_at

logger = logging.getLogger(__name__)

MAX_RANDOM_SEED = 100000


def build_grid(
    width: int,
    height: int,
    stride: int,
    seed: int,
    config: ContourMapConfig | None = None,
    source: NoiseSource | None = None,
) -> np.ndarray:
    """Samples the warped fractal field on a regular lattice.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        stride: Pixels between two samples.
        seed: Seed the noise source is re-bound to before sampling.
        config: Fractal and warp parameters. Defaults to ``ContourMapConfig()``.
        source: Noise source kind to use. Defaults to ``PerlinNoiseSource``.

    Returns:
        A read-only float64 array of shape (rows, cols) where
        ``cols = width // stride + 1`` and ``rows = height // stride + 1``.
        Entry (r, c) is the height at pixel (c * stride, r * stride).
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be > 0, got {width}x{height}")
    if stride <= 0:
        raise ValueError(f"stride must be > 0, got {stride}")

    config = config or ContourMapConfig()
    seeded = (source or PerlinNoiseSource()).with_seed(seed)

    cols = width // stride + 1
    rows = height // stride + 1

    grid = np.empty((rows, cols), dtype=np.float64)
    for r in range(rows):
        for c in range(cols):
            grid[r, c] = height_at(seeded, c * stride, r * stride, config)

    grid.flags.writeable = False
    return grid


@dataclass(frozen=True, eq=False)
class GridState:
    """The result of one generation: a seed and the grid sampled from it.

    A new state is created for every generation and never modified.

    Attributes:
        seed: Seed the grid was generated from.
        config: Configuration used for sampling.
        grid: Read-only height grid of shape (rows, cols).
    """

    seed: int
    config: ContourMapConfig
    grid: np.ndarray

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def cols(self) -> int:
        return self.grid.shape[1]

    @property
    def stride(self) -> int:
        return self.config.stride

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height


def generate(
    config: ContourMapConfig | None = None,
    seed: int | None = None,
    source: NoiseSource | None = None,
) -> GridState:
    """Generates a fresh grid state.

    Args:
        config: Generation parameters. Defaults to ``ContourMapConfig()``.
        seed: Seed to generate from. A random seed in [0, 100000) is chosen
            when omitted.
        source: Noise source kind. Defaults to ``PerlinNoiseSource``.

    Returns:
        A new GridState.
    """
    config = config or ContourMapConfig()
    if seed is None:
        seed = random.randrange(MAX_RANDOM_SEED)

    logger.info(
        f"Generating {config.cols}x{config.rows} height grid with seed {seed}..."
    )
    grid = build_grid(
        config.width, config.height, config.stride, seed, config=config, source=source
    )
    return GridState(seed=seed, config=config, grid=grid)
