import matplotlib
import numpy as np
import pytest

from terrain.config import ContourMapConfig
from terrain.engine.noise_source import NoiseSource
from terrain.engine.value_noise_source import ValueNoiseSource

matplotlib.use("Agg")


class RecordingNoiseSource(NoiseSource):
    """Noise source returning a constant and recording every sample call."""

    def __init__(self, value: float = 0.5, seed: int = 0):
        self.value = value
        self.seed = seed
        self.calls = []

    def sample(self, x, y):
        self.calls.append((x, y))
        return self.value

    def with_seed(self, seed):
        return RecordingNoiseSource(self.value, seed)


@pytest.fixture
def small_config():
    """A small canvas so grids build quickly.

    Frequencies are raised so the field still varies across 64 pixels.
    """
    return ContourMapConfig(
        width=64,
        height=48,
        stride=4,
        warp_scale=(0.03, 0.03),
        field_scale=(0.05, 0.05),
    )


@pytest.fixture
def value_source():
    return ValueNoiseSource(seed=0)


@pytest.fixture
def ramp_grid():
    """5x10 grid increasing linearly from 0.0 (left) to 1.0 (right)."""
    return np.tile(np.linspace(0.0, 1.0, 10), (5, 1))


@pytest.fixture
def recording_source():
    return RecordingNoiseSource()
