"""Noise source engine module."""

from .lookup_noise_source import LookupNoiseSource
from .noise_source import NoiseSource
from .perlin_noise_source import PerlinNoiseSource
from .value_noise_source import ValueNoiseSource

NOISE_SOURCES = {
    "perlin": PerlinNoiseSource,
    "value": ValueNoiseSource,
}


def create_noise_source(name: str = "perlin", seed: int = 0) -> NoiseSource:
    """Creates a noise source by name.

    Args:
        name: One of the keys of ``NOISE_SOURCES``.
        seed: Seed to bind the new source to.

    Returns:
        The seeded noise source.
    """
    if name not in NOISE_SOURCES:
        raise ValueError(f"noise source must be one of {sorted(NOISE_SOURCES)}")
    return NOISE_SOURCES[name](seed)


__all__ = [
    "NOISE_SOURCES",
    "LookupNoiseSource",
    "NoiseSource",
    "PerlinNoiseSource",
    "ValueNoiseSource",
    "create_noise_source",
]
