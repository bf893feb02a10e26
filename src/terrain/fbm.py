"""Fractal Brownian motion and domain-warped height sampling."""

from .config import ContourMapConfig
from .engine.noise_source import NoiseSource


def fbm(
    source: NoiseSource,
    x: float,
    y: float,
    octaves: int = 3,
    lacunarity: float = 2.0,
    persistence: float = 0.4,
) -> float:
    """Sums several octaves of noise into one normalized value.

    Args:
        source: Seeded noise source, sampled once per octave.
        x: Horizontal coordinate in noise space.
        y: Vertical coordinate in noise space.
        octaves: Number of noise layers. Higher values add finer detail.
        lacunarity: Frequency multiplier applied after each octave.
        persistence: Amplitude multiplier applied after each octave. Values
            < 1.0 make higher octaves contribute less.

    Returns:
        The amplitude-weighted mean of the octaves, in the source's [0, 1]
        range whatever the octave count or persistence.
    """
    if octaves < 1:
        raise ValueError(f"octaves must be >= 1, got {octaves}")

    value = 0.0
    amplitude = 0.5
    frequency = 1.0
    normalization = 0.0
    for _ in range(octaves):
        value += amplitude * source.sample(x * frequency, y * frequency)
        normalization += amplitude
        amplitude *= persistence
        frequency *= lacunarity
    return value / normalization


def height_at(
    source: NoiseSource, wx: float, wy: float, config: ContourMapConfig
) -> float:
    """Evaluates the domain-warped height field at a pixel coordinate.

    Two fbm evaluations at different coordinate offsets displace the sample
    point by up to ``config.warp_amount`` pixels, then the final field is
    sampled at the displaced point with its own (finer) frequency. The result
    is not clamped.

    Args:
        source: Seeded noise source.
        wx: Pixel x coordinate.
        wy: Pixel y coordinate.
        config: Fractal and warp parameters.

    Returns:
        The height, nominally in [0, 1].
    """
    octaves = config.octaves
    lacunarity = config.lacunarity
    persistence = config.persistence
    k1, k2 = config.warp_scale
    c1, c2 = config.warp_offset_x
    c3, c4 = config.warp_offset_y
    k3, k4 = config.field_scale

    warp_x = fbm(source, wx * k1 + c1, wy * k2 + c2, octaves, lacunarity, persistence)
    warp_y = fbm(source, wx * k1 + c3, wy * k2 + c4, octaves, lacunarity, persistence)
    dx = (warp_x - 0.5) * 2 * config.warp_amount
    dy = (warp_y - 0.5) * 2 * config.warp_amount

    return fbm(
        source, (wx + dx) * k3, (wy + dy) * k4, octaves, lacunarity, persistence
    )
