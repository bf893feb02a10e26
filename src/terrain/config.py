"""Configuration for contour map generation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContourMapConfig:
    """Configuration for height field generation and contour extraction.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        stride: Pixels between two grid samples.
        octaves: Number of noise layers combined by fbm.
        lacunarity: Frequency multiplier applied per octave.
        persistence: Amplitude multiplier applied per octave.
        num_levels: Number of contour iso-levels.
        iso_min: Iso-value of level 0.
        iso_max: Upper end of the iso-value range (never reached by a level).
        major_every: Every N-th level is drawn with the major stroke.
        warp_amount: Maximum domain-warp displacement in pixels.
        major_stroke: Stroke weight of major levels.
        minor_stroke: Stroke weight of all other levels.
        warp_scale: Frequency (kx, ky) of the warp field.
        warp_offset_x: Coordinate offset (cx, cy) of the x-warp channel.
        warp_offset_y: Coordinate offset (cx, cy) of the y-warp channel.
        field_scale: Frequency (kx, ky) of the final height field.
    """

    # Canvas
    width: int = 480
    height: int = 800
    stride: int = 4

    # Fractal noise
    octaves: int = 3
    lacunarity: float = 2.0
    persistence: float = 0.4

    # Contour levels
    num_levels: int = 12
    iso_min: float = 0.30
    iso_max: float = 0.70
    major_every: int = 5

    # Strokes
    major_stroke: float = 1.5
    minor_stroke: float = 0.75

    # Domain warp. Different x/y frequencies give the portrait-axis bias.
    warp_amount: float = 70.0
    warp_scale: tuple[float, float] = (0.003, 0.0015)
    warp_offset_x: tuple[float, float] = (5.2, 1.3)
    warp_offset_y: tuple[float, float] = (9.8, 2.7)
    field_scale: tuple[float, float] = (0.004, 0.002)

    def __post_init__(self):
        """Validates the configuration before any sampling happens."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"width and height must be > 0, got {self.width}x{self.height}"
            )
        if self.stride <= 0:
            raise ValueError(f"stride must be > 0, got {self.stride}")
        if self.octaves < 1:
            raise ValueError(f"octaves must be >= 1, got {self.octaves}")
        if self.lacunarity <= 0:
            raise ValueError(f"lacunarity must be > 0, got {self.lacunarity}")
        if self.persistence <= 0:
            raise ValueError(f"persistence must be > 0, got {self.persistence}")
        if self.num_levels < 1:
            raise ValueError(f"num_levels must be >= 1, got {self.num_levels}")
        if self.iso_min >= self.iso_max:
            raise ValueError(
                f"iso_min must be < iso_max, got [{self.iso_min}, {self.iso_max}]"
            )
        if self.major_every < 1:
            raise ValueError(f"major_every must be >= 1, got {self.major_every}")
        if self.warp_amount < 0:
            raise ValueError(f"warp_amount must be >= 0, got {self.warp_amount}")
        if self.major_stroke <= 0 or self.minor_stroke <= 0:
            raise ValueError("stroke weights must be > 0")

    @property
    def iso_range(self) -> tuple[float, float]:
        """The configured (iso_min, iso_max) range."""
        return self.iso_min, self.iso_max

    @property
    def cols(self) -> int:
        """Number of grid columns covering the canvas width."""
        return self.width // self.stride + 1

    @property
    def rows(self) -> int:
        """Number of grid rows covering the canvas height."""
        return self.height // self.stride + 1
