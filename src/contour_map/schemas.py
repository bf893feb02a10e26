"""Pydantic models for contour map output."""

from pydantic import BaseModel, Field

PointModel = tuple[float, float]


class ContourLevelOutput(BaseModel):
    """Represents the segments extracted for one iso-level."""

    level: int = Field(..., description="Index of the level, starting at 0.")
    iso_value: float = Field(..., description="Iso-value of the contour.")
    major: bool = Field(..., description="Whether the level is drawn emphasized.")
    stroke_weight: float = Field(..., description="Stroke weight in pixels.")
    segments: list[tuple[PointModel, PointModel]] = Field(
        default_factory=list,
        description="Line segments as ((x1, y1), (x2, y2)) in pixel space.",
    )


class ContourMapOutput(BaseModel):
    """Represents all contour levels of one generated height field."""

    seed: int = Field(..., description="Seed the height field was generated from.")
    width: int = Field(..., description="Canvas width in pixels.")
    height: int = Field(..., description="Canvas height in pixels.")
    stride: int = Field(..., description="Pixels between two grid samples.")
    levels: list[ContourLevelOutput] = Field(
        ..., description="Contour levels in increasing order."
    )

    @property
    def segment_count(self) -> int:
        return sum(len(level.segments) for level in self.levels)
