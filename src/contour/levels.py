"""Iso-level mapping and per-level contour passes."""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from terrain.config import ContourMapConfig
from terrain.height_field import GridState

from .marching_squares import Segment, extract_segments

logger = logging.getLogger(__name__)


def iso_value(level: int, num_levels: int, iso_min: float, iso_max: float) -> float:
    """Maps a level index in [0, num_levels) linearly onto [iso_min, iso_max).

    ``iso_max`` itself is never reached: level ``num_levels`` would map to it.
    """
    if not 0 <= level < num_levels:
        raise ValueError(f"level must be in [0, {num_levels}), got {level}")
    return iso_min + level * (iso_max - iso_min) / num_levels


def is_major(level: int, major_every: int) -> bool:
    return level % major_every == 0


def stroke_weight(level: int, config: ContourMapConfig) -> float:
    """Returns the stroke weight of ``level``."""
    if is_major(level, config.major_every):
        return config.major_stroke
    return config.minor_stroke


@dataclass
class ContourLevel:
    """One contour pass and the stroke it should be drawn with.

    Attributes:
        level: Level index.
        iso_value: Iso-value the segments were extracted at.
        major: Whether this is a major (emphasized) level.
        stroke_weight: Stroke weight to draw the segments with.
        segments: Extracted segments in pixel space.
    """

    level: int
    iso_value: float
    major: bool
    stroke_weight: float
    segments: list[Segment] = field(default_factory=list)


def iter_contour_levels(state: GridState) -> Iterator[ContourLevel]:
    """Extracts every configured level of ``state`` in increasing order."""
    config = state.config
    for level in range(config.num_levels):
        iso = iso_value(level, config.num_levels, config.iso_min, config.iso_max)
        segments = extract_segments(state.grid, iso, state.stride)
        logger.debug(f"Level {level} (iso={iso:.3f}): {len(segments)} segments.")
        yield ContourLevel(
            level=level,
            iso_value=iso,
            major=is_major(level, config.major_every),
            stroke_weight=stroke_weight(level, config),
            segments=segments,
        )


def draw_contours(
    state: GridState, draw_line: Callable[[Segment, float], None]
) -> int:
    """Hands every segment of every level to a line-drawing primitive.

    Args:
        state: Generated grid state.
        draw_line: Called as ``draw_line(segment, stroke_weight)``; levels are
            drawn in increasing order.

    Returns:
        Number of segments drawn.
    """
    count = 0
    for contour_level in iter_contour_levels(state):
        for segment in contour_level.segments:
            draw_line(segment, contour_level.stroke_weight)
        count += len(contour_level.segments)
    return count
