"""OpenCV raster renderer for contour maps."""

import logging

import cv2
import numpy as np

from contour.levels import draw_contours
from contour.marching_squares import Segment
from terrain.height_field import GridState

logger = logging.getLogger(__name__)

# Constants (BGR)
BACKGROUND_COLOR = (255, 255, 255)
STROKE_COLOR = (0, 0, 0)
LABEL_COLOR = (180, 180, 180)
LABEL_FONT = cv2.FONT_HERSHEY_PLAIN
LABEL_SCALE = 0.8
LABEL_THICKNESS = 1
LABEL_MARGIN = 8
# Fractional bits for sub-pixel line endpoints.
LINE_SHIFT = 4


def draw_seed_label(image: np.ndarray, seed: int) -> np.ndarray:
    """Draws ``#<seed>`` into the bottom-right corner of ``image`` in place."""
    text = f"#{seed}"
    (text_w, _text_h), baseline = cv2.getTextSize(
        text, LABEL_FONT, LABEL_SCALE, LABEL_THICKNESS
    )
    h, w = image.shape[:2]
    origin = (w - LABEL_MARGIN - text_w, h - LABEL_MARGIN - baseline)
    cv2.putText(
        image,
        text,
        origin,
        LABEL_FONT,
        LABEL_SCALE,
        LABEL_COLOR,
        LABEL_THICKNESS,
        cv2.LINE_AA,
    )
    return image


def render_contour_map(
    state: GridState, supersample: int = 4, label: bool = True
) -> np.ndarray:
    """Renders all contour levels of ``state`` onto a white canvas.

    Lines are drawn at ``supersample`` times the canvas resolution and then
    area-downsampled, so stroke weights below or between whole pixels
    (e.g. 0.75 and 1.5) keep their relative weight.

    Args:
        state: Generated grid state.
        supersample: Integer upscaling factor used while drawing.
        label: Whether to draw the seed label.

    Returns:
        A (height, width, 3) uint8 BGR image.
    """
    if supersample < 1:
        raise ValueError(f"supersample must be >= 1, got {supersample}")

    w, h = state.width, state.height
    canvas = np.full((h * supersample, w * supersample, 3), BACKGROUND_COLOR, np.uint8)
    factor = supersample * (1 << LINE_SHIFT)

    def draw_line(segment: Segment, weight: float) -> None:
        (x1, y1), (x2, y2) = segment
        cv2.line(
            canvas,
            (round(x1 * factor), round(y1 * factor)),
            (round(x2 * factor), round(y2 * factor)),
            STROKE_COLOR,
            max(1, round(weight * supersample)),
            cv2.LINE_AA,
            LINE_SHIFT,
        )

    count = draw_contours(state, draw_line)
    logger.info(f"Drew {count} segments for seed {state.seed}.")

    if supersample > 1:
        image = cv2.resize(canvas, (w, h), interpolation=cv2.INTER_AREA)
    else:
        image = canvas

    if label:
        draw_seed_label(image, state.seed)
    return image
