"""Module for plotting height fields with their contours."""

import logging

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from contour.levels import iter_contour_levels
from terrain.height_field import GridState

logger = logging.getLogger(__name__)


def plot_contour_map(
    state: GridState,
    output_path: str | None = None,
    show: bool = False,
):
    """Plots the height field of ``state`` with its contour segments on top.

    Args:
        state: Generated grid state.
        output_path: Path to save the plot.
        show: Whether to show the plot interactively.
    """
    fig_w = 6.0
    fig, ax = plt.subplots(figsize=(fig_w, fig_w * state.height / state.width))

    # Grid samples sit on lattice points, so the image spans the last sample.
    span_x = (state.cols - 1) * state.stride
    span_y = (state.rows - 1) * state.stride
    img = ax.imshow(
        state.grid,
        cmap="terrain",
        extent=(0, span_x, span_y, 0),
        interpolation="bilinear",
    )
    fig.colorbar(img, ax=ax, shrink=0.6, label="Height")

    for contour_level in iter_contour_levels(state):
        if not contour_level.segments:
            continue
        lines = LineCollection(
            contour_level.segments,
            colors="black",
            linewidths=contour_level.stroke_weight,
        )
        ax.add_collection(lines)

    ax.set_xlim(0, state.width)
    # Invert Y axis to match image coordinates (top-left origin)
    ax.set_ylim(state.height, 0)
    ax.set_aspect("equal")
    ax.set_title(f"Seed #{state.seed}")

    if output_path:
        fig.savefig(output_path)
        logger.info(f"Saved contour plot to {output_path}")

    if show:
        plt.show()

    plt.close(fig)
