"""Main pipeline for contour map generation."""

import logging
import os
from pathlib import Path

import numpy as np

from contour.levels import ContourLevel, iter_contour_levels
from rendering.bmp import save_bmp
from rendering.plotter import plot_contour_map
from rendering.raster import render_contour_map
from terrain.config import ContourMapConfig
from terrain.engine.noise_source import NoiseSource
from terrain.engine.perlin_noise_source import PerlinNoiseSource
from terrain.height_field import GridState, generate

from .schemas import ContourLevelOutput, ContourMapOutput

logger = logging.getLogger(__name__)


class ContourMapPipeline:
    """Pipeline to generate, render and export seed-driven contour maps.

    Every call to ``generate`` replaces ``state`` with a brand-new GridState;
    the previous state is never modified.

    Attributes:
        config: Generation parameters.
        noise_source: Noise source kind, re-seeded on every generation.
        state: The current GridState, or None before the first generation.
    """

    def __init__(
        self,
        config: ContourMapConfig | None = None,
        noise_source: NoiseSource | None = None,
    ):
        """Initializes the pipeline.

        Args:
            config: Optional configuration. Defaults to ContourMapConfig().
            noise_source: Optional noise source. Defaults to PerlinNoiseSource.
        """
        self.config = config or ContourMapConfig()
        self.noise_source = noise_source or PerlinNoiseSource()
        self.state: GridState | None = None

    def generate(self, seed: int | None = None) -> GridState:
        """Generates a new height grid, replacing the current state.

        Args:
            seed: Seed to use. A random one is chosen when omitted.

        Returns:
            The new GridState.
        """
        self.state = generate(self.config, seed=seed, source=self.noise_source)
        return self.state

    def regenerate(self) -> GridState:
        """Generates a new height grid from a fresh random seed."""
        return self.generate()

    def _require_state(self) -> GridState:
        if self.state is None:
            raise RuntimeError("No height grid generated yet; call generate() first.")
        return self.state

    def levels(self) -> list[ContourLevel]:
        """Extracts every contour level of the current state."""
        return list(iter_contour_levels(self._require_state()))

    def render(self, supersample: int = 4) -> np.ndarray:
        """Renders the current state to a BGR image."""
        return render_contour_map(self._require_state(), supersample=supersample)

    def save_bmp(self, path: str | os.PathLike, supersample: int = 4) -> Path:
        """Renders the current state and saves it as a 24-bit BMP."""
        return save_bmp(self.render(supersample=supersample), path)

    def summarize(self) -> ContourMapOutput:
        """Converts the contour levels of the current state to output models."""
        state = self._require_state()
        levels = [
            ContourLevelOutput(
                level=contour_level.level,
                iso_value=contour_level.iso_value,
                major=contour_level.major,
                stroke_weight=contour_level.stroke_weight,
                segments=contour_level.segments,
            )
            for contour_level in self.levels()
        ]
        output = ContourMapOutput(
            seed=state.seed,
            width=state.width,
            height=state.height,
            stride=state.stride,
            levels=levels,
        )
        logger.info(
            f"Extracted {output.segment_count} segments over {len(levels)} levels."
        )
        return output

    def visualize(self, output_path: str, show: bool = False):
        """Saves a matplotlib plot of the height field and its contours."""
        state = self._require_state()
        dir_name = os.path.dirname(output_path)
        if dir_name:
            os.makedirs(dir_name, exist_ok=True)
        plot_contour_map(state, output_path=output_path, show=show)
