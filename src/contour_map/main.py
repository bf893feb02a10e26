"""Command line entry point for generating contour maps."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from terrain.config import ContourMapConfig
from terrain.engine import NOISE_SOURCES, create_noise_source

from .pipeline import ContourMapPipeline

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    defaults = ContourMapConfig()
    parser = argparse.ArgumentParser(
        description="Generate seed-driven topographic contour maps as BMP images."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed (random when omitted)."
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of maps to generate. With --seed, seeds count up from it.",
    )
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument(
        "--stride",
        type=int,
        default=defaults.stride,
        help="Pixels between grid samples.",
    )
    parser.add_argument("--octaves", type=int, default=defaults.octaves)
    parser.add_argument("--lacunarity", type=float, default=defaults.lacunarity)
    parser.add_argument("--persistence", type=float, default=defaults.persistence)
    parser.add_argument(
        "--levels",
        type=int,
        default=defaults.num_levels,
        help="Number of contour levels.",
    )
    parser.add_argument("--iso-min", type=float, default=defaults.iso_min)
    parser.add_argument("--iso-max", type=float, default=defaults.iso_max)
    parser.add_argument(
        "--warp",
        type=float,
        default=defaults.warp_amount,
        help="Domain-warp strength in pixels.",
    )
    parser.add_argument(
        "--major-every",
        type=int,
        default=defaults.major_every,
        help="Draw every N-th level with the major stroke.",
    )
    parser.add_argument(
        "--noise",
        type=str,
        default="perlin",
        choices=sorted(NOISE_SOURCES),
        help="Noise source.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="contour.bmp",
        help="BMP file to write.",
    )
    parser.add_argument(
        "--json",
        type=str,
        default=None,
        help="Optional path for a JSON dump of the contour segments.",
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Optional path for a matplotlib plot of the height field.",
    )
    parser.add_argument(
        "--supersample",
        type=int,
        default=4,
        help="Drawing resolution multiplier used for anti-aliasing.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-level detail.")
    return parser


def _with_seed_suffix(path: str, seed: int) -> Path:
    path = Path(path)
    return path.with_name(f"{path.stem}_{seed}{path.suffix}")


def main(argv: list[str] | None = None) -> int:
    """Run the generator."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    if args.count < 1:
        parser.error(f"--count must be >= 1, got {args.count}")
    if args.supersample < 1:
        parser.error(f"--supersample must be >= 1, got {args.supersample}")

    try:
        config = ContourMapConfig(
            width=args.width,
            height=args.height,
            stride=args.stride,
            octaves=args.octaves,
            lacunarity=args.lacunarity,
            persistence=args.persistence,
            num_levels=args.levels,
            iso_min=args.iso_min,
            iso_max=args.iso_max,
            major_every=args.major_every,
            warp_amount=args.warp,
        )
    except ValueError as exc:
        parser.error(str(exc))

    pipeline = ContourMapPipeline(
        config=config, noise_source=create_noise_source(args.noise)
    )

    for i in range(args.count):
        seed = None if args.seed is None else args.seed + i
        state = pipeline.generate(seed)

        output_path = args.output
        json_path = args.json
        plot_path = args.plot
        if args.count > 1:
            output_path = _with_seed_suffix(output_path, state.seed)
            json_path = json_path and _with_seed_suffix(json_path, state.seed)
            plot_path = plot_path and _with_seed_suffix(plot_path, state.seed)

        pipeline.save_bmp(output_path, supersample=args.supersample)

        if json_path:
            output = pipeline.summarize()
            json_path = Path(json_path)
            json_path.parent.mkdir(parents=True, exist_ok=True)
            json_path.write_text(output.model_dump_json(indent=2))
            logger.info(f"Saved contour segments to {json_path}")

        if plot_path:
            pipeline.visualize(str(plot_path))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
