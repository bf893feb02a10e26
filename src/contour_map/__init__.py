"""End-to-end contour map generation: pipeline, output schemas and CLI."""
