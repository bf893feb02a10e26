"""Rendering of contour maps to rasters, BMP files and debug plots."""
