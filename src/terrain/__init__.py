"""Package for building synthetic height fields.

This package contains the noise source engines, the fractal (fbm) field with
domain warping, and the height grid builder used to produce contour maps.
"""
