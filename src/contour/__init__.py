"""Contour extraction module.

Marching squares over a height grid and the mapping of level indices to
iso-values and stroke weights.
"""
