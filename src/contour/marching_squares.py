"""Marching squares contour extraction on a regular height grid."""

from collections.abc import Iterator

import numpy as np

# Edge values closer than this are treated as flat and yield the midpoint.
EPSILON = 1e-10

Point = tuple[float, float]
Segment = tuple[Point, Point]

# Cell edges: T (tl-tr), R (tr-br), B (bl-br), L (tl-bl).
TOP, RIGHT, BOTTOM, LEFT = "T", "R", "B", "L"

# Mask (TL=8, TR=4, BR=2, BL=1) -> ordered edge pairs to join.
# Saddles 5 and 10 always split into two segments; the centre value is not
# sampled, so some true saddles get the topologically "wrong" connection.
CASE_TABLE: dict[int, tuple[tuple[str, str], ...]] = {
    0: (),
    1: ((LEFT, BOTTOM),),
    2: ((BOTTOM, RIGHT),),
    3: ((LEFT, RIGHT),),
    4: ((TOP, RIGHT),),
    5: ((TOP, RIGHT), (LEFT, BOTTOM)),
    6: ((TOP, BOTTOM),),
    7: ((TOP, LEFT),),
    8: ((TOP, LEFT),),
    9: ((TOP, BOTTOM),),
    10: ((TOP, LEFT), (RIGHT, BOTTOM)),
    11: ((TOP, RIGHT),),
    12: ((LEFT, RIGHT),),
    13: ((RIGHT, BOTTOM),),
    14: ((LEFT, BOTTOM),),
    15: (),
}


def crossing_parameter(v0: float, v1: float, iso: float) -> float | None:
    """Returns the position t of ``iso`` along an edge from v0 to v1.

    Returns None for a degenerate edge (|v1 - v0| < EPSILON). The value is
    not clamped.
    """
    delta = v1 - v0
    if abs(delta) < EPSILON:
        return None
    return (iso - v0) / delta


def interp_edge(
    v0: float,
    v1: float,
    ax: float,
    ay: float,
    bx: float,
    by: float,
    iso: float,
) -> Point:
    """Linearly interpolates the iso crossing on the edge (ax, ay)-(bx, by).

    Args:
        v0: Height at (ax, ay).
        v1: Height at (bx, by).
        ax: X coordinate of the first endpoint.
        ay: Y coordinate of the first endpoint.
        bx: X coordinate of the second endpoint.
        by: Y coordinate of the second endpoint.
        iso: Iso-value to locate.

    Returns:
        The crossing point, or the edge midpoint when the edge is flat.
    """
    t = crossing_parameter(v0, v1, iso)
    if t is None:
        return ((ax + bx) * 0.5, (ay + by) * 0.5)
    return (ax + t * (bx - ax), ay + t * (by - ay))


def cell_mask(tl: float, tr: float, br: float, bl: float, iso: float) -> int:
    """Classifies a cell by which corners lie strictly above ``iso``."""
    return (
        (8 if tl > iso else 0)
        | (4 if tr > iso else 0)
        | (2 if br > iso else 0)
        | (1 if bl > iso else 0)
    )


def _edge_point(
    edge: str,
    tl: float,
    tr: float,
    br: float,
    bl: float,
    iso: float,
    x: float,
    y: float,
    xs: float,
    ys: float,
) -> Point:
    if edge == TOP:
        return interp_edge(tl, tr, x, y, xs, y, iso)
    if edge == RIGHT:
        return interp_edge(tr, br, xs, y, xs, ys, iso)
    if edge == BOTTOM:
        return interp_edge(bl, br, x, ys, xs, ys, iso)
    return interp_edge(tl, bl, x, y, x, ys, iso)


def cell_segments(
    tl: float,
    tr: float,
    br: float,
    bl: float,
    iso: float,
    x: float,
    y: float,
    stride: float,
) -> list[Segment]:
    """Computes the contour segments crossing a single cell.

    Only the edges referenced by the cell's case are interpolated.

    Args:
        tl: Top-left corner height.
        tr: Top-right corner height.
        br: Bottom-right corner height.
        bl: Bottom-left corner height.
        iso: Iso-value.
        x: Pixel x of the top-left corner.
        y: Pixel y of the top-left corner.
        stride: Cell size in pixels.

    Returns:
        Zero, one or (for saddles) two segments.
    """
    pairs = CASE_TABLE[cell_mask(tl, tr, br, bl, iso)]
    if not pairs:
        return []

    xs = x + stride
    ys = y + stride
    points: dict[str, Point] = {}
    segments = []
    for a, b in pairs:
        for edge in (a, b):
            if edge not in points:
                points[edge] = _edge_point(edge, tl, tr, br, bl, iso, x, y, xs, ys)
        segments.append((points[a], points[b]))
    return segments


def cell_masks(grid: np.ndarray, iso: float) -> np.ndarray:
    """Computes the case mask of every cell of ``grid`` at once.

    Returns:
        An int array of shape (rows - 1, cols - 1).
    """
    above = np.asarray(grid) > iso
    return (
        above[:-1, :-1].astype(np.int64) * 8
        | above[:-1, 1:].astype(np.int64) * 4
        | above[1:, 1:].astype(np.int64) * 2
        | above[1:, :-1].astype(np.int64)
    )


def march_contour(grid: np.ndarray, iso: float, stride: float) -> Iterator[Segment]:
    """Yields the contour segments of ``grid`` at ``iso``.

    Cells are visited in row-major order and cells entirely above or below
    the iso-value are skipped. The generator reads the grid only, so calling
    it again yields the same segments.

    Args:
        grid: 2D height grid; entry (r, c) sits at pixel (c * stride, r * stride).
        iso: Iso-value of the contour.
        stride: Pixels between two grid samples.

    Yields:
        Segments as ((x1, y1), (x2, y2)) in pixel space.
    """
    grid = np.asarray(grid)
    if grid.ndim != 2:
        raise ValueError(f"grid must be 2D, got shape {grid.shape}")
    if grid.shape[0] < 2 or grid.shape[1] < 2:
        return

    masks = cell_masks(grid, iso)
    active_rows, active_cols = np.nonzero((masks != 0) & (masks != 15))
    values = grid.tolist()

    for r, c in zip(active_rows.tolist(), active_cols.tolist()):
        row, below = values[r], values[r + 1]
        yield from cell_segments(
            row[c],
            row[c + 1],
            below[c + 1],
            below[c],
            iso,
            c * stride,
            r * stride,
            stride,
        )


def extract_segments(grid: np.ndarray, iso: float, stride: float) -> list[Segment]:
    """Collects ``march_contour`` into a list."""
    return list(march_contour(grid, iso, stride))
