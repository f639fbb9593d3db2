"""Core split engine for parcelsplit.

This module contains the pure geometry that the rest of the package is
built around:

- geometry: Polygon area, point-in-polygon and bounds
- clipper: Sutherland-Hodgman clipping against a rectangular window
- splitter: Split evaluation and percentage shares

Every function here is total: degenerate input produces an empty or zero
result, never an exception.
"""

from parcelsplit.core.clipper import (
    INSIDE_EPSILON,
    PARALLEL_EPSILON,
    ClipBoundary,
    clip_half_plane,
    clip_polygon,
)
from parcelsplit.core.geometry import (
    point_in_polygon,
    polygon_area,
    polygon_bounds,
    signed_area,
)
from parcelsplit.core.splitter import (
    AREA_EPSILON,
    area_ratio,
    evaluate_split,
    split_shares,
    split_windows,
)

__all__ = [
    # Constants
    "AREA_EPSILON",
    "INSIDE_EPSILON",
    "PARALLEL_EPSILON",
    # Measurement
    "polygon_area",
    "signed_area",
    "point_in_polygon",
    "polygon_bounds",
    # Clipping
    "ClipBoundary",
    "clip_half_plane",
    "clip_polygon",
    # Splitting
    "area_ratio",
    "evaluate_split",
    "split_shares",
    "split_windows",
]
