"""Sutherland-Hodgman clipping of a polygon against a rectangular window.

The window is treated as four half-planes (left, right, top, bottom) and
the polygon is clipped against each in turn, every pass consuming the
output of the previous one. The pass order is fixed so that the vertex
sequence of the result is reproducible.

Coordinates are in image space: y grows downwards, so "top" is the
smaller y value.
"""

from collections.abc import Sequence
from enum import Enum

from parcelsplit.domain import Point, Rect

# Vertices within this distance of a boundary count as inside it
INSIDE_EPSILON = 1e-6

# Edges whose coordinate delta is below this are parallel to the boundary
PARALLEL_EPSILON = 1e-9


class ClipBoundary(Enum):
    """One edge of the clip window and the side of it that is kept."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def is_vertical(self) -> bool:
        """True for boundaries that are lines of constant x."""
        return self in (ClipBoundary.LEFT, ClipBoundary.RIGHT)

    def contains(self, point: Point, coord: float) -> bool:
        """Check whether a point is on the kept side of the boundary line.

        The test is inclusive and widened by INSIDE_EPSILON so that points
        sitting on the line survive floating-point noise.
        """
        if self is ClipBoundary.LEFT:
            return point.x >= coord - INSIDE_EPSILON
        if self is ClipBoundary.RIGHT:
            return point.x <= coord + INSIDE_EPSILON
        if self is ClipBoundary.TOP:
            return point.y >= coord - INSIDE_EPSILON
        return point.y <= coord + INSIDE_EPSILON


def boundary_intersection(p1: Point, p2: Point, boundary: ClipBoundary, coord: float) -> Point:
    """Intersect the edge p1 -> p2 with a boundary line.

    Args:
        p1: Edge start (the predecessor vertex)
        p2: Edge end
        boundary: Which window edge the line belongs to
        coord: Position of the line (x for left/right, y for top/bottom)

    Returns:
        Point on the boundary line. For an edge parallel to the line, p1 is
        projected onto it instead of dividing by a vanishing delta.
    """
    if boundary.is_vertical:
        if abs(p2.x - p1.x) < PARALLEL_EPSILON:
            return Point(coord, p1.y)
        y = p1.y + (p2.y - p1.y) * (coord - p1.x) / (p2.x - p1.x)
        return Point(coord, y)

    if abs(p2.y - p1.y) < PARALLEL_EPSILON:
        return Point(p1.x, coord)
    x = p1.x + (p2.x - p1.x) * (coord - p1.y) / (p2.y - p1.y)
    return Point(x, coord)


def clip_half_plane(points: Sequence[Point], boundary: ClipBoundary, coord: float) -> list[Point]:
    """Clip a polygon against a single boundary line.

    Walks every edge (previous vertex, current vertex), wrapping around.
    When the edge crosses the line the intersection is emitted; when the
    current vertex is inside it is emitted as well.

    Args:
        points: Polygon to clip
        boundary: Window edge defining the half-plane
        coord: Position of the boundary line

    Returns:
        Vertices of the clipped polygon (possibly empty)
    """
    if not points:
        return []

    output: list[Point] = []
    prev = points[-1]
    prev_inside = boundary.contains(prev, coord)

    for current in points:
        current_inside = boundary.contains(current, coord)

        if current_inside != prev_inside:
            output.append(boundary_intersection(prev, current, boundary, coord))
        if current_inside:
            output.append(current)

        prev = current
        prev_inside = current_inside

    return output


def clip_polygon(points: Sequence[Point], window: Rect | None) -> list[Point]:
    """Restrict a polygon to a rectangular window.

    Args:
        points: Polygon vertices (at least 3 for a non-empty result)
        window: Clip rectangle; negative width/height are treated as zero

    Returns:
        Vertices of the polygon inside the window. Empty when the window is
        missing, the polygon is degenerate or lies entirely outside.
    """
    if window is None or len(points) < 3:
        return []

    output = list(points)
    for boundary, coord in (
        (ClipBoundary.LEFT, window.x),
        (ClipBoundary.RIGHT, window.right),
        (ClipBoundary.TOP, window.y),
        (ClipBoundary.BOTTOM, window.bottom),
    ):
        output = clip_half_plane(output, boundary, coord)

    return output
