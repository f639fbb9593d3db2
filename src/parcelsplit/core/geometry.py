"""Planar measurements on parcel polygons.

This module provides the measuring primitives of the split engine:
- Polygon area (shoelace formula)
- Point-in-polygon testing (ray casting algorithm)
- Bounding rectangle of a vertex list

All functions are pure and stateless. Polygons are plain sequences of
Point forming a closed ring; the last vertex connects back to the first.
"""

from collections.abc import Sequence

from parcelsplit.domain import Point, Rect


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign follows the usual y-up convention: positive for
    counter-clockwise rings. In y-down image space the visual sense flips.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Fewer than 3 points give 0.0.

    Examples:
        >>> square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        >>> signed_area(square)
        1.0
        >>> signed_area(square[::-1])
        -1.0
    """
    n = len(points)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def polygon_area(points: Sequence[Point]) -> float:
    """Area of a polygon regardless of winding direction.

    Degenerate inputs (0, 1 or 2 vertices) accumulate a zero sum and so
    return exactly 0.0.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Non-negative area in square units

    Examples:
        >>> polygon_area([Point(0, 0), Point(10, 0), Point(10, 5), Point(0, 5)])
        50.0
    """
    return abs(signed_area(points))


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts crossings
    with polygon edges. Odd number of crossings = inside, even = outside.
    Points lying on a horizontal edge count as inside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        >>> point_in_polygon(Point(5, 5), square)
        True
        >>> point_in_polygon(Point(15, 5), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if yi == yj:
            # A horizontal ray never crosses a horizontal edge
            if y == yi and min(xi, xj) <= x <= max(xi, xj):
                return True
        elif ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def polygon_bounds(points: Sequence[Point]) -> Rect | None:
    """Calculate the bounding rectangle of a vertex list.

    Args:
        points: Polygon vertices

    Returns:
        Rect spanning min/max of the coordinates, or None for no points
    """
    if not points:
        return None

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, min_y = min(xs), min(ys)
    return Rect(min_x, min_y, max(xs) - min_x, max(ys) - min_y)
