"""Split evaluation: divide a parcel's known area along a split line.

The image extent is cut into two complementary windows at the split
coordinate. The parcel polygon is clipped against each window, the two
pieces are measured in pixel space, and the pixel ratio is applied to the
parcel's real-world area. Because only the ratio is carried over, the two
reported areas always add up to the nominal total.
"""

from collections.abc import Sequence

from parcelsplit.core.clipper import clip_polygon
from parcelsplit.core.geometry import polygon_area
from parcelsplit.domain import (
    Extent,
    Point,
    Rect,
    SplitDirection,
    SplitResult,
    SplitShares,
    SplitSpec,
)

# Pixel areas at or below this are treated as empty
AREA_EPSILON = 1e-6

# Sides that disagree with the nominal total by more than this get a note
PRECISION_NOTE_THRESHOLD = 0.01


def split_windows(split: SplitSpec, extent: Extent) -> tuple[Rect, Rect]:
    """Build the two windows that partition the extent at the split line.

    Args:
        split: Placed split line
        extent: Native image size

    Returns:
        (first, second) windows: left/right for vertical splits,
        top/bottom for horizontal ones

    Raises:
        ValueError: If the split has no coordinate
    """
    if split.coordinate is None:
        raise ValueError("Split line has not been placed")

    s = split.coordinate
    if split.direction is SplitDirection.VERTICAL:
        return (
            Rect(0.0, 0.0, s, extent.height),
            Rect(s, 0.0, extent.width - s, extent.height),
        )
    return (
        Rect(0.0, 0.0, extent.width, s),
        Rect(0.0, s, extent.width, extent.height - s),
    )


def area_ratio(area1: float, area2: float) -> float:
    """Fraction of the total that belongs to the first side.

    Falls back to 1.0 or 0.0 when both pieces are (near) empty instead of
    dividing by zero.
    """
    total = area1 + area2
    if total > AREA_EPSILON:
        return area1 / total
    if area1 > AREA_EPSILON:
        return 1.0
    return 0.0


def evaluate_split(
    polygon: Sequence[Point],
    total_area: float,
    split: SplitSpec,
    extent: Extent | None,
) -> SplitResult:
    """Divide a parcel's known area along a split line.

    Args:
        polygon: Parcel outline in native image coordinates
        total_area: Known real-world area of the parcel
        split: Direction and position of the split line
        extent: Native image size the windows are built from

    Returns:
        SplitResult with both areas, labels and clipped sub-polygons. When
        the split is not placed, the polygon has fewer than 3 vertices, the
        total area is not positive or there is no extent, the zero-filled
        result is returned.

    Examples:
        >>> square = [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]
        >>> result = evaluate_split(
        ...     square, 1000.0, SplitSpec(SplitDirection.VERTICAL, 30.0), Extent(100, 100)
        ... )
        >>> round(result.area1, 6), round(result.area2, 6)
        (300.0, 700.0)
    """
    if split.coordinate is None or len(polygon) < 3 or not total_area > 0 or extent is None:
        return SplitResult.empty()

    window1, window2 = split_windows(split, extent)
    label1, label2 = split.direction.labels

    sub_polygon1 = clip_polygon(polygon, window1)
    sub_polygon2 = clip_polygon(polygon, window2)

    ratio = area_ratio(polygon_area(sub_polygon1), polygon_area(sub_polygon2))

    return SplitResult(
        area1=total_area * ratio,
        area2=total_area * (1 - ratio),
        label1=label1,
        label2=label2,
        sub_polygon1=tuple(sub_polygon1),
        sub_polygon2=tuple(sub_polygon2),
    )


def split_shares(result: SplitResult, total_area: float) -> SplitShares:
    """Percentages of each side, as displayed next to the areas.

    Percentages are taken relative to ``area1 + area2`` rather than the
    nominal total. Any disagreement between the two is reported through
    ``discrepancy`` and ``has_precision_note``.

    Args:
        result: Evaluated split
        total_area: Nominal parcel area entered by the user

    Returns:
        SplitShares for the result
    """
    total = result.total
    if total_area > 0 and total > AREA_EPSILON:
        percent1 = result.area1 / total * 100
        percent2 = result.area2 / total * 100
    else:
        percent1 = percent2 = 0.0

    discrepancy = total - total_area
    return SplitShares(
        percent1=percent1,
        percent2=percent2,
        discrepancy=discrepancy,
        has_precision_note=total > 0 and abs(discrepancy) > PRECISION_NOTE_THRESHOLD,
    )
