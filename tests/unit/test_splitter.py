"""Tests for split evaluation and percentage shares."""

import pytest

from parcelsplit.core.geometry import polygon_area
from parcelsplit.core.splitter import (
    area_ratio,
    evaluate_split,
    split_shares,
    split_windows,
)
from parcelsplit.domain import (
    GENERIC_LABELS,
    Extent,
    Point,
    Rect,
    SplitDirection,
    SplitResult,
    SplitSpec,
)


@pytest.fixture
def square() -> list[Point]:
    """100x100 parcel filling a 100x100 image."""
    return [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]


@pytest.fixture
def extent() -> Extent:
    return Extent(100, 100)


def vertical(at: float | None) -> SplitSpec:
    return SplitSpec(SplitDirection.VERTICAL, at)


def horizontal(at: float | None) -> SplitSpec:
    return SplitSpec(SplitDirection.HORIZONTAL, at)


class TestSplitWindows:
    """Tests for split_windows."""

    def test_vertical(self):
        """Test a vertical split partitions the width."""
        w1, w2 = split_windows(vertical(30.0), Extent(200, 80))
        assert w1 == Rect(0.0, 0.0, 30.0, 80)
        assert w2 == Rect(30.0, 0.0, 170.0, 80)

    def test_horizontal(self):
        """Test a horizontal split partitions the height."""
        w1, w2 = split_windows(horizontal(25.0), Extent(200, 80))
        assert w1 == Rect(0.0, 0.0, 200, 25.0)
        assert w2 == Rect(0.0, 25.0, 200, 55.0)

    def test_unplaced(self):
        """Test an unplaced split has no windows."""
        with pytest.raises(ValueError, match="not been placed"):
            split_windows(vertical(None), Extent(10, 10))


class TestAreaRatio:
    """Tests for area_ratio."""

    def test_proportional(self):
        assert area_ratio(30.0, 70.0) == pytest.approx(0.3)

    def test_both_empty(self):
        """Test two empty sides resolve to 0.0 instead of NaN."""
        assert area_ratio(0.0, 0.0) == 0.0

    def test_below_epsilon(self):
        assert area_ratio(1e-8, 1e-8) == 0.0


class TestEvaluateSplit:
    """Tests for evaluate_split."""

    def test_vertical_scenario(self, square, extent):
        """Test the 30/70 vertical split of a 1000-unit parcel."""
        result = evaluate_split(square, 1000.0, vertical(30.0), extent)

        assert result.area1 == pytest.approx(300.0)
        assert result.area2 == pytest.approx(700.0)
        assert result.label1 == "Left Area"
        assert result.label2 == "Right Area"
        assert result.area1 + result.area2 == pytest.approx(1000.0, abs=1e-9)

    def test_horizontal_scenario(self, square, extent):
        """Test a horizontal split labels the sides top and bottom."""
        result = evaluate_split(square, 500.0, horizontal(80.0), extent)

        assert result.label1 == "Top Area"
        assert result.label2 == "Bottom Area"
        assert result.area1 == pytest.approx(400.0)
        assert result.area2 == pytest.approx(100.0)

    def test_sub_polygons_returned(self, square, extent):
        """Test the clipped halves come back for rendering."""
        result = evaluate_split(square, 1000.0, vertical(30.0), extent)

        assert polygon_area(result.sub_polygon1) == pytest.approx(3000.0)
        assert polygon_area(result.sub_polygon2) == pytest.approx(7000.0)
        assert all(p.x <= 30.0 for p in result.sub_polygon1)
        assert all(p.x >= 30.0 for p in result.sub_polygon2)

    def test_split_on_left_edge(self, square, extent):
        """Test a split on the polygon's left edge gives everything to the right."""
        result = evaluate_split(square, 1000.0, vertical(0.0), extent)

        assert polygon_area(result.sub_polygon1) == pytest.approx(0.0)
        assert result.area1 == pytest.approx(0.0)
        assert result.area2 == pytest.approx(1000.0)

    def test_split_on_right_edge(self, square, extent):
        """Test a split on the polygon's right edge gives everything to the left."""
        result = evaluate_split(square, 1000.0, vertical(100.0), extent)

        assert result.area1 == pytest.approx(1000.0)
        assert result.area2 == pytest.approx(0.0)

    def test_polygon_outside_extent(self, extent):
        """Test a polygon beyond the image resolves to a zero ratio."""
        outside = [Point(200, 200), Point(300, 200), Point(300, 300)]
        result = evaluate_split(outside, 1000.0, vertical(50.0), extent)

        assert result.area1 == 0.0
        assert result.area2 == 1000.0
        assert result.sub_polygon1 == ()
        assert result.sub_polygon2 == ()

    def test_polygon_in_smaller_image_region(self):
        """Test the ratio uses pixel areas of an off-origin parcel."""
        parcel = [Point(40, 10), Point(80, 10), Point(80, 50), Point(40, 50)]
        result = evaluate_split(parcel, 1264.0, vertical(50.0), Extent(640, 480))

        assert result.area1 == pytest.approx(1264.0 * 0.25)
        assert result.area2 == pytest.approx(1264.0 * 0.75)

    def test_triangle_horizontal(self):
        """Test a slanted parcel divides by clipped area, not by height."""
        triangle = [Point(0, 0), Point(100, 100), Point(0, 100)]
        result = evaluate_split(triangle, 100.0, horizontal(50.0), Extent(100, 100))

        assert result.area1 == pytest.approx(25.0)
        assert result.area2 == pytest.approx(75.0)

    def test_two_vertices_uncomputable(self, extent):
        """Test a two-vertex polygon yields the zero-filled result."""
        result = evaluate_split([Point(0, 0), Point(10, 10)], 1000.0, vertical(5.0), extent)

        assert result == SplitResult.empty()
        assert (result.label1, result.label2) == GENERIC_LABELS

    def test_unplaced_split_uncomputable(self, square, extent):
        """Test a split without a coordinate yields the zero-filled result."""
        assert evaluate_split(square, 1000.0, vertical(None), extent).is_empty

    @pytest.mark.parametrize("total", [0.0, -10.0, float("nan")])
    def test_non_positive_total_uncomputable(self, square, extent, total):
        """Test a non-positive total area yields the zero-filled result."""
        assert evaluate_split(square, total, vertical(30.0), extent).is_empty

    def test_missing_extent_uncomputable(self, square):
        """Test no image extent yields the zero-filled result."""
        assert evaluate_split(square, 1000.0, vertical(30.0), None).is_empty

    def test_deterministic(self, square, extent):
        """Test identical input gives identical output."""
        a = evaluate_split(square, 1000.0, vertical(42.0), extent)
        b = evaluate_split(square, 1000.0, vertical(42.0), extent)
        assert a == b


class TestSplitShares:
    """Tests for split_shares."""

    def test_percentages(self, square, extent):
        result = evaluate_split(square, 1000.0, vertical(30.0), extent)
        shares = split_shares(result, 1000.0)

        assert shares.percent1 == pytest.approx(30.0)
        assert shares.percent2 == pytest.approx(70.0)
        assert not shares.has_precision_note

    def test_relative_to_side_sum(self):
        """Test percentages use area1 + area2 even when it misses the total."""
        result = SplitResult(30.0, 60.0, "Left Area", "Right Area")
        shares = split_shares(result, 100.0)

        assert shares.percent1 == pytest.approx(100 / 3)
        assert shares.percent2 == pytest.approx(200 / 3)
        assert shares.discrepancy == pytest.approx(-10.0)
        assert shares.has_precision_note

    def test_empty_result(self):
        """Test an empty result has zero shares and no note."""
        shares = split_shares(SplitResult.empty(), 1000.0)

        assert shares.percent1 == 0.0
        assert shares.percent2 == 0.0
        assert not shares.has_precision_note

    def test_non_positive_total(self):
        shares = split_shares(SplitResult(1.0, 1.0, "Left Area", "Right Area"), 0.0)
        assert shares.percent1 == 0.0
        assert shares.percent2 == 0.0
