"""Tests for geometric primitives."""

import math

import pytest

from blobfont.core.geometry import (
    EMPTY_BOX,
    FALLBACK_PERPENDICULAR,
    BoundingBox,
    bounding_box,
    distance_to_polyline,
    distance_to_segment,
    extend_polyline,
    flatten_path,
    offset_stroke,
    perpendicular_at,
    points_bounding_box,
    strokes_bounding_box,
)
from blobfont.domain import Close, CurveTo, LineTo, MoveTo, Point, QuadTo, Stroke, StrokeType
from blobfont.exceptions import PathCommandError


class TestPerpendicular:
    """Tests for perpendicular_at."""

    def test_horizontal_line(self) -> None:
        """Test the perpendicular of a line along +x points along +y."""
        px, py = perpendicular_at([Point(0, 0), Point(10, 0)], 0)
        assert px == pytest.approx(0.0)
        assert py == pytest.approx(1.0)

    def test_vertical_line(self) -> None:
        """Test the perpendicular of a line along +y points along -x."""
        assert perpendicular_at([Point(0, 0), Point(0, 5)], 1) == pytest.approx((-1.0, 0.0))

    def test_central_difference(self) -> None:
        """Test that inner points use their two neighbours."""
        points = [Point(0, 0), Point(1, 1), Point(2, 0)]
        # Neighbours are level, so the tangent is horizontal
        assert perpendicular_at(points, 1) == pytest.approx((0.0, 1.0))

    def test_unit_length(self) -> None:
        """Test that the result is normalized."""
        px, py = perpendicular_at([Point(0, 0), Point(3, 4)], 0)
        assert math.hypot(px, py) == pytest.approx(1.0)

    def test_coincident_points_fall_back(self) -> None:
        """Test that a zero-length tangent gives the fallback instead of NaN."""
        assert perpendicular_at([Point(1, 1), Point(1, 1)], 0) == FALLBACK_PERPENDICULAR

    def test_single_point_falls_back(self) -> None:
        """Test that a single point gives the fallback."""
        assert perpendicular_at([Point(1, 1)], 0) == FALLBACK_PERPENDICULAR


class TestOffsetStroke:
    """Tests for offset_stroke."""

    def test_offsets_both_sides(self) -> None:
        """Test that a horizontal line is offset up and down."""
        left, right = offset_stroke([Point(0, 0), Point(10, 0)], 5)

        assert [p.y for p in left] == pytest.approx([5, 5])
        assert [p.y for p in right] == pytest.approx([-5, -5])
        assert [p.x for p in left] == pytest.approx([0, 10])

    def test_same_length_as_input(self) -> None:
        """Test that both sides have one point per input point."""
        points = [Point(0, 0), Point(1, 2), Point(3, 3), Point(5, 3)]
        left, right = offset_stroke(points, 1)
        assert len(left) == len(right) == len(points)

    def test_degenerate_input_stays_finite(self) -> None:
        """Test that coincident points produce finite coordinates."""
        left, right = offset_stroke([Point(2, 2), Point(2, 2), Point(2, 2)], 3)
        for p in left + right:
            assert math.isfinite(p.x) and math.isfinite(p.y)


class TestBoundingBox:
    """Tests for bounding box helpers."""

    def test_empty_path(self) -> None:
        """Test that an empty path has the empty box."""
        assert bounding_box(()) == EMPTY_BOX
        assert points_bounding_box([]) == EMPTY_BOX

    def test_includes_control_points(self) -> None:
        """Test that curve control points extend the box."""
        path = (MoveTo(0, 0), CurveTo(0, -20, 10, -20, 10, 0), Close())
        assert bounding_box(path) == BoundingBox(0, -20, 10, 0)

    def test_box_properties(self) -> None:
        """Test width, height, centre and containment."""
        box = BoundingBox(0, 0, 10, 20)

        assert box.width == 10
        assert box.height == 20
        assert box.center == Point(5, 10)
        assert box.contains(10, 20)
        assert not box.contains(11, 5)
        assert box.expanded(1) == BoundingBox(-1, -1, 11, 21)

    def test_empty_box(self) -> None:
        """Test that the empty box reports empty."""
        assert EMPTY_BOX.is_empty()
        assert not BoundingBox(0, 0, 1, 1).is_empty()

    def test_strokes_box_spans_centre_lines(self) -> None:
        """Test that the strokes box covers every centre-line point."""
        strokes = (
            Stroke(StrokeType.VERTICAL, (Point(0.2, 0), Point(0.2, 1))),
            Stroke(StrokeType.HORIZONTAL, (Point(0.1, 0.5), Point(0.9, 0.5))),
        )

        assert strokes_bounding_box(strokes) == BoundingBox(0.1, 0, 0.9, 1)
        assert strokes_bounding_box(()) == EMPTY_BOX


class TestDistances:
    """Tests for point-to-segment and point-to-polyline distances."""

    def test_perpendicular_distance(self) -> None:
        """Test distance to the inside of a segment."""
        assert distance_to_segment(Point(5, 5), Point(0, 0), Point(10, 0)) == pytest.approx(5)

    def test_distance_clamped_to_endpoint(self) -> None:
        """Test that points past the end measure to the end point."""
        assert distance_to_segment(Point(13, 4), Point(0, 0), Point(10, 0)) == pytest.approx(5)

    def test_zero_length_segment(self) -> None:
        """Test that a zero-length segment measures to its start."""
        assert distance_to_segment(Point(3, 4), Point(0, 0), Point(0, 0)) == pytest.approx(5)

    def test_polyline_minimum(self) -> None:
        """Test that the closest segment wins."""
        polyline = [Point(0, 0), Point(10, 0), Point(10, 10)]
        assert distance_to_polyline(Point(12, 5), polyline) == pytest.approx(2)

    def test_empty_polyline(self) -> None:
        """Test that an empty polyline is infinitely far away."""
        assert distance_to_polyline(Point(0, 0), []) == math.inf


class TestExtendPolyline:
    """Tests for extend_polyline."""

    def test_extends_both_ends(self) -> None:
        """Test that end points move outward along the end tangents."""
        extended = extend_polyline([Point(0, 0), Point(10, 0)], 2)
        assert extended == [Point(-2, 0), Point(12, 0)]

    def test_zero_amount_is_identity(self) -> None:
        """Test that a zero extension keeps the points."""
        points = [Point(0, 0), Point(10, 0)]
        assert extend_polyline(points, 0) == points


class TestFlattenPath:
    """Tests for flatten_path."""

    def test_closed_polygon(self) -> None:
        """Test that a closed polygon repeats its start point."""
        path = (MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), LineTo(0, 10), Close())
        polylines = flatten_path(path)

        assert len(polylines) == 1
        assert polylines[0] == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)]

    def test_curves_keep_endpoints(self) -> None:
        """Test that flattened curves start and end on the curve endpoints."""
        path = (MoveTo(0, 0), QuadTo(50, 100, 100, 0), CurveTo(100, -50, 0, -50, 0, 0), Close())
        polyline = flatten_path(path)[0]

        assert polyline[0] == Point(0, 0)
        assert len(polyline) > 4
        assert Point(100, 0) in polyline
        for p in polyline:
            assert -50 <= p.y <= 100

    def test_one_polyline_per_subpath(self) -> None:
        """Test that every sub-path becomes its own polyline."""
        square = (MoveTo(0, 0), LineTo(1, 0), LineTo(1, 1), Close())
        path = square + (MoveTo(5, 5), LineTo(6, 5), LineTo(6, 6), Close())
        assert len(flatten_path(path)) == 2

    def test_unknown_command(self) -> None:
        """Test that unknown commands raise."""
        with pytest.raises(PathCommandError):
            flatten_path((MoveTo(0, 0), object()))  # type: ignore[arg-type]
