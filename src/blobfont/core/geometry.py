"""Geometric primitives for stroke outlining and rasterization.

This module provides the mathematical utilities the outline generators are
built from:
- Perpendicular computation along a polyline
- Perpendicular offsetting of stroke centre lines
- Bounding boxes of paths and strokes
- Point-to-segment and point-to-polyline distances
- Path flattening (Bezier subdivision)

All functions are pure and never propagate NaN: degenerate input returns a
defined fallback instead.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from blobfont.core._bezier import flatten_cubic as _flatten_cubic
from blobfont.core._bezier import flatten_quadratic as _flatten_quadratic
from blobfont.domain import (
    Close,
    CurveTo,
    LineTo,
    MoveTo,
    OutlinePath,
    Point,
    QuadTo,
    path_coordinates,
)
from blobfont.exceptions import PathCommandError

# Below this length a tangent is treated as zero
EPSILON = 1e-9

# Used whenever a tangent is degenerate
FALLBACK_PERPENDICULAR = (0.0, 1.0)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def is_empty(self) -> bool:
        return self.width <= 0 and self.height <= 0

    def expanded(self, amount: float) -> "BoundingBox":
        """Return the box grown by amount on every side."""
        return BoundingBox(
            self.min_x - amount,
            self.min_y - amount,
            self.max_x + amount,
            self.max_y + amount,
        )

    def contains(self, x: float, y: float, tolerance: float = 1e-6) -> bool:
        return (
            self.min_x - tolerance <= x <= self.max_x + tolerance
            and self.min_y - tolerance <= y <= self.max_y + tolerance
        )


EMPTY_BOX = BoundingBox(0.0, 0.0, 0.0, 0.0)


def perpendicular_at(points: list[Point] | tuple[Point, ...], index: int) -> tuple[float, float]:
    """Calculate the unit perpendicular of a polyline at a vertex.

    The local tangent is a forward difference at the first point, a backward
    difference at the last point and a central difference elsewhere. The
    tangent (dx, dy) is rotated 90 degrees to (-dy, dx).

    Args:
        points: Polyline vertices
        index: Vertex to evaluate

    Returns:
        Unit vector (px, py). A zero-length tangent (coincident points or a
        single-point polyline) yields FALLBACK_PERPENDICULAR.

    Examples:
        >>> perpendicular_at([Point(0, 0), Point(1, 0)], 0)
        (-0.0, 1.0)
    """
    n = len(points)
    if n < 2:
        return FALLBACK_PERPENDICULAR

    if index == 0:
        dx = points[1].x - points[0].x
        dy = points[1].y - points[0].y
    elif index == n - 1:
        dx = points[index].x - points[index - 1].x
        dy = points[index].y - points[index - 1].y
    else:
        dx = points[index + 1].x - points[index - 1].x
        dy = points[index + 1].y - points[index - 1].y

    length = math.hypot(dx, dy)
    if length < EPSILON:
        return FALLBACK_PERPENDICULAR

    return -dy / length, dx / length


def offset_stroke(
    points: list[Point] | tuple[Point, ...], half_thickness: float
) -> tuple[list[Point], list[Point]]:
    """Displace every point along plus and minus its local perpendicular.

    Args:
        points: Stroke centre line
        half_thickness: Offset distance

    Returns:
        Tuple of (left_side, right_side), each the same length as points
    """
    left: list[Point] = []
    right: list[Point] = []

    for i, point in enumerate(points):
        px, py = perpendicular_at(points, i)
        left.append(Point(point.x + px * half_thickness, point.y + py * half_thickness))
        right.append(Point(point.x - px * half_thickness, point.y - py * half_thickness))

    return left, right


def interpolate_point(start: Point, end: Point, t: float) -> Point:
    """Linear interpolation between two points."""
    return Point(start.x + (end.x - start.x) * t, start.y + (end.y - start.y) * t)


def bounding_box(path: OutlinePath) -> BoundingBox:
    """Calculate the bounding box of every coordinate in a path.

    Control points are included, so the box may be slightly larger than the
    rendered shape.

    Args:
        path: Structured path commands

    Returns:
        BoundingBox; EMPTY_BOX for a path without coordinates
    """
    coords = path_coordinates(path)
    if not coords:
        return EMPTY_BOX

    xs = [x for x, _ in coords]
    ys = [y for _, y in coords]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def points_bounding_box(points: list[Point]) -> BoundingBox:
    """Bounding box of a point list; EMPTY_BOX when empty."""
    if not points:
        return EMPTY_BOX
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


class HasPoints(Protocol):
    """Anything with a centre line: skeleton strokes or scaled strokes."""

    @property
    def points(self) -> tuple[Point, ...]: ...


def strokes_bounding_box(strokes: Sequence[HasPoints]) -> BoundingBox:
    """Bounding box of the centre lines of a set of strokes."""
    return points_bounding_box([p for stroke in strokes for p in stroke.points])


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to the closest point of a line segment.

    Projects the point onto the infinite line, then clamps to the segment
    endpoints. Zero-length segments measure to the start point.
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < EPSILON:
        return math.hypot(point.x - seg_start.x, point.y - seg_start.y)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest_x = seg_start.x + t * dx
    nearest_y = seg_start.y + t * dy
    return math.hypot(point.x - nearest_x, point.y - nearest_y)


def distance_to_polyline(point: Point, polyline: list[Point] | tuple[Point, ...]) -> float:
    """Minimum distance from a point to any segment of a polyline.

    Returns math.inf for an empty polyline.
    """
    if not polyline:
        return math.inf
    if len(polyline) == 1:
        return math.hypot(point.x - polyline[0].x, point.y - polyline[0].y)

    return min(
        distance_to_segment(point, polyline[i], polyline[i + 1])
        for i in range(len(polyline) - 1)
    )


def extend_polyline(points: list[Point], amount: float) -> list[Point]:
    """Push both end points of a polyline outward along its end tangents.

    Used to make straight strokes overlap at junctions. Degenerate end
    tangents leave the end point where it is.
    """
    if amount <= 0 or len(points) < 2:
        return list(points)

    def _push(end: Point, neighbour: Point) -> Point:
        dx = end.x - neighbour.x
        dy = end.y - neighbour.y
        length = math.hypot(dx, dy)
        if length < EPSILON:
            return end
        return Point(end.x + dx / length * amount, end.y + dy / length * amount)

    extended = list(points)
    extended[0] = _push(points[0], points[1])
    extended[-1] = _push(points[-1], points[-2])
    return extended


def flatten_path(path: OutlinePath, tolerance: float = 1.0) -> list[list[Point]]:
    """Convert a path into polylines, one per sub-path.

    Curves are flattened by recursive subdivision. A closed sub-path repeats
    its start point at the end so the polyline includes the closing segment.

    Args:
        path: Structured path commands
        tolerance: Maximum distance from the true curve

    Returns:
        List of polylines

    Raises:
        PathCommandError: If the path holds an unknown command
    """
    polylines: list[list[Point]] = []
    current: list[Point] = []
    start: Point | None = None

    for command in path:
        if isinstance(command, MoveTo):
            if len(current) > 1:
                polylines.append(current)
            start = Point(command.x, command.y)
            current = [start]
        elif isinstance(command, LineTo):
            current.append(Point(command.x, command.y))
        elif isinstance(command, QuadTo):
            p0 = current[-1] if current else Point(command.cx, command.cy)
            flattened = _flatten_quadratic(
                [p0, Point(command.cx, command.cy), Point(command.x, command.y)],
                tolerance,
            )
            current.extend(flattened[1:])
        elif isinstance(command, CurveTo):
            p0 = current[-1] if current else Point(command.c1x, command.c1y)
            flattened = _flatten_cubic(
                [
                    p0,
                    Point(command.c1x, command.c1y),
                    Point(command.c2x, command.c2y),
                    Point(command.x, command.y),
                ],
                tolerance,
            )
            current.extend(flattened[1:])
        elif isinstance(command, Close):
            if start is not None and current and current[-1] != start:
                current.append(start)
            if len(current) > 1:
                polylines.append(current)
            current = []
            start = None
        else:
            raise PathCommandError(command)

    if len(current) > 1:
        polylines.append(current)

    return polylines
