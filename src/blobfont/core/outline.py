"""Vector outlining of letter skeletons.

Turns the strokes of a (possibly transformed) skeleton into closed outline
paths in glyph space: font units with x growing right and y growing down
from cap height. Each stroke becomes its own closed sub-path; overlapping
sub-paths merge under the nonzero fill rule once the encoder has normalized
their direction.

Key pieces:
- GlyphSpace: Mapping from normalized skeleton coordinates to font units
- OutlineStrategy: Protocol shared by the vector and raster generators
- VectorRibbonStrategy: Capsules for two-point strokes, ribbons otherwise
"""

import math
from dataclasses import dataclass
from typing import Protocol

from blobfont.config import Parameters
from blobfont.core.geometry import EPSILON, extend_polyline, interpolate_point, offset_stroke
from blobfont.domain import (
    Close,
    CurveTo,
    LetterSkeleton,
    LineTo,
    MoveTo,
    OutlinePath,
    PathCommand,
    Point,
    QuadTo,
    Stroke,
)
from blobfont.domain.metrics import CAP_HEIGHT, UNITS_PER_EM

# Curvature at or above which straight ribbons get quadratic joins
CURVE_JOIN_THRESHOLD = 50.0

# Control point distance for a quarter circle drawn with one cubic
KAPPA = 0.5522847498

# Fraction of the way a join control point moves toward the join end at full curvature
MAX_JOIN_ROUNDING = 0.5


@dataclass(frozen=True)
class ScaledStroke:
    """A stroke centre line in font units with its half width."""

    points: tuple[Point, ...]
    half_width: float
    curved: bool


@dataclass(frozen=True)
class GlyphSpace:
    """Scale from normalized skeleton space to font units.

    Attributes:
        x_scale: Font units per normalized x unit
        y_scale: Font units per normalized y unit (the cap height)
    """

    x_scale: float
    y_scale: float = CAP_HEIGHT

    @classmethod
    def for_skeleton(cls, skeleton: LetterSkeleton, params: Parameters) -> "GlyphSpace":
        return cls(x_scale=UNITS_PER_EM * skeleton.width * params.width / 100)

    def to_font(self, point: Point) -> Point:
        return Point(point.x * self.x_scale, point.y * self.y_scale)

    def scale_stroke(self, stroke: Stroke, params: Parameters) -> ScaledStroke:
        """Map a stroke into font units.

        Local stroke width is thickness * weight, independent of the
        horizontal scale.
        """
        return ScaledStroke(
            points=tuple(self.to_font(p) for p in stroke.points),
            half_width=params.thickness * stroke.weight / 2,
            curved=stroke.is_curved,
        )

    def scale_skeleton(self, skeleton: LetterSkeleton, params: Parameters) -> list[ScaledStroke]:
        return [self.scale_stroke(stroke, params) for stroke in skeleton.strokes]


class OutlineStrategy(Protocol):
    """Converts a skeleton into a closed outline path."""

    def outline(self, skeleton: LetterSkeleton, params: Parameters, codepoint: int = 0) -> OutlinePath:
        """Build the outline.

        Args:
            skeleton: Skeleton in normalized coordinates
            params: Style parameters
            codepoint: Character code mixed into random draws
        """
        ...


def _dedupe(points: tuple[Point, ...] | list[Point]) -> list[Point]:
    # Coincident neighbours make the tangent undefined
    unique: list[Point] = []
    for point in points:
        if not unique or math.hypot(point.x - unique[-1].x, point.y - unique[-1].y) > EPSILON:
            unique.append(point)
    return unique


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def _semicircle(
    center: Point,
    normal: tuple[float, float],
    tangent: tuple[float, float],
    radius: float,
) -> list[PathCommand]:
    """Half circle from center + normal * r through center + tangent * r.

    Ends at center - normal * r. Drawn as two cubic quarter arcs.
    """
    nx, ny = normal
    tx, ty = tangent
    k = radius * KAPPA

    start = Point(center.x + nx * radius, center.y + ny * radius)
    apex = Point(center.x + tx * radius, center.y + ty * radius)
    end = Point(center.x - nx * radius, center.y - ny * radius)

    return [
        CurveTo(
            start.x + tx * k, start.y + ty * k,
            apex.x + nx * k, apex.y + ny * k,
            apex.x, apex.y,
        ),
        CurveTo(
            apex.x - nx * k, apex.y - ny * k,
            end.x + tx * k, end.y + ty * k,
            end.x, end.y,
        ),
    ]


class VectorRibbonStrategy:
    """Outline every stroke as a closed ribbon around its centre line.

    Two-point strokes take a shortcut: a capsule with semicircular caps, or a
    plain rectangle when rounded caps are off. Longer strokes are offset to
    both sides, walked forward along the left side and backward along the
    right side, with caps in between.

    Example:
        strategy = VectorRibbonStrategy()
        path = strategy.outline(get_skeleton("A"), DEFAULT_PARAMETERS)
    """

    def outline(self, skeleton: LetterSkeleton, params: Parameters, codepoint: int = 0) -> OutlinePath:
        space = GlyphSpace.for_skeleton(skeleton, params)
        commands: list[PathCommand] = []

        for stroke in space.scale_skeleton(skeleton, params):
            commands.extend(self.stroke_outline(stroke, params))

        return tuple(commands)

    def stroke_outline(self, stroke: ScaledStroke, params: Parameters) -> list[PathCommand]:
        """Build the closed sub-path of one scaled stroke.

        Returns an empty list for degenerate strokes (all points coincident).
        """
        points = _dedupe(stroke.points)
        if len(points) < 2:
            return []

        if not stroke.curved and params.junction_merge > 0:
            points = extend_polyline(points, params.junction_merge / 100 * stroke.half_width)

        if len(points) == 2:
            return self._capsule(points[0], points[1], stroke.half_width, params.rounded_caps)

        smooth_joins = stroke.curved or params.curvature >= CURVE_JOIN_THRESHOLD
        rounding = params.curvature / 100 * MAX_JOIN_ROUNDING
        return self._ribbon(points, stroke.half_width, params.rounded_caps, smooth_joins, rounding)

    def _capsule(self, start: Point, end: Point, half: float, rounded: bool) -> list[PathCommand]:
        dx = end.x - start.x
        dy = end.y - start.y
        length = math.hypot(dx, dy)
        ux, uy = dx / length, dy / length
        nx, ny = -uy, ux

        commands: list[PathCommand] = [
            MoveTo(start.x + nx * half, start.y + ny * half),
            LineTo(end.x + nx * half, end.y + ny * half),
        ]
        if rounded:
            commands.extend(_semicircle(end, (nx, ny), (ux, uy), half))
        else:
            commands.append(LineTo(end.x - nx * half, end.y - ny * half))

        commands.append(LineTo(start.x - nx * half, start.y - ny * half))
        if rounded:
            commands.extend(_semicircle(start, (-nx, -ny), (-ux, -uy), half))
        commands.append(Close())
        return commands

    def _ribbon(
        self,
        points: list[Point],
        half: float,
        rounded: bool,
        smooth_joins: bool,
        rounding: float = 0.0,
    ) -> list[PathCommand]:
        left, right = offset_stroke(points, half)
        last = len(points) - 1
        commands: list[PathCommand] = [MoveTo(left[0].x, left[0].y)]

        # Left side, forward
        if smooth_joins:
            for i in range(1, last):
                mid = _midpoint(left[i], left[i + 1])
                commands.append(_join(left[i], mid, rounding))
        else:
            commands.extend(LineTo(p.x, p.y) for p in left[1:last])
        commands.append(LineTo(left[last].x, left[last].y))

        # Far cap
        if rounded:
            commands.extend(_semicircle(points[last], *_frame(left[last], points[last], half), half))
        else:
            commands.append(LineTo(right[last].x, right[last].y))

        # Right side, backward
        if smooth_joins:
            for i in range(last - 1, 0, -1):
                mid = _midpoint(right[i], right[i - 1])
                commands.append(_join(right[i], mid, rounding))
        else:
            commands.extend(LineTo(p.x, p.y) for p in reversed(right[1:last]))
        commands.append(LineTo(right[0].x, right[0].y))

        # Near cap
        if rounded:
            commands.extend(_semicircle(points[0], *_frame(right[0], points[0], half), half))

        commands.append(Close())
        return commands


def _frame(side: Point, center: Point, half: float) -> tuple[tuple[float, float], tuple[float, float]]:
    """Normal and outward tangent of a cap starting at side.

    The normal points from the centre to the side point; the tangent is the
    normal rotated a quarter turn so the cap bulges away from the stroke.
    """
    nx = (side.x - center.x) / half
    ny = (side.y - center.y) / half
    return (nx, ny), (ny, -nx)


def _join(vertex: Point, end: Point, rounding: float) -> QuadTo:
    """Quadratic join through a corner, softened by pulling its control point toward end."""
    control = interpolate_point(vertex, end, rounding)
    return QuadTo(control.x, control.y, end.x, end.y)
