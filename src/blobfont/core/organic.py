"""Organic transform stage.

Reshapes skeleton strokes before outlining:
- Symmetry blending with the mirrored skeleton
- Overshoot of curved strokes past cap height and baseline
- Catmull-Rom smoothing of curve and blob strokes
- Sinusoidal undulation of straight strokes ("flow")

Symmetry runs first because it works on the raw skeleton coordinates; the
per-stroke transforms then operate on its result. Every function returns new
values and leaves its input untouched.
"""

import math

from blobfont.config import Parameters
from blobfont.core.geometry import EPSILON, interpolate_point
from blobfont.domain import LetterSkeleton, Point, Stroke, StrokeType

# Tension is clamped away from zero; the spline tangents collapse otherwise.
MIN_TENSION = 0.05

# Points generated per spline segment
SPLINE_SEGMENTS = 8

# Waypoints per unit of flow strength
FLOW_WAVES = 3

# Amplitude of the undulation at full flow, in normalized units
FLOW_AMPLITUDE = 0.1


def catmull_rom(p0: Point, p1: Point, p2: Point, p3: Point, t: float, tension: float) -> Point:
    """Evaluate a cardinal (Catmull-Rom) spline segment between p1 and p2.

    Args:
        p0: Point before the segment
        p1: Segment start
        p2: Segment end
        p3: Point after the segment
        t: Parameter in [0, 1]
        tension: Tangent scale; 0.5 gives the classic Catmull-Rom curve

    Returns:
        Point on the curve
    """
    t2 = t * t
    t3 = t2 * t

    v0x = (p2.x - p0.x) * tension
    v0y = (p2.y - p0.y) * tension
    v1x = (p3.x - p1.x) * tension
    v1y = (p3.y - p1.y) * tension

    x = (
        (2 * p1.x - 2 * p2.x + v0x + v1x) * t3
        + (-3 * p1.x + 3 * p2.x - 2 * v0x - v1x) * t2
        + v0x * t
        + p1.x
    )
    y = (
        (2 * p1.y - 2 * p2.y + v0y + v1y) * t3
        + (-3 * p1.y + 3 * p2.y - 2 * v0y - v1y) * t2
        + v0y * t
        + p1.y
    )
    return Point(x, y)


def clamp_tension(tension: float) -> float:
    return max(MIN_TENSION, min(1.0, tension))


def smooth_curve(
    stroke: Stroke,
    tension: float,
    amount: float = 1.0,
    segments: int = SPLINE_SEGMENTS,
) -> Stroke:
    """Resample a stroke along a spline through its control points.

    Strokes with fewer than three points have nothing to smooth and are
    returned unchanged.

    Args:
        stroke: A curve or blob stroke
        tension: Spline tension, clamped to [MIN_TENSION, 1]
        amount: Blend between the straight polyline (0) and the spline (1)
        segments: Points generated per control-point span

    Returns:
        New stroke with (len(points) - 1) * segments + 1 points
    """
    points = stroke.points
    if len(points) < 3:
        return stroke

    tension = clamp_tension(tension)
    last = len(points) - 1
    smoothed: list[Point] = []

    for i in range(last):
        p0 = points[max(0, i - 1)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(last, i + 2)]

        for step in range(segments):
            t = step / segments
            on_spline = catmull_rom(p0, p1, p2, p3, t, tension)
            on_line = interpolate_point(p1, p2, t)
            smoothed.append(interpolate_point(on_line, on_spline, amount))

    smoothed.append(points[last])
    return stroke.with_points(smoothed)


def straight_to_organic(stroke: Stroke, flow_strength: float, branch_thickness: float = 1.0) -> Stroke:
    """Turn a straight stroke into a gently undulating curve.

    The line from the first to the last point is resampled into
    max(1, floor(flow * FLOW_WAVES)) inner waypoints, each pushed along the
    line's perpendicular by flow * FLOW_AMPLITUDE * sin(pi * t).

    Args:
        stroke: A straight stroke
        flow_strength: Flow in [0, 1]
        branch_thickness: Weight multiplier for the resulting curve

    Returns:
        New stroke of type CURVE; the input stroke if the line is degenerate
    """
    start = stroke.points[0]
    end = stroke.points[-1]

    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length < EPSILON:
        return stroke

    perp_x = -dy / length
    perp_y = dx / length

    waves = max(1, math.floor(flow_strength * FLOW_WAVES))
    control_points = [start]

    for i in range(1, waves + 1):
        t = i / (waves + 1)
        base = interpolate_point(start, end, t)
        amplitude = flow_strength * FLOW_AMPLITUDE * math.sin(t * math.pi)
        control_points.append(Point(base.x + perp_x * amplitude, base.y + perp_y * amplitude))

    control_points.append(end)

    return Stroke(
        type=StrokeType.CURVE,
        points=tuple(control_points),
        weight=stroke.weight * branch_thickness,
    )


def apply_symmetry(skeleton: LetterSkeleton, strength: float) -> LetterSkeleton:
    """Blend every stroke with its mirror image across x = 0.5.

    Args:
        skeleton: Raw skeleton
        strength: 0 leaves the skeleton untouched, 1 mirrors it fully

    Returns:
        Blended skeleton
    """
    if strength <= 0:
        return skeleton

    strength = min(1.0, strength)
    blended = []
    for stroke in skeleton.strokes:
        points = [
            Point(p.x * (1 - strength) + (1 - p.x) * strength, p.y)
            for p in stroke.points
        ]
        blended.append(stroke.with_points(points))

    return skeleton.with_strokes(blended)


def apply_overshoot(skeleton: LetterSkeleton, overshoot: float, cap_height: float) -> LetterSkeleton:
    """Stretch curved strokes so round shapes overshoot the flat ones.

    Curved strokes are scaled vertically about the middle of the cap height
    so that points at y = 0 and y = 1 land overshoot font units beyond cap
    height and baseline. Straight strokes are left alone.

    Args:
        skeleton: Skeleton in normalized coordinates
        overshoot: Overshoot in font units
        cap_height: Cap height in font units
    """
    if overshoot <= 0:
        return skeleton

    scale = 1 + 2 * overshoot / cap_height
    strokes = []
    for stroke in skeleton.strokes:
        if stroke.is_curved:
            stroke = stroke.with_points([Point(p.x, 0.5 + (p.y - 0.5) * scale) for p in stroke.points])
        strokes.append(stroke)

    return skeleton.with_strokes(strokes)


def apply_organic_flow(skeleton: LetterSkeleton, params: Parameters) -> LetterSkeleton:
    """Apply the per-stroke smoothing and flow transforms."""
    smoothness = params.smoothness / 100
    flow = params.flow_strength / 100

    strokes = []
    for stroke in skeleton.strokes:
        if stroke.is_curved:
            if smoothness > 0:
                stroke = smooth_curve(stroke, params.curve_tension, smoothness)
        elif flow > 0:
            stroke = straight_to_organic(stroke, flow, params.branch_thickness)
        strokes.append(stroke)

    return skeleton.with_strokes(strokes)


def transform_skeleton(skeleton: LetterSkeleton, params: Parameters, cap_height: float) -> LetterSkeleton:
    """Run the whole organic transform stage.

    Identity when smoothness, flow, symmetry and overshoot are all zero.

    Args:
        skeleton: Raw skeleton from the library
        params: Style parameters
        cap_height: Cap height in font units, used by overshoot

    Returns:
        Transformed skeleton
    """
    transformed = apply_symmetry(skeleton, params.symmetry_strength / 100)
    transformed = apply_overshoot(transformed, params.overshoot, cap_height)
    return apply_organic_flow(transformed, params)
