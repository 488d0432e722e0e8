"""Stroke-based letter skeleton types.

This module defines the geometric vocabulary letter skeletons are built from:
- Point: A 2D coordinate
- StrokeType: Enum selecting how a stroke is outlined
- Stroke: One line or curve of a skeleton
- LetterSkeleton: All strokes of one character plus its relative width

Skeleton coordinates are normalized: x runs 0-1 left to right and y runs 0-1
from cap height (0) down to the baseline (1).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class StrokeType(str, Enum):
    """Stroke type.

    Straight types (vertical, horizontal, diagonal) are outlined as
    rectangles or capsules. Curved types (curve, blob) are smoothed and
    outlined as ribbons.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"
    CURVE = "curve"
    BLOB = "blob"

    @property
    def is_curved(self) -> bool:
        """Whether strokes of this type are smoothed as splines."""
        return self in (StrokeType.CURVE, StrokeType.BLOB)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate (grows downward)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True)
class Stroke:
    """One stroke of a letter skeleton.

    Attributes:
        type: Stroke type, selects the outlining algorithm
        points: Ordered control points (at least two)
        weight: Thickness relative to the global thickness parameter
    """

    type: StrokeType
    points: tuple[Point, ...]
    weight: float = 1.0

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise ValueError(f"Stroke needs at least 2 points, got {len(self.points)}")
        if self.weight <= 0:
            raise ValueError(f"Stroke weight must be positive, got {self.weight}")

    @property
    def is_curved(self) -> bool:
        return self.type.is_curved

    def with_points(self, points: list[Point] | tuple[Point, ...]) -> "Stroke":
        """Return a copy of this stroke with different points."""
        return replace(self, points=tuple(points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "type": self.type.value,
            "points": [[p.x, p.y] for p in self.points],
            "weight": self.weight,
        }


@dataclass(frozen=True)
class LetterSkeleton:
    """Abstract stroke description of a letterform.

    Attributes:
        strokes: Ordered strokes; empty for blank characters such as space
        width: Nominal relative advance (1.0 = one em)
    """

    strokes: tuple[Stroke, ...]
    width: float

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Skeleton width must be positive, got {self.width}")

    def is_blank(self) -> bool:
        """Check if the skeleton draws nothing."""
        return len(self.strokes) == 0

    def with_strokes(self, strokes: list[Stroke] | tuple[Stroke, ...]) -> "LetterSkeleton":
        """Return a copy of this skeleton with different strokes."""
        return replace(self, strokes=tuple(strokes))
