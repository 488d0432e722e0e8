"""Structured outline path commands.

Outlines are threaded through the pipeline as tuples of command objects and
only turned into SVG path text at the preview boundary:
- MoveTo: Start a new sub-path
- LineTo: Straight segment
- QuadTo: Quadratic Bezier segment
- CurveTo: Cubic Bezier segment
- Close: Close the current sub-path
"""

from dataclasses import dataclass
from typing import Union

from blobfont.exceptions import PathCommandError


@dataclass(frozen=True, slots=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class QuadTo:
    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CurveTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Close:
    pass


PathCommand = Union[MoveTo, LineTo, QuadTo, CurveTo, Close]
OutlinePath = tuple[PathCommand, ...]

EMPTY_PATH: OutlinePath = ()


def command_coordinates(command: PathCommand) -> list[tuple[float, float]]:
    """Return every (x, y) pair a command carries, control points included.

    Raises:
        PathCommandError: If the command type is unknown
    """
    if isinstance(command, (MoveTo, LineTo)):
        return [(command.x, command.y)]
    if isinstance(command, QuadTo):
        return [(command.cx, command.cy), (command.x, command.y)]
    if isinstance(command, CurveTo):
        return [
            (command.c1x, command.c1y),
            (command.c2x, command.c2y),
            (command.x, command.y),
        ]
    if isinstance(command, Close):
        return []
    raise PathCommandError(command)


def path_coordinates(path: OutlinePath) -> list[tuple[float, float]]:
    """Flatten a path into all of its coordinates."""
    coords: list[tuple[float, float]] = []
    for command in path:
        coords.extend(command_coordinates(command))
    return coords


def split_contours(path: OutlinePath) -> list[OutlinePath]:
    """Split a path into its sub-paths.

    Each sub-path starts at a MoveTo. A trailing sub-path without Close is
    returned as-is so callers can detect open contours.
    """
    contours: list[OutlinePath] = []
    current: list[PathCommand] = []

    for command in path:
        if isinstance(command, MoveTo) and current:
            contours.append(tuple(current))
            current = []
        current.append(command)
        if isinstance(command, Close):
            contours.append(tuple(current))
            current = []

    if current:
        contours.append(tuple(current))

    return contours


def is_closed(path: OutlinePath) -> bool:
    """Check that every sub-path ends with an explicit Close."""
    return all(isinstance(contour[-1], Close) for contour in split_contours(path))


def translate_path(path: OutlinePath, dx: float, dy: float) -> OutlinePath:
    """Return the path shifted by (dx, dy)."""
    moved: list[PathCommand] = []
    for command in path:
        if isinstance(command, MoveTo):
            moved.append(MoveTo(command.x + dx, command.y + dy))
        elif isinstance(command, LineTo):
            moved.append(LineTo(command.x + dx, command.y + dy))
        elif isinstance(command, QuadTo):
            moved.append(QuadTo(command.cx + dx, command.cy + dy, command.x + dx, command.y + dy))
        elif isinstance(command, CurveTo):
            moved.append(
                CurveTo(
                    command.c1x + dx,
                    command.c1y + dy,
                    command.c2x + dx,
                    command.c2y + dy,
                    command.x + dx,
                    command.y + dy,
                )
            )
        elif isinstance(command, Close):
            moved.append(command)
        else:
            raise PathCommandError(command)
    return tuple(moved)


def _fmt(value: float) -> str:
    # Two decimals are plenty in a 1000-unit em; strip trailing zeros.
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def path_to_svg(path: OutlinePath) -> str:
    """Serialize a path to SVG path data.

    Args:
        path: Structured path commands

    Returns:
        SVG "d" attribute text, e.g. "M 0 0 L 10 0 Z"

    Raises:
        PathCommandError: If the path holds an unknown command
    """
    parts: list[str] = []
    for command in path:
        if isinstance(command, MoveTo):
            parts.append(f"M {_fmt(command.x)} {_fmt(command.y)}")
        elif isinstance(command, LineTo):
            parts.append(f"L {_fmt(command.x)} {_fmt(command.y)}")
        elif isinstance(command, QuadTo):
            parts.append(
                f"Q {_fmt(command.cx)} {_fmt(command.cy)} {_fmt(command.x)} {_fmt(command.y)}"
            )
        elif isinstance(command, CurveTo):
            parts.append(
                f"C {_fmt(command.c1x)} {_fmt(command.c1y)} "
                f"{_fmt(command.c2x)} {_fmt(command.c2y)} "
                f"{_fmt(command.x)} {_fmt(command.y)}"
            )
        elif isinstance(command, Close):
            parts.append("Z")
        else:
            raise PathCommandError(command)
    return " ".join(parts)
