"""Decoration overlays drawn on top of a glyph outline.

Decorations are additive: they are returned as a separate path and never
replace the outline. Two kinds exist besides NONE:
- GRID: Horizontal and vertical line bands over the outline's bounding box
- EDGE_PIXELS: Square tiles placed at a fixed arc length along the outline
"""

import math

from blobfont.config import DecorationKind, Parameters
from blobfont.core.geometry import BoundingBox, bounding_box, flatten_path
from blobfont.domain import EMPTY_PATH, Close, LineTo, MoveTo, OutlinePath, PathCommand, Point

# Font units per grid unit for grid_spacing and grid_line_width
GRID_UNIT_SCALE = 4.0

# Flattening tolerance when walking the outline, in font units
EDGE_FLATTEN_TOLERANCE = 1.0


def _rectangle(x0: float, y0: float, x1: float, y1: float) -> list[PathCommand]:
    return [MoveTo(x0, y0), LineTo(x1, y0), LineTo(x1, y1), LineTo(x0, y1), Close()]


def grid_lines(box: BoundingBox, spacing: float, line_width: float) -> OutlinePath:
    """Grid line bands covering a bounding box.

    Lines sit half a spacing in from the box edge and repeat every spacing
    units, like a tiled pattern with one line through the middle of each
    tile.

    Args:
        box: Area to cover
        spacing: Distance between line centres in font units
        line_width: Band thickness in font units

    Returns:
        One closed rectangle per line; empty for an empty box
    """
    if box.is_empty() or spacing <= 0:
        return EMPTY_PATH

    half = line_width / 2
    commands: list[PathCommand] = []

    x = box.min_x + spacing / 2
    while x <= box.max_x:
        commands.extend(_rectangle(x - half, box.min_y, x + half, box.max_y))
        x += spacing

    y = box.min_y + spacing / 2
    while y <= box.max_y:
        commands.extend(_rectangle(box.min_x, y - half, box.max_x, y + half))
        y += spacing

    return tuple(commands)


def edge_pixels(outline: OutlinePath, spacing: float, size: float) -> OutlinePath:
    """Square tiles sampled along the outline.

    Each contour is flattened and walked from its start; a tile is centred on
    the start point and then every time the arc length since the previous
    tile reaches spacing.

    Args:
        outline: Glyph outline
        spacing: Arc length between tiles in font units
        size: Tile side length in font units

    Returns:
        One closed square per tile
    """
    half = size / 2
    tiles: list[Point] = []

    for polyline in flatten_path(outline, EDGE_FLATTEN_TOLERANCE):
        tiles.append(polyline[0])
        travelled = 0.0

        for start, end in zip(polyline, polyline[1:]):
            segment = math.hypot(end.x - start.x, end.y - start.y)
            offset = spacing - travelled

            while offset <= segment:
                t = offset / segment
                tiles.append(Point(start.x + (end.x - start.x) * t, start.y + (end.y - start.y) * t))
                offset += spacing

            travelled = segment - (offset - spacing)

    commands: list[PathCommand] = []
    for tile in tiles:
        commands.extend(_rectangle(tile.x - half, tile.y - half, tile.x + half, tile.y + half))
    return tuple(commands)


def build_decoration(outline: OutlinePath, params: Parameters) -> OutlinePath:
    """Build the decoration overlay selected by the parameters.

    Args:
        outline: Glyph outline in glyph space
        params: Style parameters

    Returns:
        Decoration path; empty for DecorationKind.NONE or an empty outline
    """
    if not outline or params.decoration == DecorationKind.NONE:
        return EMPTY_PATH

    if params.decoration == DecorationKind.GRID:
        return grid_lines(
            bounding_box(outline),
            params.grid_spacing * GRID_UNIT_SCALE,
            params.grid_line_width * GRID_UNIT_SCALE,
        )

    return edge_pixels(outline, params.edge_pixel_spacing, params.edge_pixel_size)
