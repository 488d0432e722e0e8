"""Grid rasterization of letter skeletons.

Builds glyphs from square cells instead of continuous ribbons:

1. Mark every cell of an N x N grid whose centre lies within half the local
   stroke width of a stroke centre line
2. Thin the filled cells with a density gradient and scatter noise
3. Punch circular cutouts at fixed template positions
4. Emit one closed square (optionally corner-rounded) per remaining cell

Every random decision is drawn from cell_random, which is seeded only by
stable inputs, so the same skeleton and parameters always give the same
cells.
"""

import math
import random
from dataclasses import dataclass

import structlog

from blobfont.config import DensityMode, Parameters
from blobfont.core.geometry import BoundingBox, distance_to_polyline, points_bounding_box, strokes_bounding_box
from blobfont.core.outline import GlyphSpace, ScaledStroke
from blobfont.domain import (
    Close,
    LetterSkeleton,
    LineTo,
    MoveTo,
    OutlinePath,
    PathCommand,
    Point,
    QuadTo,
)
from blobfont.domain.metrics import CAP_HEIGHT

logger = structlog.get_logger(__name__)

# Cutout centres as fractions of the glyph box; the first cutout_count are used
CUTOUT_TEMPLATE: tuple[tuple[float, float], ...] = (
    (0.5, 0.3),
    (0.5, 0.7),
    (0.3, 0.5),
    (0.7, 0.5),
    (0.5, 0.5),
)

DENSITY_SALT = "density"
SCATTER_SALT = "scatter"


def cell_random(codepoint: int, index: int, salt: str, seed: int) -> float:
    """Deterministic pseudo-random number in [0, 1) for one cell decision.

    Args:
        codepoint: Character code of the glyph
        index: Cell index (row * N + column)
        salt: Purpose of the draw, keeps different decisions independent
        seed: User-controlled noise seed

    Returns:
        The same value for the same inputs in every run
    """
    return random.Random(f"{codepoint}:{index}:{salt}:{seed}").random()


@dataclass(frozen=True)
class Cell:
    """A grid cell in font units."""

    row: int
    col: int
    x: float
    y: float
    size: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.size / 2, self.y + self.size / 2)


class GridRasterStrategy:
    """Outline a skeleton as a field of filled grid cells.

    The grid covers the stroked skeleton: the centre-line box of the scaled
    strokes padded by the largest half width. It spans max(width, height) of
    that box on both axes, anchored at its top-left corner, so strokes on
    every side of the glyph keep their full width. Density and cutouts are
    placed relative to the glyph box (advance by cap height).

    Example:
        strategy = GridRasterStrategy()
        path = strategy.outline(get_skeleton("O"), params, codepoint=ord("O"))
    """

    def outline(self, skeleton: LetterSkeleton, params: Parameters, codepoint: int = 0) -> OutlinePath:
        space = GlyphSpace.for_skeleton(skeleton, params)
        strokes = space.scale_skeleton(skeleton, params)
        if not strokes:
            return ()

        box_w = space.x_scale
        box_h = float(CAP_HEIGHT)
        resolution = params.grid_resolution
        grid_box = strokes_bounding_box(strokes).expanded(max(s.half_width for s in strokes))

        filled = self.fill_cells(strokes, resolution, grid_box)
        before = len(filled)

        filled = [
            cell for cell, nearest in filled
            if self._survives(cell, nearest, resolution, box_w, box_h, params, codepoint)
        ]

        logger.debug(
            "Rasterized skeleton",
            codepoint=codepoint,
            resolution=resolution,
            filled=before,
            kept=len(filled),
        )

        commands: list[PathCommand] = []
        for cell in filled:
            commands.extend(cell_square(cell, params.cell_gap, params.cell_roundness))
        return tuple(commands)

    def fill_cells(
        self,
        strokes: list[ScaledStroke],
        resolution: int,
        grid_box: BoundingBox,
    ) -> list[tuple[Cell, float]]:
        """Find the cells covered by at least one stroke.

        Args:
            strokes: Scaled strokes
            resolution: Cells per side
            grid_box: Area to rasterize; cells are square, sized from its
                longer side and laid out from its top-left corner

        Returns:
            (cell, normalized distance) pairs in row-major order, where the
            distance is measured to the closest covering stroke as a
            fraction of its half width (0 on the centre line, 1 at the edge)
        """
        # Per-stroke boxes padded by the half width skip most distance checks
        reach: list[tuple[ScaledStroke, BoundingBox]] = [
            (stroke, points_bounding_box(list(stroke.points)).expanded(stroke.half_width))
            for stroke in strokes
        ]

        cell_size = max(grid_box.width, grid_box.height) / resolution

        filled: list[tuple[Cell, float]] = []
        for row in range(resolution):
            for col in range(resolution):
                x = grid_box.min_x + col * cell_size
                y = grid_box.min_y + row * cell_size
                cell = Cell(row, col, x, y, cell_size)
                center = cell.center

                nearest = math.inf
                for stroke, box in reach:
                    if not box.contains(center.x, center.y):
                        continue
                    distance = distance_to_polyline(center, stroke.points)
                    if distance <= stroke.half_width:
                        nearest = min(nearest, distance / stroke.half_width)

                if nearest <= 1.0:
                    filled.append((cell, nearest))

        return filled

    def _survives(
        self,
        cell: Cell,
        edge_distance: float,
        resolution: int,
        box_w: float,
        box_h: float,
        params: Parameters,
        codepoint: int,
    ) -> bool:
        index = cell.row * resolution + cell.col
        center = cell.center

        if params.density_mode != DensityMode.NONE and params.density_strength > 0:
            if params.density_mode == DensityMode.CENTER:
                half_diagonal = math.hypot(box_w, box_h) / 2
                d = math.hypot(center.x - box_w / 2, center.y - box_h / 2) / half_diagonal
            else:
                d = edge_distance
            retention = 1 - params.density_strength / 100 * min(1.0, d)
            if cell_random(codepoint, index, DENSITY_SALT, params.noise_seed) >= retention:
                return False

        if params.scatter_noise > 0:
            if cell_random(codepoint, index, SCATTER_SALT, params.noise_seed) < params.scatter_noise / 100:
                return False

        if params.cutout_count > 0:
            radius = params.cutout_radius / 100 * min(box_w, box_h)
            for fx, fy in CUTOUT_TEMPLATE[: params.cutout_count]:
                if math.hypot(center.x - fx * box_w, center.y - fy * box_h) <= radius:
                    return False

        return True


def cell_square(cell: Cell, gap: float, roundness: float) -> list[PathCommand]:
    """Closed square for one filled cell.

    Args:
        cell: The cell
        gap: Total inset as a percentage of the cell size
        roundness: Corner radius as a percentage of half the square side

    Returns:
        Commands for one closed sub-path
    """
    inset = cell.size * gap / 100 / 2
    x0 = cell.x + inset
    y0 = cell.y + inset
    x1 = cell.x + cell.size - inset
    y1 = cell.y + cell.size - inset
    r = (x1 - x0) / 2 * roundness / 100

    if r <= 0:
        return [MoveTo(x0, y0), LineTo(x1, y0), LineTo(x1, y1), LineTo(x0, y1), Close()]

    return [
        MoveTo(x0 + r, y0),
        LineTo(x1 - r, y0),
        QuadTo(x1, y0, x1, y0 + r),
        LineTo(x1, y1 - r),
        QuadTo(x1, y1, x1 - r, y1),
        LineTo(x0 + r, y1),
        QuadTo(x0, y1, x0, y1 - r),
        LineTo(x0, y0 + r),
        QuadTo(x0, y0, x0 + r, y0),
        Close(),
    ]
