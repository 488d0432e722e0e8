"""Tests for grid rasterization."""

import math

import pytest

from blobfont.config import DensityMode, OutlineStrategyKind, Parameters
from blobfont.core.geometry import BoundingBox, bounding_box, strokes_bounding_box
from blobfont.core.outline import GlyphSpace
from blobfont.core.raster import Cell, GridRasterStrategy, cell_random, cell_square
from blobfont.core.skeletons import get_skeleton
from blobfont.domain import Close, MoveTo, QuadTo, is_closed

GRID = Parameters(outline_strategy=OutlineStrategyKind.GRID, decoration="none")


@pytest.fixture
def strategy() -> GridRasterStrategy:
    return GridRasterStrategy()


def _cells(path) -> list[MoveTo]:
    return [c for c in path if isinstance(c, MoveTo)]


def _grid_box(character: str, params: Parameters = GRID) -> BoundingBox:
    skeleton = get_skeleton(character)
    strokes = GlyphSpace.for_skeleton(skeleton, params).scale_skeleton(skeleton, params)
    return strokes_bounding_box(strokes).expanded(max(s.half_width for s in strokes))


def _cell_size(character: str, params: Parameters = GRID) -> float:
    box = _grid_box(character, params)
    return max(box.width, box.height) / params.grid_resolution


class TestCellRandom:
    """Tests for the seeded random source."""

    def test_deterministic(self) -> None:
        """Test that the same inputs give the same value."""
        assert cell_random(65, 10, "scatter", 0) == cell_random(65, 10, "scatter", 0)

    def test_range(self) -> None:
        """Test that values fall in [0, 1)."""
        for index in range(100):
            assert 0.0 <= cell_random(79, index, "density", 3) < 1.0

    def test_inputs_change_value(self) -> None:
        """Test that salt, seed and codepoint all feed the draw."""
        base = cell_random(65, 10, "scatter", 0)
        assert cell_random(65, 10, "density", 0) != base
        assert cell_random(65, 10, "scatter", 1) != base
        assert cell_random(66, 10, "scatter", 0) != base


class TestCellSquare:
    """Tests for per-cell squares."""

    def test_plain_square(self) -> None:
        """Test a square without gap or rounding."""
        commands = cell_square(Cell(0, 0, 10, 20, 5), gap=0, roundness=0)

        assert commands[0] == MoveTo(10, 20)
        assert len(commands) == 5
        assert isinstance(commands[-1], Close)

    def test_gap_insets(self) -> None:
        """Test that the gap shrinks the square symmetrically."""
        commands = cell_square(Cell(0, 0, 0, 0, 10), gap=20, roundness=0)
        box = bounding_box(tuple(commands))

        assert box.min_x == pytest.approx(1)
        assert box.max_x == pytest.approx(9)

    def test_rounded_corners(self) -> None:
        """Test that roundness draws quadratic corners."""
        commands = cell_square(Cell(0, 0, 0, 0, 10), gap=0, roundness=50)

        assert len(commands) == 10
        assert sum(isinstance(c, QuadTo) for c in commands) == 4


class TestGridRasterStrategy:
    """Tests for GridRasterStrategy."""

    def test_produces_closed_cells(self, strategy: GridRasterStrategy) -> None:
        """Test that a letter rasterizes into closed squares."""
        path = strategy.outline(get_skeleton("I"), GRID, ord("I"))

        assert path
        assert is_closed(path)
        assert len(path) % 5 == 0

    def test_blank_skeleton(self, strategy: GridRasterStrategy) -> None:
        """Test that space has no cells."""
        assert strategy.outline(get_skeleton(" "), GRID, 32) == ()

    def test_deterministic(self, strategy: GridRasterStrategy) -> None:
        """Test that noisy rasterization is repeatable."""
        params = GRID.model_copy(update={"scatter_noise": 40, "density_mode": DensityMode.CENTER, "density_strength": 60})
        first = strategy.outline(get_skeleton("R"), params, ord("R"))
        second = strategy.outline(get_skeleton("R"), params, ord("R"))
        assert first == second

    def test_cells_stay_near_strokes(self, strategy: GridRasterStrategy) -> None:
        """Test that every cell lies within one cell of the padded stroke box."""
        limit = _grid_box("A").expanded(_cell_size("A"))

        path = strategy.outline(get_skeleton("A"), GRID, ord("A"))
        box = bounding_box(path)

        assert limit.contains(box.min_x, box.min_y)
        assert limit.contains(box.max_x, box.max_y)

    def test_filled_cells_cover_centre_line(self, strategy: GridRasterStrategy) -> None:
        """Test that every reported distance is within the stroke."""
        skeleton = get_skeleton("O")
        space = GlyphSpace.for_skeleton(skeleton, GRID)
        filled = strategy.fill_cells(space.scale_skeleton(skeleton, GRID), 32, _grid_box("O"))

        assert filled
        assert all(0.0 <= distance <= 1.0 for _, distance in filled)

    def test_full_scatter_removes_everything(self, strategy: GridRasterStrategy) -> None:
        """Test that 100% scatter noise removes every cell."""
        params = GRID.model_copy(update={"scatter_noise": 100})
        assert strategy.outline(get_skeleton("H"), params, ord("H")) == ()

    def test_scatter_thins_cells(self, strategy: GridRasterStrategy) -> None:
        """Test that partial scatter removes some cells."""
        clean = _cells(strategy.outline(get_skeleton("H"), GRID, ord("H")))
        noisy = _cells(strategy.outline(get_skeleton("H"), GRID.model_copy(update={"scatter_noise": 50}), ord("H")))
        assert 0 < len(noisy) < len(clean)

    def test_seed_changes_pattern(self, strategy: GridRasterStrategy) -> None:
        """Test that the noise seed changes which cells survive."""
        first = strategy.outline(get_skeleton("H"), GRID.model_copy(update={"scatter_noise": 50}), ord("H"))
        second = strategy.outline(
            get_skeleton("H"), GRID.model_copy(update={"scatter_noise": 50, "noise_seed": 7}), ord("H")
        )
        assert first != second

    def test_density_gradient_thins_cells(self, strategy: GridRasterStrategy) -> None:
        """Test that a full edge gradient removes cells."""
        params = GRID.model_copy(update={"density_mode": DensityMode.EDGE, "density_strength": 100})
        clean = _cells(strategy.outline(get_skeleton("O"), GRID, ord("O")))
        thinned = _cells(strategy.outline(get_skeleton("O"), params, ord("O")))
        assert len(thinned) < len(clean)

    def test_cutouts_clear_cells(self, strategy: GridRasterStrategy) -> None:
        """Test that no cell centre lies inside the central cutout."""
        params = GRID.model_copy(update={"cutout_count": 5, "cutout_radius": 10})
        clean = _cells(strategy.outline(get_skeleton("H"), GRID, ord("H")))
        cut = _cells(strategy.outline(get_skeleton("H"), params, ord("H")))

        assert len(cut) < len(clean)

        cell_size = _cell_size("H")
        radius = 0.1 * 700
        for corner in cut:
            cx = corner.x + cell_size / 2
            cy = corner.y + cell_size / 2
            assert math.hypot(cx - 500, cy - 350) > radius

    def test_resolution_changes_cell_count(self, strategy: GridRasterStrategy) -> None:
        """Test that a finer grid uses more cells."""
        coarse = _cells(strategy.outline(get_skeleton("T"), GRID.model_copy(update={"grid_resolution": 8}), ord("T")))
        fine = _cells(strategy.outline(get_skeleton("T"), GRID.model_copy(update={"grid_resolution": 64}), ord("T")))
        assert len(fine) > len(coarse)

    def test_grid_starts_at_stroke_box(self, strategy: GridRasterStrategy) -> None:
        """Test that the first cell sits at the top-left of the stroked skeleton."""
        box = _grid_box("E")
        skeleton = get_skeleton("E")
        strokes = GlyphSpace.for_skeleton(skeleton, GRID).scale_skeleton(skeleton, GRID)
        cells = [cell for cell, _ in strategy.fill_cells(strokes, GRID.grid_resolution, box)]

        assert min(cell.y for cell in cells) == pytest.approx(box.min_y)
        assert min(cell.x for cell in cells) == pytest.approx(box.min_x)

    def test_top_and_bottom_bars_match(self, strategy: GridRasterStrategy) -> None:
        """Test that bars at cap height and baseline fill the same number of rows."""
        path = strategy.outline(get_skeleton("E"), GRID, ord("E"))
        # Cells right of the stem belong to the horizontal bars
        bars = [cell for cell in _cells(path) if cell.x > 300]
        top_rows = {round(cell.y, 6) for cell in bars if cell.y < 200}
        bottom_rows = {round(cell.y, 6) for cell in bars if cell.y > 500}

        assert top_rows
        assert len(top_rows) == len(bottom_rows)
