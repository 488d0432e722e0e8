"""Tests for glyph assembly."""

import pytest

from blobfont.config import DEFAULT_PARAMETERS, DecorationKind, OutlineStrategyKind, Parameters
from blobfont.core.assembler import (
    compute_advance_width,
    generate_all_glyphs,
    generate_character_glyph,
    get_outline_strategy,
)
from blobfont.core.outline import VectorRibbonStrategy
from blobfont.core.raster import GridRasterStrategy
from blobfont.core.skeletons import UPPERCASE, get_skeleton
from blobfont.domain import LetterSkeleton, is_closed


class TestOutlineStrategySelection:
    """Tests for get_outline_strategy."""

    def test_vector(self) -> None:
        """Test that VECTOR selects ribbon outlining."""
        assert isinstance(get_outline_strategy(OutlineStrategyKind.VECTOR), VectorRibbonStrategy)

    def test_grid(self) -> None:
        """Test that GRID selects rasterization."""
        assert isinstance(get_outline_strategy(OutlineStrategyKind.GRID), GridRasterStrategy)


class TestAdvanceWidth:
    """Tests for compute_advance_width."""

    def test_default_width(self) -> None:
        """Test that A is one em wide with default parameters."""
        assert compute_advance_width(get_skeleton("A")) == 1000

    def test_width_and_tracking(self) -> None:
        """Test width percentage and tracking."""
        params = Parameters(width=80, tracking=50)
        assert compute_advance_width(get_skeleton("I"), params) == round(0.6 * 1000 * 0.8 + 50)

    def test_never_negative(self) -> None:
        """Test that negative tracking cannot produce a negative advance."""
        skeleton = LetterSkeleton(strokes=(), width=0.05)
        assert compute_advance_width(skeleton, Parameters(width=60, tracking=-100)) == 0

    def test_monospace(self) -> None:
        """Test that monospace overrides the proportional width."""
        params = Parameters(monospace=True, monospace_width=700)
        assert compute_advance_width(get_skeleton("W"), params) == 700
        assert compute_advance_width(get_skeleton("I"), params) == 700

    def test_monotonic_in_width(self) -> None:
        """Test that raising the width never narrows a glyph."""
        for character in UPPERCASE:
            skeleton = get_skeleton(character)
            widths = [compute_advance_width(skeleton, Parameters(width=w)) for w in range(60, 141, 10)]
            assert widths == sorted(widths), character


class TestGenerateCharacterGlyph:
    """Tests for generate_character_glyph."""

    def test_generates_letter(self) -> None:
        """Test the glyph of a supported letter."""
        glyph = generate_character_glyph("A")

        assert glyph is not None
        assert glyph.character == "A"
        assert glyph.codepoint == 65
        assert glyph.advance_width == 1000
        assert glyph.outline_path
        assert is_closed(glyph.outline_path)

    def test_lowercase_maps_to_uppercase(self) -> None:
        """Test that lowercase input produces the uppercase glyph."""
        glyph = generate_character_glyph("a")
        assert glyph is not None
        assert glyph.character == "A"
        assert glyph == generate_character_glyph("A")

    def test_unsupported_returns_none(self) -> None:
        """Test that unsupported characters are skipped."""
        assert generate_character_glyph("!") is None

    def test_space(self) -> None:
        """Test that space has an advance but no outline or decoration."""
        glyph = generate_character_glyph(" ")

        assert glyph is not None
        assert glyph.is_empty()
        assert glyph.decoration_path == ()
        assert glyph.advance_width == 400

    @pytest.mark.parametrize("strategy", list(OutlineStrategyKind))
    def test_deterministic(self, strategy: OutlineStrategyKind) -> None:
        """Test that repeated calls give identical glyphs."""
        params = Parameters(outline_strategy=strategy, scatter_noise=30, flow_strength=40)
        assert generate_character_glyph("R", params) == generate_character_glyph("R", params)

    @pytest.mark.parametrize("strategy", list(OutlineStrategyKind))
    def test_every_letter_closed(self, strategy: OutlineStrategyKind) -> None:
        """Test closure for every letter under both strategies."""
        params = Parameters(outline_strategy=strategy)
        for character in UPPERCASE:
            glyph = generate_character_glyph(character, params)
            assert glyph is not None
            assert glyph.outline_path, character
            assert is_closed(glyph.outline_path), character

    def test_monospace_keeps_outline(self) -> None:
        """Test that toggling monospace changes only the advance."""
        proportional = generate_character_glyph("M", DEFAULT_PARAMETERS)
        mono = generate_character_glyph("M", Parameters(monospace=True, monospace_width=600))

        assert mono.outline_path == proportional.outline_path
        assert mono.advance_width == 600

    def test_decoration_is_separate(self) -> None:
        """Test that the decoration does not change the outline."""
        plain = generate_character_glyph("H", Parameters(decoration=DecorationKind.NONE))
        decorated = generate_character_glyph("H", Parameters(decoration=DecorationKind.GRID))

        assert plain.decoration_path == ()
        assert decorated.decoration_path
        assert decorated.outline_path == plain.outline_path

    def test_parameters_change_outline(self) -> None:
        """Test that curvature and smoothness reach the outline."""
        base = generate_character_glyph("S", Parameters(smoothness=30))
        smoother = generate_character_glyph("S", Parameters(smoothness=90))
        curvier = generate_character_glyph("E", Parameters(curvature=80, flow_strength=30))
        straight = generate_character_glyph("E", Parameters(curvature=0, flow_strength=30))

        assert base.outline_path != smoother.outline_path
        assert curvier.outline_path != straight.outline_path


class TestGenerateAllGlyphs:
    """Tests for generate_all_glyphs."""

    def test_uppercase_set(self) -> None:
        """Test that A-Z are generated in order."""
        glyphs = generate_all_glyphs()
        assert "".join(g.character for g in glyphs) == UPPERCASE

    def test_progress_reported(self) -> None:
        """Test that progress is reported per character and ends at 100."""
        progress: list[int] = []
        generate_all_glyphs(progress_callback=progress.append)

        assert len(progress) == 26
        assert progress == sorted(progress)
        assert progress[-1] == 100

    def test_skips_unsupported(self) -> None:
        """Test that unsupported characters are skipped but still counted."""
        progress: list[int] = []
        glyphs = generate_all_glyphs(progress_callback=progress.append, characters="AB!")

        assert [g.character for g in glyphs] == ["A", "B"]
        assert progress == [33, 66, 100]

    def test_case_variants_generated_once(self) -> None:
        """Test that "a" after "A" is not generated twice."""
        glyphs = generate_all_glyphs(characters="AaB")
        assert [g.character for g in glyphs] == ["A", "B"]

    def test_custom_generate_function(self) -> None:
        """Test that a wrapping generate function sees each unique character once."""
        calls: list[str] = []

        def tracking(character: str, params: Parameters):
            calls.append(character)
            return generate_character_glyph(character, params)

        glyphs = generate_all_glyphs(characters="AaB!", generate=tracking)

        assert calls == ["A", "B", "!"]
        assert [g.character for g in glyphs] == ["A", "B"]
