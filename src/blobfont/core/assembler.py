"""Glyph assembly.

Runs the full per-character pipeline (skeleton lookup, organic transform,
outline strategy, decoration, advance width) and batches it over a
character set.
"""

from collections.abc import Callable

import structlog

from blobfont.config import DEFAULT_PARAMETERS, OutlineStrategyKind, Parameters
from blobfont.core.decoration import build_decoration
from blobfont.core.organic import transform_skeleton
from blobfont.core.outline import OutlineStrategy, VectorRibbonStrategy
from blobfont.core.raster import GridRasterStrategy
from blobfont.core.skeletons import UPPERCASE, get_skeleton
from blobfont.domain import GlyphData, LetterSkeleton
from blobfont.domain.metrics import CAP_HEIGHT, UNITS_PER_EM

logger = structlog.get_logger(__name__)

ProgressCallback = Callable[[int], None]
GlyphFactory = Callable[[str, Parameters], GlyphData | None]

_STRATEGIES: dict[OutlineStrategyKind, type] = {
    OutlineStrategyKind.VECTOR: VectorRibbonStrategy,
    OutlineStrategyKind.GRID: GridRasterStrategy,
}


def get_outline_strategy(kind: OutlineStrategyKind) -> OutlineStrategy:
    """Create the outline strategy for a strategy kind."""
    return _STRATEGIES[kind]()


def compute_advance_width(skeleton: LetterSkeleton, params: Parameters = DEFAULT_PARAMETERS) -> int:
    """Calculate a glyph's advance width in font units.

    width = skeleton.width * UNITS_PER_EM * width% + tracking, rounded and
    never negative. Monospace replaces it with the fixed monospace width.

    Examples:
        >>> compute_advance_width(get_skeleton("A"))
        1000
    """
    if params.monospace:
        return params.monospace_width

    advance = skeleton.width * UNITS_PER_EM * params.width / 100 + params.tracking
    return max(0, round(advance))


def generate_character_glyph(character: str, params: Parameters = DEFAULT_PARAMETERS) -> GlyphData | None:
    """Generate one glyph.

    Args:
        character: A single character; lookup is case-insensitive
        params: Style parameters

    Returns:
        The glyph, or None when the character has no skeleton
    """
    skeleton = get_skeleton(character)
    if skeleton is None:
        logger.debug("No skeleton for character", character=character)
        return None

    glyph_character = character.upper()
    codepoint = ord(glyph_character)

    transformed = transform_skeleton(skeleton, params, CAP_HEIGHT)
    outline = get_outline_strategy(params.outline_strategy).outline(transformed, params, codepoint)

    return GlyphData(
        character=glyph_character,
        codepoint=codepoint,
        outline_path=outline,
        advance_width=compute_advance_width(skeleton, params),
        decoration_path=build_decoration(outline, params),
    )


def generate_all_glyphs(
    params: Parameters = DEFAULT_PARAMETERS,
    progress_callback: ProgressCallback | None = None,
    characters: str = UPPERCASE,
    generate: GlyphFactory = generate_character_glyph,
) -> tuple[GlyphData, ...]:
    """Generate glyphs for a character set.

    Unsupported characters are skipped. Duplicates (including case
    variants of the same letter) are generated once.

    Args:
        params: Style parameters
        progress_callback: Called with the integer completion percentage
            after every character
        characters: Characters to generate, in output order
        generate: Per-character glyph function; wrappers add timing or
            bookkeeping around generate_character_glyph

    Returns:
        Generated glyphs in input order
    """
    glyphs: list[GlyphData] = []
    seen: set[str] = set()
    total = len(characters)

    for i, character in enumerate(characters, start=1):
        key = character.upper()
        if key not in seen:
            seen.add(key)
            glyph = generate(character, params)
            if glyph is not None:
                glyphs.append(glyph)

        if progress_callback is not None:
            progress_callback(i * 100 // total)

    logger.debug("Generated glyph set", requested=total, generated=len(glyphs))
    return tuple(glyphs)
