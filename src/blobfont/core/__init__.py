"""Core glyph generation algorithms for blobfont.

This module contains the generation pipeline:

- Skeleton library (stroke definitions for A-Z, 0-9 and space)
- Geometry operations (perpendiculars, offsets, distances, flattening)
- Organic transforms (smoothing, flow, symmetry, overshoot)
- Outline strategies (vector ribbons, grid rasterization)
- Decoration overlays (grid lines, edge pixels)
- Glyph assembly and SVG previews

All pipeline functions are designed to be:
- Pure (parameters in, new values out)
- Deterministic (seeded only from stable inputs)

Key functions:
- get_skeleton: Look up a character's skeleton
- generate_character_glyph: Run the pipeline for one character
- generate_all_glyphs: Run the pipeline for a character set
- render_glyph_svg / render_text_svg: SVG previews

Key classes:
- VectorRibbonStrategy: Ribbon and capsule outlining
- GridRasterStrategy: Cell rasterization
- FontGenerator: Build, encode and export orchestration
"""

from blobfont.core.assembler import (
    compute_advance_width,
    generate_all_glyphs,
    generate_character_glyph,
    get_outline_strategy,
)
from blobfont.core.generator import FontGenerator
from blobfont.core.outline import GlyphSpace, OutlineStrategy, VectorRibbonStrategy
from blobfont.core.preview import render_glyph_svg, render_text_svg
from blobfont.core.raster import GridRasterStrategy, cell_random
from blobfont.core.skeletons import (
    DIGITS,
    UPPERCASE,
    get_available_characters,
    get_skeleton,
)

__all__ = [
    "DIGITS",
    "UPPERCASE",
    # Orchestration
    "FontGenerator",
    # Strategies
    "GlyphSpace",
    "GridRasterStrategy",
    "OutlineStrategy",
    "VectorRibbonStrategy",
    # Pipeline functions
    "cell_random",
    "compute_advance_width",
    "generate_all_glyphs",
    "generate_character_glyph",
    "get_available_characters",
    "get_outline_strategy",
    "get_skeleton",
    "render_glyph_svg",
    "render_text_svg",
]
