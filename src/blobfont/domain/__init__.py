"""Domain models for blobfont.

This module contains the value types flowing through the glyph generation
pipeline. All models are designed to be:

- Immutable (frozen dataclasses, tuples instead of lists)
- Independent of fonttools drawing details
- Cheap to construct fresh on every generation call

Key classes:
- Point, Stroke, StrokeType, LetterSkeleton: Skeleton vocabulary
- MoveTo, LineTo, QuadTo, CurveTo, Close: Structured path commands
- GlyphData: One generated glyph
- GeneratedFont: A complete character set ready for encoding
- UNITS_PER_EM, CAP_HEIGHT, ASCENDER, DESCENDER: Font-wide metrics
"""

from blobfont.domain.glyph import GeneratedFont, GlyphData, glyph_name_for
from blobfont.domain.path import (
    EMPTY_PATH,
    Close,
    CurveTo,
    LineTo,
    MoveTo,
    OutlinePath,
    PathCommand,
    QuadTo,
    is_closed,
    path_coordinates,
    path_to_svg,
    split_contours,
    translate_path,
)
from blobfont.domain.metrics import ASCENDER, CAP_HEIGHT, DESCENDER, UNITS_PER_EM
from blobfont.domain.skeleton import LetterSkeleton, Point, Stroke, StrokeType

__all__: list[str] = [
    # Enums
    "StrokeType",
    # Skeleton types
    "Point",
    "Stroke",
    "LetterSkeleton",
    # Path commands
    "EMPTY_PATH",
    "Close",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "OutlinePath",
    "PathCommand",
    "QuadTo",
    "is_closed",
    "path_coordinates",
    "path_to_svg",
    "split_contours",
    "translate_path",
    # Results
    "GeneratedFont",
    "GlyphData",
    "glyph_name_for",
    # Metrics
    "ASCENDER",
    "CAP_HEIGHT",
    "DESCENDER",
    "UNITS_PER_EM",
]
