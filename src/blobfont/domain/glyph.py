"""Generated glyph and font value types.

This module defines the results of the generation pipeline:
- GlyphData: One generated character with outline, overlay and metrics
- GeneratedFont: A complete character set ready for encoding
"""

from dataclasses import dataclass, field
from typing import Any

from fontTools.agl import UV2AGL

from blobfont.config import FontMetadata, Parameters
from blobfont.domain.path import EMPTY_PATH, OutlinePath, path_to_svg


def glyph_name_for(codepoint: int) -> str:
    """Return the Adobe Glyph List name for a codepoint.

    Falls back to the "uniXXXX" convention for codepoints the AGL does not
    name.
    """
    return UV2AGL.get(codepoint, f"uni{codepoint:04X}")


@dataclass(frozen=True)
class GlyphData:
    """A generated glyph.

    Produced fresh on every generation call; never cached across parameter
    changes.

    Attributes:
        character: The character this glyph draws
        codepoint: Unicode code point of the character
        outline_path: Closed outline in generation space (font units, Y down)
        advance_width: Horizontal advance in font units
        decoration_path: Optional overlay (grid lines or edge pixels)
    """

    character: str
    codepoint: int
    outline_path: OutlinePath
    advance_width: int
    decoration_path: OutlinePath = field(default=EMPTY_PATH)

    @property
    def name(self) -> str:
        """Glyph name used in the exported font."""
        return glyph_name_for(self.codepoint)

    @property
    def svg_path(self) -> str:
        """Outline as SVG path data."""
        return path_to_svg(self.outline_path)

    @property
    def decoration_svg(self) -> str:
        """Decoration overlay as SVG path data."""
        return path_to_svg(self.decoration_path)

    def is_empty(self) -> bool:
        """Check if the glyph has no outline (e.g. space)."""
        return len(self.outline_path) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for previews and debugging."""
        return {
            "character": self.character,
            "unicode": self.codepoint,
            "name": self.name,
            "svg_path": self.svg_path,
            "decoration_path": self.decoration_svg,
            "advance_width": self.advance_width,
        }


@dataclass(frozen=True)
class GeneratedFont:
    """A fully generated character set.

    Built once per export action and consumed by the font encoder.

    Attributes:
        metadata: Naming information for the font
        glyphs: Generated glyphs in output order
        parameters: Snapshot of the parameters the glyphs were built with
    """

    metadata: FontMetadata
    glyphs: tuple[GlyphData, ...]
    parameters: Parameters

    @property
    def glyph_count(self) -> int:
        return len(self.glyphs)

    def get_glyph(self, character: str) -> GlyphData | None:
        """Find the glyph for a character, or None."""
        for glyph in self.glyphs:
            if glyph.character == character:
                return glyph
        return None
