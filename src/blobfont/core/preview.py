"""SVG previews of generated glyphs.

Previews embed exactly the path commands the font encoder consumes, so what
is shown is what gets exported. Glow is the only preview-only effect: it is
drawn as a translucent stroked copy of the outline and never changes the
outline itself.
"""

from blobfont.config import DEFAULT_PARAMETERS, Parameters
from blobfont.core.assembler import generate_character_glyph
from blobfont.domain import GlyphData, path_to_svg, translate_path
from blobfont.domain.metrics import ASCENDER, CAP_HEIGHT, UNITS_PER_EM

# Top of the preview viewport in glyph space (y grows down from cap height)
VIEW_TOP = CAP_HEIGHT - ASCENDER

# Glow stroke width in font units per glow percent
GLOW_SCALE = 0.6
GLOW_OPACITY = 0.35


def grid_color(lightness: float) -> str:
    """Grey for a lightness percentage (0 = black, 100 = white)."""
    level = round(255 * max(0.0, min(100.0, lightness)) / 100)
    return f"#{level:02x}{level:02x}{level:02x}"


def _glyph_layers(glyph: GlyphData, params: Parameters, dx: float, fill: str) -> list[str]:
    outline = translate_path(glyph.outline_path, dx, 0) if dx else glyph.outline_path
    d = path_to_svg(outline)
    if not d:
        return []

    layers: list[str] = []
    if params.glow > 0:
        layers.append(
            f'<path d="{d}" fill="none" stroke="{fill}" stroke-opacity="{GLOW_OPACITY}" '
            f'stroke-width="{params.glow * GLOW_SCALE:g}" stroke-linejoin="round"/>'
        )
    layers.append(f'<path d="{d}" fill="{fill}"/>')

    if glyph.decoration_path:
        decoration = translate_path(glyph.decoration_path, dx, 0) if dx else glyph.decoration_path
        layers.append(f'<path d="{path_to_svg(decoration)}" fill="{grid_color(params.grid_line_lightness)}"/>')

    return layers


def _svg_document(width: float, height: float, view_width: int, body: list[str], background: str | None) -> str:
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:g}" height="{height:g}" '
        f'viewBox="0 {VIEW_TOP} {view_width} {UNITS_PER_EM}">'
    ]
    if background:
        parts.append(f'<rect x="0" y="{VIEW_TOP}" width="{view_width}" height="{UNITS_PER_EM}" fill="{background}"/>')
    parts.extend(body)
    parts.append("</svg>")
    return "\n".join(parts)


def render_glyph_svg(
    glyph: GlyphData,
    params: Parameters = DEFAULT_PARAMETERS,
    size: float = 200,
    fill: str = "#000000",
    background: str | None = None,
) -> str:
    """Render one glyph as a standalone SVG document.

    Args:
        glyph: Generated glyph
        params: Parameters the glyph was generated with (glow, grid colour)
        size: Rendered height in pixels; width follows the advance
        fill: Outline colour
        background: Optional background colour

    Returns:
        SVG document text
    """
    view_width = max(glyph.advance_width, 1)
    width = size * view_width / UNITS_PER_EM
    return _svg_document(width, size, view_width, _glyph_layers(glyph, params, 0, fill), background)


def render_text_svg(
    text: str,
    params: Parameters = DEFAULT_PARAMETERS,
    font_size: float = 100,
    fill: str = "#000000",
    background: str | None = None,
) -> str:
    """Render a line of text as an SVG document.

    Characters without a skeleton take the advance of a space.

    Args:
        text: Text to set
        params: Style parameters
        font_size: Em size in pixels
        fill: Outline colour
        background: Optional background colour

    Returns:
        SVG document text
    """
    blank = generate_character_glyph(" ", params)
    glyphs: dict[str, GlyphData] = {}
    body: list[str] = []
    cursor = 0

    for character in text:
        key = character.upper()
        if key not in glyphs:
            glyphs[key] = generate_character_glyph(character, params) or blank
        glyph = glyphs[key]
        body.extend(_glyph_layers(glyph, params, cursor, fill))
        cursor += glyph.advance_width

    view_width = max(cursor, 1)
    width = font_size * view_width / UNITS_PER_EM
    return _svg_document(width, font_size, view_width, body, background)
