"""Blobfont - Procedural blob typography and font export.

Blobfont turns stroke-based letter skeletons into decorative "blob" glyphs
driven by a small set of numeric style parameters, renders SVG previews and
exports the result as an installable OTF or TTF font.

Example:
    $ blobfont export --family "Pixel Blob" --format otf

This will create pixel-blob.otf containing the glyphs A-Z.
"""

__version__ = "0.1.0"
__author__ = "Blobfont Contributors"

__all__ = ["__author__", "__version__"]
