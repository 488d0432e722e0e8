"""Font and project I/O layer for blobfont.

This module turns generated glyphs into files. It provides a clean
abstraction layer between fonttools and the domain models.

Key responsibilities:
- Encode glyph sets as OTF (CFF) or TTF (glyf) fonts
- Write font files atomically with family-derived filenames
- Save and load project files

Key classes:
- FontEncoder: Build font bytes from a GeneratedFont
- ProjectFile: Serialized parameters and metadata
"""

from blobfont.io.encoder import MIME_TYPES, FontEncoder
from blobfont.io.project import ProjectFile, load_project, project_filename, save_project
from blobfont.io.writer import export_filename, write_font_bytes

__all__ = [
    "MIME_TYPES",
    "FontEncoder",
    "ProjectFile",
    "export_filename",
    "load_project",
    "project_filename",
    "save_project",
    "write_font_bytes",
]
