"""Exception hierarchy for Blobfont."""


class BlobFontError(Exception):
    """Base exception for all Blobfont errors."""

    pass


class GlyphError(BlobFontError):
    """Errors related to glyph generation."""

    pass


class PathError(BlobFontError):
    """Errors in outline path data."""

    pass


class PathCommandError(PathError):
    """Outline path contains a command that cannot be encoded."""

    def __init__(self, command: object) -> None:
        self.command = command
        super().__init__(f"Unsupported path command: {command!r}")


class ExportError(BlobFontError):
    """Errors related to building or saving a font."""

    pass


class FontEncodingError(ExportError):
    """Error converting generated glyphs into font tables."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Failed to encode glyph '{glyph_name}': {reason}")


class FontExportError(ExportError):
    """Font export failed.

    The message is deliberately generic; the underlying cause is chained
    and written to the log.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Font export failed, no file was written to '{path}'")


class ProjectError(BlobFontError):
    """Errors related to project files."""

    pass


class ProjectLoadError(ProjectError):
    """Error reading a project file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load project '{path}': {reason}")


class ProjectSaveError(ProjectError):
    """Error writing a project file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save project '{path}': {reason}")
