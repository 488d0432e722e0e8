"""Font generation orchestration.

This module coordinates the full workflow from parameters to a font file:
generate every requested glyph, encode the set, and write it to disk.

Key components:
- FontGenerator: Main orchestrator class
"""

import time
from pathlib import Path

import structlog

from blobfont.config import BlobFontSettings, Parameters
from blobfont.core.assembler import ProgressCallback, generate_all_glyphs, generate_character_glyph
from blobfont.core.skeletons import UPPERCASE
from blobfont.domain import GeneratedFont, GlyphData
from blobfont.exceptions import FontExportError, GlyphError
from blobfont.io import FontEncoder, export_filename, write_font_bytes
from blobfont.utils import GenerationLogger, GenerationStats


class FontGenerator:
    """Orchestrates glyph generation and font export.

    Manages the complete workflow:
    1. Generate glyphs for the requested characters
    2. Report progress after every character
    3. Encode the glyph set as OTF or TTF
    4. Write the font atomically

    Example:
        settings = BlobFontSettings()
        generator = FontGenerator(settings)
        font = generator.build()
        generator.export(font, Path("pixel-blob.otf"))
    """

    def __init__(
        self,
        settings: BlobFontSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Parameters, metadata and export configuration
            logger: Configured logger (see configure_logging); a default
                structlog logger is used if None
        """
        self.settings = settings
        self.logger = logger or structlog.get_logger("blobfont")
        self.generation_logger = GenerationLogger(self.logger)
        self.encoder = FontEncoder(
            settings.export.format,
            include_decoration=settings.export.include_decoration,
        )

    @property
    def stats(self) -> GenerationStats:
        """Statistics of the runs made by this generator."""
        return self.generation_logger.stats

    @property
    def mime_type(self) -> str:
        return self.encoder.mime_type

    def default_output_path(self, directory: Path = Path(".")) -> Path:
        """Output path derived from the family name, e.g. ./pixel-blob.otf."""
        return directory / export_filename(self.settings.metadata.family_name, self.settings.export.format)

    def build(
        self,
        characters: str = UPPERCASE,
        progress_callback: ProgressCallback | None = None,
    ) -> GeneratedFont:
        """Generate the glyph set.

        Unsupported characters are skipped and counted; case variants of a
        letter already generated are ignored.

        Args:
            characters: Characters to include, in output order
            progress_callback: Called with the integer completion percentage
                after every character

        Returns:
            GeneratedFont with a snapshot of the current parameters

        Raises:
            GlyphError: If a supported character fails to generate
        """
        params = self.settings.parameters
        stats = self.stats
        stats.start_time = time.time()

        self.logger.info(
            "Generating glyphs",
            characters=len(characters),
            strategy=params.outline_strategy.value,
        )

        glyphs = generate_all_glyphs(
            params,
            progress_callback=progress_callback,
            characters=characters,
            generate=self._generate,
        )

        stats.end_time = time.time()
        self.logger.info(
            "Glyph generation complete",
            generated=stats.generated_count,
            skipped=stats.skipped_count,
            duration_s=round(stats.duration_seconds, 3),
            avg_glyph_ms=round(stats.average_glyph_ms, 2),
        )

        return GeneratedFont(
            metadata=self.settings.metadata,
            glyphs=glyphs,
            parameters=params,
        )

    def _generate(self, character: str, params: Parameters) -> GlyphData | None:
        self.generation_logger.log_glyph_start(character)
        start = time.perf_counter()

        try:
            glyph = generate_character_glyph(character, params)
        except ValueError as e:
            self.generation_logger.log_glyph_error(character, e)
            raise GlyphError(f"Failed to generate glyph for {character!r}: {e}") from e

        if glyph is None:
            self.generation_logger.log_glyph_skipped(character, "no skeleton")
            return None

        self.generation_logger.log_glyph_complete(
            character,
            commands=len(glyph.outline_path),
            advance_width=glyph.advance_width,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return glyph

    def encode(self, generated_font: GeneratedFont) -> bytes:
        """Encode a glyph set into font bytes."""
        return self.encoder.encode(generated_font)

    def export(self, generated_font: GeneratedFont, output_path: Path) -> Path:
        """Encode a glyph set and write it to a file.

        Any failure is logged with its traceback and reported as a single
        FontExportError. The file is only replaced once the complete font has
        been written.

        Args:
            generated_font: Complete glyph set
            output_path: Destination file

        Returns:
            The written path

        Raises:
            FontExportError: If encoding or writing failed
        """
        try:
            data = self.encode(generated_font)
            write_font_bytes(data, output_path)
        except Exception as e:
            self.logger.error(
                "Font export failed",
                path=str(output_path),
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise FontExportError(str(output_path)) from e

        self.generation_logger.log_export(output_path, self.settings.export.format.value, len(data))
        return output_path
