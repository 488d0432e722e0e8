"""Logging utilities for Blobfont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class GenerationStats:
    """Statistics from a generation run."""

    generated_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    glyph_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def average_glyph_ms(self) -> float:
        if not self.glyph_timings_ms:
            return 0.0
        return sum(self.glyph_timings_ms) / len(self.glyph_timings_ms)

    @property
    def slowest_glyph_ms(self) -> float:
        return max(self.glyph_timings_ms, default=0.0)

    @property
    def fastest_glyph_ms(self) -> float:
        return min(self.glyph_timings_ms, default=0.0)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Log records go through the standard library so that handlers decide
    where they end up; structlog renders them as JSON.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("blobfont")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking generation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = GenerationStats()

    def log_glyph_start(self, character: str) -> None:
        """Log start of glyph generation."""
        self._logger.debug("Generating glyph", character=character)

    def log_glyph_complete(
        self,
        character: str,
        commands: int,
        advance_width: int,
        duration_ms: float,
    ) -> None:
        """Log successful glyph generation."""
        self._logger.debug(
            "Glyph generated",
            character=character,
            commands=commands,
            advance=advance_width,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.generated_count += 1
        self._stats.glyph_timings_ms.append(duration_ms)

    def log_glyph_skipped(self, character: str, reason: str) -> None:
        """Log skipped glyph."""
        self._logger.debug("Glyph skipped", character=character, reason=reason)
        self._stats.skipped_count += 1

    def log_glyph_error(self, character: str, error: Exception) -> None:
        """Log glyph generation error."""
        self._logger.error(
            "Glyph generation failed",
            character=character,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((character, str(error)))

    def log_export(self, path: Path, export_format: str, size: int) -> None:
        """Log a written font file."""
        self._logger.info(
            "Font exported",
            path=str(path),
            format=export_format,
            bytes=size,
        )

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
