"""Utility functions for blobfont.

This module provides:

- Logging setup and configuration
- Generation statistics and progress logging
"""

from blobfont.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
]
