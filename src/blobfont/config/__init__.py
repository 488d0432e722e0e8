"""Configuration management for blobfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, project files or defaults.

Key classes:
- Parameters: Frozen style parameters passed to every generation call
- FontMetadata: Naming information for the exported font
- ExportConfig: Export format settings
- LoggingConfig: Logging settings
- BlobFontSettings: Main application settings
"""

from blobfont.config.settings import (
    DEFAULT_PARAMETERS,
    PRESETS,
    BlobFontSettings,
    DecorationKind,
    DensityMode,
    ExportConfig,
    ExportFormat,
    FontMetadata,
    LoggingConfig,
    OutlineStrategyKind,
    Parameters,
    Preset,
    get_default_settings,
    get_preset,
)

__all__ = [
    "DEFAULT_PARAMETERS",
    "PRESETS",
    "BlobFontSettings",
    "DecorationKind",
    "DensityMode",
    "ExportConfig",
    "ExportFormat",
    "FontMetadata",
    "LoggingConfig",
    "OutlineStrategyKind",
    "Parameters",
    "Preset",
    "get_default_settings",
    "get_preset",
]
