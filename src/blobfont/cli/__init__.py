"""Command-line interface for blobfont.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar for glyph generation
- Presets and project files as parameter sources
- SVG previews of single letters or text
- Verbose/quiet output modes
"""

from blobfont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
