"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from blobfont.config import FontMetadata, Parameters

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for glyph generation.

    The bar is driven by percentages, so tasks should use total=100.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    console.print(f"\n[bold]Blobfont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(metadata: FontMetadata, params: Parameters, character_count: int) -> None:
    """Print what is about to be generated.

    Args:
        metadata: Font naming information
        params: Style parameters
        character_count: Number of requested characters
    """
    line = Text("  ")
    line.append(f"{metadata.family_name} {metadata.style_name}", style="bold")
    line.append(f" v{metadata.version}")
    console.print(line)
    console.print(
        f"  {character_count} characters {SYM_DOT} {params.outline_strategy.value} outlines "
        f"{SYM_DOT} thickness {params.thickness:g}"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    generated: int,
    skipped: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total generation time in seconds
        generated: Number of glyphs generated
        skipped: Number of unsupported characters skipped
        avg_time_ms: Average generation time per glyph in milliseconds
        min_time_ms: Minimum generation time per glyph in milliseconds
        max_time_ms: Maximum generation time per glyph in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    skipped_style = "yellow" if skipped > 0 else "green"
    console.print(
        f"  {generated} glyphs {SYM_DOT} "
        f"[{skipped_style}]{skipped} skipped[/{skipped_style}]"
    )

    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.1f}ms avg"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.1f}-{max_time_ms:.1f}ms range)"
        console.print(f"  {timing_str}")


def print_saved(kind: str, output_path: str) -> None:
    line = Text(f"\n{SYM_OK} {kind} written to ", style="green")
    line.append(output_path, style="bold")
    console.print(line)


def print_characters(characters: tuple[str, ...]) -> None:
    """Print the supported characters as a table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Character")
    table.add_column("Code point")

    for character in characters:
        label = "space" if character == " " else character
        table.add_row(label, f"U+{ord(character):04X}")

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output file created")
