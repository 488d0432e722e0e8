"""CLI application entry point for blobfont.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from blobfont import __version__
from blobfont.cli.output import (
    console,
    create_progress,
    print_cancellation_notice,
    print_characters,
    print_error,
    print_font_info,
    print_header,
    print_saved,
    print_step,
    print_success,
)
from blobfont.config import (
    BlobFontSettings,
    DecorationKind,
    ExportConfig,
    ExportFormat,
    FontMetadata,
    LoggingConfig,
    OutlineStrategyKind,
    Parameters,
    get_preset,
)
from blobfont.core import (
    DIGITS,
    UPPERCASE,
    FontGenerator,
    generate_character_glyph,
    get_available_characters,
    render_glyph_svg,
    render_text_svg,
)
from blobfont.exceptions import BlobFontError, ProjectError
from blobfont.io import load_project, project_filename, save_project
from blobfont.utils import configure_logging

app = typer.Typer(
    name="blobfont",
    help="Generate decorative blob typography and export it as an installable font.",
    add_completion=False,
    no_args_is_help=True,
)

# Options shared by several commands
PresetOption = Annotated[
    str | None,
    typer.Option("--preset", "-p", help="Start from a named preset (e.g. 'Chunky')"),
]
ProjectOption = Annotated[
    Path | None,
    typer.Option("--project", help="Start from a saved project file"),
]
ThicknessOption = Annotated[
    float | None,
    typer.Option("--thickness", "-t", help="Stroke thickness in font units (30-150)", min=30.0, max=150.0),
]
SmoothnessOption = Annotated[
    float | None,
    typer.Option("--smoothness", help="Curve smoothing (0-100)", min=0.0, max=100.0),
]
CurvatureOption = Annotated[
    float | None,
    typer.Option("--curvature", help="Join rounding (0-100)", min=0.0, max=100.0),
]
FlowOption = Annotated[
    float | None,
    typer.Option("--flow", help="Undulation of straight strokes (0-100)", min=0.0, max=100.0),
]
StrategyOption = Annotated[
    OutlineStrategyKind | None,
    typer.Option("--strategy", "-s", help="Outline strategy"),
]
DecorationOption = Annotated[
    DecorationKind | None,
    typer.Option("--decoration", help="Decoration overlay"),
]
WidthOption = Annotated[
    float | None,
    typer.Option("--width", help="Letter width percentage (60-140)", min=60.0, max=140.0),
]
TrackingOption = Annotated[
    float | None,
    typer.Option("--tracking", help="Extra advance in font units (-100-300)", min=-100.0, max=300.0),
]
MonospaceOption = Annotated[
    bool | None,
    typer.Option("--monospace/--proportional", help="Fixed or proportional advance widths"),
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", help="Noise seed for raster randomness", min=0),
]
FamilyOption = Annotated[
    str | None,
    typer.Option("--family", "-f", help="Font family name"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Blobfont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Blobfont: procedural blob typography."""


def _resolve_sources(preset: str | None, project: Path | None) -> tuple[Parameters, FontMetadata]:
    """Base parameters and metadata from a project file, a preset or defaults.

    Raises:
        typer.Exit: If the preset is unknown or the project cannot be loaded
    """
    if project is not None and preset is not None:
        print_error("Cannot use --preset and --project together")
        raise typer.Exit(code=1)

    if project is not None:
        try:
            loaded = load_project(project)
        except ProjectError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from None
        return loaded.parameters, loaded.metadata

    if preset is not None:
        try:
            return get_preset(preset).parameters, FontMetadata()
        except KeyError:
            print_error(f"Unknown preset: {preset}")
            raise typer.Exit(code=1) from None

    return Parameters(), FontMetadata()


def _apply_overrides(base: Parameters, overrides: dict[str, Any]) -> Parameters:
    """Apply the options the user actually passed, validating the result.

    Raises:
        typer.Exit: If the combined parameters are out of range
    """
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return base

    try:
        return Parameters.model_validate({**base.model_dump(), **update})
    except ValidationError as e:
        print_error("Invalid parameters", details=f"{e.error_count()} field(s) out of range")
        raise typer.Exit(code=1) from None


def _apply_metadata(base: FontMetadata, overrides: dict[str, Any]) -> FontMetadata:
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return base

    try:
        return FontMetadata.model_validate({**base.model_dump(), **update})
    except ValidationError:
        print_error("Invalid font metadata", details="Family and style names must not be empty")
        raise typer.Exit(code=1) from None


@app.command()
def export(
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {family-name}.{ext})",
        ),
    ] = None,
    export_format: Annotated[
        ExportFormat,
        typer.Option("--format", help="Font container format"),
    ] = ExportFormat.OTF,
    family: FamilyOption = None,
    style: Annotated[str | None, typer.Option("--style", help="Style name")] = None,
    designer: Annotated[str | None, typer.Option("--designer", help="Designer name")] = None,
    description: Annotated[str | None, typer.Option("--description", help="Font description")] = None,
    font_version: Annotated[str | None, typer.Option("--font-version", help="Font version string")] = None,
    copyright_notice: Annotated[str | None, typer.Option("--copyright", help="Copyright notice")] = None,
    preset: PresetOption = None,
    project: ProjectOption = None,
    thickness: ThicknessOption = None,
    smoothness: SmoothnessOption = None,
    curvature: CurvatureOption = None,
    flow: FlowOption = None,
    strategy: StrategyOption = None,
    decoration: DecorationOption = None,
    width: WidthOption = None,
    tracking: TrackingOption = None,
    monospace: MonospaceOption = None,
    seed: SeedOption = None,
    digits: Annotated[
        bool,
        typer.Option("--digits", help="Also include digits 0-9 and space"),
    ] = False,
    include_decoration: Annotated[
        bool,
        typer.Option("--include-decoration", help="Merge the decoration overlay into the outlines"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Generate A-Z and export an OTF or TTF font.

    Example:
        blobfont export --family "Pixel Blob" --preset Chunky

    This will create pixel-blob.otf in the current directory.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    base_params, base_metadata = _resolve_sources(preset, project)
    params = _apply_overrides(
        base_params,
        {
            "thickness": thickness,
            "smoothness": smoothness,
            "curvature": curvature,
            "flow_strength": flow,
            "outline_strategy": strategy,
            "decoration": decoration,
            "width": width,
            "tracking": tracking,
            "monospace": monospace,
            "noise_seed": seed,
        },
    )
    metadata = _apply_metadata(
        base_metadata,
        {
            "family_name": family,
            "style_name": style,
            "designer": designer,
            "description": description,
            "version": font_version,
            "copyright": copyright_notice,
        },
    )

    settings = BlobFontSettings(
        parameters=params,
        metadata=metadata,
        export=ExportConfig(format=export_format, include_decoration=include_decoration),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    characters = UPPERCASE + DIGITS + " " if digits else UPPERCASE

    if not quiet:
        print_header(__version__)
        print_step("Generating glyphs")
        print_font_info(metadata, params, len(characters))

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except OSError as e:
        print_error(f"Could not open log file: {e.strerror}")
        raise typer.Exit(code=1) from None

    try:
        generator = FontGenerator(settings, logger=logger)
        output_path = output or generator.default_output_path()

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(f"Generating {len(characters)} glyphs", total=100)

                    def update_progress(percent: int) -> None:
                        progress.update(task_id, completed=percent)

                    font = generator.build(characters, progress_callback=update_progress)
            else:
                font = generator.build(characters)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None

        if not quiet:
            print_step(f"Encoding {export_format.value.upper()}")

        generator.export(font, output_path)

        if not quiet:
            stats = generator.stats
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                generated=stats.generated_count,
                skipped=stats.skipped_count,
                avg_time_ms=stats.average_glyph_ms,
                min_time_ms=stats.fastest_glyph_ms,
                max_time_ms=stats.slowest_glyph_ms,
            )

    except BlobFontError as e:
        print_error(str(e), details="See the log for details" if log_file else None)
        raise typer.Exit(code=1)


@app.command()
def preview(
    text: Annotated[
        str,
        typer.Argument(help="Letter or text to preview"),
    ] = "A",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="SVG output path (default: preview.svg)"),
    ] = None,
    size: Annotated[
        float,
        typer.Option("--size", help="Rendered height in pixels", min=8.0),
    ] = 200.0,
    background: Annotated[
        str | None,
        typer.Option("--background", help="Background colour, e.g. '#ffffff'"),
    ] = None,
    glow: Annotated[
        float | None,
        typer.Option("--glow", help="Preview halo (0-100)", min=0.0, max=100.0),
    ] = None,
    preset: PresetOption = None,
    project: ProjectOption = None,
    thickness: ThicknessOption = None,
    smoothness: SmoothnessOption = None,
    curvature: CurvatureOption = None,
    flow: FlowOption = None,
    strategy: StrategyOption = None,
    decoration: DecorationOption = None,
    width: WidthOption = None,
    tracking: TrackingOption = None,
    monospace: MonospaceOption = None,
    seed: SeedOption = None,
) -> None:
    """Write an SVG preview of a letter or a line of text.

    Example:
        blobfont preview HELLO --preset "Smooth Flow" -o hello.svg
    """
    base_params, _ = _resolve_sources(preset, project)
    params = _apply_overrides(
        base_params,
        {
            "thickness": thickness,
            "smoothness": smoothness,
            "curvature": curvature,
            "flow_strength": flow,
            "outline_strategy": strategy,
            "decoration": decoration,
            "width": width,
            "tracking": tracking,
            "monospace": monospace,
            "noise_seed": seed,
            "glow": glow,
        },
    )

    if not text:
        print_error("Nothing to preview", details="Pass a letter or some text.")
        raise typer.Exit(code=1)

    if len(text) == 1:
        glyph = generate_character_glyph(text, params)
        if glyph is None:
            print_error(f"Unsupported character: {text!r}", details="Run 'blobfont characters' for the list.")
            raise typer.Exit(code=1)
        svg = render_glyph_svg(glyph, params, size=size, background=background)
    else:
        svg = render_text_svg(text, params, font_size=size, background=background)

    output_path = output or Path("preview.svg")
    try:
        output_path.write_text(svg, encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write preview: {e.strerror}")
        raise typer.Exit(code=1)

    print_saved("Preview", str(output_path))


@app.command("save-project")
def save_project_command(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Project path (default: {Family-Name}-project.json)"),
    ] = None,
    family: FamilyOption = None,
    style: Annotated[str | None, typer.Option("--style", help="Style name")] = None,
    designer: Annotated[str | None, typer.Option("--designer", help="Designer name")] = None,
    preset: PresetOption = None,
    project: ProjectOption = None,
    thickness: ThicknessOption = None,
    smoothness: SmoothnessOption = None,
    curvature: CurvatureOption = None,
    flow: FlowOption = None,
    strategy: StrategyOption = None,
    decoration: DecorationOption = None,
    width: WidthOption = None,
    tracking: TrackingOption = None,
    monospace: MonospaceOption = None,
    seed: SeedOption = None,
) -> None:
    """Save parameters and metadata to a project JSON file."""
    base_params, base_metadata = _resolve_sources(preset, project)
    params = _apply_overrides(
        base_params,
        {
            "thickness": thickness,
            "smoothness": smoothness,
            "curvature": curvature,
            "flow_strength": flow,
            "outline_strategy": strategy,
            "decoration": decoration,
            "width": width,
            "tracking": tracking,
            "monospace": monospace,
            "noise_seed": seed,
        },
    )
    metadata = _apply_metadata(
        base_metadata,
        {"family_name": family, "style_name": style, "designer": designer},
    )

    output_path = output or Path(project_filename(metadata.family_name))
    try:
        save_project(output_path, params, metadata)
    except ProjectError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_saved("Project", str(output_path))


@app.command()
def characters() -> None:
    """List the supported characters."""
    print_characters(get_available_characters())


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"

    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
