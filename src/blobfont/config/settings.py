"""Configuration settings for Blobfont."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class OutlineStrategyKind(str, Enum):
    """Algorithm used to turn strokes into a closed outline."""

    VECTOR = "vector"
    GRID = "grid"


class DensityMode(str, Enum):
    """How filled raster cells are thinned out."""

    NONE = "none"
    CENTER = "center"
    EDGE = "edge"


class DecorationKind(str, Enum):
    """Additive overlay drawn on top of the outline."""

    NONE = "none"
    GRID = "grid"
    EDGE_PIXELS = "edge_pixels"


class ExportFormat(str, Enum):
    """Binary font container written on export."""

    OTF = "otf"
    TTF = "ttf"


class Parameters(BaseModel):
    """Style parameters for glyph generation.

    A frozen value object: every generation call receives its own snapshot,
    so no stage can mutate the parameters another stage sees. Ranges are
    enforced when the model is constructed; the generation pipeline does not
    re-validate them.
    """

    model_config = ConfigDict(frozen=True)

    # Outline shape
    thickness: float = Field(
        default=100.0,
        ge=30.0,
        le=150.0,
        description="Stroke thickness in font units",
    )
    smoothness: float = Field(
        default=70.0,
        ge=0.0,
        le=100.0,
        description="Spline smoothing of curved strokes (0 disables smoothing)",
    )
    curvature: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Rounding of outline joins; quadratic joins at or above the threshold",
    )
    curve_tension: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Catmull-Rom tension used when smoothing curves",
    )
    flow_strength: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Undulation applied to straight strokes",
    )
    branch_thickness: float = Field(
        default=1.0,
        ge=0.5,
        le=2.0,
        description="Weight multiplier for straight strokes turned organic",
    )
    symmetry_strength: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Blend between the skeleton and its mirror image",
    )
    rounded_caps: bool = Field(
        default=True,
        description="Round stroke ends instead of cutting them square",
    )
    outline_strategy: OutlineStrategyKind = Field(
        default=OutlineStrategyKind.VECTOR,
        description="Vector ribbon outlining or grid rasterization",
    )

    # Decoration
    decoration: DecorationKind = Field(
        default=DecorationKind.GRID,
        description="Overlay drawn on top of the outline",
    )
    grid_spacing: float = Field(
        default=15.0,
        ge=5.0,
        le=40.0,
        description="Distance between grid lines in grid units (4 font units each)",
    )
    grid_line_width: float = Field(
        default=2.0,
        ge=0.5,
        le=5.0,
        description="Grid line thickness in grid units (4 font units each)",
    )
    grid_line_lightness: float = Field(
        default=30.0,
        ge=0.0,
        le=100.0,
        description="Grid line colour (0 = black, 100 = white)",
    )
    edge_pixel_spacing: float = Field(
        default=40.0,
        ge=5.0,
        le=200.0,
        description="Arc length between edge pixels in font units",
    )
    edge_pixel_size: float = Field(
        default=16.0,
        ge=2.0,
        le=80.0,
        description="Side length of an edge pixel in font units",
    )

    # Raster
    grid_resolution: int = Field(
        default=32,
        ge=8,
        le=96,
        description="Cells per side of the raster grid",
    )
    cell_gap: float = Field(
        default=0.0,
        ge=0.0,
        le=50.0,
        description="Gap between raster cells as percentage of cell size",
    )
    cell_roundness: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Corner rounding of raster cells",
    )
    density_mode: DensityMode = Field(
        default=DensityMode.NONE,
        description="Density gradient applied to filled cells",
    )
    density_strength: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Strength of the density gradient",
    )
    scatter_noise: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Percentage of filled cells removed at random",
    )
    cutout_count: int = Field(
        default=0,
        ge=0,
        le=5,
        description="Number of circular negative-space cutouts",
    )
    cutout_radius: float = Field(
        default=8.0,
        ge=1.0,
        le=30.0,
        description="Cutout radius as percentage of the smaller glyph side",
    )
    noise_seed: int = Field(
        default=0,
        ge=0,
        description="Extra seed mixed into every random draw",
    )

    # Typography metrics
    width: float = Field(
        default=100.0,
        ge=60.0,
        le=140.0,
        description="Letter width as percentage of the skeleton width",
    )
    tracking: float = Field(
        default=0.0,
        ge=-100.0,
        le=300.0,
        description="Extra advance added to every glyph in font units",
    )
    monospace: bool = Field(
        default=False,
        description="Use the same advance width for every glyph",
    )
    monospace_width: int = Field(
        default=1000,
        ge=300,
        le=2000,
        description="Advance width used when monospace is on",
    )

    # Advanced
    overshoot: float = Field(
        default=0.0,
        ge=0.0,
        le=30.0,
        description="Font units curved strokes extend past cap height and baseline",
    )
    junction_merge: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Extension of straight stroke ends so joins overlap",
    )
    glow: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Preview halo width; does not change the outline",
    )


DEFAULT_PARAMETERS = Parameters()


class Preset(BaseModel):
    """A named parameter set."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: Parameters


PRESETS: tuple[Preset, ...] = (
    Preset(
        name="Default",
        description="Balanced organic blobs with visible grid",
        parameters=DEFAULT_PARAMETERS,
    ),
    Preset(
        name="Fine Grid",
        description="Small grid spacing with subtle lines",
        parameters=DEFAULT_PARAMETERS.model_copy(
            update={
                "grid_spacing": 8.0,
                "grid_line_width": 1.0,
                "grid_line_lightness": 40.0,
                "thickness": 90.0,
                "smoothness": 85.0,
            }
        ),
    ),
    Preset(
        name="Chunky",
        description="Wide grid spacing with bold lines",
        parameters=DEFAULT_PARAMETERS.model_copy(
            update={
                "grid_spacing": 25.0,
                "grid_line_width": 3.0,
                "grid_line_lightness": 20.0,
                "thickness": 130.0,
                "smoothness": 50.0,
            }
        ),
    ),
    Preset(
        name="Smooth Flow",
        description="Very curvy blobs with fine mesh",
        parameters=DEFAULT_PARAMETERS.model_copy(
            update={
                "grid_spacing": 10.0,
                "grid_line_width": 1.5,
                "grid_line_lightness": 35.0,
                "thickness": 85.0,
                "smoothness": 95.0,
                "flow_strength": 40.0,
                "curvature": 60.0,
            }
        ),
    ),
    Preset(
        name="High Contrast",
        description="Thick blobs with prominent grid",
        parameters=DEFAULT_PARAMETERS.model_copy(
            update={
                "grid_spacing": 18.0,
                "grid_line_width": 4.0,
                "grid_line_lightness": 15.0,
                "thickness": 140.0,
                "smoothness": 60.0,
            }
        ),
    ),
    Preset(
        name="Pixel Grid",
        description="Rasterized cells with rounded corners and a few cutouts",
        parameters=DEFAULT_PARAMETERS.model_copy(
            update={
                "outline_strategy": OutlineStrategyKind.GRID,
                "decoration": DecorationKind.NONE,
                "grid_resolution": 24,
                "cell_gap": 10.0,
                "cell_roundness": 40.0,
                "cutout_count": 2,
            }
        ),
    ),
)


def get_preset(name: str) -> Preset:
    """Look up a preset by name (case-insensitive).

    Args:
        name: Preset name, e.g. "Chunky" or "fine grid"

    Returns:
        The matching preset

    Raises:
        KeyError: If no preset has that name
    """
    wanted = name.strip().lower()
    for preset in PRESETS:
        if preset.name.lower() == wanted:
            return preset
    raise KeyError(f"Unknown preset '{name}'")


class FontMetadata(BaseModel):
    """Naming information written into the exported font."""

    model_config = ConfigDict(frozen=True)

    family_name: str = Field(default="Pixel Blob", min_length=1)
    style_name: str = Field(default="Regular", min_length=1)
    designer: str = ""
    description: str = "Generated with Blobfont"
    version: str = "1.0"
    copyright: str = ""


class ExportConfig(BaseModel):
    """Configuration for font export."""

    format: ExportFormat = Field(
        default=ExportFormat.OTF,
        description="Font container format",
    )
    include_decoration: bool = Field(
        default=False,
        description="Merge the decoration overlay into the exported outlines",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BlobFontSettings(BaseModel):
    """Main application settings."""

    parameters: Parameters = Field(default_factory=Parameters)
    metadata: FontMetadata = Field(default_factory=FontMetadata)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BlobFontSettings:
    """Get default application settings."""
    return BlobFontSettings()
