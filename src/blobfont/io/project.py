"""Project files.

A project file is the JSON serialization of the current parameters and font
metadata plus the time it was saved:

    {"parameters": {...}, "metadata": {...}, "timestamp": "2025-01-01T12:00:00"}

Loading validates every field through the pydantic models, so out-of-range
values are rejected instead of reaching the generator.
"""

import re
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from blobfont.config import FontMetadata, Parameters
from blobfont.exceptions import ProjectLoadError, ProjectSaveError

_WHITESPACE = re.compile(r"\s+")


class ProjectFile(BaseModel):
    """Serialized project state."""

    model_config = ConfigDict(frozen=True)

    parameters: Parameters = Field(default_factory=Parameters)
    metadata: FontMetadata = Field(default_factory=FontMetadata)
    timestamp: datetime = Field(default_factory=datetime.now)


def project_filename(family_name: str) -> str:
    """Filename for a project, e.g. "Pixel Blob" -> "Pixel-Blob-project.json"."""
    stem = _WHITESPACE.sub("-", family_name.strip()) or "blobfont"
    return f"{stem}-project.json"


def save_project(
    path: Path,
    parameters: Parameters,
    metadata: FontMetadata,
    timestamp: datetime | None = None,
) -> ProjectFile:
    """Write a project file.

    Args:
        path: Destination file
        parameters: Parameters to store
        metadata: Font metadata to store
        timestamp: Save time (now if None)

    Returns:
        The project that was written

    Raises:
        ProjectSaveError: If the file cannot be written
    """
    project = ProjectFile(
        parameters=parameters,
        metadata=metadata,
        timestamp=timestamp or datetime.now(),
    )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(project.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise ProjectSaveError(str(path), str(e)) from e

    return project


def load_project(path: Path) -> ProjectFile:
    """Read and validate a project file.

    Raises:
        ProjectLoadError: If the file is missing, not JSON, or holds invalid
            values
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProjectLoadError(str(path), str(e)) from e

    try:
        return ProjectFile.model_validate_json(text)
    except ValidationError as e:
        raise ProjectLoadError(str(path), f"{e.error_count()} invalid field(s)") from e
