"""Tests for font writing and project files."""

import json
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from blobfont.config import ExportFormat, FontMetadata, Parameters
from blobfont.exceptions import ProjectLoadError, ProjectSaveError
from blobfont.io import (
    ProjectFile,
    export_filename,
    load_project,
    project_filename,
    save_project,
    write_font_bytes,
)


class TestExportFilename:
    """Tests for export_filename."""

    def test_default(self) -> None:
        """Test the default family name."""
        assert export_filename("Pixel Blob") == "pixel-blob.otf"

    def test_whitespace_runs(self) -> None:
        """Test that whitespace runs collapse to one hyphen."""
        assert export_filename("  My   Blob\tFont ", ExportFormat.TTF) == "my-blob-font.ttf"

    def test_blank_name(self) -> None:
        """Test the fallback for a blank family name."""
        assert export_filename("   ") == "font.otf"


class TestWriteFontBytes:
    """Tests for atomic font writing."""

    def test_writes_file(self, tmp_path: Path) -> None:
        """Test that bytes end up at the destination."""
        output = tmp_path / "out.otf"
        assert write_font_bytes(b"OTTOdata", output) == output
        assert output.read_bytes() == b"OTTOdata"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Test that missing directories are created."""
        output = tmp_path / "fonts" / "nested" / "out.ttf"
        write_font_bytes(b"data", output)
        assert output.exists()

    def test_replaces_existing(self, tmp_path: Path) -> None:
        """Test that an existing file is replaced."""
        output = tmp_path / "out.otf"
        output.write_bytes(b"old")
        write_font_bytes(b"new", output)
        assert output.read_bytes() == b"new"

    def test_failure_leaves_destination_untouched(self, tmp_path: Path) -> None:
        """Test that a failed write keeps the old file and removes the temp file."""
        output = tmp_path / "out.otf"
        output.write_bytes(b"old")

        with patch("blobfont.io.writer.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                write_font_bytes(b"new", output)

        assert output.read_bytes() == b"old"
        assert [p.name for p in tmp_path.iterdir()] == ["out.otf"]


class TestProjectFiles:
    """Tests for saving and loading projects."""

    def test_filename(self) -> None:
        """Test the project filename convention."""
        assert project_filename("Pixel Blob") == "Pixel-Blob-project.json"

    def test_round_trip(self, tmp_path: Path) -> None:
        """Test that a saved project loads back unchanged."""
        path = tmp_path / "project.json"
        params = Parameters(thickness=120, smoothness=40, monospace=True)
        metadata = FontMetadata(family_name="Round Trip", designer="Me")
        timestamp = datetime(2025, 1, 1, 12, 0, 0)

        saved = save_project(path, params, metadata, timestamp)
        loaded = load_project(path)

        assert loaded == saved
        assert loaded.parameters == params
        assert loaded.metadata.family_name == "Round Trip"
        assert loaded.timestamp == timestamp

    def test_file_layout(self, tmp_path: Path) -> None:
        """Test the JSON keys of a project file."""
        path = tmp_path / "project.json"
        save_project(path, Parameters(), FontMetadata())
        data = json.loads(path.read_text(encoding="utf-8"))

        assert set(data) == {"parameters", "metadata", "timestamp"}
        assert data["parameters"]["thickness"] == 100.0
        assert data["metadata"]["family_name"] == "Pixel Blob"

    def test_missing_fields_use_defaults(self, tmp_path: Path) -> None:
        """Test that a partial project falls back to defaults."""
        path = tmp_path / "partial.json"
        path.write_text('{"parameters": {"thickness": 60}}', encoding="utf-8")

        project = load_project(path)
        assert project.parameters.thickness == 60
        assert project.parameters.smoothness == 70
        assert project.metadata == FontMetadata()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises ProjectLoadError."""
        with pytest.raises(ProjectLoadError):
            load_project(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test that malformed JSON raises ProjectLoadError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ProjectLoadError):
            load_project(path)

    def test_out_of_range_value(self, tmp_path: Path) -> None:
        """Test that out-of-range parameters are rejected on load."""
        path = tmp_path / "bad.json"
        path.write_text('{"parameters": {"thickness": 5000}}', encoding="utf-8")
        with pytest.raises(ProjectLoadError, match="invalid field"):
            load_project(path)

    def test_save_failure(self, tmp_path: Path) -> None:
        """Test that an unwritable destination raises ProjectSaveError."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(ProjectSaveError):
            save_project(blocker / "project.json", Parameters(), FontMetadata())

    def test_project_is_frozen(self) -> None:
        """Test that a loaded project cannot be modified."""
        project = ProjectFile()
        with pytest.raises(ValidationError):
            project.parameters = Parameters(thickness=50)  # type: ignore[misc]
