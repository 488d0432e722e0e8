"""Font file writer.

Writes encoded font bytes to disk without ever leaving a partial file: the
data goes to a temporary file in the target directory first and is renamed
into place only after it has been fully written.
"""

import os
import re
import tempfile
from pathlib import Path

from blobfont.config import ExportFormat

_WHITESPACE = re.compile(r"\s+")


def export_filename(family_name: str, export_format: ExportFormat = ExportFormat.OTF) -> str:
    """Derive the download filename from a family name.

    Whitespace runs become hyphens and the result is lowercased.

    Examples:
        >>> export_filename("Pixel Blob")
        'pixel-blob.otf'
        >>> export_filename("My  Font", ExportFormat.TTF)
        'my-font.ttf'
    """
    stem = _WHITESPACE.sub("-", family_name.strip()).lower() or "font"
    return f"{stem}.{export_format.value}"


def write_font_bytes(data: bytes, output_path: Path) -> Path:
    """Atomically write font bytes.

    Args:
        data: Encoded font
        output_path: Destination file

    Returns:
        The destination path

    Raises:
        OSError: If the file cannot be written; the destination is untouched
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent)
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, output_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    return output_path
