"""Font encoder.

Converts generated glyphs into a binary OpenType font using fontTools'
FontBuilder. Outlines are drawn through fontTools pens:

    outline path -> TransformPen (Y flip) -> RecordingPen (per contour)
        -> [ReverseContourPen] -> TTGlyphPen via Cu2QuPen   (TTF)
                               -> T2CharStringPen           (OTF/CFF)

Contour direction is normalized per contour so that overlapping strokes
union under the nonzero fill rule: clockwise for TrueType, counter-clockwise
for CFF.
"""

import re
from io import BytesIO
from typing import Any

import structlog
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.areaPen import AreaPen
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.reverseContourPen import ReverseContourPen
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.transformPen import TransformPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from blobfont.config import ExportFormat, FontMetadata
from blobfont.domain import (
    Close,
    CurveTo,
    GeneratedFont,
    GlyphData,
    LineTo,
    MoveTo,
    OutlinePath,
    QuadTo,
    split_contours,
)
from blobfont.domain.metrics import ASCENDER, CAP_HEIGHT, DESCENDER, UNITS_PER_EM
from blobfont.exceptions import FontEncodingError, PathCommandError

logger = structlog.get_logger(__name__)

MIME_TYPES: dict[ExportFormat, str] = {
    ExportFormat.OTF: "font/otf",
    ExportFormat.TTF: "font/ttf",
}

NOTDEF = ".notdef"

# Glyph space has y growing down from cap height; fonts grow up from baseline
FLIP_TRANSFORM = (1, 0, 0, -1, 0, CAP_HEIGHT)

# Maximum cubic-to-quadratic approximation error in font units
CU2QU_MAX_ERR = 1.0

# Characters not allowed in a PostScript name
_PS_NAME_INVALID = re.compile(r"[^\x21-\x7e]|[\[\](){}<>/%]")


def draw_path(path: OutlinePath, pen: Any) -> None:
    """Replay structured path commands into a fontTools pen.

    A trailing sub-path without Close is ended with endPath.

    Raises:
        PathCommandError: If the path holds an unknown command
    """
    open_contour = False
    for command in path:
        if isinstance(command, MoveTo):
            if open_contour:
                pen.endPath()
            pen.moveTo((command.x, command.y))
            open_contour = True
        elif isinstance(command, LineTo):
            pen.lineTo((command.x, command.y))
        elif isinstance(command, QuadTo):
            pen.qCurveTo((command.cx, command.cy), (command.x, command.y))
        elif isinstance(command, CurveTo):
            pen.curveTo(
                (command.c1x, command.c1y),
                (command.c2x, command.c2y),
                (command.x, command.y),
            )
        elif isinstance(command, Close):
            pen.closePath()
            open_contour = False
        else:
            raise PathCommandError(command)

    if open_contour:
        pen.endPath()


def record_flipped_contours(path: OutlinePath) -> list[RecordingPen]:
    """Record each contour of a path in font coordinates (Y up)."""
    recordings: list[RecordingPen] = []
    for contour in split_contours(path):
        recording = RecordingPen()
        draw_path(contour, TransformPen(recording, FLIP_TRANSFORM))
        recordings.append(recording)
    return recordings


def contour_area(recording: RecordingPen) -> float:
    """Signed area of a recorded contour; negative when clockwise."""
    pen = AreaPen()
    recording.replay(pen)
    return pen.value


def replay_with_direction(recordings: list[RecordingPen], pen: Any, clockwise: bool) -> None:
    """Replay contours into pen, reversing those with the wrong direction."""
    for recording in recordings:
        area = contour_area(recording)
        if area == 0:
            recording.replay(pen)
            continue
        if (area < 0) != clockwise:
            recording.replay(ReverseContourPen(pen))
        else:
            recording.replay(pen)


def left_side_bearing(recordings: list[RecordingPen]) -> int:
    """Left side bearing of a CFF outline; 0 for empty outlines.

    CFF bounds are measured on the curves themselves.
    """
    pen = BoundsPen(None)
    for recording in recordings:
        recording.replay(pen)
    if pen.bounds is None:
        return 0
    return round(pen.bounds[0])


def glyf_left_side_bearing(glyph: Any) -> int:
    """Left side bearing of a TrueType glyph; 0 for empty outlines.

    glyf xMin covers every point, off-curve points included, so the
    bearing is taken from the converted coordinates rather than the curves.
    """
    if not glyph.numberOfContours:
        return 0
    return round(min(x for x, _ in glyph.coordinates))


def postscript_name(metadata: FontMetadata) -> str:
    """PostScript name such as "PixelBlob-Regular" (63 characters max)."""
    family = _PS_NAME_INVALID.sub("", metadata.family_name) or "Untitled"
    style = _PS_NAME_INVALID.sub("", metadata.style_name) or "Regular"
    return f"{family}-{style}"[:63]


def version_string(version: str) -> str:
    """Name-table version string, e.g. "1.0" -> "Version 1.0"."""
    return version if version.startswith("Version") else f"Version {version}"


def font_revision(version: str) -> float:
    """Numeric head.fontRevision parsed from the leading number of version."""
    match = re.search(r"\d+(?:\.\d+)?", version)
    return float(match.group()) if match else 1.0


class FontEncoder:
    """Encodes a GeneratedFont into OTF or TTF bytes.

    Example:
        encoder = FontEncoder(ExportFormat.OTF)
        data = encoder.encode(generated_font)
    """

    def __init__(self, export_format: ExportFormat = ExportFormat.OTF, include_decoration: bool = False) -> None:
        """Initialize the encoder.

        Args:
            export_format: OTF (CFF outlines) or TTF (glyf outlines)
            include_decoration: Merge each glyph's decoration into its outline
        """
        self._format = export_format
        self._include_decoration = include_decoration

    @property
    def mime_type(self) -> str:
        return MIME_TYPES[self._format]

    @property
    def is_ttf(self) -> bool:
        return self._format == ExportFormat.TTF

    def encode(self, generated_font: GeneratedFont) -> bytes:
        """Build the font and serialize it.

        Args:
            generated_font: Complete glyph set with metadata

        Returns:
            The binary font

        Raises:
            PathCommandError: If a glyph outline holds an unknown command
            FontEncodingError: If a glyph cannot be converted
        """
        glyph_order = [NOTDEF]
        cmap: dict[int, str] = {}
        metrics: dict[str, tuple[int, int]] = {NOTDEF: (0, 0)}
        outlines: dict[str, Any] = {NOTDEF: self._empty_outline()}

        for glyph in generated_font.glyphs:
            name = glyph.name
            if name in outlines:
                raise FontEncodingError(name, "duplicate glyph name")

            outline, lsb = self._encode_glyph(glyph)
            glyph_order.append(name)
            cmap[glyph.codepoint] = name
            metrics[name] = (glyph.advance_width, lsb)
            outlines[name] = outline

        builder = FontBuilder(UNITS_PER_EM, isTTF=self.is_ttf)
        builder.setupGlyphOrder(glyph_order)
        builder.setupCharacterMap(cmap)

        metadata = generated_font.metadata
        ps_name = postscript_name(metadata)
        if self.is_ttf:
            builder.setupGlyf(outlines)
        else:
            builder.setupCFF(
                ps_name,
                {"FullName": f"{metadata.family_name} {metadata.style_name}", "FamilyName": metadata.family_name},
                outlines,
                {},
            )

        builder.setupHorizontalMetrics(metrics)
        builder.setupHorizontalHeader(ascent=ASCENDER, descent=DESCENDER)
        builder.setupOS2(
            sTypoAscender=ASCENDER,
            sTypoDescender=DESCENDER,
            sTypoLineGap=0,
            usWinAscent=ASCENDER,
            usWinDescent=abs(DESCENDER),
            sCapHeight=CAP_HEIGHT,
        )
        builder.setupNameTable(self._name_strings(metadata, ps_name))
        builder.setupPost()
        builder.setupMaxp()
        builder.updateHead(fontRevision=font_revision(metadata.version))

        buffer = BytesIO()
        builder.save(buffer)
        data = buffer.getvalue()

        logger.debug(
            "Encoded font",
            format=self._format.value,
            glyphs=len(glyph_order),
            size=len(data),
        )
        return data

    def _empty_outline(self) -> Any:
        if self.is_ttf:
            return TTGlyphPen(None).glyph()
        return T2CharStringPen(0, None).getCharString()

    def _encode_glyph(self, glyph: GlyphData) -> tuple[Any, int]:
        path = glyph.outline_path
        if self._include_decoration:
            path = path + glyph.decoration_path

        recordings = record_flipped_contours(path)

        try:
            if self.is_ttf:
                tt_pen = TTGlyphPen(None)
                pen = Cu2QuPen(tt_pen, max_err=CU2QU_MAX_ERR, reverse_direction=False)
                replay_with_direction(recordings, pen, clockwise=True)
                outline = tt_pen.glyph()
                lsb = glyf_left_side_bearing(outline)
            else:
                t2_pen = T2CharStringPen(glyph.advance_width, None)
                replay_with_direction(recordings, t2_pen, clockwise=False)
                outline = t2_pen.getCharString()
                lsb = left_side_bearing(recordings)
        except (ValueError, TypeError, AssertionError, ZeroDivisionError) as e:
            raise FontEncodingError(glyph.name, str(e)) from e

        return outline, lsb

    def _name_strings(self, metadata: FontMetadata, ps_name: str) -> dict[str, str]:
        names = {
            "familyName": metadata.family_name,
            "styleName": metadata.style_name,
            "uniqueFontIdentifier": f"{ps_name};{metadata.version}",
            "fullName": f"{metadata.family_name} {metadata.style_name}",
            "psName": ps_name,
            "version": version_string(metadata.version),
            "manufacturer": "Blobfont",
            "designer": metadata.designer,
            "description": metadata.description,
            "copyright": metadata.copyright,
        }
        # Empty optional strings are left out of the name table
        return {key: value for key, value in names.items() if value}
