"""Letter skeleton library.

Static stroke definitions for every supported character, in normalized
coordinates: x runs 0-1 left to right, y runs 0-1 from cap height (0) down
to the baseline (1). The data is defined once at import time and never
modified afterwards.
"""

from types import MappingProxyType

from blobfont.domain import LetterSkeleton, Point, Stroke, StrokeType

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"

V = StrokeType.VERTICAL
H = StrokeType.HORIZONTAL
D = StrokeType.DIAGONAL
C = StrokeType.CURVE
B = StrokeType.BLOB


def _stroke(kind: StrokeType, coords: list[tuple[float, float]], weight: float = 1.0) -> Stroke:
    return Stroke(type=kind, points=tuple(Point(x, y) for x, y in coords), weight=weight)


def _skeleton(width: float, *strokes: Stroke) -> LetterSkeleton:
    return LetterSkeleton(strokes=tuple(strokes), width=width)


# Shared bowl of C, G and the closed ring of O, Q, 0
_C_BOWL = [(0.85, 0.15), (0.7, 0), (0.3, 0), (0.15, 0.15), (0.15, 0.85), (0.3, 1), (0.7, 1), (0.85, 0.85)]
_RING = [(0.5, 0), (0.15, 0.15), (0.15, 0.85), (0.5, 1), (0.85, 0.85), (0.85, 0.15), (0.5, 0)]
_UPPER_BOWL = [(0.15, 0), (0.7, 0.05), (0.75, 0.25), (0.15, 0.5)]

_SKELETONS: dict[str, LetterSkeleton] = {
    "A": _skeleton(
        1.0,
        _stroke(D, [(0.15, 1), (0.5, 0)]),
        _stroke(D, [(0.5, 0), (0.85, 1)]),
        _stroke(H, [(0.28, 0.6), (0.72, 0.6)], 0.8),
    ),
    "B": _skeleton(
        1.0,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(B, [(0.15, 0), (0.7, 0.05), (0.75, 0.22), (0.15, 0.45)]),
        _stroke(B, [(0.15, 0.5), (0.75, 0.53), (0.8, 0.75), (0.15, 1)]),
    ),
    "C": _skeleton(0.95, _stroke(C, _C_BOWL)),
    "D": _skeleton(
        1.0,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(C, [(0.15, 0), (0.6, 0), (0.85, 0.2), (0.85, 0.8), (0.6, 1), (0.15, 1)]),
    ),
    "E": _skeleton(
        0.9,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(H, [(0.15, 0), (0.8, 0)]),
        _stroke(H, [(0.15, 0.5), (0.7, 0.5)], 0.9),
        _stroke(H, [(0.15, 1), (0.8, 1)]),
    ),
    "F": _skeleton(
        0.85,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(H, [(0.15, 0), (0.8, 0)]),
        _stroke(H, [(0.15, 0.5), (0.7, 0.5)], 0.9),
    ),
    "G": _skeleton(
        1.0,
        _stroke(C, _C_BOWL),
        _stroke(H, [(0.85, 0.5), (0.55, 0.5)]),
        _stroke(V, [(0.85, 0.5), (0.85, 0.85)]),
    ),
    "H": _skeleton(
        1.0,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(V, [(0.85, 0), (0.85, 1)]),
        _stroke(H, [(0.15, 0.5), (0.85, 0.5)], 0.9),
    ),
    "I": _skeleton(
        0.6,
        _stroke(V, [(0.5, 0), (0.5, 1)]),
        _stroke(H, [(0.25, 0), (0.75, 0)], 0.9),
        _stroke(H, [(0.25, 1), (0.75, 1)], 0.9),
    ),
    "J": _skeleton(
        0.8,
        _stroke(V, [(0.7, 0), (0.7, 0.75)]),
        _stroke(C, [(0.7, 0.75), (0.7, 0.95), (0.45, 1), (0.25, 0.9), (0.2, 0.75)]),
        _stroke(H, [(0.45, 0), (0.85, 0)], 0.9),
    ),
    "K": _skeleton(
        0.95,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(D, [(0.85, 0), (0.15, 0.5)]),
        _stroke(D, [(0.15, 0.5), (0.85, 1)]),
    ),
    "L": _skeleton(
        0.8,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(H, [(0.15, 1), (0.8, 1)]),
    ),
    "M": _skeleton(
        1.2,
        _stroke(V, [(0.1, 0), (0.1, 1)]),
        _stroke(D, [(0.1, 0), (0.5, 0.4)]),
        _stroke(D, [(0.5, 0.4), (0.9, 0)]),
        _stroke(V, [(0.9, 0), (0.9, 1)]),
    ),
    "N": _skeleton(
        1.0,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(D, [(0.15, 0), (0.85, 1)]),
        _stroke(V, [(0.85, 0), (0.85, 1)]),
    ),
    "O": _skeleton(1.0, _stroke(C, _RING)),
    "P": _skeleton(
        0.9,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(B, _UPPER_BOWL),
    ),
    "Q": _skeleton(
        1.0,
        _stroke(C, _RING),
        _stroke(D, [(0.6, 0.7), (0.9, 1.1)], 0.9),
    ),
    "R": _skeleton(
        0.95,
        _stroke(V, [(0.15, 0), (0.15, 1)]),
        _stroke(B, _UPPER_BOWL),
        _stroke(D, [(0.5, 0.5), (0.85, 1)]),
    ),
    "S": _skeleton(
        0.95,
        _stroke(
            C,
            [
                (0.85, 0.2), (0.7, 0), (0.3, 0), (0.15, 0.15), (0.3, 0.3), (0.5, 0.4),
                (0.7, 0.5), (0.85, 0.6), (0.85, 0.85), (0.7, 1), (0.3, 1), (0.15, 0.8),
            ],
        ),
    ),
    "T": _skeleton(
        0.9,
        _stroke(H, [(0.1, 0), (0.9, 0)]),
        _stroke(V, [(0.5, 0), (0.5, 1)]),
    ),
    "U": _skeleton(
        1.0,
        _stroke(C, [(0.15, 0), (0.15, 0.75), (0.25, 1), (0.75, 1), (0.85, 0.75), (0.85, 0)]),
    ),
    "V": _skeleton(
        1.0,
        _stroke(D, [(0.1, 0), (0.5, 1)]),
        _stroke(D, [(0.5, 1), (0.9, 0)]),
    ),
    "W": _skeleton(
        1.3,
        _stroke(D, [(0.05, 0), (0.25, 1)]),
        _stroke(D, [(0.25, 1), (0.5, 0.5)]),
        _stroke(D, [(0.5, 0.5), (0.75, 1)]),
        _stroke(D, [(0.75, 1), (0.95, 0)]),
    ),
    "X": _skeleton(
        0.95,
        _stroke(D, [(0.15, 0), (0.85, 1)]),
        _stroke(D, [(0.85, 0), (0.15, 1)]),
    ),
    "Y": _skeleton(
        0.95,
        _stroke(D, [(0.15, 0), (0.5, 0.5)]),
        _stroke(D, [(0.85, 0), (0.5, 0.5)]),
        _stroke(V, [(0.5, 0.5), (0.5, 1)]),
    ),
    "Z": _skeleton(
        0.9,
        _stroke(H, [(0.15, 0), (0.85, 0)]),
        _stroke(D, [(0.85, 0), (0.15, 1)]),
        _stroke(H, [(0.15, 1), (0.85, 1)]),
    ),
    # Digits use the same stroke vocabulary with a narrower body
    "0": _skeleton(0.85, _stroke(C, _RING)),
    "1": _skeleton(
        0.6,
        _stroke(D, [(0.25, 0.2), (0.55, 0)], 0.9),
        _stroke(V, [(0.55, 0), (0.55, 1)]),
        _stroke(H, [(0.25, 1), (0.85, 1)], 0.9),
    ),
    "2": _skeleton(
        0.85,
        _stroke(C, [(0.15, 0.2), (0.3, 0), (0.7, 0), (0.85, 0.2), (0.8, 0.45), (0.15, 1)]),
        _stroke(H, [(0.15, 1), (0.85, 1)]),
    ),
    "3": _skeleton(
        0.85,
        _stroke(C, [(0.15, 0.1), (0.5, 0), (0.8, 0.1), (0.8, 0.4), (0.45, 0.5)]),
        _stroke(C, [(0.45, 0.5), (0.85, 0.6), (0.85, 0.9), (0.5, 1), (0.15, 0.9)]),
    ),
    "4": _skeleton(
        0.9,
        _stroke(D, [(0.65, 0), (0.1, 0.7)]),
        _stroke(H, [(0.1, 0.7), (0.9, 0.7)]),
        _stroke(V, [(0.65, 0), (0.65, 1)]),
    ),
    "5": _skeleton(
        0.85,
        _stroke(H, [(0.8, 0), (0.2, 0)]),
        _stroke(V, [(0.2, 0), (0.2, 0.45)]),
        _stroke(B, [(0.2, 0.45), (0.75, 0.45), (0.85, 0.75), (0.6, 1), (0.15, 0.9)]),
    ),
    "6": _skeleton(
        0.85,
        _stroke(C, [(0.8, 0.05), (0.4, 0.05), (0.15, 0.4), (0.15, 0.8), (0.35, 1), (0.65, 1), (0.85, 0.8)]),
        _stroke(B, [(0.85, 0.8), (0.8, 0.5), (0.45, 0.45), (0.15, 0.6)]),
    ),
    "7": _skeleton(
        0.85,
        _stroke(H, [(0.15, 0), (0.85, 0)]),
        _stroke(D, [(0.85, 0), (0.35, 1)]),
    ),
    "8": _skeleton(
        0.85,
        _stroke(C, [(0.5, 0), (0.2, 0.1), (0.2, 0.4), (0.5, 0.5), (0.8, 0.4), (0.8, 0.1), (0.5, 0)]),
        _stroke(C, [(0.5, 0.5), (0.15, 0.6), (0.15, 0.9), (0.5, 1), (0.85, 0.9), (0.85, 0.6), (0.5, 0.5)]),
    ),
    "9": _skeleton(
        0.85,
        _stroke(B, [(0.85, 0.4), (0.55, 0.55), (0.2, 0.5), (0.15, 0.2), (0.5, 0), (0.85, 0.2)]),
        _stroke(C, [(0.85, 0.2), (0.85, 0.6), (0.6, 0.95), (0.2, 0.95)]),
    ),
    " ": LetterSkeleton(strokes=(), width=0.4),
}

LETTER_SKELETONS = MappingProxyType(_SKELETONS)


def get_skeleton(character: str) -> LetterSkeleton | None:
    """Get the skeleton for a character.

    Lookup is case-insensitive. Unsupported characters return None; the
    caller decides whether to skip them or substitute a blank advance.

    Args:
        character: A single character

    Returns:
        The character's skeleton, or None if it is not supported
    """
    if len(character) != 1:
        return None
    return LETTER_SKELETONS.get(character.upper())


def get_available_characters() -> tuple[str, ...]:
    """Get all supported characters in display order (A-Z, 0-9, space)."""
    return tuple(LETTER_SKELETONS.keys())
