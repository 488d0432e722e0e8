"""Font-wide vertical metrics in font units.

Glyph space puts y = 0 at cap height and grows downward; the encoder flips
it about CAP_HEIGHT so the baseline lands at y = 0.
"""

UNITS_PER_EM = 1000
CAP_HEIGHT = 700
ASCENDER = 800
DESCENDER = -200
