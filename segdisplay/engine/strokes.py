"""Symbol stroke table — unit symbols and SI prefixes as polylines.

Points are (x, y) in a 0..100 square, y growing downwards. Each glyph is a
tuple of polylines; each polyline has at least two points.
"""

from __future__ import annotations

Point = tuple[int, int]
Polyline = tuple[Point, ...]
Strokes = tuple[Polyline, ...]

MICRO_SIGN = "µ"
GREEK_MU = "μ"

SYMBOL_STROKES: dict[str, Strokes] = {
    # Units
    "V": (
        ((0, 0), (50, 100), (100, 0)),
    ),
    "A": (
        ((0, 100), (50, 0), (100, 100)),
        ((25, 50), (75, 50)),
    ),
    "W": (
        ((0, 0), (25, 100), (50, 50), (75, 100), (100, 0)),
    ),
    "Ω": (
        ((0, 100), (30, 100), (30, 80), (0, 60), (0, 20), (30, 0),
         (70, 0), (100, 20), (100, 60), (70, 80), (70, 100), (100, 100)),
    ),
    "F": (
        ((100, 0), (0, 0), (0, 100)),
        ((0, 50), (70, 50)),
    ),
    "H": (
        ((0, 0), (0, 100)),
        ((100, 0), (100, 100)),
        ((0, 50), (100, 50)),
    ),
    # SI prefixes
    "T": (
        ((0, 0), (100, 0)),
        ((50, 0), (50, 100)),
    ),
    "G": (
        ((100, 0), (0, 0), (0, 100), (100, 100), (100, 50), (50, 50)),
    ),
    "M": (
        ((0, 100), (0, 0), (50, 50), (100, 0), (100, 100)),
    ),
    "k": (
        ((0, 0), (0, 100)),
        ((100, 40), (0, 70), (100, 100)),
    ),
    "m": (
        ((0, 100), (0, 40), (100, 40), (100, 100)),
        ((50, 40), (50, 100)),
    ),
    MICRO_SIGN: (
        ((0, 100), (0, 40)),
        ((0, 80), (100, 80), (100, 40)),
    ),
    "n": (
        ((0, 100), (0, 40), (100, 40), (100, 100)),
    ),
    "p": (
        ((0, 100), (0, 40), (100, 40), (100, 70), (0, 70)),
    ),
}

SYMBOL_STROKES[GREEK_MU] = SYMBOL_STROKES[MICRO_SIGN]


def strokes_for(glyph: str) -> Strokes:
    """Polylines for a glyph, or an empty tuple if it is not in the table."""
    return SYMBOL_STROKES.get(glyph, ())
