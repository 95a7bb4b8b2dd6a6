"""Shared grid constants for geometry, rasterization and rendering."""

# A, G, D need one line each, plus one line each for the F/B and E/C bands.
MIN_LINES = 3 + 2

# F/E and B/C are two columns each, leaving at least two for the A/G/D band.
MIN_COLS = 4 + 2

# Vertical bars and stroke cells are two columns wide (cells are ~2:1 tall).
BAR_WIDTH = 2

# Decimal point mark reserves this many columns on the right.
DP_WIDTH = 2

# Symbol strokes are authored in a 0..100 square.
NORMALIZED_EXTENT = 100
