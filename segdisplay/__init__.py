"""Segmented LED/LCD style character display for terminal cell grids."""

from segdisplay.display import SegmentDisplay
from segdisplay.engine.geometry import BoundingBox
from segdisplay.models.display import DisplayKind
from segdisplay.style import PaintAttributes, Pen, StyleProvider
from segdisplay.surface.grid import GridSurface

__version__ = "0.1.0"

__all__ = [
    "BoundingBox",
    "DisplayKind",
    "GridSurface",
    "PaintAttributes",
    "Pen",
    "SegmentDisplay",
    "StyleProvider",
]
