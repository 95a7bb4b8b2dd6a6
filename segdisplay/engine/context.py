"""Everything one render call reads, plus its run count."""

from __future__ import annotations

from dataclasses import dataclass

from segdisplay.engine.geometry import BoundingBox, Geometry
from segdisplay.models.display import DisplayKind
from segdisplay.style import PaintAttributes, Pen
from segdisplay.surface.base import Surface


@dataclass
class RenderContext:
    """State for a single render. Built fresh per call; geometry and paints are read-only."""

    surface: Surface
    kind: DisplayKind
    box: BoundingBox
    geometry: Geometry
    paints: PaintAttributes
    value: str = ""
    # Number of fill_run calls issued by the kind renderer
    runs: int = 0

    def fill(self, line: int, col: int, width: int, paint: Pen) -> None:
        self.surface.fill_run(line, col, width, paint)
        self.runs += 1

    def pen(self, lit: bool) -> Pen:
        return self.paints.lit if lit else self.paints.unlit
