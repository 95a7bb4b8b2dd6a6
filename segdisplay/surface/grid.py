"""GridSurface — an in-memory cell grid implementing the Surface interface.

Cells hold small integer paint codes (0 = never painted); the pens behind
each code live in a palette. Every operation is also recorded in order so
two renders can be compared exactly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from segdisplay.utils.palette import colour_to_rgb

if TYPE_CHECKING:
    from segdisplay.engine.geometry import BoundingBox
    from segdisplay.style import Pen

_UNPAINTED = 0

_ANSI_RESET = "\x1b[0m"


@dataclass(frozen=True)
class PaintOp:
    op: str
    line: int
    col: int
    width: int
    lines: int
    paint: Pen | None


class GridSurface:
    """Cell grid of ``lines`` x ``cols``; out-of-range paint is clipped."""

    def __init__(self, lines: int, cols: int) -> None:
        self.lines = lines
        self.cols = cols
        self.cells: NDArray[np.int16] = np.zeros((lines, cols), dtype=np.int16)
        self.ops: list[PaintOp] = []
        self._palette: list[Pen] = []
        self._paint: Pen | None = None

    # -- Surface interface --

    def set_paint(self, paint: Pen | None) -> None:
        self._paint = paint

    def erase_rect(self, box: BoundingBox) -> None:
        self.ops.append(PaintOp("erase_rect", box.top, box.left, box.cols, box.lines, self._paint))
        self._fill(box.top, box.top + box.lines, box.left, box.left + box.cols, self._paint)

    def fill_run(self, line: int, col: int, width: int, paint: Pen | None = None) -> None:
        paint = paint if paint is not None else self._paint
        self.ops.append(PaintOp("fill_run", line, col, width, 1, paint))
        self._fill(line, line + 1, col, col + width, paint)

    # -- Inspection --

    def paint_at(self, line: int, col: int) -> Pen | None:
        code = int(self.cells[line, col])
        return None if code == _UNPAINTED else self._palette[code - 1]

    def mask(self, paint: Pen) -> NDArray[np.bool_]:
        """Boolean grid of cells currently holding ``paint``."""
        if paint not in self._palette:
            return np.zeros(self.cells.shape, dtype=bool)
        return self.cells == self._code_for(paint)

    def cells_painted(self, paint: Pen) -> set[tuple[int, int]]:
        rows, cols = np.nonzero(self.mask(paint))
        return {(int(r), int(c)) for r, c in zip(rows, cols)}

    def clear(self) -> None:
        self.cells[:] = _UNPAINTED
        self.ops.clear()

    # -- Export --

    def to_text(self, chars: Mapping[Pen, str], blank: str = " ") -> str:
        """One character per cell, looked up by the cell's pen."""
        lookup = [blank] + [chars.get(pen, blank) for pen in self._palette]
        return "\n".join("".join(lookup[code] for code in row) for row in self.cells)

    def to_ansi(self) -> str:
        """One space per cell with a 256-colour background escape."""
        out = []
        for row in self.cells:
            parts = []
            current = None
            for code in row:
                if code != current:
                    if code == _UNPAINTED:
                        parts.append(_ANSI_RESET)
                    else:
                        parts.append(f"\x1b[48;5;{self._palette[code - 1].bg}m")
                    current = code
                parts.append(" ")
            parts.append(_ANSI_RESET)
            out.append("".join(parts))
        return "\n".join(out)

    def to_image(
        self,
        cell_width: int = 8,
        cell_height: int = 16,
        background: tuple[int, int, int] = (0, 0, 0),
    ) -> Image.Image:
        """RGB image with each cell drawn as a cell_width x cell_height block."""
        colours = np.array(
            [background] + [colour_to_rgb(pen.bg) for pen in self._palette],
            dtype=np.uint8,
        )
        rgb = colours[self.cells]
        rgb = np.repeat(np.repeat(rgb, cell_height, axis=0), cell_width, axis=1)
        return Image.fromarray(rgb)

    # -- Internals --

    def _code_for(self, paint: Pen) -> int:
        if paint not in self._palette:
            self._palette.append(paint)
        return self._palette.index(paint) + 1

    def _fill(self, line0: int, line1: int, col0: int, col1: int, paint: Pen | None) -> None:
        line0, line1 = max(line0, 0), min(line1, self.lines)
        col0, col1 = max(col0, 0), min(col1, self.cols)
        if line0 >= line1 or col0 >= col1:
            return
        code = _UNPAINTED if paint is None else self._code_for(paint)
        self.cells[line0:line1, col0:col1] = code
