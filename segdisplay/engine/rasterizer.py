"""Stroke rasterization — normalized polylines to grid paint runs.

Cells are roughly twice as tall as they are wide, so every stroke cell is
painted two columns wide, and projected points round away from the glyph
centre instead of always truncating.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from segdisplay.engine.constants import BAR_WIDTH, NORMALIZED_EXTENT
from segdisplay.engine.geometry import SymbolGeometry
from segdisplay.engine.strokes import Polyline, Strokes
from segdisplay.surface.base import PaintRun

GridPoint = tuple[int, int]


def center_round(values: NDArray[np.float64], center: int) -> NDArray[np.int64]:
    """Round up only values with a fractional part lying beyond ``center``.

    Everything else truncates, including a value exactly on the centre.
    """
    floor = np.floor(values)
    away = (values > center) & (values != floor)
    return np.where(away, floor + 1, floor).astype(np.int64)


def project_polyline(polyline: Polyline, geometry: SymbolGeometry) -> NDArray[np.int64]:
    """Map normalized (x, y) points to box-relative (line, col) grid points."""
    pts = np.asarray(polyline, dtype=np.float64).reshape(-1, 2)
    # Multiply before dividing so on-grid points stay exact
    lines = pts[:, 1] * geometry.line_span / NORMALIZED_EXTENT
    cols = pts[:, 0] * geometry.col_span / NORMALIZED_EXTENT
    return np.column_stack(
        [center_round(lines, geometry.mid_line), center_round(cols, geometry.mid_col)]
    )


def segment_runs(start: GridPoint, end: GridPoint) -> list[PaintRun]:
    """Runs covering one straight segment between two grid points."""
    (l0, c0), (l1, c1) = start, end

    if l0 == l1:
        lo, hi = sorted((c0, c1))
        # One extra cell at the end balances the narrow cell width
        return [PaintRun(l0, lo, hi - lo + BAR_WIDTH)]

    if c0 == c1:
        lo, hi = sorted((l0, l1))
        return [PaintRun(line, c0, BAR_WIDTH) for line in range(lo, hi + 1)]

    d_lines = abs(l1 - l0)
    d_cols = abs(c1 - c0)
    runs: list[PaintRun] = []

    if d_cols > d_lines:
        # Mostly horizontal: step columns, walk lines
        if c0 > c1:
            (l0, c0), (l1, c1) = (l1, c1), (l0, c0)
        step = 1 if l1 > l0 else -1
        err = d_cols // 2
        line = l0
        for col in range(c0, c1):
            runs.append(PaintRun(line, col, BAR_WIDTH))
            err += d_lines
            if err > d_cols:
                err -= d_cols
                line += step
    else:
        # Mostly vertical: step lines, walk columns
        if l0 > l1:
            (l0, c0), (l1, c1) = (l1, c1), (l0, c0)
        step = 1 if c1 > c0 else -1
        err = d_lines // 2
        col = c0
        for line in range(l0, l1):
            runs.append(PaintRun(line, col, BAR_WIDTH))
            err += d_cols
            if err > d_lines:
                err -= d_lines
                col += step

    runs.append(PaintRun(l1, c1, BAR_WIDTH))
    return runs


def rasterize_polyline(polyline: Polyline, geometry: SymbolGeometry) -> list[PaintRun]:
    """Paint runs for one polyline, offset into the display's box."""
    points = [(int(line), int(col)) for line, col in project_polyline(polyline, geometry)]
    runs: list[PaintRun] = []
    for start, end in zip(points, points[1:]):
        for run in segment_runs(start, end):
            runs.append(PaintRun(run.line + geometry.top, run.col + geometry.left, run.width))
    return runs


def rasterize_strokes(strokes: Strokes, geometry: SymbolGeometry) -> list[PaintRun]:
    runs: list[PaintRun] = []
    for polyline in strokes:
        runs.extend(rasterize_polyline(polyline, geometry))
    return runs
