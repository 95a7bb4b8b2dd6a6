"""Geometry resolution — integer anchors for each display kind.

Every function here is pure: the same box always yields the same anchors.
Displays cache the result and recompute it in full whenever the box changes.

Boxes smaller than MIN_LINES x MIN_COLS are a precondition violation; the
anchors are still computed but the layout is not meaningful.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from segdisplay.engine.constants import BAR_WIDTH, DP_WIDTH, NORMALIZED_EXTENT
from segdisplay.models.display import DisplayKind


@dataclass(frozen=True)
class BoundingBox:
    """Rectangular cell region allocated to one display."""

    lines: int
    cols: int
    top: int = 0
    left: int = 0

    @property
    def bottom(self) -> int:
        return self.top + self.lines - 1

    @property
    def right(self) -> int:
        return self.left + self.cols - 1


@dataclass(frozen=True)
class SevenGeometry:
    # A/G/D horizontal band
    agd_col: int
    agd_width: int
    # F/E and B/C vertical bar columns
    fe_col: int
    bc_col: int
    a_line: int
    g_line: int
    d_line: int
    # Decimal point column, only for the seven_dp kind
    dp_col: int | None = None

    @property
    def upper_lines(self) -> range:
        return range(self.a_line + 1, self.g_line)

    @property
    def lower_lines(self) -> range:
        return range(self.g_line + 1, self.d_line)


@dataclass(frozen=True)
class ColonGeometry:
    col: int
    upper_line: int
    lower_line: int


@dataclass(frozen=True)
class SymbolGeometry:
    """Box-relative centre anchors plus the spans strokes are scaled onto."""

    top: int
    left: int
    mid_line: int
    mid_col: int
    line_span: int
    col_span: int

    @property
    def rows_per_unit(self) -> float:
        return self.line_span / NORMALIZED_EXTENT

    @property
    def cols_per_unit(self) -> float:
        return self.col_span / NORMALIZED_EXTENT


Geometry = Union[SevenGeometry, ColonGeometry, SymbolGeometry]


def seven_geometry(box: BoundingBox, *, decimal_point: bool = False) -> SevenGeometry:
    cols = box.cols - DP_WIDTH if decimal_point else box.cols
    return SevenGeometry(
        agd_col=box.left + BAR_WIDTH,
        agd_width=cols - 2 * BAR_WIDTH,
        fe_col=box.left,
        bc_col=box.left + cols - BAR_WIDTH,
        a_line=box.top,
        g_line=box.top + int((box.lines - 1 + 0.5) / 2),
        d_line=box.bottom,
        dp_col=box.left + box.cols - DP_WIDTH if decimal_point else None,
    )


def colon_geometry(box: BoundingBox) -> ColonGeometry:
    ofs = int((box.lines - 1 + 0.5) / 4)
    return ColonGeometry(
        col=box.left + BAR_WIDTH + (box.cols - 2 * BAR_WIDTH) // 2,
        upper_line=box.top + ofs,
        lower_line=box.bottom - ofs,
    )


def symbol_geometry(box: BoundingBox) -> SymbolGeometry:
    line_span = box.lines - 1
    col_span = box.cols - BAR_WIDTH
    return SymbolGeometry(
        top=box.top,
        left=box.left,
        mid_line=line_span // 2,
        mid_col=col_span // 2,
        line_span=line_span,
        col_span=col_span,
    )


def resolve_geometry(kind: DisplayKind, box: BoundingBox) -> Geometry:
    """Compute the full anchor set for a display kind within a box."""
    if kind is DisplayKind.SEVEN:
        return seven_geometry(box)
    if kind is DisplayKind.SEVEN_DP:
        return seven_geometry(box, decimal_point=True)
    if kind is DisplayKind.COLON:
        return colon_geometry(box)
    if kind is DisplayKind.SYMBOL:
        return symbol_geometry(box)
    raise ValueError(f"No geometry for display kind {kind!r}")
