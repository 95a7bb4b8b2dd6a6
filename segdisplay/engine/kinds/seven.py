"""Seven-segment digit: lights bars A..G per the segment table."""

from __future__ import annotations

from segdisplay.engine.constants import BAR_WIDTH
from segdisplay.engine.context import RenderContext
from segdisplay.engine.geometry import SevenGeometry
from segdisplay.engine.registry import renderer
from segdisplay.engine.segments import SegmentState, segment_state
from segdisplay.models.display import DisplayKind


def paint_digit(ctx: RenderContext, geometry: SevenGeometry, state: SegmentState) -> None:
    """Paint all seven bars, each lit or unlit per ``state``."""
    for segment, line in (("A", geometry.a_line), ("G", geometry.g_line), ("D", geometry.d_line)):
        ctx.fill(line, geometry.agd_col, geometry.agd_width, ctx.pen(state.is_lit(segment)))

    f_pen, b_pen = ctx.pen(state.f), ctx.pen(state.b)
    for line in geometry.upper_lines:
        ctx.fill(line, geometry.fe_col, BAR_WIDTH, f_pen)
        ctx.fill(line, geometry.bc_col, BAR_WIDTH, b_pen)

    e_pen, c_pen = ctx.pen(state.e), ctx.pen(state.c)
    for line in geometry.lower_lines:
        ctx.fill(line, geometry.fe_col, BAR_WIDTH, e_pen)
        ctx.fill(line, geometry.bc_col, BAR_WIDTH, c_pen)


@renderer(kind=DisplayKind.SEVEN, description="7-segment bar display")
def render_seven(ctx: RenderContext) -> None:
    paint_digit(ctx, ctx.geometry, segment_state(ctx.value))
