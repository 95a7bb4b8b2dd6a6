"""Seven-segment digit with a decimal point mark in the two rightmost columns."""

from __future__ import annotations

from segdisplay.engine.constants import DP_WIDTH
from segdisplay.engine.context import RenderContext
from segdisplay.engine.kinds.seven import paint_digit
from segdisplay.engine.registry import renderer
from segdisplay.engine.segments import parse_digit_and_dot, segment_state
from segdisplay.models.display import DisplayKind


@renderer(kind=DisplayKind.SEVEN_DP, description="7-segment bar display with decimal point")
def render_seven_dp(ctx: RenderContext) -> None:
    geometry = ctx.geometry
    digit, has_dot = parse_digit_and_dot(ctx.value)

    paint_digit(ctx, geometry, segment_state(digit))
    ctx.fill(geometry.d_line, geometry.dp_col, DP_WIDTH, ctx.pen(has_dot))
