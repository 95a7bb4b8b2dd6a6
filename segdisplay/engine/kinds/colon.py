"""Static double-dot colon. The value is ignored."""

from __future__ import annotations

from segdisplay.engine.constants import BAR_WIDTH
from segdisplay.engine.context import RenderContext
from segdisplay.engine.registry import renderer
from segdisplay.models.display import DisplayKind


@renderer(kind=DisplayKind.COLON, description="Static double-dot colon")
def render_colon(ctx: RenderContext) -> None:
    geometry = ctx.geometry
    ctx.fill(geometry.upper_line, geometry.col, BAR_WIDTH, ctx.paints.lit)
    ctx.fill(geometry.lower_line, geometry.col, BAR_WIDTH, ctx.paints.lit)
