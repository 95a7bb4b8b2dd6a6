"""Unit letters and SI prefixes drawn as lit vector strokes."""

from __future__ import annotations

from segdisplay.engine.context import RenderContext
from segdisplay.engine.rasterizer import rasterize_strokes
from segdisplay.engine.registry import renderer
from segdisplay.engine.strokes import strokes_for
from segdisplay.models.display import DisplayKind


@renderer(kind=DisplayKind.SYMBOL, description="Vector-drawn unit and SI-prefix symbols")
def render_symbol(ctx: RenderContext) -> None:
    for run in rasterize_strokes(strokes_for(ctx.value), ctx.geometry):
        ctx.fill(run.line, run.col, run.width, ctx.paints.lit)
