"""Clears the box, then dispatches to the kind's registered renderer."""

from __future__ import annotations

import logging
import time

from segdisplay.engine import register_renderers
from segdisplay.engine.context import RenderContext
from segdisplay.engine.registry import RendererRegistry, get_registry
from segdisplay.models.display import DisplayKind

logger = logging.getLogger(__name__)


class Renderer:
    """Orchestrates one render call against a surface."""

    def __init__(self, registry: RendererRegistry | None = None) -> None:
        if registry is None:
            register_renderers()
            registry = get_registry()
        self.registry = registry

    def require(self, kind: DisplayKind) -> None:
        """Fail unless a renderer is registered for ``kind``."""
        if kind in self.registry.missing():
            raise ValueError(f"No renderer registered for display type {kind.value!r}")

    def render(self, ctx: RenderContext) -> RenderContext:
        start = time.perf_counter()

        ctx.surface.set_paint(ctx.paints.unlit)
        ctx.surface.erase_rect(ctx.box)

        spec = self.registry.get(ctx.kind)
        spec.fn(ctx)

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            "Rendered %s %r: %d runs in %.2fms",
            ctx.kind.value,
            ctx.value,
            ctx.runs,
            elapsed,
        )
        return ctx
