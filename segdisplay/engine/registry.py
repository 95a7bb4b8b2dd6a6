"""Renderer registry — one render function per display kind, registered via decorator.

Usage:
    @renderer(kind=DisplayKind.COLON, description="Static double-dot colon")
    def render_colon(ctx: RenderContext) -> None:
        ...

Adding a new display kind = one enum member plus one module with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from segdisplay.models.display import DisplayKind

if TYPE_CHECKING:
    from segdisplay.engine.context import RenderContext

logger = logging.getLogger(__name__)

@dataclass
class RendererSpec:
    kind: DisplayKind
    fn: Callable[["RenderContext"], None]
    description: str = ""

class RendererRegistry:
    """Registry of kind renderers."""

    def __init__(self) -> None:
        self._renderers: dict[DisplayKind, RendererSpec] = {}

    def register(self, spec: RendererSpec) -> None:
        if spec.kind in self._renderers:
            raise ValueError(f"Duplicate renderer for display kind: {spec.kind.value}")
        self._renderers[spec.kind] = spec
        logger.debug("Registered renderer for %s", spec.kind.value)

    def get(self, kind: DisplayKind) -> RendererSpec:
        return self._renderers[kind]

    def all(self) -> list[RendererSpec]:
        order = list(DisplayKind)
        return sorted(self._renderers.values(), key=lambda s: order.index(s.kind))

    def missing(self) -> set[DisplayKind]:
        """Display kinds with no registered renderer."""
        return set(DisplayKind) - set(self._renderers)

# Module-level singleton
_registry = RendererRegistry()

def get_registry() -> RendererRegistry:
    return _registry

def renderer(*, kind: DisplayKind, description: str = ""):
    """Decorator to register a kind renderer."""

    def decorator(fn: Callable[["RenderContext"], None]):
        _registry.register(RendererSpec(kind=kind, fn=fn, description=description))
        return fn

    return decorator
