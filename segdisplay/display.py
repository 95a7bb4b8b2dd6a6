"""SegmentDisplay — one character shown like a segmented LED or LCD display.

A display is configured once with a type and an initial value. The host
layout calls reshape() with the allocated box and render() with a surface
whenever it redraws. Types:

    seven     (alias "7")   7-segment bar display
    seven_dp  (alias "7.")  7-segment display with a decimal point
    colon     (alias ":")   a static double-dot colon
    symb                    a vector-drawn unit or SI-prefix symbol

The minimum box is MIN_LINES x MIN_COLS (5 x 6). Smaller boxes are not
clamped; hosts must not allocate below the minimum.
"""

from __future__ import annotations

import logging
from typing import Callable

from segdisplay.engine.constants import MIN_COLS, MIN_LINES
from segdisplay.engine.context import RenderContext
from segdisplay.engine.geometry import BoundingBox, Geometry, resolve_geometry
from segdisplay.engine.registry import RendererRegistry
from segdisplay.engine.renderer import Renderer
from segdisplay.models.display import DisplayKind, DisplayOptions
from segdisplay.models.style import StyleValues
from segdisplay.style import PaintAttributes, StyleProvider, resolve_paint_attributes
from segdisplay.surface.base import Surface

logger = logging.getLogger(__name__)


class SegmentDisplay:
    lines = MIN_LINES
    cols = MIN_COLS

    def __init__(
        self,
        type: str = "seven",
        value: str = "",
        *,
        style: StyleProvider | None = None,
        on_redraw: Callable[[], None] | None = None,
        registry: RendererRegistry | None = None,
    ) -> None:
        options = DisplayOptions(type=type, value=value)
        self.kind: DisplayKind = options.kind
        self._value = options.value

        self._renderer = Renderer(registry)
        self._renderer.require(self.kind)

        self._style = style or StyleProvider.from_settings()
        self._paints: PaintAttributes = resolve_paint_attributes(self._style.values)
        self._style.subscribe(self.on_style_changed)

        self._on_redraw = on_redraw
        self.needs_redraw = False

        self._box: BoundingBox | None = None
        self._geometry: Geometry | None = None

    @property
    def min_size(self) -> tuple[int, int]:
        return (self.lines, self.cols)

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        """Change the character on display and request a redraw."""
        self._value = value
        self.redraw()

    def redraw(self) -> None:
        self.needs_redraw = True
        if self._on_redraw is not None:
            self._on_redraw()

    @property
    def box(self) -> BoundingBox | None:
        return self._box

    @property
    def geometry(self) -> Geometry | None:
        return self._geometry

    @property
    def paints(self) -> PaintAttributes:
        return self._paints

    def reshape(self, box: BoundingBox) -> None:
        """Adopt a new bounding box, recomputing all geometry."""
        self._box = box
        self._geometry = resolve_geometry(self.kind, box)
        logger.debug(
            "Reshaped %s display to %dx%d at (%d, %d)",
            self.kind.value,
            box.lines,
            box.cols,
            box.top,
            box.left,
        )
        self.redraw()

    def on_style_changed(self, values: StyleValues) -> None:
        self._paints = resolve_paint_attributes(values)
        self.redraw()

    def close(self) -> None:
        """Stop listening for style changes."""
        self._style.unsubscribe(self.on_style_changed)

    def render(self, surface: Surface) -> None:
        if self._box is None or self._geometry is None:
            logger.debug("Render skipped: %s display has no box yet", self.kind.value)
            return
        ctx = RenderContext(
            surface=surface,
            kind=self.kind,
            box=self._box,
            geometry=self._geometry,
            paints=self._paints,
            value=self._value,
        )
        self._renderer.render(ctx)
        self.needs_redraw = False
