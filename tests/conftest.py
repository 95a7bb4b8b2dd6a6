"""Shared test fixtures."""

from __future__ import annotations

import pytest

from segdisplay.display import SegmentDisplay
from segdisplay.engine.geometry import BoundingBox
from segdisplay.models.style import StyleValues
from segdisplay.style import PaintAttributes, StyleProvider, resolve_paint_attributes
from segdisplay.surface.grid import GridSurface

LIT = 1
UNLIT = 52

MIN_BOX = BoundingBox(lines=5, cols=6, top=0, left=0)

SYMBOL_BOX = BoundingBox(lines=9, cols=10, top=0, left=0)


@pytest.fixture
def style() -> StyleProvider:
    return StyleProvider(StyleValues(lit=LIT, unlit=UNLIT))


@pytest.fixture
def paints(style: StyleProvider) -> PaintAttributes:
    return resolve_paint_attributes(style.values)


@pytest.fixture
def make_display(style: StyleProvider):
    """Build a display already reshaped into ``box``."""

    def _make(type: str, value: str = "", box: BoundingBox = MIN_BOX) -> SegmentDisplay:
        display = SegmentDisplay(type=type, value=value, style=style)
        display.reshape(box)
        return display

    return _make


@pytest.fixture
def render(make_display):
    """Render one display onto a fresh surface sized to its box."""

    def _render(type: str, value: str = "", box: BoundingBox = MIN_BOX) -> GridSurface:
        display = make_display(type, value, box)
        surface = GridSurface(box.top + box.lines, box.left + box.cols)
        display.render(surface)
        return surface

    return _render
