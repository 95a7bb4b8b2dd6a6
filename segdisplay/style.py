"""Paint attributes and the style provider that supplies them.

Displays never read colours directly. A StyleProvider holds the current
StyleValues and notifies subscribers on change; each display then rebuilds
its PaintAttributes in full via resolve_paint_attributes().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from segdisplay.config import Settings, settings
from segdisplay.models.style import StyleValues

logger = logging.getLogger(__name__)

StyleCallback = Callable[[StyleValues], None]


@dataclass(frozen=True)
class Pen:
    """Opaque paint token: the background colour a cell is filled with."""

    bg: int


@dataclass(frozen=True)
class PaintAttributes:
    lit: Pen
    unlit: Pen


def resolve_paint_attributes(values: StyleValues) -> PaintAttributes:
    return PaintAttributes(lit=Pen(bg=values.lit), unlit=Pen(bg=values.unlit))


class StyleProvider:
    """Holds style values and broadcasts changes to subscribed displays."""

    def __init__(self, values: StyleValues | None = None) -> None:
        self._values = values or StyleValues()
        self._subscribers: list[StyleCallback] = []

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> StyleProvider:
        config = config or settings
        return cls(StyleValues(lit=config.segdisplay_lit, unlit=config.segdisplay_unlit))

    @property
    def values(self) -> StyleValues:
        return self._values

    def color_for(self, key: str) -> int:
        if key not in StyleValues.model_fields:
            raise KeyError(f"Unknown style key: {key!r}")
        return getattr(self._values, key)

    def subscribe(self, callback: StyleCallback) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: StyleCallback) -> None:
        self._subscribers.remove(callback)

    def update(self, **changes: int | str) -> StyleValues:
        """Validate and apply new colours, notifying subscribers if anything changed."""
        values = StyleValues.model_validate({**self._values.model_dump(), **changes})
        if values == self._values:
            return values
        self._values = values
        logger.debug("Style changed: lit=%d unlit=%d", values.lit, values.unlit)
        for callback in list(self._subscribers):
            callback(values)
        return values
