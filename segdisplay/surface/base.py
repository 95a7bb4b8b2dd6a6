"""Drawing surface interface consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from segdisplay.engine.geometry import BoundingBox
    from segdisplay.style import Pen


@dataclass(frozen=True)
class PaintRun:
    """A horizontal run of ``width`` cells starting at (line, col)."""

    line: int
    col: int
    width: int


class Surface(Protocol):
    def erase_rect(self, box: BoundingBox) -> None:
        """Fill the whole box with the current default paint."""
        ...

    def fill_run(self, line: int, col: int, width: int, paint: Pen | None = None) -> None:
        """Paint ``width`` cells on ``line`` from ``col``; None uses the default paint."""
        ...

    def set_paint(self, paint: Pen | None) -> None:
        """Set the default paint for erase_rect and unattributed fills."""
        ...
