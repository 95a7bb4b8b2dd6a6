"""Command-line demo: render one display per value, side by side.

Usage:
  segdisplay 1 2 : 3 4                                   # clock-style row
  segdisplay --type seven_dp 3. 1 4                      # decimal point digits
  segdisplay --type symb --lines 9 --cols 10 V A W Ω M k m µ
  segdisplay --text 8                                    # plain characters
  segdisplay --png row.png 4 2                           # also save an image
  segdisplay --list-types                                # available display types
"""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

from segdisplay.config import settings
from segdisplay.display import SegmentDisplay
from segdisplay.engine import register_renderers
from segdisplay.engine.constants import MIN_COLS, MIN_LINES
from segdisplay.engine.geometry import BoundingBox
from segdisplay.engine.registry import get_registry
from segdisplay.style import PaintAttributes, StyleProvider
from segdisplay.surface.grid import GridSurface

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="segdisplay",
        description="Show characters like a segmented LED/LCD display",
    )
    parser.add_argument("values", nargs="*", help="One character per display")
    parser.add_argument("-t", "--type", default=None, help="seven, seven_dp, colon or symb")
    parser.add_argument("--lines", type=int, default=MIN_LINES + 2, help="Display height in cells")
    parser.add_argument("--cols", type=int, default=MIN_COLS + 2, help="Display width in cells")
    parser.add_argument("--spacing", type=int, default=1, help="Blank columns between displays")
    parser.add_argument("--text", action="store_true", help="Print # and . instead of colours")
    parser.add_argument("--png", default=None, help="Also save the row as a PNG image")
    parser.add_argument("--list-types", action="store_true", help="List display types and exit")
    return parser


def render_row(
    values: list[str],
    type_name: str,
    lines: int,
    cols: int,
    spacing: int = 1,
    style: StyleProvider | None = None,
) -> tuple[GridSurface, PaintAttributes]:
    """Lay displays out left to right and render them onto one surface."""
    style = style or StyleProvider.from_settings()
    width = len(values) * cols + (len(values) - 1) * spacing
    surface = GridSurface(lines, width)

    paints = None
    for i, value in enumerate(values):
        display = SegmentDisplay(type=type_name, value=value, style=style)
        display.reshape(BoundingBox(lines=lines, cols=cols, top=0, left=i * (cols + spacing)))
        display.render(surface)
        display.close()
        paints = display.paints

    return surface, paints


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.segdisplay_log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_types:
        register_renderers()
        for spec in get_registry().all():
            print(f"{spec.kind.value:<10} {spec.description}")
        return 0
    if not args.values:
        parser.error("at least one value is required")

    if args.lines < MIN_LINES or args.cols < MIN_COLS:
        parser.error(f"display must be at least {MIN_LINES} lines x {MIN_COLS} cols")
    if args.spacing < 0:
        parser.error("spacing must not be negative")

    type_name = args.type or settings.segdisplay_type
    try:
        surface, paints = render_row(args.values, type_name, args.lines, args.cols, args.spacing)
    except ValueError as e:
        parser.error(str(e))

    if args.text:
        print(surface.to_text({paints.lit: "#", paints.unlit: "."}))
    else:
        print(surface.to_ansi())

    if args.png:
        surface.to_image().save(args.png)
        logger.info("Saved %s", args.png)

    return 0
