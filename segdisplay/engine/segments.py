"""Seven-segment font and value parsing.

The 7 segments are

     AAA
    F   B
    F   B
     GGG
    E   C
    E   C
     DDD

B, C, E, F are two columns wide; A, D, G are one line tall.
"""

from __future__ import annotations

from typing import NamedTuple

SEGMENT_NAMES = "ABCDEFG"

DIGITS = "0123456789"


class SegmentState(NamedTuple):
    a: bool = False
    b: bool = False
    c: bool = False
    d: bool = False
    e: bool = False
    f: bool = False
    g: bool = False

    @classmethod
    def from_segments(cls, segments: str) -> SegmentState:
        return cls(*(name in segments for name in SEGMENT_NAMES))

    def is_lit(self, segment: str) -> bool:
        return getattr(self, segment.lower())


_FONT: dict[str, str] = {
    "0": "ABCDEF",
    "1": "BC",
    "2": "ABDEG",
    "3": "ABCDG",
    "4": "BCFG",
    "5": "ACDFG",
    "6": "ACDEFG",
    "7": "ABC",
    "8": "ABCDEFG",
    "9": "ABCDFG",
}

SEGMENT_TABLE: dict[str, SegmentState] = {
    digit: SegmentState.from_segments(segments) for digit, segments in _FONT.items()
}

ALL_UNLIT = SegmentState()


def segment_state(value: str | None) -> SegmentState:
    """State for an exact digit string; anything else is all unlit."""
    if value is None:
        return ALL_UNLIT
    return SEGMENT_TABLE.get(value, ALL_UNLIT)


def parse_digit_and_dot(value: str) -> tuple[str | None, bool]:
    """Split a value into (optional digit, trailing dot).

    At most one leading digit, then at most one ".". Any other input parses
    as no digit and no dot.
    """
    digit = None
    rest = value
    if rest and rest[0] in DIGITS:
        digit, rest = rest[0], rest[1:]
    if rest == "":
        return digit, False
    if rest == ".":
        return digit, True
    return None, False
