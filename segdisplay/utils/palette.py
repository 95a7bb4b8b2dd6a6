"""Terminal colour names, palette indices and xterm-256 RGB. No engine imports."""

from __future__ import annotations

COLOUR_NAMES: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "hi-black": 8,
    "hi-red": 9,
    "hi-green": 10,
    "hi-yellow": 11,
    "hi-blue": 12,
    "hi-magenta": 13,
    "hi-cyan": 14,
    "hi-white": 15,
}

PALETTE_SIZE = 256

_BASE_16: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
    (127, 127, 127),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (92, 92, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

# 6x6x6 colour cube occupies indices 16..231
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
_CUBE_START = 16
_GREY_START = 232


def parse_colour(value: int | str) -> int:
    """Accept a colour name, a palette index, or a decimal index string."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid colour {value!r}")
    if isinstance(value, str):
        name = value.strip()
        if name in COLOUR_NAMES:
            return COLOUR_NAMES[name]
        if not name.isdecimal():
            raise ValueError(f"Unrecognised colour name {value!r}")
        value = int(name)
    if not isinstance(value, int) or not 0 <= value < PALETTE_SIZE:
        raise ValueError(f"Colour index out of range: {value!r}")
    return value


def colour_to_rgb(index: int) -> tuple[int, int, int]:
    """RGB triple for an xterm-256 palette index."""
    if index < _CUBE_START:
        return _BASE_16[index]
    if index < _GREY_START:
        i = index - _CUBE_START
        return (_CUBE_LEVELS[i // 36], _CUBE_LEVELS[(i // 6) % 6], _CUBE_LEVELS[i % 6])
    level = 8 + 10 * (index - _GREY_START)
    return (level, level, level)
