"""In-game text colour codes and their readable names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

#: Marker that starts a colour code inside game strings.
BINARY_PREFIX = "\u00ffc"


class Color(Enum):
    """Text colours known to the game."""

    white = 0
    grey = 1
    red = 2
    green = 3
    blue = 4
    gold = 5
    dgrey = 6
    black = 7
    tan = 8
    orange = 9
    yellow = 10
    dgreen = 11
    purple = 12
    colorcode = 13

    transparent = 7


@dataclass(frozen=True)
class ColorDesc:
    """Everything known about one colour."""

    color: Color
    short_code: str
    full_binary_code: str
    rgb: tuple[int, int, int]
    user_readable: str


_COLOR_DATA = [
    (Color.white, "\x2f", (255, 255, 255)),
    (Color.grey, "\x30", (0xC0, 0xC0, 0xC0)),
    (Color.red, "\x31", (255, 0, 0)),
    (Color.green, "\x32", (0, 255, 0)),
    (Color.blue, "\x33", (80, 80, 200)),
    (Color.gold, "\x34", (160, 145, 105)),
    (Color.dgrey, "\x35", (0x80, 0x80, 0x80)),
    (Color.black, "\x36", (0, 0, 0)),
    (Color.tan, "\x37", (170, 160, 120)),
    (Color.orange, "\x38", (250, 170, 35)),
    (Color.yellow, "\x39", (255, 255, 0)),
    (Color.dgreen, "\x3a", (0, 0x80, 0)),
    (Color.purple, "\x3b", (150, 90, 250)),
    (Color.colorcode, "\x00", (0, 0, 0)),
]

_DESCS = {
    color: ColorDesc(
        color=color,
        short_code=code,
        full_binary_code=BINARY_PREFIX + code,
        rgb=rgb,
        user_readable=color.name,
    )
    for color, code, rgb in _COLOR_DATA
}

_CODE_TO_USER = {desc.short_code: desc.user_readable for desc in _DESCS.values()}
_USER_TO_BINARY = {desc.user_readable: desc.full_binary_code for desc in _DESCS.values()}

_USER_MARKER = re.compile(r"\\\{([A-Za-z]+)\}")


def get_color_desc(color: Color) -> ColorDesc:
    """Return the description of ``color``."""
    return _DESCS[color]


def replace_colors_to_user(s: str) -> str:
    """Turn embedded colour codes into readable ``\\{name}`` markers."""
    prefix_len = len(BINARY_PREFIX)
    pos = s.find(BINARY_PREFIX)
    while pos != -1:
        code_pos = pos + prefix_len
        # A code at the very end reads as the NUL terminator.
        code = s[code_pos] if code_pos < len(s) else "\x00"
        name = _CODE_TO_USER.get(code)
        if name is None:
            pos = s.find(BINARY_PREFIX, code_pos)
            continue
        replacement = "\\{" + name + "}"
        s = s[:pos] + replacement + s[code_pos + 1:]
        pos = s.find(BINARY_PREFIX, pos + len(replacement))
    return s


def replace_colors_to_binary(s: str) -> str:
    """Turn readable ``\\{name}`` markers back into embedded colour codes.

    Markers naming an unknown colour are left untouched.
    """

    def _replace(match: re.Match[str]) -> str:
        return _USER_TO_BINARY.get(match.group(1), match.group(0))

    return _USER_MARKER.sub(_replace, s)