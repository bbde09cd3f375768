"""Colour names and their SGR encodings.

A colour is a string: one of the named terminal colours below, ``"default"``
for the terminal's own colour, or a ``"#rrggbb"`` hex triple (emitted as a
24-bit SGR sequence).
"""

from __future__ import annotations

import re

Color = str

DEFAULT = "default"

_NAMED_COLORS: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "gray": 60,
    "bright_red": 61,
    "bright_green": 62,
    "bright_yellow": 63,
    "bright_blue": 64,
    "bright_magenta": 65,
    "bright_cyan": 66,
    "bright_white": 67,
}

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def is_color(color: str) -> bool:
    return color == DEFAULT or color in _NAMED_COLORS or bool(_HEX_RE.match(color))


def _sgr(color: Color, base: int) -> str:
    if color == DEFAULT:
        return str(base + 9)
    code = _NAMED_COLORS.get(color)
    if code is not None:
        return str(base + code)
    m = _HEX_RE.match(color)
    if m is not None:
        r, g, b = (int(part, 16) for part in m.groups())
        return f"{base + 8};2;{r};{g};{b}"
    # Unknown names fall back to the terminal default
    return str(base + 9)


def fg_sgr(color: Color) -> str:
    """SGR parameter selecting *color* as foreground."""
    return _sgr(color, 30)


def bg_sgr(color: Color) -> str:
    """SGR parameter selecting *color* as background."""
    return _sgr(color, 40)


def style_sequence(fg: Color, bg: Color) -> str:
    """Full escape sequence switching to the given foreground/background."""
    return f"\x1b[0;{fg_sgr(fg)};{bg_sgr(bg)}m"
