"""Box-drawing glyph tables used for frames and table borders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BorderGlyphs:
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    left_t: str
    right_t: str
    top_t: str
    bottom_t: str
    cross: str


SINGLE = BorderGlyphs(
    horizontal="─",
    vertical="│",
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    left_t="├",
    right_t="┤",
    top_t="┬",
    bottom_t="┴",
    cross="┼",
)

DOUBLE = BorderGlyphs(
    horizontal="═",
    vertical="║",
    top_left="╔",
    top_right="╗",
    bottom_left="╚",
    bottom_right="╝",
    left_t="╠",
    right_t="╣",
    top_t="╦",
    bottom_t="╩",
    cross="╬",
)
