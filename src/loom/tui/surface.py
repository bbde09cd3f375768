"""Drawing surfaces.

Widgets paint into a ``Surface``: a rectangle of character cells, each
holding one grapheme with a foreground and background colour. ``CellBuffer``
is the in-memory implementation the application renders into before the
result is turned into terminal lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from loom.tui.colors import DEFAULT, Color, style_sequence
from loom.tui.utils import Align, align_offset, check_align, graphemes

__all__ = [
    "Surface",
    "Cell",
    "CellBuffer",
    "print_text",
]


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


class Surface(Protocol):
    """A rectangle of character cells addressed by absolute coordinates."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def set_content(self, x: int, y: int, ch: str, fg: Color, bg: Color) -> None:
        """Write one character with its colours. Out-of-bounds writes are ignored."""
        ...


# ---------------------------------------------------------------------------
# CellBuffer
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Cell:
    ch: str = " "
    fg: Color = DEFAULT
    bg: Color = DEFAULT


_BLANK = Cell()


class CellBuffer:
    """In-memory surface.

    Parameters
    ----------
    width:
        Number of columns.
    height:
        Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = max(0, width)
        self._height = max(0, height)
        self._cells: list[list[Cell]] = [
            [_BLANK] * self._width for _ in range(self._height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_content(self, x: int, y: int, ch: str, fg: Color, bg: Color) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._cells[y][x] = Cell(ch, fg, bg)

    def get_content(self, x: int, y: int) -> Cell:
        if 0 <= x < self._width and 0 <= y < self._height:
            return self._cells[y][x]
        return _BLANK

    def fill(self, ch: str = " ", fg: Color = DEFAULT, bg: Color = DEFAULT) -> None:
        cell = Cell(ch, fg, bg)
        for row in self._cells:
            row[:] = [cell] * self._width

    def text_at(self, y: int) -> str:
        """Characters of row *y* without colours (handy for assertions)."""
        if not 0 <= y < self._height:
            return ""
        return "".join(cell.ch for cell in self._cells[y])

    def to_lines(self) -> list[str]:
        """Render every row as a string with SGR colour sequences."""
        lines: list[str] = []
        for row in self._cells:
            parts: list[str] = []
            style: tuple[Color, Color] | None = None
            for cell in row:
                if (cell.fg, cell.bg) != style:
                    style = (cell.fg, cell.bg)
                    parts.append(style_sequence(cell.fg, cell.bg))
                parts.append(cell.ch)
            parts.append("\x1b[0m")
            lines.append("".join(parts))
        return lines


# ---------------------------------------------------------------------------
# Printing primitive
# ---------------------------------------------------------------------------


def print_text(
    surface: Surface,
    text: str,
    x: int,
    y: int,
    max_width: int,
    align: Align,
    color: Color,
    background: Color = DEFAULT,
) -> tuple[int, int]:
    """Print *text* into the region ``x .. x + max_width`` on row *y*.

    Text longer than *max_width* is clipped on the side opposite to its
    alignment (centred text loses characters on both sides). Returns the
    number of graphemes printed and the column where printing started.
    """
    check_align(align)
    if max_width <= 0:
        return 0, x

    clusters = graphemes(text)
    overflow = len(clusters) - max_width
    if overflow > 0:
        if align == "right":
            clusters = clusters[overflow:]
        elif align == "center":
            left = overflow // 2
            clusters = clusters[left : left + max_width]
        else:
            clusters = clusters[:max_width]

    start = x + align_offset(len(clusters), max_width, align)
    for i, ch in enumerate(clusters):
        surface.set_content(start + i, y, ch, color, background)
    return len(clusters), start
