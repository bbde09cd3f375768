"""Frame component - background, optional border and title around a widget."""

from __future__ import annotations

from loom.tui.colors import Color
from loom.tui.glyphs import DOUBLE, SINGLE
from loom.tui.surface import Surface, print_text
from loom.tui.utils import Align, check_align, text_length


class Frame:
    """Frame decoration shared by widgets.

    Widgets own a ``Frame`` and call :meth:`draw` before painting their
    content into :meth:`get_inner_rect`. The border is drawn with double
    lines while the owner is focused.
    """

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.width = 15
        self.height = 10
        self.focused = False

        self.background_color: Color = "black"
        self.border = False
        self.border_color: Color = "white"
        self.title = ""
        self.title_color: Color = "white"
        self.title_align: Align = "center"

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.x, self.y = x, y
        self.width, self.height = max(0, width), max(0, height)

    def get_rect(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height

    def set_border(self, show: bool) -> None:
        self.border = show

    def set_title(self, title: str, align: Align = "center") -> None:
        self.title = title
        self.title_align = check_align(align)

    def get_inner_rect(self) -> tuple[int, int, int, int]:
        """Drawable area left after the border."""
        if not self.border:
            return self.get_rect()
        return (
            self.x + 1,
            self.y + 1,
            max(0, self.width - 2),
            max(0, self.height - 2),
        )

    def draw(self, surface: Surface) -> None:
        if self.width <= 0 or self.height <= 0:
            return

        bg = self.background_color
        for row in range(self.y, self.y + self.height):
            for col in range(self.x, self.x + self.width):
                surface.set_content(col, row, " ", bg, bg)

        if not self.border or self.width < 2 or self.height < 2:
            return

        glyphs = DOUBLE if self.focused else SINGLE
        fg = self.border_color
        right = self.x + self.width - 1
        bottom = self.y + self.height - 1
        for col in range(self.x + 1, right):
            surface.set_content(col, self.y, glyphs.horizontal, fg, bg)
            surface.set_content(col, bottom, glyphs.horizontal, fg, bg)
        for row in range(self.y + 1, bottom):
            surface.set_content(self.x, row, glyphs.vertical, fg, bg)
            surface.set_content(right, row, glyphs.vertical, fg, bg)
        surface.set_content(self.x, self.y, glyphs.top_left, fg, bg)
        surface.set_content(right, self.y, glyphs.top_right, fg, bg)
        surface.set_content(self.x, bottom, glyphs.bottom_left, fg, bg)
        surface.set_content(right, bottom, glyphs.bottom_right, fg, bg)

        if self.title and self.width > 4:
            title_width = self.width - 2
            printed, _ = print_text(
                surface,
                self.title,
                self.x + 1,
                self.y,
                title_width,
                self.title_align,
                self.title_color,
                bg,
            )
            if text_length(self.title) > printed and printed > 0:
                # Mark the cut-off title
                end = self.x + 1 + title_width - 1
                if self.title_align == "right":
                    end = self.x + 1
                surface.set_content(end, self.y, "…", self.title_color, bg)
