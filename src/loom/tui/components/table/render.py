"""Painting a computed viewport onto a surface."""

from __future__ import annotations

from loom.tui.colors import Color
from loom.tui.components.table.cells import CellStore
from loom.tui.components.table.state import TableState
from loom.tui.components.table.viewport import Viewport
from loom.tui.glyphs import SINGLE, BorderGlyphs
from loom.tui.surface import Surface, print_text
from loom.tui.utils import truncate_to_width


def paint_table(
    surface: Surface,
    cells: CellStore,
    state: TableState,
    viewport: Viewport,
    rect: tuple[int, int, int, int],
    background: Color,
    glyphs: BorderGlyphs = SINGLE,
) -> None:
    """Paint *viewport* into *rect* (the table's inner rectangle).

    Coordinates below are relative to the rectangle's origin. Nothing is
    painted outside of it.
    """
    x, y, width, height = rect
    rows = viewport.rows
    both = state.rows_selectable and state.columns_selectable

    def draw_border(col_x: int, row_y: int, ch: str, selected: bool) -> None:
        if not (0 <= col_x < width and 0 <= row_y < height):
            return
        if selected:
            surface.set_content(x + col_x, y + row_y, ch, background, state.borders_color)
        else:
            surface.set_content(x + col_x, y + row_y, ch, state.borders_color, background)

    def is_row_selected(row: int) -> bool:
        return (
            state.rows_selectable
            and not state.columns_selectable
            and row == state.selected_row
        )

    # Borderless tables have no left border column
    column_x = 0 if state.borders else -1

    for column_index, span in enumerate(viewport.columns):
        column, column_width = span.index, span.width
        column_selected = (
            state.columns_selectable
            and not state.rows_selectable
            and column == state.selected_column
        )

        for row_index, row in enumerate(rows):
            row_selected = is_row_selected(row)
            cell_selected = (
                column_selected
                or row_selected
                or (both and column == state.selected_column and row == state.selected_row)
            )

            if state.borders:
                row_y = 2 * row_index
                for pos in range(column_width):
                    if column_x + 1 + pos >= width:
                        break
                    draw_border(column_x + 1 + pos, row_y, glyphs.horizontal, column_selected)
                ch = glyphs.cross
                if column_index == 0:
                    ch = glyphs.top_left if row_y == 0 else glyphs.left_t
                elif row_y == 0:
                    ch = glyphs.top_t
                draw_border(column_x, row_y, ch, False)
                row_y += 1
                if row_y >= height:
                    break  # No room left for the text line
                draw_border(column_x, row_y, glyphs.vertical, row_selected)
            else:
                row_y = row_index
                if column_index > 0:
                    draw_border(column_x, row_y, state.separator, row_selected)

            cell = cells.get(row, column)
            bg_color: Color = background
            text_color: Color = cell.color
            if cell_selected:
                bg_color, text_color = cell.color, background

            for pos in range(column_width):
                if column_x + 1 + pos >= width:
                    break
                surface.set_content(x + column_x + 1 + pos, y + row_y, " ", text_color, bg_color)

            text_width = column_width
            if column_x + 1 + text_width >= width:
                text_width = width - column_x - 1
            if text_width > 0:
                print_text(
                    surface,
                    truncate_to_width(cell.text, text_width),
                    x + column_x + 1,
                    y + row_y,
                    text_width,
                    cell.align,
                    text_color,
                    bg_color,
                )

        # Bottom border
        bottom_y = 2 * len(rows)
        if state.borders and bottom_y < height:
            for pos in range(column_width):
                if column_x + 1 + pos >= width:
                    break
                draw_border(column_x + 1 + pos, bottom_y, glyphs.horizontal, column_selected)
            ch = glyphs.bottom_left if column_index == 0 else glyphs.bottom_t
            draw_border(column_x, bottom_y, ch, False)

        column_x += column_width + 1

    # Right border
    if state.borders and viewport.columns and column_x < width:
        for row_index, row in enumerate(rows):
            row_y = 2 * row_index
            if row_y + 1 < height:
                draw_border(column_x, row_y + 1, glyphs.vertical, is_row_selected(row))
            ch = glyphs.top_right if row_y == 0 else glyphs.right_t
            draw_border(column_x, row_y, ch, False)
        bottom_y = 2 * len(rows)
        if bottom_y < height:
            draw_border(column_x, bottom_y, glyphs.bottom_right, False)
