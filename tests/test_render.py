"""Tests for table painting -- borders, separators, highlighting and clipping."""

from __future__ import annotations

from loom.tui.components.table import (
    CellStore,
    Table,
    TableCell,
    TableState,
    compute_viewport,
    paint_table,
)
from loom.tui.glyphs import DOUBLE
from loom.tui.surface import Cell, CellBuffer


def _table(*rows: list[str], **cell_fields) -> Table:
    table = Table()
    for r, row in enumerate(rows):
        for c, text in enumerate(row):
            table.set_cell(r, c, TableCell(text, **cell_fields))
    return table


def _draw(table: Table, width: int, height: int, buffer_width: int | None = None) -> CellBuffer:
    buffer = CellBuffer(buffer_width or width, height)
    table.set_rect(0, 0, width, height)
    table.draw(buffer)
    return buffer


class TestBorderless:
    def test_separator_between_columns(self):
        table = _table(["ab", "cd"]).set_separator("|")
        buffer = _draw(table, 10, 1)
        assert buffer.text_at(0) == "ab|cd     "

    def test_separator_uses_border_color(self):
        table = _table(["ab", "cd"]).set_separator("|").set_borders_color("cyan")
        buffer = _draw(table, 10, 1)
        sep = buffer.get_content(2, 0)
        assert sep == Cell("|", "cyan", "black")

    def test_no_separator_before_first_column(self):
        table = _table(["ab"]).set_separator("|")
        buffer = _draw(table, 5, 1)
        assert buffer.text_at(0) == "ab   "

    def test_rows_on_consecutive_lines(self):
        table = _table(["a", "b"], ["c", "d"])
        buffer = _draw(table, 5, 2)
        assert buffer.text_at(0) == "a b  "
        assert buffer.text_at(1) == "c d  "


class TestBorders:
    def test_single_row(self):
        table = _table(["ab", "cd"]).set_borders(True)
        buffer = _draw(table, 10, 3)
        assert buffer.text_at(0) == "┌──┬──┐   "
        assert buffer.text_at(1) == "│ab│cd│   "
        assert buffer.text_at(2) == "└──┴──┘   "

    def test_two_rows(self):
        table = _table(["ab", "cd"], ["ef", "gh"]).set_borders(True)
        buffer = _draw(table, 8, 5)
        assert buffer.text_at(0) == "┌──┬──┐ "
        assert buffer.text_at(1) == "│ab│cd│ "
        assert buffer.text_at(2) == "├──┼──┤ "
        assert buffer.text_at(3) == "│ef│gh│ "
        assert buffer.text_at(4) == "└──┴──┘ "

    def test_no_bottom_border_without_room(self):
        table = _table(["ab"], ["cd"]).set_borders(True).set_offset(0, 0)
        buffer = _draw(table, 5, 4)
        assert buffer.text_at(2) == "├──┤ "
        assert buffer.text_at(3) == "│cd│ "

    def test_border_color(self):
        table = _table(["ab"]).set_borders(True).set_borders_color("green")
        buffer = _draw(table, 5, 3)
        assert buffer.get_content(0, 0) == Cell("┌", "green", "black")

    def test_empty_table_draws_nothing(self):
        table = Table().set_borders(True)
        buffer = _draw(table, 5, 3)
        assert all(buffer.text_at(y) == "     " for y in range(3))

    def test_custom_glyphs(self):
        cells = CellStore()
        cells.set(0, 0, TableCell("ab"))
        state = TableState(borders=True)
        viewport = compute_viewport(cells, state, 6, 3)
        buffer = CellBuffer(6, 3)
        paint_table(buffer, cells, state, viewport, (0, 0, 6, 3), "black", DOUBLE)
        assert buffer.text_at(0) == "╔══╗  "
        assert buffer.text_at(2) == "╚══╝  "


class TestHighlight:
    def test_selected_row_swaps_colors(self):
        table = _table(["ab", "cd"], ["ef", "gh"], color="white")
        table.set_selectable(True, False).set_selected(1, 0)
        buffer = _draw(table, 10, 3)
        assert buffer.get_content(0, 1) == Cell("e", "black", "white")
        assert buffer.get_content(3, 1) == Cell("g", "black", "white")
        assert buffer.get_content(0, 0) == Cell("a", "white", "black")

    def test_selected_column_swaps_colors(self):
        table = _table(["ab", "cd"], ["ef", "gh"], color="white")
        table.set_selectable(False, True).set_selected(0, 1)
        buffer = _draw(table, 10, 3)
        assert buffer.get_content(3, 0) == Cell("c", "black", "white")
        assert buffer.get_content(3, 1) == Cell("g", "black", "white")
        assert buffer.get_content(0, 0) == Cell("a", "white", "black")

    def test_selected_cell_only(self):
        table = _table(["ab", "cd"], ["ef", "gh"], color="yellow")
        table.set_selectable(True, True).set_selected(1, 1)
        buffer = _draw(table, 10, 3)
        assert buffer.get_content(3, 1) == Cell("g", "black", "yellow")
        assert buffer.get_content(0, 1) == Cell("e", "yellow", "black")
        assert buffer.get_content(3, 0) == Cell("c", "yellow", "black")

    def test_selected_row_border_highlight(self):
        table = _table(["ab"], ["cd"]).set_borders(True)
        table.set_selectable(True, False).set_selected(0, 0)
        buffer = _draw(table, 5, 5)
        assert buffer.get_content(0, 1) == Cell("│", "black", "white")
        assert buffer.get_content(0, 3) == Cell("│", "white", "black")

    def test_no_highlight_without_selection(self):
        table = _table(["ab"], color="white")
        buffer = _draw(table, 5, 1)
        assert buffer.get_content(0, 0) == Cell("a", "white", "black")


class TestText:
    def test_long_text_gets_ellipsis(self):
        table = _table(["hello"], max_width=3)
        buffer = _draw(table, 10, 1)
        assert buffer.text_at(0)[:4] == "he… "

    def test_right_alignment(self):
        table = Table()
        table.set_cell(0, 0, TableCell("ab", align="right"))
        table.set_cell(1, 0, TableCell("abcd"))
        buffer = _draw(table, 6, 2)
        assert buffer.text_at(0) == "  ab  "

    def test_center_alignment(self):
        table = Table()
        table.set_cell(0, 0, TableCell("ab", align="center"))
        table.set_cell(1, 0, TableCell("abcdef"))
        buffer = _draw(table, 6, 2)
        assert buffer.text_at(0) == "  ab  "

    def test_column_clipped_at_right_edge(self):
        table = _table(["abcd", "efgh"])
        buffer = _draw(table, 7, 1, buffer_width=12)
        assert buffer.text_at(0)[:7] == "abcd e…"
        assert buffer.get_content(7, 0) == Cell()

    def test_nothing_painted_outside_rect(self):
        table = _table(["abcdef", "ghijkl", "mnopqr"]).set_borders(True)
        buffer = _draw(table, 9, 3, buffer_width=20)
        for x in range(9, 20):
            assert buffer.get_content(x, 1) == Cell()

    def test_frame_border_insets_table(self):
        table = _table(["ab"])
        table.frame.set_border(True)
        buffer = _draw(table, 6, 3)
        assert buffer.text_at(1) == "│ab  │"
