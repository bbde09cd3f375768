"""Tests for compute_viewport -- visible rows, column fitting and eviction."""

from __future__ import annotations

import pytest

from loom.tui.components.table import (
    CellStore,
    ColumnSpan,
    TableCell,
    TableState,
    compute_viewport,
)


def _grid(rows: int, columns: int, text: str = "aaaa") -> CellStore:
    store = CellStore()
    for r in range(rows):
        for c in range(columns):
            store.set(r, c, TableCell(text))
    return store


def _indices(viewport) -> list[int]:
    return [span.index for span in viewport.columns]


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


class TestRowOffset:
    def test_track_end_shows_last_rows(self):
        vp = compute_viewport(_grid(10, 1), TableState(), 20, 3)
        assert vp.row_offset == 7
        assert vp.rows == [7, 8, 9]
        assert vp.track_end is True

    def test_explicit_offset_without_track_end(self):
        state = TableState(row_offset=2, track_end=False)
        vp = compute_viewport(_grid(10, 1), state, 20, 3)
        assert vp.row_offset == 2
        assert vp.rows == [2, 3, 4]

    def test_content_that_fits_reenables_track_end(self):
        state = TableState(row_offset=3, track_end=False)
        vp = compute_viewport(_grid(2, 1), state, 20, 5)
        assert vp.track_end is True
        assert vp.row_offset == 0
        assert vp.rows == [0, 1]

    def test_selection_above_window_pulls_offset_down(self):
        state = TableState(
            rows_selectable=True, selected_row=2, row_offset=5, track_end=False
        )
        vp = compute_viewport(_grid(10, 1), state, 20, 3)
        assert vp.row_offset == 2
        assert vp.rows[0] == 2
        assert vp.track_end is False

    def test_selection_below_window_becomes_last_visible_row(self):
        state = TableState(rows_selectable=True, selected_row=4, track_end=False)
        vp = compute_viewport(_grid(5, 3), state, 20, 3)
        assert vp.row_offset == 2
        assert vp.rows == [2, 3, 4]

    def test_selection_below_window_with_borders(self):
        state = TableState(
            borders=True, rows_selectable=True, selected_row=5, track_end=False
        )
        vp = compute_viewport(_grid(10, 1), state, 20, 6)
        assert vp.row_offset == 3
        assert vp.rows == [3, 4, 5]

    def test_selection_inside_window_keeps_offset(self):
        state = TableState(
            rows_selectable=True, selected_row=4, row_offset=3, track_end=False
        )
        vp = compute_viewport(_grid(10, 1), state, 20, 3)
        assert vp.row_offset == 3

    def test_fixed_rows_always_shown(self):
        state = TableState(fixed_rows=1, row_offset=3, track_end=False)
        vp = compute_viewport(_grid(10, 1), state, 20, 4)
        assert vp.rows == [0, 4, 5, 6]

    def test_fixed_rows_with_track_end(self):
        state = TableState(fixed_rows=1)
        vp = compute_viewport(_grid(10, 1), state, 20, 4)
        assert vp.rows == [0, 7, 8, 9]

    def test_bordered_rows_use_two_lines(self):
        vp = compute_viewport(_grid(5, 1), TableState(borders=True), 20, 6)
        assert vp.visible_rows == 3
        assert vp.rows == [2, 3, 4]

    def test_visible_rows_is_page_size(self):
        vp = compute_viewport(_grid(10, 1), TableState(), 20, 7)
        assert vp.visible_rows == 7

    def test_zero_height(self):
        vp = compute_viewport(_grid(3, 1), TableState(), 20, 0)
        assert vp.rows == []
        assert vp.visible_rows == 0

    @pytest.mark.parametrize("height", [1, 2, 3, 5, 8, 13])
    @pytest.mark.parametrize("borders", [False, True])
    def test_row_offset_stays_in_range(self, height, borders):
        cells = _grid(9, 1)
        for selected in range(9):
            state = TableState(
                borders=borders,
                rows_selectable=True,
                selected_row=selected,
                row_offset=selected * 2,
                track_end=False,
            )
            vp = compute_viewport(cells, state, 20, height)
            capacity = height // state.row_step
            assert 0 <= vp.row_offset <= max(0, cells.row_count - capacity)


# ---------------------------------------------------------------------------
# Columns
# ---------------------------------------------------------------------------


class TestColumnWidths:
    def test_width_is_widest_visible_cell(self):
        store = CellStore()
        store.set(0, 0, TableCell("a"))
        store.set(1, 0, TableCell("abcd"))
        vp = compute_viewport(store, TableState(), 20, 2)
        assert vp.columns == [ColumnSpan(0, 4)]

    def test_width_respects_max_width(self):
        store = CellStore()
        store.set(0, 0, TableCell("hello", max_width=3))
        vp = compute_viewport(store, TableState(), 20, 1)
        assert vp.columns == [ColumnSpan(0, 3)]

    def test_rows_outside_viewport_do_not_count(self):
        store = CellStore()
        store.set(0, 0, TableCell("a"))
        store.set(1, 0, TableCell("a very long text"))
        state = TableState(track_end=False)
        vp = compute_viewport(store, state, 40, 1)
        assert vp.rows == [0]
        assert vp.columns == [ColumnSpan(0, 1)]

    def test_empty_column_ends_scan(self):
        store = CellStore()
        store.set(0, 0, TableCell("a"))
        store.set(0, 1, TableCell("b"))
        store.set(1, 3, TableCell("d"))
        state = TableState(track_end=False)
        vp = compute_viewport(store, state, 40, 1)
        assert vp.rows == [0]
        assert _indices(vp) == [0, 1]

    def test_empty_string_cell_has_zero_width(self):
        store = CellStore()
        store.set(0, 0, TableCell(""))
        store.set(0, 1, TableCell("b"))
        vp = compute_viewport(store, TableState(), 40, 1)
        assert vp.columns == [ColumnSpan(0, 0), ColumnSpan(1, 1)]


class TestColumnEviction:
    def test_no_offset_keeps_leading_columns(self):
        vp = compute_viewport(_grid(1, 5), TableState(), 10, 1)
        assert _indices(vp) == [0, 1, 2]
        assert vp.column_offset == 0

    def test_offset_evicts_leftmost_columns(self):
        state = TableState(column_offset=2)
        vp = compute_viewport(_grid(1, 5), state, 10, 1)
        assert _indices(vp) == [2, 3, 4]
        assert vp.column_offset == 2

    def test_offset_reflects_columns_actually_skipped(self):
        state = TableState(column_offset=10)
        vp = compute_viewport(_grid(1, 5), state, 10, 1)
        assert _indices(vp) == [2, 3, 4]
        assert vp.column_offset == 2

    def test_offset_ignored_when_everything_fits(self):
        state = TableState(column_offset=3)
        vp = compute_viewport(_grid(1, 3), state, 40, 1)
        assert _indices(vp) == [0, 1, 2]
        assert vp.column_offset == 0

    def test_fixed_columns_are_never_evicted(self):
        state = TableState(fixed_columns=1, column_offset=10)
        vp = compute_viewport(_grid(1, 5), state, 10, 1)
        assert _indices(vp) == [0, 3, 4]
        assert vp.column_offset == 2

    def test_overflow_inside_fixed_region_stops(self):
        state = TableState(fixed_columns=3)
        vp = compute_viewport(_grid(1, 5), state, 6, 1)
        assert _indices(vp) == [0, 1]
        assert vp.column_offset == 0

    def test_nothing_evictable_stops(self):
        state = TableState(fixed_columns=2, column_offset=5)
        vp = compute_viewport(_grid(1, 5), state, 6, 1)
        assert _indices(vp) == [0, 1]
        assert vp.column_offset == 0

    def test_borders_count_left_edge(self):
        # Left border plus two columns reach 11; the third still starts inside
        vp = compute_viewport(_grid(1, 5), TableState(borders=True), 11, 2)
        assert _indices(vp) == [0, 1, 2]

    @pytest.mark.parametrize("offset", range(8))
    @pytest.mark.parametrize("width", [5, 10, 17, 30])
    def test_offset_equals_eviction_count(self, offset, width):
        state = TableState(fixed_columns=1, column_offset=offset)
        vp = compute_viewport(_grid(1, 6), state, width, 1)
        indices = _indices(vp)
        assert indices[0] == 0
        scrollable = indices[1:]
        first = 1 + vp.column_offset
        assert scrollable == list(range(first, first + len(scrollable)))


class TestColumnSelection:
    def test_selection_at_fixed_seam_is_not_scrolled_away(self):
        state = TableState(columns_selectable=True, fixed_columns=1, selected_column=1)
        vp = compute_viewport(_grid(1, 5), state, 10, 1)
        assert _indices(vp) == [0, 1, 2]
        assert vp.column_offset == 0

    def test_selection_right_of_window_scrolls_into_view(self):
        state = TableState(columns_selectable=True, selected_column=3)
        vp = compute_viewport(_grid(1, 5), state, 10, 1)
        assert 3 in _indices(vp)[:2]
        assert vp.column_offset == 2

    def test_selection_left_of_window_pulls_offset_back(self):
        state = TableState(columns_selectable=True, selected_column=1, column_offset=3)
        vp = compute_viewport(_grid(1, 5), state, 10, 1)
        assert _indices(vp) == [1, 2, 3]
        assert vp.column_offset == 1

    def test_selected_column_stays_visible_while_moving_right(self):
        cells = _grid(1, 8)
        offset = 0
        for selected in range(7):
            state = TableState(
                columns_selectable=True,
                selected_column=selected,
                column_offset=offset,
            )
            vp = compute_viewport(cells, state, 15, 1)
            offset = vp.column_offset
            # Each column takes 5 cells; the selected one must start inside
            position = _indices(vp).index(selected)
            assert position * 5 < 15

    def test_last_selected_column_starts_inside(self):
        state = TableState(columns_selectable=True, selected_column=5)
        vp = compute_viewport(_grid(1, 6, "xxxxx"), state, 12, 1)
        assert _indices(vp) == [4, 5]
        assert vp.column_offset == 4

    def test_last_selected_column_starts_inside_with_borders(self):
        state = TableState(columns_selectable=True, selected_column=5, borders=True)
        vp = compute_viewport(_grid(1, 6, "xxxxx"), state, 13, 3)
        assert _indices(vp) == [4, 5]
        assert vp.column_offset == 4
