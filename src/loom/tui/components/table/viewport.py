"""Viewport computation: which rows and columns of a table fit the screen.

``compute_viewport`` is pure. It reads the table state and cells and returns
the visible rows, the visible columns with their widths, and the offsets the
table must adopt so that the selection stays reachable.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loom.tui.components.table.cells import CellStore
from loom.tui.components.table.state import TableState


@dataclass(frozen=True)
class ColumnSpan:
    """A visible column and the width computed for it."""

    index: int
    width: int


@dataclass
class Viewport:
    rows: list[int] = field(default_factory=list)
    columns: list[ColumnSpan] = field(default_factory=list)
    row_offset: int = 0
    column_offset: int = 0
    track_end: bool = False
    # Table rows that fit the height (page size)
    visible_rows: int = 0


def compute_viewport(
    cells: CellStore, state: TableState, width: int, height: int
) -> Viewport:
    """Lay out *cells* in a ``width`` x ``height`` area according to *state*."""
    row_offset, track_end = _clamp_row_offset(state, cells.row_count, height)
    rows = _visible_rows(state, cells.row_count, row_offset, height)

    column_offset = state.column_offset
    selected_column = max(0, state.selected_column)
    if (
        state.columns_selectable
        and state.fixed_columns <= selected_column < state.fixed_columns + column_offset
    ):
        column_offset = selected_column - state.fixed_columns
    column_offset = max(0, column_offset)

    columns, skipped = _fit_columns(
        cells, state, rows, width, column_offset, selected_column
    )

    return Viewport(
        rows=rows,
        columns=columns,
        row_offset=row_offset,
        column_offset=skipped,
        track_end=track_end,
        visible_rows=max(0, height) // state.row_step,
    )


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


def _clamp_row_offset(
    state: TableState, row_count: int, height: int
) -> tuple[int, bool]:
    step = state.row_step
    capacity = max(0, height) // step
    offset = state.row_offset
    track_end = state.track_end
    selected = state.selected_row

    if state.rows_selectable:
        # Selection above the window: scroll up to it
        if state.fixed_rows <= selected < state.fixed_rows + offset:
            offset = selected - state.fixed_rows
            track_end = False
        # Selection below the window: make it the last visible row
        if step * (selected + 1 - offset) >= height:
            offset = selected + 1 - capacity
            track_end = False

    if step * (row_count - offset) < height:
        track_end = True
    if track_end:
        offset = row_count - capacity

    return max(0, offset), track_end


def _visible_rows(
    state: TableState, row_count: int, row_offset: int, height: int
) -> list[int]:
    step = state.row_step
    rows: list[int] = []
    used = 0

    def index_row(row: int) -> bool:
        nonlocal used
        if used >= height:
            return False
        rows.append(row)
        used += step
        return True

    for row in range(min(state.fixed_rows, row_count)):
        if not index_row(row):
            break
    for row in range(state.fixed_rows + row_offset, row_count):
        if not index_row(row):
            break
    return rows


# ---------------------------------------------------------------------------
# Columns
# ---------------------------------------------------------------------------


def _column_width(cells: CellStore, rows: list[int], column: int) -> int | None:
    """Widest materialised cell of *column* in *rows*, ``None`` if there is none."""
    widest = -1
    for row in rows:
        cell = cells.lookup(row, column)
        if cell is not None:
            widest = max(widest, cell.display_width())
    return widest if widest >= 0 else None


def _fit_columns(
    cells: CellStore,
    state: TableState,
    rows: list[int],
    width: int,
    column_offset: int,
    selected_column: int,
) -> tuple[list[ColumnSpan], int]:
    """Accept columns left to right, evicting scrollable ones that no longer fit.

    Returns the accepted columns and the number of evicted columns.
    """
    fixed = state.fixed_columns
    selectable = state.columns_selectable

    spans: list[ColumnSpan] = []
    # Running width including the trailing separator; starts past the left
    # border when there is one
    table_width = 1 if state.borders else 0
    # Where the last accepted column starts
    last_start = 0
    skipped = 0

    for column in range(cells.last_column + 1):
        done = False
        # The trailing separator may sit on the right edge, hence the -1
        while table_width - 1 >= width:
            if column < fixed:
                done = True
            elif not selectable and skipped >= column_offset:
                done = True
            elif selectable and selected_column - skipped == fixed:
                # One more eviction would scroll the selection away
                done = True
            elif (
                selectable
                and skipped >= column_offset
                and (
                    (selected_column < column and last_start < width - 1)
                    or selected_column < column - 1
                )
            ):
                done = True
            elif len(spans) <= fixed:
                done = True
            if done:
                break

            evicted = spans.pop(fixed)
            skipped += 1
            last_start -= evicted.width + 1
            table_width -= evicted.width + 1
        if done:
            break

        column_width = _column_width(cells, rows, column)
        if column_width is None:
            break

        spans.append(ColumnSpan(column, column_width))
        last_start = table_width
        table_width += column_width + 1

    # The last accepted column can start past the right edge; evict until the
    # selected one starts inside
    if selectable:
        while len(spans) > fixed and spans[fixed].index != selected_column:
            start = _column_start(state, spans, selected_column)
            if start is None or start < width:
                break
            spans.pop(fixed)
            skipped += 1

    return spans, skipped


def _column_start(
    state: TableState, spans: list[ColumnSpan], column: int
) -> int | None:
    x = 1 if state.borders else 0
    for span in spans:
        if span.index == column:
            return x
        x += span.width + 1
    return None
