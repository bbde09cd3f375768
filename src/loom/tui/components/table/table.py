"""Table component - a scrollable grid of cells with optional selection.

Navigation (default bindings, see :mod:`loom.tui.keybindings`):

* ``h`` / left, ``l`` / right: one column
* ``j`` / down, ``k`` / up: one row
* ``g`` / home, ``G`` / end: top / bottom
* ``ctrl+f`` / page down, ``ctrl+b`` / page up: one page

Without a selection these keys scroll the table (fixed rows and columns stay
in place). With a selection they move it, and the table scrolls to keep it
visible.
"""

from __future__ import annotations

import logging
from typing import Callable

from loom.tui.colors import Color
from loom.tui.components.frame import Frame
from loom.tui.components.table.cells import CellStore, TableCell
from loom.tui.components.table.render import paint_table
from loom.tui.components.table.selection import SelectionController
from loom.tui.components.table.state import TableState
from loom.tui.components.table.viewport import Viewport, compute_viewport
from loom.tui.keybindings import get_table_keybindings
from loom.tui.keys import KeyId, parse_key
from loom.tui.surface import Surface
from loom.tui.utils import text_length

logger = logging.getLogger(__name__)

SelectedFunc = Callable[[int, int], None]
DoneFunc = Callable[[KeyId], None]


class Table:
    """Two-dimensional table widget."""

    def __init__(self) -> None:
        self.frame = Frame()

        self._cells = CellStore()
        self._state = TableState()
        self._controller = SelectionController(self._state, self._cells)
        self._viewport: Viewport | None = None

        # Listeners
        self._selected_func: SelectedFunc | None = None
        self._done_func: DoneFunc | None = None

    # ------------------------------------------------------------------
    # Widget plumbing
    # ------------------------------------------------------------------

    @property
    def focused(self) -> bool:
        return self.frame.focused

    @focused.setter
    def focused(self, value: bool) -> None:
        self.frame.focused = value

    def set_rect(self, x: int, y: int, width: int, height: int) -> Table:
        self.frame.set_rect(x, y, width, height)
        return self

    @property
    def state(self) -> TableState:
        return self._state

    @property
    def viewport(self) -> Viewport | None:
        """Layout computed by the last :meth:`draw`."""
        return self._viewport

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._cells.row_count

    @property
    def column_count(self) -> int:
        return self._cells.last_column + 1

    @property
    def last_column(self) -> int:
        return self._cells.last_column

    def set_cell(self, row: int, column: int, cell: TableCell) -> Table:
        """Set the cell at (*row*, *column*), growing the table as needed.

        Setting a cell in an unknown row or column extends the table, so
        starting with row 100,000 creates 100,000 empty rows.
        """
        self._cells.set(row, column, cell)
        self._clamp()
        return self

    def set_cell_text(self, row: int, column: int, text: str) -> Table:
        """Shortcut for a white, selectable cell holding *text*."""
        return self.set_cell(row, column, TableCell(text, color="white", selectable=True))

    def get_cell(self, row: int, column: int) -> TableCell:
        """Cell at the position; an empty ``TableCell`` if never set."""
        return self._cells.get(row, column)

    def clear(self) -> Table:
        """Remove all cells."""
        self._cells.clear()
        self._clamp()
        return self

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_borders(self, show: bool) -> Table:
        """Surround every cell with a border."""
        self._state.borders = show
        return self

    def set_borders_color(self, color: Color) -> Table:
        """Colour of the cell borders and of the separator."""
        self._state.borders_color = color
        return self

    def set_separator(self, separator: str) -> Table:
        """Character between neighbouring cells when borders are off."""
        if text_length(separator) != 1:
            raise ValueError(f"Separator must be a single character, got {separator!r}")
        self._state.separator = separator
        return self

    def set_fixed(self, rows: int, columns: int) -> Table:
        """Pin the top *rows* and left *columns* while the rest scrolls."""
        self._state.fixed_rows = rows
        self._state.fixed_columns = columns
        self._clamp()
        return self

    def set_selectable(self, rows: bool, columns: bool) -> Table:
        """Choose what can be selected.

        Neither: nothing; rows only: whole rows; columns only: whole
        columns; both: individual cells.
        """
        self._state.rows_selectable = rows
        self._state.columns_selectable = columns
        self._clamp()
        return self

    def get_selectable(self) -> tuple[bool, bool]:
        return self._state.rows_selectable, self._state.columns_selectable

    def set_selected(self, row: int, column: int) -> Table:
        """Select a cell, row or column depending on :meth:`set_selectable`."""
        self._state.selected_row = row
        self._state.selected_column = column
        self._clamp()
        return self

    def get_selection(self) -> tuple[int, int]:
        return self._state.selected_row, self._state.selected_column

    def set_offset(self, row: int, column: int) -> Table:
        """Scroll by *row* rows and *column* columns (fixed ones never scroll).

        Stops following the last row; navigation and drawing may still
        adjust the offsets.
        """
        self._state.row_offset = row
        self._state.column_offset = column
        self._state.track_end = False
        self._clamp()
        return self

    def get_offset(self) -> tuple[int, int]:
        return self._state.row_offset, self._state.column_offset

    def set_selected_func(self, handler: SelectedFunc | None) -> Table:
        """Called with (row, column) when Enter is pressed on a selection.

        The column is meaningless when whole rows are selected, and the row
        when whole columns are.
        """
        self._selected_func = handler
        return self

    def set_done_func(self, handler: DoneFunc | None) -> Table:
        """Called with the key id on Escape, Tab or Shift+Tab.

        Also called for Enter when nothing is selectable.
        """
        self._done_func = handler
        return self

    def _clamp(self) -> None:
        self._state.clamp(self._cells.row_count, self._cells.last_column)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(
        self,
        data: str,
        set_focus: Callable[[object | None], None] | None = None,
    ) -> None:
        """Handle one key sequence.

        *set_focus* is the application's focus-transfer hook; the table
        itself never moves focus, listeners may.
        """
        action = get_table_keybindings().action_for(data)
        if action is None:
            return

        if action == "cancel" or (action == "activate" and not self._state.selectable):
            key = parse_key(data)
            logger.debug("table done: %s", key)
            if self._done_func is not None and key is not None:
                self._done_func(key)
            return

        if action == "activate":
            row, column = self.get_selection()
            logger.debug("table selected: row=%d column=%d", row, column)
            if self._selected_func is not None:
                self._selected_func(row, column)
            return

        self._controller.apply(action)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: Surface) -> None:
        self.frame.draw(surface)

        x, y, width, height = self.frame.get_inner_rect()
        state = self._state
        logger.debug(
            "table draw: row_offset=%d selected_row=%d height=%d",
            state.row_offset,
            state.selected_row,
            height,
        )

        viewport = compute_viewport(self._cells, state, width, height)
        state.row_offset = viewport.row_offset
        state.column_offset = viewport.column_offset
        state.track_end = viewport.track_end
        state.visible_rows = viewport.visible_rows
        self._viewport = viewport

        paint_table(
            surface,
            self._cells,
            state,
            viewport,
            (x, y, width, height),
            self.frame.background_color,
        )
