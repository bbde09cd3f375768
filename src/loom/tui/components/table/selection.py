"""Keyboard navigation for tables.

When an axis is selectable, navigation moves the selection along it;
otherwise it scrolls the table. Every command leaves the state clamped.
"""

from __future__ import annotations

from typing import Callable, Literal

from loom.tui.components.table.cells import CellStore
from loom.tui.components.table.state import TableState

NavigationCommand = Literal[
    "home",
    "end",
    "up",
    "down",
    "left",
    "right",
    "pageUp",
    "pageDown",
]


class SelectionController:
    """Applies navigation commands to a :class:`TableState`."""

    def __init__(self, state: TableState, cells: CellStore) -> None:
        self._state = state
        self._cells = cells
        self._commands: dict[str, Callable[[], None]] = {
            "home": self.home,
            "end": self.end,
            "up": self.up,
            "down": self.down,
            "left": self.left,
            "right": self.right,
            "pageUp": self.page_up,
            "pageDown": self.page_down,
        }

    def apply(self, command: str) -> bool:
        """Run *command*. Returns ``False`` for unknown commands."""
        handler = self._commands.get(command)
        if handler is None:
            return False
        handler()
        self._state.clamp(self._cells.row_count, self._cells.last_column)
        return True

    # -- commands ------------------------------------------------------------

    def home(self) -> None:
        s = self._state
        if s.rows_selectable:
            s.selected_row = 0
        else:
            s.track_end = False
            s.row_offset = 0
        if s.columns_selectable:
            s.selected_column = 0
        else:
            s.column_offset = 0

    def end(self) -> None:
        s = self._state
        if s.rows_selectable:
            s.selected_row = self._cells.row_count - 1
        else:
            s.track_end = True
        if s.columns_selectable:
            s.selected_column = self._cells.last_column
        else:
            s.column_offset = 0

    def down(self) -> None:
        self._move_rows(1)

    def up(self) -> None:
        self._move_rows(-1)

    def page_down(self) -> None:
        self._move_rows(self._state.visible_rows)

    def page_up(self) -> None:
        self._move_rows(-self._state.visible_rows)

    def left(self) -> None:
        self._move_columns(-1)

    def right(self) -> None:
        self._move_columns(1)

    # -- helpers -------------------------------------------------------------

    def _move_rows(self, delta: int) -> None:
        s = self._state
        if s.rows_selectable:
            last = max(0, self._cells.row_count - 1)
            s.selected_row = min(max(0, s.selected_row + delta), last)
            return
        if delta < 0:
            s.track_end = False
        s.row_offset = max(0, s.row_offset + delta)

    def _move_columns(self, delta: int) -> None:
        s = self._state
        if s.columns_selectable:
            last = max(0, self._cells.last_column)
            s.selected_column = min(max(0, s.selected_column + delta), last)
            return
        s.column_offset = max(0, s.column_offset + delta)
