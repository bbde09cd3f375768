"""Configuration and navigation state shared by the table's parts."""

from __future__ import annotations

from dataclasses import dataclass

from loom.tui.colors import Color


@dataclass
class TableState:
    """Everything about a table except its cells.

    The selection controller mutates it on input; a paint writes back the
    clamped offsets and caches ``visible_rows`` for page navigation.
    """

    borders: bool = False
    borders_color: Color = "white"
    separator: str = " "

    fixed_rows: int = 0
    fixed_columns: int = 0

    rows_selectable: bool = False
    columns_selectable: bool = False
    selected_row: int = 0
    selected_column: int = 0

    row_offset: int = 0
    column_offset: int = 0

    # Keep the last row in view as rows are added
    track_end: bool = True

    # Rows that fit the last paint
    visible_rows: int = 0

    @property
    def row_step(self) -> int:
        """Screen lines used by one table row."""
        return 2 if self.borders else 1

    @property
    def selectable(self) -> bool:
        return self.rows_selectable or self.columns_selectable

    def clamp(self, row_count: int, last_column: int) -> None:
        """Pull offsets and selection back into their valid ranges."""
        self.fixed_rows = max(0, self.fixed_rows)
        self.fixed_columns = max(0, self.fixed_columns)
        self.row_offset = max(0, self.row_offset)
        self.column_offset = max(0, self.column_offset)

        if self.rows_selectable and row_count > 0:
            self.selected_row = min(max(0, self.selected_row), row_count - 1)
        else:
            self.selected_row = 0

        if self.columns_selectable and last_column >= 0:
            self.selected_column = min(max(0, self.selected_column), last_column)
        else:
            self.selected_column = 0
