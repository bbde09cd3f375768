"""Table cells and the sparse grid that stores them."""

from __future__ import annotations

from dataclasses import dataclass

from loom.tui.colors import DEFAULT, Color
from loom.tui.utils import Align, check_align, text_length


@dataclass
class TableCell:
    """One cell of a :class:`~loom.tui.components.table.Table`.

    ``max_width`` caps the width the cell claims for its column; 0 means
    no cap. ``TableCell()`` is the empty cell returned for unset positions.
    """

    text: str = ""
    align: Align = "left"
    max_width: int = 0
    color: Color = DEFAULT
    selectable: bool = False

    def __post_init__(self) -> None:
        check_align(self.align)

    def display_width(self) -> int:
        """Width this cell asks for: its length, capped by ``max_width``."""
        width = text_length(self.text)
        if 0 < self.max_width < width:
            return self.max_width
        return width


class CellStore:
    """Growable ragged grid of :class:`TableCell`.

    Rows may have different lengths. Writing ``(row, column)`` materialises
    every row up to *row* (as empty rows) and every column up to *column*
    inside that row (as default cells).
    """

    def __init__(self) -> None:
        self._rows: list[list[TableCell]] = []
        self.last_column = -1

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def set(self, row: int, column: int, cell: TableCell) -> None:
        if row < 0 or column < 0:
            raise ValueError(f"Cell position must be non-negative, got ({row}, {column})")

        if row >= len(self._rows):
            self._rows.extend([] for _ in range(row - len(self._rows) + 1))
        cells = self._rows[row]
        if column >= len(cells):
            cells.extend(TableCell() for _ in range(column - len(cells) + 1))
        cells[column] = cell

        if column > self.last_column:
            self.last_column = column

    def lookup(self, row: int, column: int) -> TableCell | None:
        """Stored cell, or ``None`` if the position was never materialised."""
        if row < 0 or column < 0 or row >= len(self._rows):
            return None
        cells = self._rows[row]
        if column >= len(cells):
            return None
        return cells[column]

    def get(self, row: int, column: int) -> TableCell:
        cell = self.lookup(row, column)
        if cell is None:
            return TableCell()
        return cell

    def row_length(self, row: int) -> int:
        if 0 <= row < len(self._rows):
            return len(self._rows[row])
        return 0

    def clear(self) -> None:
        self._rows = []
        self.last_column = -1
