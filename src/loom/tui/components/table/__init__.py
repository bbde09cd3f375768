"""Table component and its building blocks."""

from loom.tui.components.table.cells import CellStore, TableCell
from loom.tui.components.table.render import paint_table
from loom.tui.components.table.selection import NavigationCommand, SelectionController
from loom.tui.components.table.state import TableState
from loom.tui.components.table.table import DoneFunc, SelectedFunc, Table
from loom.tui.components.table.viewport import ColumnSpan, Viewport, compute_viewport

__all__ = [
    "CellStore",
    "ColumnSpan",
    "DoneFunc",
    "NavigationCommand",
    "SelectedFunc",
    "SelectionController",
    "Table",
    "TableCell",
    "TableState",
    "Viewport",
    "compute_viewport",
    "paint_table",
]
