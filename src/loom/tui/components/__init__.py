"""TUI components."""

from loom.tui.components.frame import Frame
from loom.tui.components.table import Table, TableCell

__all__ = [
    "Frame",
    "Table",
    "TableCell",
]
