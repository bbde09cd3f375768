"""loom-tui: terminal widgets built around a scrollable, selectable table."""

# Colors
from loom.tui.colors import DEFAULT, Color, is_color

# Components (re-exported from components package)
from loom.tui.components import Frame, Table, TableCell
from loom.tui.components.table import (
    CellStore,
    ColumnSpan,
    SelectionController,
    TableState,
    Viewport,
    compute_viewport,
    paint_table,
)

# Settings
from loom.tui.config import TableSettings, TuiSettings, load_settings

# Glyphs
from loom.tui.glyphs import DOUBLE, SINGLE, BorderGlyphs

# Keybindings
from loom.tui.keybindings import (
    DEFAULT_TABLE_KEYBINDINGS,
    TableAction,
    TableKeybindingsManager,
    get_table_keybindings,
    set_table_keybindings,
)

# Keyboard input handling
from loom.tui.keys import Key, KeyId, matches_key, parse_key, split_keys

# Drawing surface
from loom.tui.surface import Cell, CellBuffer, Surface, print_text

# Terminal interface and implementations
from loom.tui.terminal import ProcessTerminal, Terminal

# Core TUI
from loom.tui.tui import Application, Focusable, Widget, is_focusable

# Utilities
from loom.tui.utils import Align, text_length, truncate_to_width

__all__ = [
    # Colors
    "Color",
    "DEFAULT",
    "is_color",
    # Components
    "Frame",
    "Table",
    "TableCell",
    "CellStore",
    "ColumnSpan",
    "SelectionController",
    "TableState",
    "Viewport",
    "compute_viewport",
    "paint_table",
    # Settings
    "TableSettings",
    "TuiSettings",
    "load_settings",
    # Glyphs
    "BorderGlyphs",
    "DOUBLE",
    "SINGLE",
    # Keybindings
    "DEFAULT_TABLE_KEYBINDINGS",
    "TableAction",
    "TableKeybindingsManager",
    "get_table_keybindings",
    "set_table_keybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    "split_keys",
    # Surface
    "Cell",
    "CellBuffer",
    "Surface",
    "print_text",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # TUI core
    "Application",
    "Focusable",
    "Widget",
    "is_focusable",
    # Utilities
    "Align",
    "text_length",
    "truncate_to_width",
]
