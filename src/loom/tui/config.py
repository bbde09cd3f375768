"""Settings with JSON persistence.

Two levels, merged key by key: the global file (``~/.loom/tui.json``, or
``$LOOM_CONFIG_DIR/tui.json``) and the project file (``./.loom/tui.json``),
the project file winning. Example::

    {
      "table": {"borders": true, "bordersColor": "cyan", "separator": "|"},
      "keybindings": {"pageDown": ["pageDown", "space"]}
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, get_args

from loom.tui.colors import is_color
from loom.tui.keybindings import (
    TableAction,
    TableKeybindingsConfig,
    get_table_keybindings,
)
from loom.tui.utils import text_length

if TYPE_CHECKING:
    from loom.tui.components.table import Table

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".loom"
SETTINGS_FILE_NAME = "tui.json"


# --- Settings schema ---


@dataclass
class TableSettings:
    """Default look of tables."""

    borders: bool = False
    borders_color: str = "white"
    separator: str = " "
    background_color: str = "black"


@dataclass
class TuiSettings:
    table: TableSettings = field(default_factory=TableSettings)
    keybindings: TableKeybindingsConfig = field(default_factory=dict)
    # First error hit while reading a settings file, if any
    load_error: Exception | None = None


# --- Deep merge ---


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into base settings.

    For nested dicts, merge recursively. For primitives and arrays,
    override value wins completely.
    """
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_settings(result[key], value)
        else:
            result[key] = value
    return result


# --- Loading ---


def default_config_dir() -> str:
    return os.environ.get("LOOM_CONFIG_DIR") or os.path.join(
        os.path.expanduser("~"), CONFIG_DIR_NAME
    )


def _read_json(path: str) -> dict[str, Any]:
    if not os.path.exists(path):
        return {}
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: settings must be a JSON object")
    return data


def settings_from_dict(data: dict[str, Any]) -> TuiSettings:
    """Build settings from parsed JSON, skipping invalid entries with a warning."""
    settings = TuiSettings()

    table = data.get("table") or {}
    if isinstance(table, dict):
        if isinstance(table.get("borders"), bool):
            settings.table.borders = table["borders"]
        for key, attr in (("bordersColor", "borders_color"), ("backgroundColor", "background_color")):
            value = table.get(key)
            if value is None:
                continue
            if isinstance(value, str) and is_color(value):
                setattr(settings.table, attr, value)
            else:
                logger.warning("Ignoring invalid table.%s: %r", key, value)
        separator = table.get("separator")
        if separator is not None:
            if isinstance(separator, str) and text_length(separator) == 1:
                settings.table.separator = separator
            else:
                logger.warning("Ignoring invalid table.separator: %r", separator)

    keybindings = data.get("keybindings") or {}
    if isinstance(keybindings, dict):
        actions = set(get_args(TableAction))
        for action, keys in keybindings.items():
            valid = isinstance(keys, str) or (
                isinstance(keys, list) and all(isinstance(k, str) for k in keys)
            )
            if action not in actions or not valid:
                logger.warning("Ignoring keybinding %r: %r", action, keys)
                continue
            settings.keybindings[action] = keys

    return settings


def load_settings(cwd: str | None = None, config_dir: str | None = None) -> TuiSettings:
    """Load and merge the global and project settings files.

    A file that cannot be read or parsed is skipped; the error is logged
    and kept in ``load_error``.
    """
    paths = [
        os.path.join(config_dir or default_config_dir(), SETTINGS_FILE_NAME),
        os.path.join(cwd or os.getcwd(), CONFIG_DIR_NAME, SETTINGS_FILE_NAME),
    ]

    merged: dict[str, Any] = {}
    load_error: Exception | None = None
    for path in paths:
        try:
            merged = deep_merge_settings(merged, _read_json(path))
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.warning("Could not load settings from %s: %s", path, exc)
            if load_error is None:
                load_error = exc

    settings = settings_from_dict(merged)
    settings.load_error = load_error
    return settings


# --- Applying ---


def apply_keybindings(settings: TuiSettings) -> None:
    """Install the keybinding overrides into the global manager."""
    get_table_keybindings().set_config(settings.keybindings)


def apply_table_settings(table: Table, settings: TableSettings) -> Table:
    table.set_borders(settings.borders)
    table.set_borders_color(settings.borders_color)
    table.set_separator(settings.separator)
    table.frame.background_color = settings.background_color
    return table
