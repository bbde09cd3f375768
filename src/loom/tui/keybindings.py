"""Table keybindings manager."""

from __future__ import annotations

from typing import Literal

from loom.tui.keys import KeyId, normalize_key_id, parse_key

TableAction = Literal[
    # Navigation
    "home",
    "end",
    "up",
    "down",
    "left",
    "right",
    "pageUp",
    "pageDown",
    # Selection
    "activate",
    "cancel",
]

TableKeybindingsConfig = dict[TableAction, KeyId | list[KeyId]]

DEFAULT_TABLE_KEYBINDINGS: dict[TableAction, KeyId | list[KeyId]] = {
    # Navigation (vim keys alongside the usual ones)
    "home": ["home", "g"],
    "end": ["end", "G"],
    "up": ["up", "k"],
    "down": ["down", "j"],
    "left": ["left", "h"],
    "right": ["right", "l"],
    "pageUp": ["pageUp", "ctrl+b"],
    "pageDown": ["pageDown", "ctrl+f"],
    # Selection
    "activate": "enter",
    "cancel": ["escape", "tab", "shift+tab"],
}


class TableKeybindingsManager:
    """Manages keybindings for tables."""

    def __init__(self, config: TableKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[TableAction, list[KeyId]] = {}
        self._key_to_action: dict[KeyId, TableAction] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: TableKeybindingsConfig) -> None:
        self._action_to_keys.clear()
        self._key_to_action.clear()

        # User config first; keys it binds are taken away from the defaults
        claimed: set[KeyId] = set()
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)
            claimed.update(
                canonical
                for canonical in map(normalize_key_id, key_array)
                if canonical is not None
            )

        for action, keys in DEFAULT_TABLE_KEYBINDINGS.items():
            if action in self._action_to_keys:
                continue
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = [
                key for key in key_array if normalize_key_id(key) not in claimed
            ]

        # Reverse map on canonical ids; the first action to bind a key keeps it
        for action, key_array in self._action_to_keys.items():
            for key in key_array:
                canonical = normalize_key_id(key)
                if canonical is not None:
                    self._key_to_action.setdefault(canonical, action)

    def matches(self, data: str, action: TableAction) -> bool:
        """Check if input matches a specific action."""
        key = parse_key(data)
        if key is None:
            return False
        for bound in self._action_to_keys.get(action, []):
            if normalize_key_id(bound) == key:
                return True
        return False

    def action_for(self, data: str) -> TableAction | None:
        """The action bound to the key in *data*, if any."""
        key = parse_key(data)
        if key is None:
            return None
        return self._key_to_action.get(key)

    def get_keys(self, action: TableAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: TableKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_table_keybindings: TableKeybindingsManager | None = None


def get_table_keybindings() -> TableKeybindingsManager:
    global _global_table_keybindings
    if _global_table_keybindings is None:
        _global_table_keybindings = TableKeybindingsManager()
    return _global_table_keybindings


def set_table_keybindings(manager: TableKeybindingsManager) -> None:
    global _global_table_keybindings
    _global_table_keybindings = manager
