"""Keyboard input parsing and matching.

Turns raw terminal input into key identifiers such as ``"up"``,
``"ctrl+f"``, ``"shift+tab"`` or ``"G"``, and splits a chunk read from stdin
into individual key sequences. Legacy xterm/VT sequences and the kitty
``CSI u`` encoding are understood.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Sequence tables
# ---------------------------------------------------------------------------

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[H": "home",
    "\x1bOH": "home",
    "\x1b[1~": "home",
    "\x1b[7~": "home",
    "\x1b[F": "end",
    "\x1bOF": "end",
    "\x1b[4~": "end",
    "\x1b[8~": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[Z": "shift+tab",
}

# Kitty codepoints for keys without a printable form
CODEPOINTS: dict[int, str] = {
    27: "escape",
    13: "enter",
    57414: "enter",  # keypad enter
    9: "tab",
    32: "space",
    127: "backspace",
}

# ``CSI 1;<mod> <letter>`` and ``CSI <number>;<mod> ~`` with modifiers
_CSI_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_CSI_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    7: "home",
    8: "end",
}

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

LOCK_MASK = 64 + 128

_KITTY_CSI_U_RE = re.compile(r"^\x1b\[(\d+)(?::\d+)*(?:;(\d+)(?::(\d+))?)?u$")
_CSI_MOD_LETTER_RE = re.compile(r"^\x1b\[1;(\d+)(?::(\d+))?([ABCDHF])$")
_CSI_MOD_TILDE_RE = re.compile(r"^\x1b\[(\d+);(\d+)(?::(\d+))?~$")

_PASTE_START = "\x1b[200~"
_PASTE_END = "\x1b[201~"


# ---------------------------------------------------------------------------
# Key id normalisation
# ---------------------------------------------------------------------------


def _compose(key: str, ctrl: bool = False, shift: bool = False, alt: bool = False) -> str:
    """Build the canonical id: ``ctrl+`` / ``shift+`` / ``alt+`` then the key."""
    if shift and not ctrl and not alt and len(key) == 1 and key.isalpha():
        return key.upper()
    prefix = ""
    if ctrl:
        prefix += "ctrl+"
    if shift:
        prefix += "shift+"
    if alt:
        prefix += "alt+"
    return prefix + key


_KEY_ALIASES: dict[str, str] = {
    "esc": "escape",
    "return": "enter",
    "pageup": "pageUp",
    "pagedown": "pageDown",
}


def _split_id(key_id: str) -> tuple[set[str], str]:
    """Split ``"ctrl+shift+x"`` into its modifier names and key."""
    if key_id == "+":
        return set(), "+"
    parts = key_id.split("+")
    if len(parts) > 1 and parts[-1] == "":
        # Trailing "+" names the plus key itself ("ctrl++")
        parts = parts[:-2] + ["+"]
    return {part.lower() for part in parts[:-1]}, parts[-1]


def normalize_key_id(key_id: str) -> str | None:
    """Canonical form of a user-written key id, ``None`` if malformed.

    ``"shift+g"`` and ``"G"`` normalise to the same id; modifier order does
    not matter.
    """
    if not key_id:
        return None
    mods, key = _split_id(key_id)
    if not key or not mods <= set(MODIFIERS):
        return None
    if len(key) > 1:
        lowered = key.lower()
        key = _KEY_ALIASES.get(lowered, lowered)
    elif mods and key.isalpha():
        # With modifiers, case is carried by an explicit "shift"
        key = key.lower()
    return _compose(key, "ctrl" in mods, "shift" in mods, "alt" in mods)


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


def _decode_modifier(value: str | None) -> tuple[bool, bool, bool]:
    if not value:
        return False, False, False
    mod = (int(value) - 1) & ~LOCK_MASK
    return (
        bool(mod & MODIFIERS["ctrl"]),
        bool(mod & MODIFIERS["shift"]),
        bool(mod & MODIFIERS["alt"]),
    )


def parse_key(data: str) -> str | None:
    """Return the key identifier for one key sequence, or ``None``."""
    if not data:
        return None

    legacy = LEGACY_KEY_SEQUENCES.get(data)
    if legacy is not None:
        return legacy

    m = _KITTY_CSI_U_RE.match(data)
    if m is not None:
        codepoint = int(m.group(1))
        if m.group(3) == "3":
            return None  # key release
        ctrl, shift, alt = _decode_modifier(m.group(2))
        name = CODEPOINTS.get(codepoint)
        if name is not None:
            return _compose(name, ctrl, shift, alt)
        ch = chr(codepoint)
        if ch.isprintable():
            return _compose(ch.lower() if (ctrl or alt) else ch, ctrl, shift, alt)
        return None

    m = _CSI_MOD_LETTER_RE.match(data)
    if m is not None:
        if m.group(2) == "3":
            return None
        ctrl, shift, alt = _decode_modifier(m.group(1))
        return _compose(_CSI_LETTER_KEYS[m.group(3)], ctrl, shift, alt)

    m = _CSI_MOD_TILDE_RE.match(data)
    if m is not None:
        name = _CSI_TILDE_KEYS.get(int(m.group(1)))
        if name is None or m.group(3) == "3":
            return None
        ctrl, shift, alt = _decode_modifier(m.group(2))
        return _compose(name, ctrl, shift, alt)

    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n"):
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data in ("\x7f", "\x08"):
        return "backspace"

    # Ctrl + letter (0x01 - 0x1a)
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # Alt + key (ESC prefix)
    if len(data) == 2 and data[0] == "\x1b":
        inner = parse_key(data[1])
        if inner is not None:
            mods, key = _split_id(inner)
            if len(key) == 1 and key.isupper():
                key = key.lower()
                mods.add("shift")
            return _compose(key, "ctrl" in mods, "shift" in mods, True)

    if len(data) == 1 and data.isprintable():
        return data

    return None


def matches_key(data: str, key_id: str) -> bool:
    """Return ``True`` if *data* (raw terminal input) is the key *key_id*."""
    parsed = parse_key(data)
    if parsed is None:
        return False
    return parsed == normalize_key_id(key_id)


# ---------------------------------------------------------------------------
# split_keys
# ---------------------------------------------------------------------------


def split_keys(data: str) -> list[str]:
    """Split a chunk of raw input into individual key sequences.

    A bracketed paste is kept together as one chunk.
    """
    keys: list[str] = []
    i = 0
    n = len(data)
    while i < n:
        if data.startswith(_PASTE_START, i):
            end = data.find(_PASTE_END, i + len(_PASTE_START))
            stop = n if end < 0 else end + len(_PASTE_END)
            keys.append(data[i:stop])
            i = stop
            continue

        if data[i] != "\x1b" or i + 1 >= n:
            keys.append(data[i])
            i += 1
            continue

        nxt = data[i + 1]
        if nxt == "[":
            j = i + 2
            # Parameters run until a final byte in 0x40..0x7e
            while j < n and not ("\x40" <= data[j] <= "\x7e"):
                j += 1
            stop = min(j + 1, n)
        elif nxt == "O" and i + 2 < n:
            stop = i + 3
        else:
            stop = i + 2
        keys.append(data[i:stop])
        i = stop
    return keys
