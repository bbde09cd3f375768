"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that manages raw mode, the alternate screen, bracketed paste,
and cursor visibility via ANSI escape sequences.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys
import termios
import tty
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_BRACKETED_PASTE_ENABLE = "\x1b[?2004h"
_BRACKETED_PASTE_DISABLE = "\x1b[?2004l"

_ALT_SCREEN_ENABLE = "\x1b[?1049h"
_ALT_SCREEN_DISABLE = "\x1b[?1049l"

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def start(
        self,
        on_input: Callable[[str], None],
        on_resize: Callable[[], None],
    ) -> None: ...

    def stop(self) -> None: ...

    def write(self, data: str) -> None: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    Manages raw mode via :mod:`tty` and :mod:`termios`, the alternate screen,
    bracketed paste mode, and SIGWINCH-based resize detection. Input is read
    by an asyncio reader, so :meth:`start` must run inside an event loop.
    """

    def __init__(self) -> None:
        self._input_handler: Callable[[str], None] | None = None
        self._resize_handler: Callable[[], None] | None = None
        self._stdin_reader_active: bool = False
        self._original_termios: list | None = None
        self._prev_sigwinch_handler: signal.Handlers | None = None
        self._write_log_path: str = os.environ.get("LOOM_TUI_WRITE_LOG", "")

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    # -- start / stop -------------------------------------------------------

    def start(
        self,
        on_input: Callable[[str], None],
        on_resize: Callable[[], None],
    ) -> None:
        """Enable raw mode and the alternate screen, and begin reading stdin."""
        self._input_handler = on_input
        self._resize_handler = on_resize

        fd = sys.stdin.fileno()

        # Save previous terminal state
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)

        self._raw_write(_ALT_SCREEN_ENABLE + _BRACKETED_PASTE_ENABLE + _HIDE_CURSOR)

        # Set up SIGWINCH handler for resize events
        self._prev_sigwinch_handler = signal.getsignal(signal.SIGWINCH)
        signal.signal(signal.SIGWINCH, self._on_sigwinch)

        self._start_stdin_reader()

    def stop(self) -> None:
        """Restore terminal state and clean up all handlers."""
        self._remove_stdin_reader()

        if self._prev_sigwinch_handler is not None:
            signal.signal(signal.SIGWINCH, self._prev_sigwinch_handler)
            self._prev_sigwinch_handler = None

        self._raw_write(_SHOW_CURSOR + _BRACKETED_PASTE_DISABLE + _ALT_SCREEN_DISABLE)

        fd = sys.stdin.fileno()
        if self._original_termios is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
            self._original_termios = None

        self._input_handler = None
        self._resize_handler = None

    # -- write --------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                pass

    # -- private: stdin reading --------------------------------------------

    def _start_stdin_reader(self) -> None:
        """Register an asyncio reader on stdin."""
        if self._stdin_reader_active:
            return
        try:
            loop = asyncio.get_event_loop()
            loop.add_reader(sys.stdin.fileno(), self._on_stdin_readable)
            self._stdin_reader_active = True
        except RuntimeError:
            logger.warning("No event loop; terminal input is not read")

    def _remove_stdin_reader(self) -> None:
        if not self._stdin_reader_active:
            return
        try:
            loop = asyncio.get_event_loop()
            loop.remove_reader(sys.stdin.fileno())
        except (RuntimeError, ValueError):
            pass
        self._stdin_reader_active = False

    def _on_stdin_readable(self) -> None:
        """Callback invoked by the event loop when stdin has data."""
        try:
            raw = os.read(sys.stdin.fileno(), 4096)
        except OSError:
            return

        if not raw:
            return

        data = raw.decode("utf-8", errors="replace")
        if self._input_handler is not None:
            self._input_handler(data)

    # -- private: SIGWINCH -------------------------------------------------

    def _on_sigwinch(self, signum: int, frame: object) -> None:
        """Handle terminal resize signals."""
        if self._resize_handler is not None:
            self._resize_handler()

    # -- private: raw write ------------------------------------------------

    def _raw_write(self, data: str) -> None:
        """Write directly to stdout, bypassing buffering."""
        try:
            sys.stdout.write(data)
            sys.stdout.flush()
        except OSError:
            pass
