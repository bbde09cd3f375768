"""Application loop with line-differential rendering.

Provides the ``Widget`` and ``Focusable`` protocols and the ``Application``
class that owns a root widget, dispatches terminal input to the focused
widget, paints the root into a ``CellBuffer`` and writes only the lines that
changed since the previous frame.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from loom.tui.keys import matches_key, split_keys
from loom.tui.surface import CellBuffer, Surface

if TYPE_CHECKING:
    from loom.tui.terminal import Terminal

logger = logging.getLogger(__name__)

__all__ = [
    "Widget",
    "Focusable",
    "is_focusable",
    "Application",
]

# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class Widget(Protocol):
    """A widget that paints itself into a rectangle of a surface.

    ``handle_input(data, set_focus)`` is optional -- checked at call-sites
    via ``getattr``.
    """

    def set_rect(self, x: int, y: int, width: int, height: int) -> object:
        """Place the widget."""
        ...

    def draw(self, surface: Surface) -> None:
        """Paint the widget."""
        ...


@runtime_checkable
class Focusable(Protocol):
    """A widget that can receive focus."""

    focused: bool


def is_focusable(widget: object | None) -> bool:
    """Return ``True`` if *widget* implements ``Focusable``."""
    return widget is not None and hasattr(widget, "focused")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


class Application:
    """Drives a full-screen root widget on a ``Terminal``.

    * ``ctrl+c`` stops the application.
    * Every other key goes to the focused widget, together with
      :meth:`set_focus` so the widget (or its listeners) can move focus.
    * Renders are coalesced on the event loop and only changed lines are
      rewritten.
    """

    def __init__(
        self,
        terminal: Terminal,
        clear_on_shrink: bool | None = None,
    ) -> None:
        self.terminal: Terminal = terminal

        self._root: Widget | None = None
        self._focused: object | None = None

        # Previous frame (for differential updates)
        self._previous_lines: list[str] = []
        self._previous_size: tuple[int, int] = (0, 0)

        self._render_requested: bool = False
        self._stopped: bool = True
        self._done: asyncio.Event | None = None

        # Whether to clear the screen when the terminal gets smaller
        self._clear_on_shrink: bool = (
            clear_on_shrink
            if clear_on_shrink is not None
            else os.environ.get("LOOM_CLEAR_ON_SHRINK") == "1"
        )

        self._full_redraw_count: int = 0

    # ------------------------------------------------------------------
    # Properties / accessors
    # ------------------------------------------------------------------

    @property
    def full_redraws(self) -> int:
        """Number of full (non-differential) redraws performed."""
        return self._full_redraw_count

    @property
    def stopped(self) -> bool:
        return self._stopped

    def set_root(self, widget: Widget, focus: bool = True) -> Application:
        self._root = widget
        if focus:
            self.set_focus(widget)
        self.request_render()
        return self

    # ------------------------------------------------------------------
    # Focus
    # ------------------------------------------------------------------

    def set_focus(self, widget: object | None) -> None:
        """Focus *widget*, unfocusing the previous one."""
        if self._focused is widget:
            return

        prev = self._focused
        if is_focusable(prev):
            prev.focused = False  # type: ignore[union-attr]

        self._focused = widget

        if is_focusable(widget):
            widget.focused = True  # type: ignore[union-attr]
        self.request_render()

    def get_focus(self) -> object | None:
        return self._focused

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Take over the terminal and paint the first frame."""
        self._stopped = False
        self._previous_lines = []
        self.terminal.start(self.handle_input, self._on_resize)
        logger.info(
            "application started (%dx%d)", self.terminal.columns, self.terminal.rows
        )
        self.do_render()

    def stop(self) -> None:
        """Give the terminal back. Safe to call more than once."""
        if self._stopped:
            return
        self._stopped = True
        self.terminal.stop()
        logger.info("application stopped")
        if self._done is not None:
            self._done.set()

    async def run(self) -> None:
        """Run until :meth:`stop` is called (``ctrl+c`` or a listener)."""
        self._done = asyncio.Event()
        self.start()
        try:
            await self._done.wait()
        finally:
            self.stop()
            self._done = None

    # ------------------------------------------------------------------
    # Render scheduling
    # ------------------------------------------------------------------

    def request_render(self) -> None:
        """Schedule a render on the next event-loop tick.

        Multiple calls coalesce into a single render pass.
        """
        if self._render_requested or self._stopped:
            return
        self._render_requested = True
        try:
            loop = asyncio.get_running_loop()
            loop.call_soon(self._do_render_tick)
        except RuntimeError:
            # No running event loop -- render synchronously
            self._do_render_tick()

    def _do_render_tick(self) -> None:
        self._render_requested = False
        if self._stopped:
            return
        self.do_render()

    def _on_resize(self) -> None:
        self._previous_lines = []
        self.request_render()

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def handle_input(self, data: str) -> None:
        """Split *data* into keys and dispatch them to the focused widget."""
        for key in split_keys(data):
            if self._stopped:
                return

            if matches_key(key, "ctrl+c"):
                logger.debug("ctrl+c: stopping")
                self.stop()
                return

            focused = self._focused
            handler = getattr(focused, "handle_input", None)
            if callable(handler):
                logger.debug("dispatching %r to %s", key, type(focused).__name__)
                handler(key, self.set_focus)

        self.request_render()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def do_render(self) -> None:
        """Paint the root widget and write the lines that changed."""
        if self._stopped or self._root is None:
            return

        width: int = self.terminal.columns
        height: int = self.terminal.rows
        if width <= 0 or height <= 0:
            return

        buffer = CellBuffer(width, height)
        self._root.set_rect(0, 0, width, height)
        self._root.draw(buffer)
        lines = buffer.to_lines()

        force_full = (width, height) != self._previous_size or not self._previous_lines
        out: list[str] = []
        if force_full:
            self._full_redraw_count += 1
            prev_width, prev_height = self._previous_size
            if self._clear_on_shrink and (width < prev_width or height < prev_height):
                out.append("\x1b[2J")

        for i, line in enumerate(lines):
            if (
                force_full
                or i >= len(self._previous_lines)
                or self._previous_lines[i] != line
            ):
                out.append(f"\x1b[{i + 1};1H")
                out.append(line)

        self._previous_lines = lines
        self._previous_size = (width, height)

        if out:
            self.terminal.write("".join(out))
