"""Glue between the chat engine and Textual.

Hides the details of how the engine's timers and debug messages reach the
TUI:
- TextualScheduler runs engine timers with ``App.set_timer``
- PanelDebugCallback routes engine debug messages to the log panel
"""

from typing import TYPE_CHECKING

from ..chat.scheduler import Callback, Scheduler

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import DebugPanel


class TextualScheduler(Scheduler):
    """Scheduler on the Textual message loop.

    Timers belong to the app, so they stop firing when the app exits.
    """

    def __init__(self, app: "App") -> None:
        self._app = app
        self._pending = 0

    def call_later(self, delay: float, callback: Callback) -> None:
        self._pending += 1

        def _fire() -> None:
            self._pending -= 1
            callback()

        self._app.set_timer(max(delay, 0.0), _fire)

    @property
    def pending(self) -> int:
        return self._pending


class PanelDebugCallback:
    """Debug callback writing to the log panel.

    Messages arriving before the panel is attached are kept and flushed
    when it is.
    """

    def __init__(self) -> None:
        self._panel: "DebugPanel | None" = None
        self._backlog: list[tuple[str, str, str]] = []

    def attach(self, panel: "DebugPanel") -> None:
        self._panel = panel
        backlog, self._backlog = self._backlog, []
        for entry in backlog:
            self(*entry)

    def __call__(self, level: str, component: str, message: str) -> None:
        """Route a debug message to the log panel."""
        if self._panel is None:
            self._backlog.append((level, component, message))
            return
        if level == "debug":
            self._panel.debug(component, message)
        elif level == "info":
            self._panel.info(component, message)
        elif level == "warning":
            self._panel.warning(component, message)
        elif level == "error":
            self._panel.error(component, message)
