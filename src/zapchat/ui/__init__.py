"""Terminal UI module for zapchat.

Provides a Textual-based TUI for the Zap chat widget.

Module structure (Parnas principle - each module hides a design decision):
- formatting.py: Message presentation (alignment, headers, file cards)
- widgets.py: Custom widgets (bubbles, input bar, panels, log rendering)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Modal dialogs (API key, leave-site confirmation)
- callbacks.py: Engine integration (timers and debug messages)
- app.py: Application orchestration (user interaction flow)
"""

from .app import ZapChatApp, run_textual_tui
from .callbacks import PanelDebugCallback, TextualScheduler
from .config import LogLevel
from .formatting import MessageView, render_message
from .widgets import ChatInputBar, DebugPanel, MessageLogView

__all__ = [
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "MessageLogView",
    "MessageView",
    "PanelDebugCallback",
    "TextualScheduler",
    "ZapChatApp",
    "render_message",
    "run_textual_tui",
]
