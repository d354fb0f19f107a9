"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble rendering and auto-scroll
- Send button state
- Typing indicator animation
- Attachment chips, command suggestions, hints
- Log rendering and level filtering
"""

from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static

from ..chat.commands import COMMAND_SUGGESTIONS, MESSAGE_HINTS
from ..chat.models import Message as ChatMessage, Sender
from .config import (
    ASSISTANT_TAG,
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    NOTIFY_SHORT,
    SITE_NAME,
    TAGLINE,
    LogLevel,
)
from .formatting import render_message


class ChatBubble(Vertical):
    """A chat message container that copies its content when clicked.

    File messages also carry a download button.
    """

    class DownloadRequested(Message):
        """Posted when the download button of a file message is pressed."""

        def __init__(self, file_name: str) -> None:
            super().__init__()
            self.file_name = file_name

    def __init__(self, message: ChatMessage, *args, **kwargs) -> None:
        view = render_message(message)
        classes = f"chat-message {message.sender.value}-message align-{view.align}"
        if view.is_file:
            classes += " file-message"
        super().__init__(*args, classes=classes, **kwargs)
        self._content = message.content
        self._download_name = view.download_name
        self.compose_add_child(Static(view.header, classes="message-header", markup=False))
        self.compose_add_child(Static(view.body, classes="message-content", markup=False))
        if view.is_file:
            self.compose_add_child(Button("⬇ Download", classes="download-btn", variant="primary"))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if self._download_name:
            self.post_message(self.DownloadRequested(self._download_name))

    def on_click(self, event: Click) -> None:
        """Copy message content to the clipboard when clicked."""
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=NOTIFY_SHORT)


class MessageLogView(VerticalScroll):
    """Scrollable message thread, scrolled to the newest entry on every append."""

    BORDER_TITLE = SITE_NAME
    BORDER_SUBTITLE = "No messages yet"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[ChatMessage] = []

    @property
    def message_count(self) -> int:
        return len(self._messages)

    def add_message(self, message: ChatMessage) -> None:
        """Render ``message`` at the bottom of the thread."""
        self._messages.append(message)
        self.mount(ChatBubble(message))
        self.border_subtitle = f"{len(self._messages)} messages"
        self.call_after_refresh(self.scroll_end, animate=False)

    def get_last_response(self) -> str | None:
        """Get the last assistant response."""
        for message in reversed(self._messages):
            if message.sender == Sender.ASSISTANT:
                return message.content
        return None


class ChatInputBar(Horizontal):
    """Chat input bar with an Input and a Send button.

    Enter submits. The send button follows the controller's ``can_send``.
    """

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Changed(Message):
        """Message sent when the input text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield Input(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="success", disabled=True).with_tooltip(
            "Send message (Enter)"
        )

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", Input).value

    def set_text(self, text: str) -> None:
        """Replace the input text without re-announcing it."""
        text_input = self.query_one("#chat-input", Input)
        if text_input.value != text:
            with text_input.prevent(Input.Changed):
                text_input.value = text
            text_input.cursor_position = len(text)

    def set_send_enabled(self, enabled: bool, busy: bool = False) -> None:
        button = self.query_one("#send-btn", Button)
        button.disabled = not enabled
        button.label = "…" if busy else "Send"

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def _submit(self) -> None:
        self.post_message(self.Submitted(self.text))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()


class TypingIndicator(Static):
    """"zap  Thinking..." line shown while a reply is being typed."""

    FRAMES = (".  ", ".. ", "...")

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._frame = 0

    def on_mount(self) -> None:
        self.display = False
        self._render_frame()
        self.set_interval(0.3, self._tick)

    def _tick(self) -> None:
        if self.display:
            self._frame = (self._frame + 1) % len(self.FRAMES)
            self._render_frame()

    def _render_frame(self) -> None:
        self.update(f"[b]{ASSISTANT_TAG}[/b]  Thinking{self.FRAMES[self._frame]}")


class StatusLine(Static):
    """Tagline with the current mode: demo or AI enabled."""

    def set_mode(self, demo_mode: bool) -> None:
        if demo_mode:
            self.update(f"{TAGLINE} [magenta](Demo Mode)[/]")
        else:
            self.update(f"{TAGLINE} [green](AI Enabled)[/]")


class LoadingSplash(Static):
    """Full-screen splash shown during the initial loading delay."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(f"[b]{SITE_NAME}[/b]\n\nLoading...", *args, **kwargs)


class AttachmentBar(Horizontal):
    """Chips for attached files, each with a remove button."""

    class Removed(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._attachments: tuple[str, ...] = ()

    def on_mount(self) -> None:
        self.display = False

    def show_attachments(self, attachments: tuple[str, ...]) -> None:
        if attachments == self._attachments:
            return
        self._attachments = attachments
        self.remove_children()
        chips = []
        for index, name in enumerate(attachments):
            chips.append(Static(name, classes="attachment-name", markup=False))
            chips.append(Button("✕", name=str(index), classes="attachment-remove"))
        if chips:
            self.mount(*chips)
        self.display = bool(attachments)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.name is not None:
            self.post_message(self.Removed(int(event.button.name)))


class CommandBar(Horizontal):
    """Row of quick-fill command buttons."""

    class Chosen(Message):
        def __init__(self, prefix: str) -> None:
            super().__init__()
            self.prefix = prefix

    def compose(self):
        for suggestion in COMMAND_SUGGESTIONS:
            yield Button(
                f"{suggestion.icon} {suggestion.label}",
                name=suggestion.prefix,
                classes="command-btn",
            ).with_tooltip(suggestion.description)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.name:
            self.post_message(self.Chosen(event.button.name))


class CommandPalette(Vertical):
    """Keyboard-navigable list of commands with their descriptions."""

    BORDER_TITLE = "Commands"

    def compose(self):
        for suggestion in COMMAND_SUGGESTIONS:
            yield Static(
                f"{suggestion.icon}  [b]{suggestion.prefix}[/b]  {suggestion.description}",
                classes="palette-row",
            )

    def on_mount(self) -> None:
        self.display = False

    def highlight(self, index: int) -> None:
        for row_index, row in enumerate(self.query(".palette-row")):
            row.set_class(row_index == index, "-active")


class HintsPanel(Vertical):
    """Suggested first messages."""

    BORDER_TITLE = "AI Message Hints"

    class Chosen(Message):
        def __init__(self, hint: str) -> None:
            super().__init__()
            self.hint = hint

    def compose(self):
        for hint in MESSAGE_HINTS:
            yield Button(hint, name=hint, classes="hint-btn")

    def on_mount(self) -> None:
        self.display = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.name:
            self.post_message(self.Chosen(event.button.name))


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+L.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat, Typing, Store, Download)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        level_color = level_colors.get(level, "white")
        level_name = LogLevel.name(level)

        component_colors = {
            "TUI": "cyan",
            "Chat": "green",
            "Typing": "magenta",
            "Store": "yellow",
            "Download": "blue",
        }
        comp_color = component_colors.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] {message}"
        )

    def debug(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
