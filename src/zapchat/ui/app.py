"""Main Textual TUI application.

Wires the conversation controller to the widgets. The controller owns all
state; the app forwards widget events to it and redraws from its state and
message log notifications.
"""

import asyncio
import random
from collections.abc import Callable
from typing import TypeVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widget import Widget
from textual.widgets import Footer, Header

from ..chat import ChatState, ConversationController, FileDownloader, Message, find_command
from ..config import ChatConfig
from ..storage import CredentialStore, create_store
from .callbacks import PanelDebugCallback, TextualScheduler
from .config import NOTIFY_LONG, NOTIFY_SHORT, SITE_NAME, LogLevel
from .screens import CredentialScreen, LeaveSiteScreen
from .styles import APP_CSS
from .themes import FINAL_SITE_NIGHT
from .widgets import (
    AttachmentBar,
    ChatBubble,
    ChatInputBar,
    CommandBar,
    CommandPalette,
    DebugPanel,
    HintsPanel,
    LoadingSplash,
    MessageLogView,
    StatusLine,
    TypingIndicator,
)

WidgetType = TypeVar("WidgetType", bound=Widget)


class ZapChatApp(App):
    """Textual TUI for the Zap chat widget."""

    CSS = APP_CSS
    TITLE = SITE_NAME
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+s", "settings", "API Key"),
        Binding("ctrl+t", "toggle_hints", "Hints"),
        Binding("ctrl+o", "toggle_palette", "Commands"),
        Binding("ctrl+n", "palette_next", "Next", show=False),
        Binding("ctrl+p", "palette_previous", "Previous", show=False),
        Binding("ctrl+b", "attach", "Attach"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+l", "toggle_debug", "Log"),
        Binding("escape", "close_panels", "Close", show=False),
    ]

    def __init__(
        self,
        config: ChatConfig | None = None,
        log_level: str | None = None,
        credentials: CredentialStore | None = None,
        rng: random.Random | None = None,
        downloader: FileDownloader | None = None,
        open_url: Callable[[str], object] | None = None,
    ) -> None:
        super().__init__()
        self._config = config or ChatConfig()
        self._log_level = log_level
        self._credentials = credentials
        self._rng = rng
        self._downloader = downloader
        self._open_url = open_url
        self._debug_log = PanelDebugCallback()
        self._controller: ConversationController | None = None
        self._credential_screen_open = False
        self._leave_screen_open = False
        self._last_notice: str | None = None

    @property
    def controller(self) -> ConversationController:
        if self._controller is None:
            raise RuntimeError("App is not mounted")
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield LoadingSplash(id="loading-splash")

        with Vertical(id="main"):
            yield StatusLine(id="status-line")
            yield MessageLogView(id="message-log")
            yield TypingIndicator(id="typing-indicator")
            yield HintsPanel(id="hints-panel")
            yield CommandPalette(id="command-palette")
            yield AttachmentBar(id="attachment-bar")
            yield ChatInputBar(id="chat-input-bar")
            yield CommandBar(id="command-bar")
            yield DebugPanel(id="debug-panel")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(FINAL_SITE_NIGHT)
        self.theme = "final-site-night"

        log_panel = self._query_main("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
        self._debug_log.attach(log_panel)
        if self._log_level is not None:
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        credentials = self._credentials or self._create_credentials()
        controller = ConversationController(
            TextualScheduler(self),
            self._config,
            rng=self._rng,
            downloader=self._downloader,
            credentials=credentials,
            open_url=self._open_url,
            debug_callback=self._debug_log,
        )
        controller.log.subscribe(self._on_log_append)
        controller.subscribe(self._sync_state)
        self._controller = controller

        self._sync_state(controller.state)
        controller.start()

    def _query_main(self, selector: str, expect_type: type[WidgetType]) -> WidgetType:
        """Query the chat screen, which stays at the bottom of the stack under dialogs."""
        return self.screen_stack[0].query_one(selector, expect_type)

    def _create_credentials(self) -> CredentialStore:
        store_config = {}
        if self._config.store_backend == "file":
            store_config["path"] = self._config.store_path
        store = create_store(self._config.store_backend, **store_config)
        self._debug_log("debug", "TUI", f"credential store: {store.backend_type}")
        return CredentialStore(store, key=self._config.credential_key, debug_callback=self._debug_log)

    def on_unmount(self) -> None:
        """Stop the controller; timers still pending are dropped."""
        if self._controller is not None:
            self._controller.close()

    # ------------------------------------------------------------------
    # Redraw
    # ------------------------------------------------------------------

    def _on_log_append(self, message: Message) -> None:
        self._query_main("#message-log", MessageLogView).add_message(message)

    def _sync_state(self, state: ChatState) -> None:
        """Bring every widget in line with ``state``."""
        input_bar = self._query_main("#chat-input-bar", ChatInputBar)
        self._query_main("#loading-splash", LoadingSplash).display = state.loading
        main = self._query_main("#main", Vertical)
        if main.display == state.loading:
            main.display = not state.loading
            if not state.loading:
                input_bar.focus_input()
        self._query_main("#status-line", StatusLine).set_mode(state.demo_mode)
        self.sub_title = "Demo Mode" if state.demo_mode else "AI Enabled"

        self._query_main("#typing-indicator", TypingIndicator).display = state.typing
        self._query_main("#hints-panel", HintsPanel).display = state.hints_open
        palette = self._query_main("#command-palette", CommandPalette)
        palette.display = state.palette_open
        palette.highlight(state.active_suggestion)
        self._query_main("#attachment-bar", AttachmentBar).show_attachments(state.attachments)

        input_bar.set_text(state.input_text)
        input_bar.set_send_enabled(state.can_send, busy=state.typing)

        if state.notice and state.notice != self._last_notice:
            self.notify(state.notice, severity="warning", timeout=NOTIFY_LONG)
        self._last_notice = state.notice

        if state.credential_modal_open and not self._credential_screen_open:
            self._credential_screen_open = True
            self.push_screen(CredentialScreen(), self._on_credential_result)
        if state.link_confirm_open and not self._leave_screen_open:
            self._leave_screen_open = True
            self.push_screen(LeaveSiteScreen(), self._on_leave_result)

    def _on_credential_result(self, value: str | None) -> None:
        self._credential_screen_open = False
        if value is None:
            self.controller.skip_credential()
            return
        if self.controller.save_credential(value):
            self.notify("API key saved. AI enabled.", timeout=NOTIFY_SHORT)

    def _on_leave_result(self, confirmed: bool | None) -> None:
        self._leave_screen_open = False
        if confirmed:
            self.controller.confirm_link()
            self.notify("Opening Discord in your browser", timeout=NOTIFY_SHORT)
        else:
            self.controller.decline_link()

    # ------------------------------------------------------------------
    # Widget events
    # ------------------------------------------------------------------

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        self.controller.set_input(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        state = self.controller.state
        if state.palette_open and state.active_suggestion >= 0:
            self.controller.choose_command()
            return
        self.controller.set_input(event.value)
        self.controller.submit()

    def on_chat_bubble_download_requested(self, event: ChatBubble.DownloadRequested) -> None:
        self.controller.download(event.file_name)
        self.notify(f"Downloading {event.file_name}…", timeout=NOTIFY_SHORT)

    def on_attachment_bar_removed(self, event: AttachmentBar.Removed) -> None:
        self.controller.remove_attachment(event.index)

    def on_command_bar_chosen(self, event: CommandBar.Chosen) -> None:
        suggestion = find_command(event.prefix)
        if suggestion is not None:
            self.controller.choose_command(suggestion)
        self._query_main("#chat-input-bar", ChatInputBar).focus_input()

    def on_hints_panel_chosen(self, event: HintsPanel.Chosen) -> None:
        self.controller.choose_hint(event.hint)
        self._query_main("#chat-input-bar", ChatInputBar).focus_input()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_settings(self) -> None:
        """Open the API key dialog."""
        self.controller.open_credential_modal()

    def action_toggle_hints(self) -> None:
        self.controller.toggle_hints()

    def action_toggle_palette(self) -> None:
        self.controller.toggle_palette()

    def action_palette_next(self) -> None:
        if self.controller.state.palette_open:
            self.controller.move_suggestion(1)

    def action_palette_previous(self) -> None:
        if self.controller.state.palette_open:
            self.controller.move_suggestion(-1)

    def action_attach(self) -> None:
        """Attach a mock file."""
        name = self.controller.add_attachment()
        self.notify(f"Attached {name}", timeout=NOTIFY_SHORT)

    def action_close_panels(self) -> None:
        state = self.controller.state
        if state.palette_open:
            self.controller.toggle_palette()
        if state.hints_open:
            self.controller.toggle_hints()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self._query_main("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=NOTIFY_SHORT)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self._query_main("#message-log", MessageLogView).get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied", timeout=NOTIFY_SHORT)
        else:
            self.notify("No response to copy", severity="warning", timeout=NOTIFY_SHORT)


async def run_textual_tui(
    config: ChatConfig | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        config: Chat configuration (store backend, delays, speed)
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ZapChatApp(config=config, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
