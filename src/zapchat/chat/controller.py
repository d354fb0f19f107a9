"""Conversation controller.

Owns the widget state and the message log and decides what happens on
every user action. The view only forwards events here and redraws from
the state and log notifications.

Submission flow:
1. ignore blank input
2. append the user's message and clear the input
3. "/discord" opens the leave-site confirmation and stops
4. otherwise type a reply; messages about scripts are followed by a
   promo line and then the scripts file offer
"""

import random
import webbrowser
from collections.abc import Callable

from ..config import DISCORD_COMMAND, ChatConfig, DebugCallback
from ..storage import CredentialStore, InMemoryStore
from . import state as reducers
from .commands import COMMAND_SUGGESTIONS, CommandSuggestion
from .log import MessageLog
from .models import ChatState, FileAttachment, Message, Sender
from .responses import DECLINE_LINK_REPLY, SCRIPTS_PROMO, ResponseSelector, wants_scripts_offer
from .scheduler import Scheduler
from .services import CompletionClient, DemoCompletionClient, FileDownloader, MockFileDownloader
from .simulator import TypingSimulator

StateListener = Callable[[ChatState], None]


class ConversationController:
    """State machine behind the chat widget.

    ``Idle`` until a reply starts typing, ``AwaitingReply`` while one is.
    All timing goes through the injected scheduler.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: ChatConfig | None = None,
        *,
        log: MessageLog | None = None,
        rng: random.Random | None = None,
        selector: ResponseSelector | None = None,
        completion: CompletionClient | None = None,
        downloader: FileDownloader | None = None,
        credentials: CredentialStore | None = None,
        open_url: Callable[[str], object] | None = None,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._config = config or ChatConfig()
        self._log = log or MessageLog()
        self._rng = rng or random.Random()
        self._selector = selector or ResponseSelector(self._rng)
        self._completion = completion or DemoCompletionClient(self._selector)
        self._downloader = downloader or MockFileDownloader(debug_callback)
        self._credentials = credentials or CredentialStore(
            InMemoryStore(), key=self._config.credential_key, debug_callback=debug_callback
        )
        self._open_url = open_url or webbrowser.open_new_tab
        self._debug_callback = debug_callback
        self._state = ChatState()
        self._listeners: list[StateListener] = []
        self._closed = False
        self._typist = TypingSimulator(
            scheduler,
            self._log,
            self._config,
            on_start=lambda: self._dispatch(reducers.begin_typing),
            on_finish=lambda: self._dispatch(reducers.end_typing),
            debug_callback=debug_callback,
        )

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def log(self) -> MessageLog:
        return self._log

    @property
    def config(self) -> ChatConfig:
        return self._config

    @property
    def typist(self) -> TypingSimulator:
        return self._typist

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every change."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _dispatch(self, reducer: Callable[..., ChatState], *args: object) -> None:
        new_state = reducer(self._state, *args)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Chat", message)

    def _later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._scheduler.call_later(self._config.seconds(delay_ms), callback)

    def close(self) -> None:
        """Tear down. Timers still pending fire into a closed log and are dropped."""
        self._closed = True
        self._log.close()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    def load_credential(self) -> str:
        """Read the stored credential into the state."""
        credential = self._credentials.load()
        self._dispatch(reducers.set_credential, credential)
        if self._credentials.notice:
            self._dispatch(reducers.set_notice, self._credentials.notice)
        self._debug("info", "AI enabled" if credential else "no stored key, demo mode")
        return credential

    def start(self) -> None:
        """First-run flow.

        Loads the credential, keeps the loading splash up for the loading
        delay, then asks for a key a moment later if none is stored.
        """
        credential = self.load_credential()

        def _loaded() -> None:
            if self._closed:
                return
            self._dispatch(reducers.finish_loading)
            if not credential:
                self._later(self._config.first_run_prompt_delay_ms, _prompt)

        def _prompt() -> None:
            if self._closed or self._state.credential:
                return
            self._dispatch(reducers.open_credential_modal)

        self._later(self._config.loading_delay_ms, _loaded)

    # ------------------------------------------------------------------
    # Conversation
    # ------------------------------------------------------------------

    def set_input(self, text: str) -> None:
        self._dispatch(reducers.set_input, text)

    def submit(self, text: str | None = None) -> Message | None:
        """Send ``text``, or the input buffer when no text is given.

        Returns:
            The user's message, or None when nothing was sent
        """
        raw = self._state.input_text if text is None else text
        content = raw.strip()
        if not content or self._closed:
            return None
        if self._config.serialize_replies and self._state.typing:
            self._debug("debug", "submission ignored while a reply is typing")
            return None

        message = Message(content=content, sender=Sender.USER)
        self._log.append(message)
        self._dispatch(reducers.clear_input)
        self._debug("debug", f"user: {content[:50]}")

        if content.lower() == DISCORD_COMMAND:
            self._dispatch(reducers.open_link_confirm)
            return message

        offer_scripts = wants_scripts_offer(content)
        reply = self._completion.complete_chat(content, self._state.credential)
        self._typist.simulate(
            reply,
            on_complete=self._schedule_scripts_offer if offer_scripts else None,
        )
        return message

    def _schedule_scripts_offer(self, _reply: Message) -> None:
        self._later(self._config.promo_delay_ms, self._type_promo)

    def _type_promo(self) -> None:
        if self._closed:
            return
        self._typist.simulate(
            SCRIPTS_PROMO,
            on_complete=lambda _message: self._later(
                self._config.file_offer_delay_ms, self._append_file_offer
            ),
        )

    def _append_file_offer(self) -> None:
        scripts = self._config.scripts_file
        attachment = FileAttachment(name=scripts.name, file_type=scripts.file_type, size=scripts.size)
        self._log.append(
            Message(content=scripts.name, sender=Sender.ASSISTANT, attachment=attachment)
        )
        self._debug("info", f"offered {scripts.name}")

    # ------------------------------------------------------------------
    # Leave-site confirmation
    # ------------------------------------------------------------------

    def confirm_link(self) -> bool:
        """Open the community link and close the dialog.

        Returns:
            False if the dialog was not open
        """
        if not self._state.link_confirm_open:
            return False
        self._open_url(self._config.community_url)
        self._dispatch(reducers.close_link_confirm)
        self._debug("info", f"opened {self._config.community_url}")
        return True

    def decline_link(self) -> bool:
        """Close the dialog and answer with the fixed "no problem" reply."""
        if not self._state.link_confirm_open:
            return False
        self._dispatch(reducers.close_link_confirm)
        self._typist.simulate(DECLINE_LINK_REPLY)
        return True

    # ------------------------------------------------------------------
    # Credential modal
    # ------------------------------------------------------------------

    def open_credential_modal(self) -> None:
        self._dispatch(reducers.open_credential_modal)

    def set_credential_draft(self, text: str) -> None:
        self._dispatch(reducers.set_credential_draft, text)

    def save_credential(self, text: str | None = None) -> bool:
        """Store the trimmed key and close the modal.

        Blank input closes the modal without touching the stored key.

        Returns:
            True if a key was stored
        """
        value = (self._state.credential_draft if text is None else text).strip()
        saved = False
        if value:
            self._credentials.save(value)
            self._dispatch(reducers.set_credential, value)
            if self._credentials.notice:
                self._dispatch(reducers.set_notice, self._credentials.notice)
            saved = True
        self._dispatch(reducers.close_credential_modal)
        return saved

    def skip_credential(self) -> None:
        self._dispatch(reducers.close_credential_modal)

    def clear_credential(self) -> None:
        """Forget the stored key and return to demo mode."""
        self._credentials.clear()
        self._dispatch(reducers.set_credential, "")

    def dismiss_notice(self) -> None:
        self._dispatch(reducers.set_notice, None)

    # ------------------------------------------------------------------
    # Hints, command palette, attachments, downloads
    # ------------------------------------------------------------------

    def toggle_hints(self) -> None:
        self._dispatch(reducers.toggle_hints)

    def choose_hint(self, hint: str) -> None:
        self._dispatch(reducers.set_input, hint)
        self._dispatch(reducers.close_hints)

    def toggle_palette(self) -> None:
        self._dispatch(reducers.toggle_palette)

    def move_suggestion(self, step: int) -> None:
        self._dispatch(reducers.move_suggestion, step, len(COMMAND_SUGGESTIONS))

    def choose_command(self, suggestion: CommandSuggestion | None = None) -> bool:
        """Fill the input with a command prefix.

        Without an argument the highlighted palette entry is used.

        Returns:
            False if there was nothing to choose
        """
        if suggestion is None:
            index = self._state.active_suggestion
            if not 0 <= index < len(COMMAND_SUGGESTIONS):
                return False
            suggestion = COMMAND_SUGGESTIONS[index]
        self._dispatch(reducers.set_input, suggestion.fill_text)
        self._dispatch(reducers.close_palette)
        return True

    def add_attachment(self, name: str | None = None) -> str:
        """Attach a mock file. Only the name is kept."""
        name = name or f"file-{self._rng.randrange(1000)}.pdf"
        self._dispatch(reducers.add_attachment, name)
        return name

    def remove_attachment(self, index: int) -> None:
        self._dispatch(reducers.remove_attachment, index)

    def download(self, name: str) -> None:
        self._downloader.download(name)
