"""Typing simulation for assistant replies.

Hides the timing model: a reply "types" for a delay that grows with its
length, and is appended to the log when the delay ends.
"""

from collections.abc import Callable

from ..config import ChatConfig, DebugCallback
from .log import MessageLog
from .models import FileAttachment, Message, Sender
from .scheduler import Scheduler


def typing_delay_ms(
    text: str,
    base_ms: int = 1000,
    per_char_ms: int = 30,
    max_extra_ms: int = 3000,
) -> int:
    """Milliseconds the assistant "types" before ``text`` appears.

    ``base_ms`` plus ``per_char_ms`` per character, the length part capped
    at ``max_extra_ms``. With the defaults: 1000ms minimum, 4000ms maximum
    (reached at 100 characters).
    """
    return base_ms + min(per_char_ms * len(text), max_extra_ms)


class TypingSimulator:
    """Schedules assistant messages behind a typing indicator.

    ``on_start`` runs when a reply starts typing and ``on_finish`` right
    before it is appended, so the owner can flip its typing flag. Calls are
    fire-and-forget; several replies may be typing at once.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        log: MessageLog,
        config: ChatConfig | None = None,
        on_start: Callable[[], None] | None = None,
        on_finish: Callable[[], None] | None = None,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._log = log
        self._config = config or ChatConfig()
        self._on_start = on_start
        self._on_finish = on_finish
        self._debug_callback = debug_callback

    def _debug(self, message: str) -> None:
        if self._debug_callback:
            self._debug_callback("debug", "Typing", message)

    def delay_ms(self, text: str) -> int:
        return typing_delay_ms(
            text,
            base_ms=self._config.typing_base_delay_ms,
            per_char_ms=self._config.typing_per_char_ms,
            max_extra_ms=self._config.typing_max_extra_ms,
        )

    def simulate(
        self,
        text: str,
        attachment: FileAttachment | None = None,
        on_complete: Callable[[Message], None] | None = None,
    ) -> int:
        """Type ``text`` and append it as an assistant message.

        Args:
            text: Reply content
            attachment: Optional file metadata for the message
            on_complete: Called with the message once it is in the log.
                Not called if the log was closed in the meantime.

        Returns:
            The unscaled typing delay in milliseconds
        """
        delay = self.delay_ms(text)
        if self._on_start:
            self._on_start()
        self._debug(f"typing {len(text)} chars for {delay}ms")

        def _finish() -> None:
            if self._on_finish:
                self._on_finish()
            message = Message(content=text, sender=Sender.ASSISTANT, attachment=attachment)
            if not self._log.append(message):
                self._debug("log closed, reply dropped")
                return
            if on_complete:
                on_complete(message)

        self._scheduler.call_later(self._config.seconds(delay), _finish)
        return delay
