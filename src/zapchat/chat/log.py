"""Append-only message log.

Hides the storage of the conversation. Order is insertion order; nothing
is ever edited, removed or reordered. Observers are told about every
append so the view can render and scroll.
"""

from collections.abc import Callable, Iterator

from .models import Message, Sender

LogListener = Callable[[Message], None]


class MessageLog:
    """Ordered, append-only sequence of messages for one session.

    After ``close()`` the log refuses appends. Timers that outlive the
    view call ``append`` as usual and the message is dropped.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._listeners: list[LogListener] = []
        self._closed = False

    def append(self, message: Message) -> bool:
        """Append ``message`` at the end and notify listeners.

        Returns:
            False if the log is closed and the message was dropped
        """
        if self._closed:
            return False
        self._messages.append(message)
        for listener in list(self._listeners):
            listener(message)
        return True

    def subscribe(self, listener: LogListener) -> Callable[[], None]:
        """Register a listener. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        self._closed = True
        self._listeners.clear()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def last(self, sender: Sender | None = None) -> Message | None:
        """Most recent message, optionally restricted to one sender."""
        for message in reversed(self._messages):
            if sender is None or message.sender == sender:
                return message
        return None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))
