"""Outside-world collaborators of the controller.

Each is a single-method interface so a real implementation can replace
the stub without touching the conversation flow:

- FileDownloader: what happens when a file message's download is chosen
- CompletionClient: where replies come from

The shipped implementations are stubs. The download does not produce any
bytes, and the completion client never leaves the process: it answers
with the canned ResponseSelector whatever the credential.
"""

from abc import ABC, abstractmethod

from ..config import DebugCallback
from .responses import ResponseSelector


class FileDownloader(ABC):
    """Handles a download request for a file offered in chat."""

    @abstractmethod
    def download(self, name: str) -> None:
        """Start a download of the file called ``name``."""


class MockFileDownloader(FileDownloader):
    """Placeholder download. Records the request, fetches nothing.

    The offered files do not exist anywhere.
    """

    def __init__(self, debug_callback: DebugCallback | None = None) -> None:
        self._requests: list[str] = []
        self._debug_callback = debug_callback

    @property
    def requests(self) -> list[str]:
        """Names of every download requested so far, in order."""
        return list(self._requests)

    def download(self, name: str) -> None:
        self._requests.append(name)
        if self._debug_callback:
            self._debug_callback("info", "Download", f"mock download requested: {name}")


class CompletionClient(ABC):
    """Produces the assistant's reply to a prompt."""

    @abstractmethod
    def complete_chat(self, prompt: str, credential: str) -> str:
        """Return a reply to ``prompt``.

        Args:
            prompt: The user's message
            credential: Stored API key, empty in demo mode
        """


class DemoCompletionClient(CompletionClient):
    """Canned replies only. The credential is accepted and ignored."""

    def __init__(self, selector: ResponseSelector | None = None) -> None:
        self._selector = selector or ResponseSelector()

    @property
    def selector(self) -> ResponseSelector:
        return self._selector

    def complete_chat(self, prompt: str, credential: str) -> str:
        return self._selector.select(prompt)
