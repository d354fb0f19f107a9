"""The persisted credential.

One opaque string under a fixed key. An empty or missing value means demo
mode. The value is never validated.

If the backing store fails, CredentialStore switches to an in-memory store
for the rest of the session and keeps a notice for the UI to show. Nothing
is raised to the caller.
"""

from ..config import CREDENTIAL_KEY, DebugCallback
from ..errors import StorageError
from .base import KeyValueStore
from .in_memory import InMemoryStore


class CredentialStore:
    """Reads and writes the API key in a KeyValueStore."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str = CREDENTIAL_KEY,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._store = store
        self._key = key
        self._debug_callback = debug_callback
        self._notice: str | None = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def backend_type(self) -> str:
        return self._store.backend_type

    @property
    def degraded(self) -> bool:
        """True once the store failed and credentials live in memory only."""
        return self._notice is not None

    @property
    def notice(self) -> str | None:
        """Message describing why the store degraded, if it did."""
        return self._notice

    def _degrade(self, error: StorageError, value: str | None = None) -> None:
        self._notice = f"Key storage unavailable, keeping it for this session only. {error}"
        if self._debug_callback:
            self._debug_callback("warning", "Store", self._notice)
        self._store = InMemoryStore({self._key: value} if value else None)

    def load(self) -> str:
        """Return the stored credential, or "" when none is stored."""
        try:
            return self._store.get(self._key) or ""
        except StorageError as e:
            self._degrade(e)
            return ""

    def save(self, value: str) -> None:
        try:
            self._store.set(self._key, value)
        except StorageError as e:
            self._degrade(e, value)
            return
        if self._debug_callback:
            self._debug_callback("info", "Store", f"credential saved ({self._store.backend_type})")

    def clear(self) -> None:
        try:
            self._store.delete(self._key)
        except StorageError as e:
            self._degrade(e)
