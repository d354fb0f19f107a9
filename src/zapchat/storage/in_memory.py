"""In-memory key-value store.

Simple dict-based storage. Data is lost when the application exits.
"""

from .base import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Session-only store, also used as the fallback when the file store fails."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    @property
    def backend_type(self) -> str:
        return "memory"
