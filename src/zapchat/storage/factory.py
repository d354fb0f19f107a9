"""Factory for creating key-value store backends."""

from typing import Any

from ..errors import UnknownBackendError
from .base import KeyValueStore

SUPPORTED_BACKENDS = ("file", "memory")


def create_store(backend: str = "file", **kwargs: Any) -> KeyValueStore:
    """Create a key-value store backend.

    Args:
        backend: Backend type ("file" or "memory")
        **kwargs: Backend-specific configuration
            For file:
                - path: str | Path (default: ~/.config/zapchat/storage.json)
            For memory:
                - initial: dict[str, str] | None

    Returns:
        KeyValueStore instance

    Raises:
        UnknownBackendError: If backend type is not supported
    """
    backend_lower = backend.lower()

    if backend_lower == "file":
        from .json_file import JsonFileStore
        return JsonFileStore(**kwargs)

    if backend_lower == "memory":
        from .in_memory import InMemoryStore
        return InMemoryStore(**kwargs)

    raise UnknownBackendError(backend, SUPPORTED_BACKENDS)
