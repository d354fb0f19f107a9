"""Abstract base class for local key-value stores.

This module defines the interface used to persist the credential.
The abstraction hides:
- Storage format (JSON file, in-memory dict)
- Persistence mechanism and its failure modes
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Synchronous string-to-string store.

    Implementations raise StorageError when the underlying medium fails.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``. Missing keys are ignored."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
