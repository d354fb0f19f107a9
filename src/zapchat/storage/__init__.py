"""Local persistence for zapchat.

Stores the single credential the widget remembers between runs.
"""

from .base import KeyValueStore
from .credentials import CredentialStore
from .factory import SUPPORTED_BACKENDS, create_store
from .in_memory import InMemoryStore
from .json_file import JsonFileStore

__all__ = [
    "SUPPORTED_BACKENDS",
    "CredentialStore",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "create_store",
]
