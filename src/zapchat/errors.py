"""Exception hierarchy for the chat engine."""


class ZapChatError(Exception):
    """Base class for zapchat errors."""


class StorageError(ZapChatError):
    """The local key-value store could not be read or written."""

    def __init__(self, message: str, path: str | None = None):
        msg = f"Storage error: {message}"
        if path:
            msg += f" (path: {path})"
        super().__init__(msg)
        self.path = path


class UnknownBackendError(ZapChatError, ValueError):
    """Requested store backend does not exist."""

    def __init__(self, backend: str, supported: tuple[str, ...]):
        super().__init__(
            f"Unsupported store backend: {backend}. "
            f"Supported backends: {', '.join(supported)}"
        )
        self.backend = backend
