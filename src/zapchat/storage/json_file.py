"""JSON file key-value store.

Keeps all keys in one small JSON object on disk, read on every access so
that separate processes (the TUI and ``zapchat key``) see each other's
writes.
"""

import json
from pathlib import Path

from ..config import DEFAULT_STORE_PATH
from ..errors import StorageError
from .base import KeyValueStore


class JsonFileStore(KeyValueStore):
    """File-backed store.

    A missing file reads as an empty store. Unreadable files, bytes that
    are not UTF-8, invalid JSON and write failures raise StorageError.
    Values that are not strings are ignored.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_PATH):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except OSError as e:
            raise StorageError(str(e), path=str(self._path)) from e
        except UnicodeDecodeError as e:
            raise StorageError(f"not UTF-8 text: {e}", path=str(self._path)) from e
        except json.JSONDecodeError as e:
            raise StorageError(f"invalid JSON: {e}", path=str(self._path)) from e
        if not isinstance(data, dict):
            raise StorageError("expected a JSON object", path=str(self._path))
        # null and non-string values read as absent keys
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as e:
            raise StorageError(str(e), path=str(self._path)) from e

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    @property
    def backend_type(self) -> str:
        return "file"
