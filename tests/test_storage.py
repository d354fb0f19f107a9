"""Tests for the key-value stores and the credential store."""
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zapchat.errors import StorageError, UnknownBackendError
from zapchat.storage import CredentialStore, InMemoryStore, JsonFileStore, create_store


class TestInMemoryStore:
    """Tests for InMemoryStore."""

    def test_get_set_delete(self):
        store = InMemoryStore()
        assert store.get("k") is None
        store.set("k", "v")
        assert store.get("k") == "v"
        store.delete("k")
        store.delete("k")
        assert store.get("k") is None
        assert store.backend_type == "memory"

    def test_initial_data_is_copied(self):
        initial = {"k": "v"}
        store = InMemoryStore(initial)
        store.set("k", "changed")
        assert initial == {"k": "v"}


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    @pytest.fixture
    def path(self, tmp_path):
        return tmp_path / "nested" / "storage.json"

    def test_missing_file_reads_empty(self, path):
        assert JsonFileStore(path).get("anything") is None

    def test_set_creates_file(self, path):
        store = JsonFileStore(path)
        store.set("cohere_api_key", "sk-abc")
        assert json.loads(path.read_text()) == {"cohere_api_key": "sk-abc"}
        assert store.backend_type == "file"

    def test_separate_instances_share_the_file(self, path):
        JsonFileStore(path).set("k", "v")
        assert JsonFileStore(path).get("k") == "v"

    def test_delete_keeps_other_keys(self, path):
        store = JsonFileStore(path)
        store.set("a", "1")
        store.set("b", "2")
        store.delete("a")
        assert json.loads(path.read_text()) == {"b": "2"}

    def test_invalid_json_raises(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("{not json")
        with pytest.raises(StorageError, match="invalid JSON"):
            JsonFileStore(path).get("k")

    def test_non_utf8_raises(self, path):
        path.parent.mkdir(parents=True)
        path.write_bytes(b'{"cohere_api_key": "\xff\xfe"}')
        with pytest.raises(StorageError, match="not UTF-8"):
            JsonFileStore(path).get("cohere_api_key")

    @pytest.mark.parametrize("raw", ["null", "42", "true", "[\"sk\"]", "{}"])
    def test_non_string_values_read_as_missing(self, path, raw):
        path.parent.mkdir(parents=True)
        path.write_text(f'{{"cohere_api_key": {raw}, "other": "kept"}}')
        store = JsonFileStore(path)
        assert store.get("cohere_api_key") is None
        assert store.get("other") == "kept"

    def test_non_object_raises(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("[1, 2, 3]")
        with pytest.raises(StorageError, match="expected a JSON object"):
            JsonFileStore(path).get("k")

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = JsonFileStore(blocker / "storage.json")
        with pytest.raises(StorageError):
            store.set("k", "v")

    @given(st.text(), st.text())
    def test_roundtrip(self, key: str, value: str):
        """Property test: whatever is stored reads back unchanged."""
        store = InMemoryStore()
        store.set(key, value)
        assert store.get(key) == value


class TestFactory:
    """Tests for create_store."""

    def test_file_backend(self, tmp_path):
        store = create_store("file", path=tmp_path / "s.json")
        assert isinstance(store, JsonFileStore)

    def test_memory_backend_case_insensitive(self):
        assert isinstance(create_store("MEMORY"), InMemoryStore)

    def test_unknown_backend(self):
        with pytest.raises(UnknownBackendError, match="Supported backends: file, memory"):
            create_store("redis")

    def test_unknown_backend_is_value_error(self):
        with pytest.raises(ValueError):
            create_store("redis")


class TestCredentialStore:
    """Tests for CredentialStore."""

    def test_load_empty(self):
        assert CredentialStore(InMemoryStore()).load() == ""

    def test_save_load_clear(self, tmp_path):
        credentials = CredentialStore(JsonFileStore(tmp_path / "s.json"))
        credentials.save("sk-abc")
        assert CredentialStore(JsonFileStore(tmp_path / "s.json")).load() == "sk-abc"
        credentials.clear()
        assert credentials.load() == ""
        assert not credentials.degraded

    def test_value_is_not_validated(self):
        credentials = CredentialStore(InMemoryStore())
        credentials.save("not a real key !!")
        assert credentials.load() == "not a real key !!"

    def test_custom_key(self):
        store = InMemoryStore()
        CredentialStore(store, key="other").save("v")
        assert store.get("other") == "v"

    def test_corrupt_file_degrades_on_load(self, tmp_path, debug):
        path = tmp_path / "s.json"
        path.write_text("garbage")
        credentials = CredentialStore(JsonFileStore(path), debug_callback=debug)
        assert credentials.load() == ""
        assert credentials.degraded
        assert credentials.backend_type == "memory"
        assert "invalid JSON" in credentials.notice
        assert debug.entries[0][:2] == ("warning", "Store")

    def test_non_utf8_file_degrades_on_load(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_bytes(b'{"cohere_api_key": "\xff\xfe"}')
        credentials = CredentialStore(JsonFileStore(path))
        assert credentials.load() == ""
        assert credentials.degraded
        assert "not UTF-8" in credentials.notice

    def test_null_key_loads_as_demo_mode(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text('{"cohere_api_key": null}')
        credentials = CredentialStore(JsonFileStore(path))
        assert credentials.load() == ""
        assert not credentials.degraded

    def test_failed_save_keeps_value_in_memory(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        credentials = CredentialStore(JsonFileStore(blocker / "s.json"))
        credentials.save("sk-abc")
        assert credentials.degraded
        assert credentials.load() == "sk-abc"
