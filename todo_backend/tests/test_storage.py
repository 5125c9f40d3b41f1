import pytest

from todo_app.db import SQLiteKeyValueStore
from todo_app.settings import Settings
from todo_app.storage import InMemoryKeyValueStore, get_storage


@pytest.fixture(params=["memory", "sqlite"])
def any_store(request, tmp_path):
    if request.param == "sqlite":
        return SQLiteKeyValueStore(str(tmp_path / "nested" / "storage.db"))
    return InMemoryKeyValueStore()


class TestKeyValueStore:
    def test_get_missing_is_none(self, any_store):
        assert any_store.get_item("user") is None
        assert "user" not in any_store

    def test_set_get_replace(self, any_store):
        any_store.set_item("user", "alice")
        assert any_store.get_item("user") == "alice"
        any_store.set_item("user", "bob")
        assert any_store.get_item("user") == "bob"
        assert "user" in any_store

    def test_remove(self, any_store):
        any_store.set_item("user", "alice")
        any_store.remove_item("user")
        assert any_store.get_item("user") is None
        # removing again is harmless
        any_store.remove_item("user")

    def test_keys_sorted(self, any_store):
        any_store.set_item("todos", "[]")
        any_store.set_item("registeredUsers", "[]")
        any_store.set_item("user", "alice")
        assert any_store.keys() == ["registeredUsers", "todos", "user"]
        assert list(any_store) == ["registeredUsers", "todos", "user"]

    def test_json_helpers(self, any_store):
        any_store.write_json("todos", [{"id": 1, "text": "café", "completed": False}])
        assert any_store.get_item("todos") == '[{"id": 1, "text": "café", "completed": false}]'
        assert any_store.read_json_list("todos") == [{"id": 1, "text": "café", "completed": False}]

    @pytest.mark.parametrize("raw", ["not json", "{}", '"text"', "42"])
    def test_read_json_list_tolerates_bad_values(self, any_store, raw):
        any_store.set_item("todos", raw)
        assert any_store.read_json_list("todos") == []

    def test_read_json_list_missing(self, any_store):
        assert any_store.read_json_list("todos") == []


class TestSQLitePersistence:
    def test_values_survive_reopen(self, tmp_path):
        path = str(tmp_path / "storage.db")
        SQLiteKeyValueStore(path).set_item("user", "alice")
        assert SQLiteKeyValueStore(path).get_item("user") == "alice"


class TestFactory:
    def test_memory_backend(self):
        assert isinstance(get_storage(Settings(persistence_backend="memory")), InMemoryKeyValueStore)

    def test_sqlite_backend(self, tmp_path):
        path = str(tmp_path / "data" / "storage.db")
        store = get_storage(Settings(persistence_backend="sqlite", sqlite_db_path=path))
        assert isinstance(store, SQLiteKeyValueStore)
        assert store.db_path == path
