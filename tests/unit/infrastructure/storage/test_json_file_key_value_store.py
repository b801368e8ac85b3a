import json

import pytest

from storefront_client.infrastructure.storage.in_memory_key_value_store import InMemoryKeyValueStore
from storefront_client.infrastructure.storage.json_file_key_value_store import JsonFileKeyValueStore


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "nested" / "client_storage.json"


def test_creates_directory_and_empty_file(store_path):
    JsonFileKeyValueStore(store_path)

    assert store_path.exists()
    assert json.loads(store_path.read_text()) == {}


def test_set_get_remove_persist_across_instances(store_path):
    store = JsonFileKeyValueStore(store_path)
    store.set("accessToken", "abc")
    store.set("cart_items", "[]")

    reopened = JsonFileKeyValueStore(store_path)
    assert reopened.get("accessToken") == "abc"

    reopened.remove("accessToken")
    reopened.remove("never-set")
    assert JsonFileKeyValueStore(store_path).get("accessToken") is None
    assert JsonFileKeyValueStore(store_path).get("cart_items") == "[]"


def test_corrupt_file_reads_as_empty(store_path):
    store = JsonFileKeyValueStore(store_path)
    store_path.write_text("{not json")

    assert store.get("anything") is None

    store.set("key", "value")
    assert json.loads(store_path.read_text()) == {"key": "value"}


def test_non_object_file_reads_as_empty(store_path):
    store = JsonFileKeyValueStore(store_path)
    store_path.write_text("[1, 2, 3]")

    assert store.get("0") is None


def test_non_string_values_are_ignored(store_path):
    store = JsonFileKeyValueStore(store_path)
    store_path.write_text(json.dumps({"count": 3}))

    assert store.get("count") is None


def test_no_temp_files_left_behind(store_path):
    store = JsonFileKeyValueStore(store_path)
    store.set("a", "1")
    store.set("b", "2")

    assert [p.name for p in store_path.parent.iterdir()] == ["client_storage.json"]


def test_in_memory_store():
    store = InMemoryKeyValueStore({"a": "1"})
    store.set("b", "2")
    store.remove("a")
    store.remove("missing")

    assert store.get("a") is None
    assert store.snapshot() == {"b": "2"}
