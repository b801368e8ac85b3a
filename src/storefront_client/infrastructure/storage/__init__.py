from storefront_client.infrastructure.storage.in_memory_key_value_store import InMemoryKeyValueStore
from storefront_client.infrastructure.storage.json_file_key_value_store import JsonFileKeyValueStore

__all__ = ["InMemoryKeyValueStore", "JsonFileKeyValueStore"]
