from typing import Dict, Optional

from storefront_client.application.ports.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)
