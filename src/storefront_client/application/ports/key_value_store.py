from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """String key-value storage for client-side state (tokens, user, cart)."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Returns the stored value or None."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Stores a value, replacing any previous one."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Removes a key. Missing keys are ignored."""
        pass
