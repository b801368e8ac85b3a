from __future__ import annotations

import json
from typing import Callable, Optional

from pydantic import ValidationError

from storefront_client.application.ports.key_value_store import KeyValueStore
from storefront_client.domain.entities.user_session import TokenPair, User, UserSession
from storefront_client.infrastructure.observability.logger_factory_service import build_logger

logger = build_logger(__name__)

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"
USER_KEY = "user"


class TokenStoreService:
    """Persists the access/refresh token pair and the logged-in user."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._clear_listeners: list[Callable[[], None]] = []

    def add_clear_listener(self, listener: Callable[[], None]) -> None:
        """Registers a callback run after every ``clear()``, whoever triggered it."""
        self._clear_listeners.append(listener)

    @property
    def access_token(self) -> Optional[str]:
        return self.store.get(ACCESS_TOKEN_KEY) or None

    @property
    def refresh_token(self) -> Optional[str]:
        return self.store.get(REFRESH_TOKEN_KEY) or None

    def save_tokens(self, access_token: str, refresh_token: str) -> None:
        self.store.set(ACCESS_TOKEN_KEY, access_token)
        self.store.set(REFRESH_TOKEN_KEY, refresh_token)

    def save_user(self, user: User) -> None:
        self.store.set(USER_KEY, json.dumps(user.to_record()))

    def has_saved_user(self) -> bool:
        return bool(self.store.get(USER_KEY))

    def load_user(self) -> Optional[User]:
        raw = self.store.get(USER_KEY)
        if not raw:
            return None
        try:
            return User.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Discarding unreadable saved user: {e}")
            return None

    def load_session(self) -> UserSession:
        tokens = None
        if self.access_token and self.refresh_token:
            tokens = TokenPair(self.access_token, self.refresh_token)
        return UserSession(user=self.load_user(), tokens=tokens)

    def clear(self) -> None:
        for key in (USER_KEY, ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY):
            self.store.remove(key)
        for listener in self._clear_listeners:
            listener()
