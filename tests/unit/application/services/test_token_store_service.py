import json

from storefront_client.application.services.token_store_service import (
    ACCESS_TOKEN_KEY,
    REFRESH_TOKEN_KEY,
    USER_KEY,
    TokenStoreService,
)
from storefront_client.domain.entities.user_session import TokenPair, User


def test_save_and_read_tokens(token_store, memory_store):
    token_store.save_tokens("access-1", "refresh-1")

    assert token_store.access_token == "access-1"
    assert token_store.refresh_token == "refresh-1"
    assert memory_store.get(ACCESS_TOKEN_KEY) == "access-1"
    assert memory_store.get(REFRESH_TOKEN_KEY) == "refresh-1"


def test_empty_token_reads_as_none(memory_store):
    memory_store.set(ACCESS_TOKEN_KEY, "")
    assert TokenStoreService(memory_store).access_token is None


def test_user_round_trips_with_camel_case_record(token_store, memory_store, user_payload):
    user = User.model_validate(user_payload)
    token_store.save_user(user)

    stored = json.loads(memory_store.get(USER_KEY))
    assert stored["firstName"] == "Ada"
    assert stored["isAdmin"] is False
    assert token_store.load_user() == user


def test_corrupt_saved_user_loads_as_none(token_store, memory_store):
    memory_store.set(USER_KEY, "{broken")
    assert token_store.has_saved_user()
    assert token_store.load_user() is None

    memory_store.set(USER_KEY, json.dumps({"firstName": "No id"}))
    assert token_store.load_user() is None


def test_load_session(token_store, user_payload):
    assert not token_store.load_session().is_authenticated

    token_store.save_tokens("a", "r")
    token_store.save_user(User.model_validate({**user_payload, "isAdmin": True}))

    session = token_store.load_session()
    assert session.is_authenticated
    assert session.is_admin
    assert session.tokens == TokenPair("a", "r")


def test_clear_removes_all_session_keys(token_store, memory_store, user_payload):
    memory_store.set("cart_items", "[]")
    token_store.save_tokens("a", "r")
    token_store.save_user(User.model_validate(user_payload))

    token_store.clear()

    assert memory_store.snapshot() == {"cart_items": "[]"}


def test_clear_notifies_listeners(token_store):
    calls = []
    token_store.add_clear_listener(lambda: calls.append("cleared"))
    token_store.save_tokens("access-1", "refresh-1")

    token_store.clear()

    assert calls == ["cleared"]
    assert token_store.access_token is None
