import pytest

from storefront_client.application.services.token_store_service import TokenStoreService
from storefront_client.infrastructure.configuration.main_settings import StorefrontSettings
from storefront_client.infrastructure.navigation.logging_login_redirect_adapter import LoggingLoginRedirectAdapter
from storefront_client.infrastructure.storage.in_memory_key_value_store import InMemoryKeyValueStore

API_BASE_URL = "https://shop.example.com/api"


@pytest.fixture
def settings(tmp_path):
    return StorefrontSettings(
        api_base_url=API_BASE_URL,
        storage_dir=tmp_path / "runtime_data",
        request_timeout=5.0,
    )


@pytest.fixture
def memory_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def token_store(memory_store):
    return TokenStoreService(memory_store)


@pytest.fixture
def login_redirect():
    return LoggingLoginRedirectAdapter(login_path="/login")


@pytest.fixture
def user_payload():
    return {
        "id": "u-1",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "isAdmin": False,
        "marketingOptIn": True,
        "walletBalance": "12.50",
        "createdAt": "2024-01-01T00:00:00.000Z",
    }
