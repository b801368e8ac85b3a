import pytest
from unittest.mock import MagicMock

from storefront_client.application.dtos.forms.account_forms import (
    ForgotPasswordForm,
    ProfileForm,
    RegistrationForm,
    ResetPasswordForm,
)
from storefront_client.application.services.auth_session_service import AuthSessionService
from storefront_client.domain.entities.user_session import User
from storefront_client.domain.exceptions.api_error import ApiConnectionError, ApiError
from storefront_client.domain.exceptions.form_validation_error import FormValidationError


@pytest.fixture
def auth_api():
    return MagicMock()


@pytest.fixture
def service(auth_api, token_store):
    return AuthSessionService(auth_api, token_store)


@pytest.fixture
def login_payload(user_payload):
    return {"user": user_payload, "token": "access-1", "refreshToken": "refresh-1"}


@pytest.fixture
def saved_session(token_store, user_payload):
    token_store.save_tokens("access-0", "refresh-0")
    token_store.save_user(User.model_validate(user_payload))


def test_login_stores_tokens_and_user(service, auth_api, token_store, login_payload):
    auth_api.login.return_value = login_payload

    assert service.login("ada@example.com", "secret1") is True

    auth_api.login.assert_called_once_with(email="ada@example.com", password="secret1")
    assert token_store.access_token == "access-1"
    assert token_store.refresh_token == "refresh-1"
    assert service.user.first_name == "Ada"
    assert token_store.load_user() == service.user
    assert service.session.is_authenticated
    assert service.is_loading is False


def test_login_with_incomplete_response_fails(service, auth_api, token_store, user_payload):
    auth_api.login.return_value = {"user": user_payload, "token": "access-1"}

    assert service.login("ada@example.com", "secret1") is False
    assert token_store.access_token is None
    assert service.user is None


def test_login_api_error_returns_false(service, auth_api):
    auth_api.login.side_effect = ApiError(status_code=401, message="Invalid credentials")
    assert service.login("ada@example.com", "wrong") is False


def test_initialize_without_saved_session(service, auth_api):
    assert service.initialize() is None
    auth_api.get_profile.assert_not_called()
    assert service.is_loading is False


def test_initialize_verifies_and_refreshes_saved_user(service, auth_api, token_store, saved_session, user_payload):
    auth_api.get_profile.return_value = {"user": {**user_payload, "firstName": "Augusta"}}

    user = service.initialize()

    assert user.first_name == "Augusta"
    assert token_store.load_user().first_name == "Augusta"


@pytest.mark.parametrize("status", [401, 403])
def test_initialize_rejected_credentials_clear_session(service, auth_api, token_store, saved_session, status):
    auth_api.get_profile.side_effect = ApiError(status_code=status, message="Unauthorized")

    assert service.initialize() is None
    assert token_store.access_token is None
    assert not token_store.has_saved_user()


def test_initialize_server_error_keeps_saved_user(service, auth_api, token_store, saved_session):
    auth_api.get_profile.side_effect = ApiError(status_code=500, message="Internal server error")

    user = service.initialize()

    assert user.first_name == "Ada"
    assert token_store.access_token == "access-0"


def test_initialize_network_error_keeps_saved_user(service, auth_api, saved_session):
    auth_api.get_profile.side_effect = ApiConnectionError(message="Network error. Please check your connection and try again.")
    assert service.initialize().first_name == "Ada"


def test_initialize_corrupt_saved_user_clears_on_network_error(service, auth_api, token_store, memory_store):
    token_store.save_tokens("access-0", "refresh-0")
    memory_store.set("user", "{corrupt")
    auth_api.get_profile.side_effect = ApiConnectionError(message="offline")

    assert service.initialize() is None
    assert token_store.access_token is None


def _registration(**overrides):
    data = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "password": "secret1",
        "terms_accepted": True,
    }
    data.update(overrides)
    return RegistrationForm(**data)


def test_register_success(service, auth_api, token_store, login_payload):
    auth_api.register.return_value = login_payload

    result = service.register(_registration())

    assert result.success is True
    assert token_store.access_token == "access-1"
    assert auth_api.register.call_args.kwargs["terms_accepted"] is True


def test_register_invalid_form_skips_api(service, auth_api):
    result = service.register(_registration(password="123"))

    assert result.success is False
    assert result.error == "Password must be at least 6 characters"
    auth_api.register.assert_not_called()


def test_register_api_error_message(service, auth_api):
    auth_api.register.side_effect = ApiError(status_code=409, message="x", payload={"error": "User already exists"})
    assert service.register(_registration()).error == "User already exists"

    auth_api.register.side_effect = ApiError(status_code=500, message="x", payload={})
    assert service.register(_registration()).error == "Registration failed. Please try again."


def test_register_connection_error_message(service, auth_api):
    auth_api.register.side_effect = ApiConnectionError(
        message="Cannot connect to server at http://localhost:5000/api. Please make sure the backend server is running."
    )
    assert service.register(_registration()).error.startswith("Cannot connect to server")


def test_register_invalid_response(service, auth_api):
    auth_api.register.return_value = {"message": "ok"}
    assert service.register(_registration()).error == "Registration failed. Invalid response from server."


def test_logout_always_clears_session(service, auth_api, token_store, saved_session):
    auth_api.logout.side_effect = ApiConnectionError(message="offline")

    service.logout()

    assert token_store.access_token is None
    assert service.user is None


def test_refresh_user_failure_clears_session(service, auth_api, token_store, saved_session):
    auth_api.get_profile.side_effect = ApiError(status_code=500, message="boom")

    assert service.refresh_user() is None
    assert token_store.access_token is None


def test_update_profile_stores_returned_user(service, auth_api, token_store, user_payload):
    auth_api.update_profile.return_value = {"user": {**user_payload, "lastName": "King"}}
    form = ProfileForm(first_name=" Ada ", last_name="King", email="ada@example.com")

    user = service.update_profile(form)

    assert user.last_name == "King"
    assert token_store.load_user().last_name == "King"
    assert auth_api.update_profile.call_args.kwargs["first_name"] == "Ada"
    assert auth_api.update_profile.call_args.kwargs["phone"] is None


def test_update_profile_requires_names(service, auth_api):
    with pytest.raises(FormValidationError) as exc_info:
        service.update_profile(ProfileForm(first_name="Ada"))

    assert exc_info.value.field_errors == {"name": "First name and last name are required"}
    auth_api.update_profile.assert_not_called()


def test_is_admin(service, auth_api, user_payload):
    assert service.is_admin() is False
    auth_api.login.return_value = {"user": {**user_payload, "isAdmin": True}, "token": "a", "refreshToken": "r"}
    service.login("admin@example.com", "secret1")
    assert service.is_admin() is True


def test_password_reset_flow(service, auth_api):
    auth_api.forgot_password.return_value = {"message": "Reset email sent", "resetToken": "tok"}
    request = service.request_password_reset(ForgotPasswordForm(email="ada@example.com"))
    assert request.message == "Reset email sent"
    assert request.reset_token == "tok"

    auth_api.reset_password.return_value = {"message": "Password has been reset"}
    form = ResetPasswordForm(reset_token="tok", new_password="secret1", confirm_password="secret1")
    assert service.reset_password(form) == "Password has been reset"
    auth_api.reset_password.assert_called_once_with("tok", "secret1")


def test_password_reset_without_message_raises(service, auth_api):
    auth_api.forgot_password.return_value = {}
    with pytest.raises(ApiError) as exc_info:
        service.request_password_reset(ForgotPasswordForm(email="ada@example.com"))
    assert exc_info.value.message == "Failed to send reset email. Please try again."


def test_token_store_clear_forgets_the_user(service, auth_api, token_store, login_payload):
    auth_api.login.return_value = {**login_payload, "user": {**login_payload["user"], "isAdmin": True}}
    service.login("ada@example.com", "secret1")
    assert service.is_admin()

    token_store.clear()

    assert service.user is None
    assert service.is_admin() is False
    assert service.session.is_authenticated is False
