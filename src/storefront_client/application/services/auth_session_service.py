from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from storefront_client.application.dtos.forms.account_forms import (
    ForgotPasswordForm,
    ProfileForm,
    RegistrationForm,
    ResetPasswordForm,
)
from storefront_client.application.services.token_store_service import TokenStoreService
from storefront_client.domain.entities.user_session import User, UserSession
from storefront_client.domain.exceptions.api_error import ApiConnectionError, ApiError, extract_error_message
from storefront_client.domain.exceptions.storefront_error import StorefrontError
from storefront_client.infrastructure.http.resources.auth_api import AuthApi
from storefront_client.infrastructure.observability.logger_factory_service import build_logger

logger = build_logger(__name__)


@dataclass(frozen=True)
class RegistrationResult:
    success: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class PasswordResetRequest:
    message: str
    # Development backends echo the token so the reset screen can be tested
    reset_token: Optional[str] = None


def _parse_user(payload: Any) -> Optional[User]:
    raw = payload.get("user") if isinstance(payload, dict) else None
    if not raw:
        return None
    try:
        return User.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed user payload: {e}")
        return None


class AuthSessionService:
    """Holds the logged-in user and keeps it in sync with client storage and the API."""

    def __init__(self, auth_api: AuthApi, token_store: TokenStoreService):
        self.auth_api = auth_api
        self.token_store = token_store
        self.user: Optional[User] = None
        self.is_loading = True
        # Irrecoverable auth failures clear the token store from inside the HTTP auth flow
        token_store.add_clear_listener(self._forget_user)

    @property
    def session(self) -> UserSession:
        stored = self.token_store.load_session()
        return UserSession(user=self.user, tokens=stored.tokens)

    def _store_login(self, payload: Any) -> bool:
        user = _parse_user(payload)
        token = payload.get("token") if isinstance(payload, dict) else None
        refresh_token = payload.get("refreshToken") if isinstance(payload, dict) else None
        if user is None or not token or not refresh_token:
            return False
        self.token_store.save_tokens(token, refresh_token)
        self.update_user(user)
        return True

    def _forget_user(self) -> None:
        self.user = None

    def clear(self) -> None:
        self.user = None
        self.token_store.clear()

    def initialize(self) -> Optional[User]:
        """
        Restores the saved session and verifies it against ``/auth/me``.
        Rejected credentials (401/403) clear the session; an unreachable or
        failing backend keeps the saved user.
        """
        try:
            if not (self.token_store.access_token and self.token_store.has_saved_user()):
                self.user = None
                return None

            try:
                payload = self.auth_api.get_profile()
            except ApiError as e:
                logger.error(f"Auth initialization error: {e}")
                if e.status_code in (401, 403):
                    self.clear()
                else:
                    self._restore_saved_user()
            except ApiConnectionError as e:
                logger.error(f"Auth initialization error: {e}")
                self._restore_saved_user()
            else:
                user = _parse_user(payload)
                if user is not None:
                    self.update_user(user)
                else:
                    self.clear()
            return self.user
        finally:
            self.is_loading = False

    def _restore_saved_user(self) -> None:
        saved = self.token_store.load_user()
        if saved is None:
            self.clear()
        else:
            self.user = saved

    def login(self, email: str, password: str) -> bool:
        self.is_loading = True
        try:
            payload = self.auth_api.login(email=email, password=password)
            return self._store_login(payload)
        except StorefrontError as e:
            logger.error(f"Login error: {e}")
            return False
        finally:
            self.is_loading = False

    def register(self, form: RegistrationForm) -> RegistrationResult:
        errors = form.collect_errors()
        if errors:
            return RegistrationResult(success=False, error=next(iter(errors.values())))

        self.is_loading = True
        try:
            payload = self.auth_api.register(
                first_name=form.first_name,
                last_name=form.last_name,
                email=form.email,
                password=form.password,
                terms_accepted=form.terms_accepted,
                marketing_opt_in=form.marketing_opt_in,
            )
        except ApiConnectionError as e:
            logger.error(f"Registration error: {e}")
            return RegistrationResult(success=False, error=e.message)
        except ApiError as e:
            logger.error(f"Registration error: {e}")
            return RegistrationResult(
                success=False,
                error=extract_error_message(e.payload, "Registration failed. Please try again."),
            )
        finally:
            self.is_loading = False

        if self._store_login(payload):
            return RegistrationResult(success=True)
        return RegistrationResult(success=False, error="Registration failed. Invalid response from server.")

    def logout(self) -> None:
        try:
            self.auth_api.logout()
        except StorefrontError as e:
            logger.error(f"Logout error: {e}")
        finally:
            self.clear()

    def is_admin(self) -> bool:
        return self.user is not None and self.user.is_admin is True

    def update_user(self, user: User) -> None:
        self.user = user
        self.token_store.save_user(user)

    def refresh_user(self) -> Optional[User]:
        try:
            user = _parse_user(self.auth_api.get_profile())
        except StorefrontError as e:
            logger.error(f"Refresh user error: {e}")
            self.clear()
            return None
        if user is not None:
            self.update_user(user)
        return self.user

    def update_profile(self, form: ProfileForm) -> User:
        form.ensure_valid()
        payload = self.auth_api.update_profile(**form.to_update_kwargs())
        user = _parse_user(payload)
        if user is None:
            raise ApiError(status_code=None, message="Failed to update profile", payload=payload if isinstance(payload, dict) else {})
        # Stored directly; refetching the profile could log the user out on a transient failure
        self.update_user(user)
        return user

    def request_password_reset(self, form: ForgotPasswordForm) -> PasswordResetRequest:
        form.ensure_valid()
        payload = self.auth_api.forgot_password(email=form.email)
        message = payload.get("message") if isinstance(payload, dict) else None
        if not message:
            raise ApiError(status_code=None, message="Failed to send reset email. Please try again.")
        return PasswordResetRequest(message=message, reset_token=payload.get("resetToken"))

    def reset_password(self, form: ResetPasswordForm) -> str:
        form.ensure_valid()
        payload = self.auth_api.reset_password(form.reset_token, form.new_password)
        message = payload.get("message") if isinstance(payload, dict) else None
        if not message:
            raise ApiError(status_code=None, message="Failed to reset password. Please try again.")
        return message
