"""Bearer-token auth with a transparent, single-flight token refresh."""

from __future__ import annotations

import threading
from typing import Generator, Optional

import httpx
import structlog

from storefront_client.application.ports.login_redirect_port import LoginRedirectPort
from storefront_client.application.services.token_store_service import TokenStoreService

logger = structlog.get_logger()

# Credentials endpoints answer 401 for bad input, not for an expired session
CREDENTIALS_PATHS = ("/auth/login", "/auth/register", "/auth/refresh")


class TokenRefreshAuth(httpx.Auth):
    """
    httpx auth flow for the storefront API.

    1. Sends the stored access token as ``Authorization: Bearer``.
    2. On 401 refreshes the token pair once via ``POST /auth/refresh``.
       Refreshes are serialized; a request that waited on another refresh
       reuses the token it produced instead of refreshing again.
    3. Retries the original request once. A second 401, a missing refresh
       token or a failed refresh clears the session and redirects to login.
    """

    def __init__(
        self,
        token_store: TokenStoreService,
        refresh_url: str,
        login_redirect: LoginRedirectPort,
        timeout: float = 10.0,
        refresh_transport: Optional[httpx.BaseTransport] = None,
    ):
        self.token_store = token_store
        self.refresh_url = refresh_url
        self.login_redirect = login_redirect
        self.timeout = timeout
        self.refresh_transport = refresh_transport
        self._refresh_lock = threading.Lock()

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        sent_token = self.token_store.access_token
        self._apply_token(request, sent_token)
        response = yield request

        if response.status_code != 401 or self._is_credentials_request(request):
            return

        with self._refresh_lock:
            current_token = self.token_store.access_token
            if current_token is None or current_token == sent_token:
                current_token = self._refresh_tokens()

        if current_token is None:
            self._end_session("token refresh unavailable")
            return

        self._apply_token(request, current_token)
        retry_response = yield request

        if retry_response.status_code == 401:
            self._end_session("request rejected after token refresh")

    def _apply_token(self, request: httpx.Request, token: Optional[str]) -> None:
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        else:
            request.headers.pop("Authorization", None)

    def _is_credentials_request(self, request: httpx.Request) -> bool:
        return request.url.path.rstrip("/").endswith(CREDENTIALS_PATHS)

    def _refresh_tokens(self) -> Optional[str]:
        """Exchanges the stored refresh token for a new pair. Returns the new access token or None."""
        refresh_token = self.token_store.refresh_token
        if not refresh_token:
            logger.info("No refresh token stored", context_component="token_refresh_auth")
            return None

        logger.info("Access token rejected, refreshing", context_component="token_refresh_auth")
        try:
            with httpx.Client(transport=self.refresh_transport) as client:
                response = client.post(
                    self.refresh_url,
                    json={"refreshToken": refresh_token},
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logger.warning(
                "Token refresh failed",
                context_component="token_refresh_auth",
                error_type=type(e).__name__,
                error_details=str(e),
            )
            return None

        if not response.is_success:
            logger.warning(
                "Token refresh rejected",
                context_component="token_refresh_auth",
                error_type="RefreshRejected",
                error_status=response.status_code,
            )
            return None

        try:
            data = response.json()
        except ValueError:
            data = None
        new_token = data.get("token") if isinstance(data, dict) else None
        if not new_token:
            logger.warning("Token refresh returned no token", context_component="token_refresh_auth")
            return None

        self.token_store.save_tokens(new_token, data.get("refreshToken") or refresh_token)
        return new_token

    def _end_session(self, reason: str) -> None:
        logger.info("Clearing session", context_component="token_refresh_auth", reason=reason)
        self.token_store.clear()
        self.login_redirect.redirect_to_login()
