from __future__ import annotations

import time
from typing import Any, Optional

import httpx
import structlog

from storefront_client.domain.exceptions.api_error import (
    ApiConnectionError,
    ApiError,
    SessionExpiredError,
    extract_error_message,
)
from storefront_client.infrastructure.configuration.main_settings import StorefrontSettings
from storefront_client.infrastructure.http.auth.token_refresh_auth import CREDENTIALS_PATHS

logger = structlog.get_logger()


def clean_params(params: Optional[dict[str, Any]]) -> Optional[dict[str, str]]:
    """Drops None values and renders booleans the way the API expects ("true"/"false")."""
    if not params:
        return None
    cleaned: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        else:
            cleaned[key] = str(value)
    return cleaned or None


class StorefrontHttpClient:
    """JSON client for the storefront REST API."""

    def __init__(
        self,
        settings: StorefrontSettings,
        auth: Optional[httpx.Auth] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings
        self.base_url = settings.api_base_url.rstrip("/")
        self.auth = auth
        self.transport = transport

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, json_data: Optional[dict[str, Any]] = None) -> Any:
        return self._request("POST", path, json_data=json_data)

    def put(self, path: str, json_data: Optional[dict[str, Any]] = None) -> Any:
        return self._request("PUT", path, json_data=json_data)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json_data: Optional[dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        started = time.perf_counter()
        try:
            with httpx.Client(auth=self.auth, transport=self.transport) as client:
                response = client.request(
                    method,
                    url,
                    headers=self._get_headers(),
                    params=clean_params(params),
                    json=json_data,
                    timeout=self.settings.request_timeout,
                )
        except httpx.ConnectError as e:
            logger.error("API unreachable", context_component="http_client", http_method=method, http_path=path, error_type=type(e).__name__)
            raise ApiConnectionError(
                message=f"Cannot connect to server at {self.base_url}. Please make sure the backend server is running.",
                path=path,
            ) from e
        except httpx.TransportError as e:
            logger.error("API request failed", context_component="http_client", http_method=method, http_path=path, error_type=type(e).__name__)
            raise ApiConnectionError(
                message="Network error. Please check your connection and try again.",
                path=path,
            ) from e

        logger.debug(
            "API call",
            context_component="http_client",
            http_method=method,
            http_path=path,
            http_status=response.status_code,
            http_duration_ms=(time.perf_counter() - started) * 1000,
        )
        return self._handle_response(response, path)

    def _handle_response(self, response: httpx.Response, path: str) -> Any:
        payload = self._decode(response)
        if response.is_success:
            return payload

        body = payload if isinstance(payload, dict) else {}
        message = extract_error_message(body, f"Request failed with status {response.status_code}")
        logger.warning(
            "API error response",
            context_component="http_client",
            http_path=path,
            error_type="ApiError",
            error_status=response.status_code,
            error_details=message,
        )
        if response.status_code == 401 and not ("/" + path.strip("/")).endswith(CREDENTIALS_PATHS):
            raise SessionExpiredError(status_code=401, message=message, payload=body, path=path)
        raise ApiError(status_code=response.status_code, message=message, payload=body, path=path)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {}
