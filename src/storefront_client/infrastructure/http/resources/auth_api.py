from __future__ import annotations

from typing import Any, Optional

from storefront_client.infrastructure.http.clients.storefront_http_client import StorefrontHttpClient
from storefront_client.infrastructure.http.resources.base_resource_api import UNSET, compact


class AuthApi:
    """``/auth/*`` endpoints. Responses are returned as raw JSON; session services interpret them."""

    def __init__(self, client: StorefrontHttpClient):
        self.client = client

    def register(
        self,
        first_name: str,
        last_name: str,
        password: str,
        terms_accepted: bool,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        marketing_opt_in: Optional[bool] = None,
    ) -> dict[str, Any]:
        payload = {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "phone": phone,
            "password": password,
            "termsAccepted": terms_accepted,
            "marketingOptIn": marketing_opt_in,
        }
        return self.client.post("/auth/register", {k: v for k, v in payload.items() if v is not None})

    def login(self, email: Optional[str] = None, phone: Optional[str] = None, password: str = "") -> dict[str, Any]:
        payload = {"email": email, "phone": phone, "password": password}
        return self.client.post("/auth/login", {k: v for k, v in payload.items() if v is not None})

    def logout(self) -> dict[str, Any]:
        return self.client.post("/auth/logout")

    def get_profile(self) -> dict[str, Any]:
        return self.client.get("/auth/me")

    def update_profile(
        self,
        first_name: Any = UNSET,
        last_name: Any = UNSET,
        email: Any = UNSET,
        phone: Any = UNSET,
        profile_picture: Any = UNSET,
        marketing_opt_in: Any = UNSET,
    ) -> dict[str, Any]:
        return self.client.put(
            "/auth/profile",
            compact(
                firstName=first_name,
                lastName=last_name,
                email=email,
                phone=phone,
                profilePicture=profile_picture,
                marketingOptIn=marketing_opt_in,
            ),
        )

    def forgot_password(self, email: Optional[str] = None, phone: Optional[str] = None) -> dict[str, Any]:
        payload = {"email": email, "phone": phone}
        return self.client.post("/auth/forgot-password", {k: v for k, v in payload.items() if v is not None})

    def reset_password(self, reset_token: str, new_password: str) -> dict[str, Any]:
        return self.client.post("/auth/reset-password", {"resetToken": reset_token, "newPassword": new_password})

    def refresh_token(self, refresh_token: str) -> dict[str, Any]:
        return self.client.post("/auth/refresh", {"refreshToken": refresh_token})
