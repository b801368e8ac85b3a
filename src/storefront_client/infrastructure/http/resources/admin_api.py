from __future__ import annotations

from typing import Any, Optional

from storefront_client.domain.entities.user_session import User
from storefront_client.infrastructure.http.clients.storefront_http_client import StorefrontHttpClient
from storefront_client.infrastructure.http.dtos.resource_models import PagedResult
from storefront_client.infrastructure.http.resources.base_resource_api import page_params


class AdminApi:
    def __init__(self, client: StorefrontHttpClient):
        self.client = client

    def get_stats(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> dict[str, Any]:
        payload = self.client.get("/admin/stats", params={"startDate": start_date or None, "endDate": end_date or None})
        stats = payload.get("stats") if isinstance(payload, dict) else None
        return stats or {}

    def list_users(self, page: Optional[int] = None, limit: Optional[int] = None) -> PagedResult[User]:
        payload = self.client.get("/auth/admin/users", params=page_params(page, limit))
        return PagedResult.from_payload(payload, "users", User, limit=limit)
