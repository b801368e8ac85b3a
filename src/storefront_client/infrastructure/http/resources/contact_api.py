from __future__ import annotations

from typing import Any, Optional

from storefront_client.infrastructure.http.dtos.resource_models import ContactMessage, PagedResult
from storefront_client.infrastructure.http.resources.base_resource_api import (
    UNSET,
    BaseResourceApi,
    compact,
    page_params,
)


class ContactApi(BaseResourceApi[ContactMessage]):
    path = "/contact"
    collection_key = "messages"
    item_key = "message"
    model = ContactMessage

    def create(self, name: str, email: str, message: str, subject: Optional[str] = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": name, "email": email, "message": message}
        if subject:
            payload["subject"] = subject
        return self.client.post(self.path, payload)

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        archived: Optional[bool] = None,
        is_read: Optional[bool] = None,
    ) -> PagedResult[ContactMessage]:
        params = {**page_params(page, limit), "archived": archived, "isRead": is_read}
        return self._list(params, limit=limit)

    def update(self, message_id: str, is_read: Any = UNSET, archived: Any = UNSET) -> dict[str, Any]:
        return self.client.put(self._item_path(message_id), compact(isRead=is_read, archived=archived))

    def reply(self, message_id: str, subject: str, message: str) -> dict[str, Any]:
        return self.client.post(f"{self._item_path(message_id)}/reply", {"subject": subject, "message": message})
