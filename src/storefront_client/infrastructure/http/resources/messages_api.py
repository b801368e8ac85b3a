from __future__ import annotations

from typing import Any, Optional

from storefront_client.infrastructure.http.dtos.resource_models import PagedResult, UserMessage
from storefront_client.infrastructure.http.resources.base_resource_api import BaseResourceApi, page_params


class MessagesApi(BaseResourceApi[UserMessage]):
    """Messages addressed to the logged-in user (support and admin replies)."""

    path = "/messages"
    collection_key = "messages"
    item_key = "message"
    model = UserMessage

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        is_read: Optional[bool] = None,
    ) -> PagedResult[UserMessage]:
        return self._list({**page_params(page, limit), "isRead": is_read}, limit=limit)

    def create(self, user_id: str, sender: str, subject: str, message: str) -> dict[str, Any]:
        return self.client.post(
            self.path,
            {"userId": user_id, "sender": sender, "subject": subject, "message": message},
        )

    def update(self, message_id: str, is_read: bool) -> dict[str, Any]:
        return self.client.put(self._item_path(message_id), {"isRead": is_read})
