from __future__ import annotations

from typing import Any, Optional

from storefront_client.domain.value_objects.statuses import ReturnStatus
from storefront_client.infrastructure.http.dtos.resource_models import PagedResult, ReturnRequest
from storefront_client.infrastructure.http.resources.base_resource_api import BaseResourceApi, page_params


class ReturnsApi(BaseResourceApi[ReturnRequest]):
    # Single endpoint for listing, creating and updating return requests
    path = "/returns/request"
    collection_key = "returns"
    item_key = "returnRequest"
    model = ReturnRequest

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
    ) -> PagedResult[ReturnRequest]:
        return self._list({**page_params(page, limit), "status": status or None}, limit=limit)

    def create(self, order_id: str, reason: str, images: Optional[list[str]] = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"orderId": order_id, "reason": reason}
        if images is not None:
            payload["images"] = images
        return self.client.post(self.path, payload)

    def update(self, return_id: str, status: ReturnStatus) -> dict[str, Any]:
        return self.client.put(self.path, {"returnId": return_id, "status": ReturnStatus(status).value})
