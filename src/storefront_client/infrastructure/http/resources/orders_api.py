from __future__ import annotations

from typing import Any, Iterable, Optional

from storefront_client.domain.value_objects.address import Address
from storefront_client.domain.value_objects.statuses import OrderStatus
from storefront_client.infrastructure.http.dtos.resource_models import Order, PagedResult
from storefront_client.infrastructure.http.resources.base_resource_api import BaseResourceApi, page_params


class OrdersApi(BaseResourceApi[Order]):
    path = "/orders"
    collection_key = "orders"
    item_key = "order"
    model = Order

    def list(self, page: Optional[int] = None, limit: Optional[int] = None) -> PagedResult[Order]:
        return self._list(page_params(page, limit), limit=limit)

    def create(
        self,
        items: Iterable[tuple[str, int]],
        shipping_address: Address,
        billing_address: Address,
        user_id: Optional[str] = None,
    ) -> Order:
        """``items`` are (product_id, quantity) pairs. Admins may place an order for ``user_id``."""
        payload: dict[str, Any] = {
            "items": [{"productId": product_id, "quantity": quantity} for product_id, quantity in items],
            "shippingAddress": shipping_address.to_payload(),
            "billingAddress": billing_address.to_payload(),
        }
        if user_id:
            payload["userId"] = user_id
        return self._parse_item(self.client.post(self.path, payload))

    def update(
        self,
        order_id: str,
        status: Optional[OrderStatus] = None,
        tracking_number: Optional[str] = None,
        sub_order_id: Optional[str] = None,
    ) -> Order:
        payload: dict[str, Any] = {}
        if status is not None:
            payload["status"] = OrderStatus(status).value
        if tracking_number is not None:
            payload["trackingNumber"] = tracking_number
        if sub_order_id is not None:
            payload["subOrderId"] = sub_order_id
        return self._parse_item(self.client.put(self._item_path(order_id), payload))
