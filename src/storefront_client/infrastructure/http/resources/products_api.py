from __future__ import annotations

from typing import Any, Optional

from storefront_client.infrastructure.http.dtos.resource_models import PagedResult, Product
from storefront_client.infrastructure.http.resources.base_resource_api import BaseResourceApi, page_params


class ProductsApi(BaseResourceApi[Product]):
    path = "/products"
    collection_key = "products"
    item_key = "product"
    model = Product

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> PagedResult[Product]:
        params = {
            **page_params(page, limit),
            "category": category or None,
            "search": search or None,
            # The API treats any value as a filter, so only "true" is ever sent
            "featured": True if featured else None,
        }
        return self._list(params, limit=limit)

    def create(self, payload: dict[str, Any]) -> Product:
        return self._parse_item(self.client.post(self.path, payload))

    def update(self, product_id: str, payload: dict[str, Any]) -> Product:
        return self._parse_item(self.client.put(self._item_path(product_id), payload))
