from __future__ import annotations

from typing import Any, Optional

from storefront_client.infrastructure.http.dtos.resource_models import PagedResult, ServiceOffering
from storefront_client.infrastructure.http.resources.base_resource_api import (
    UNSET,
    BaseResourceApi,
    compact,
    page_params,
)


class ServicesApi(BaseResourceApi[ServiceOffering]):
    path = "/services"
    collection_key = "services"
    item_key = "service"
    model = ServiceOffering

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        active: Optional[bool] = None,
    ) -> PagedResult[ServiceOffering]:
        return self._list({**page_params(page, limit), "active": active}, limit=limit)

    def create(
        self,
        title: str,
        description: str,
        icon_name: Any = UNSET,
        features: Any = UNSET,
        price: Any = UNSET,
        duration: Any = UNSET,
        active: Any = UNSET,
    ) -> ServiceOffering:
        payload = compact(
            title=title,
            description=description,
            iconName=icon_name,
            features=features,
            price=price,
            duration=duration,
            active=active,
        )
        return self._parse_item(self.client.post(self.path, payload))

    def update(
        self,
        service_id: str,
        title: Any = UNSET,
        description: Any = UNSET,
        icon_name: Any = UNSET,
        features: Any = UNSET,
        price: Any = UNSET,
        duration: Any = UNSET,
        active: Any = UNSET,
    ) -> ServiceOffering:
        payload = compact(
            title=title,
            description=description,
            iconName=icon_name,
            features=features,
            price=price,
            duration=duration,
            active=active,
        )
        return self._parse_item(self.client.put(self._item_path(service_id), payload))
