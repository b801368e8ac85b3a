from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from storefront_client.infrastructure.http.clients.storefront_http_client import StorefrontHttpClient
from storefront_client.infrastructure.http.dtos.resource_models import PagedResult


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


# Distinguishes "leave unchanged" from an explicit null in update payloads
UNSET: Any = _Unset()

ModelT = TypeVar("ModelT", bound=BaseModel)


def compact(**fields: Any) -> dict[str, Any]:
    """Builds a JSON body from keyword fields, dropping the ones left UNSET."""
    return {key: value for key, value in fields.items() if value is not UNSET}


def page_params(page: Optional[int], limit: Optional[int]) -> dict[str, Any]:
    # page/limit are only sent when truthy
    return {"page": page or None, "limit": limit or None}


class BaseResourceApi(Generic[ModelT]):
    """Shared list/get/delete plumbing for a REST collection."""

    path: str = ""
    collection_key: str = ""
    item_key: str = ""
    model: type[ModelT]

    def __init__(self, client: StorefrontHttpClient):
        self.client = client

    def _item_path(self, item_id: str) -> str:
        return f"{self.path}/{item_id}"

    def _list(self, params: dict[str, Any], limit: Optional[int] = None) -> PagedResult[ModelT]:
        payload = self.client.get(self.path, params=params)
        return PagedResult.from_payload(payload, self.collection_key, self.model, limit=limit)

    def _parse_item(self, payload: Any) -> ModelT:
        body = payload.get(self.item_key) if isinstance(payload, dict) else None
        if not isinstance(body, dict):
            body = payload
        return self.model.model_validate(body)

    def get(self, item_id: str) -> ModelT:
        return self._parse_item(self.client.get(self._item_path(item_id)))

    def delete(self, item_id: str) -> dict[str, Any]:
        return self.client.delete(self._item_path(item_id))
