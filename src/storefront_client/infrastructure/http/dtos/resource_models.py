from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from storefront_client.domain.value_objects.pagination import Pagination
from storefront_client.domain.value_objects.pricing import original_price_from_discount, parse_price


class ApiModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python, unknown fields kept."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


def _none_to_list(value: Any) -> Any:
    return [] if value is None else value


class Product(ApiModel):
    id: str
    title: str = ""
    description: Optional[str] = None
    price: float = 0.0
    discount: Optional[float] = None
    hs_code: Optional[str] = None
    category: Optional[str] = None
    stock: int = 0
    images: list[str] = []
    featured: bool = False
    slug: Optional[str] = None
    rating: Optional[float] = None

    @field_validator("images", mode="before")
    @classmethod
    def _default_images(cls, value: Any) -> Any:
        return _none_to_list(value)

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> float:
        return parse_price(value)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @property
    def original_price(self) -> Optional[float]:
        """Pre-discount price; None unless the discount is inside (0, 100)."""
        if not self.discount or not 0 < self.discount < 100:
            return None
        return original_price_from_discount(self.price, self.discount)

    def primary_image(self, placeholder: str) -> str:
        return self.images[0] if self.images else placeholder


class OrderProduct(ApiModel):
    id: str
    title: str = ""
    images: list[str] = []

    @field_validator("images", mode="before")
    @classmethod
    def _default_images(cls, value: Any) -> Any:
        return _none_to_list(value)


class OrderItem(ApiModel):
    product: Optional[OrderProduct] = None
    quantity: int = 1
    unit_price: float = 0.0

    @field_validator("unit_price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> float:
        return parse_price(value)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


class Supplier(ApiModel):
    name: str


class SubOrder(ApiModel):
    id: str
    items: list[OrderItem] = []
    status: str = ""
    tracking_number: Optional[str] = None
    supplier: Optional[Supplier] = None


class Order(ApiModel):
    id: str
    order_number: Optional[str] = None
    total_amount: float = 0.0
    status: str = ""
    created_at: Optional[str] = None
    sub_orders: list[SubOrder] = []

    @field_validator("sub_orders", mode="before")
    @classmethod
    def _default_sub_orders(cls, value: Any) -> Any:
        return _none_to_list(value)

    @field_validator("total_amount", mode="before")
    @classmethod
    def _parse_total(cls, value: Any) -> float:
        return parse_price(value)

    @property
    def line_items(self) -> list[OrderItem]:
        return [item for sub_order in self.sub_orders for item in sub_order.items]

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.line_items)


class BlogPost(ApiModel):
    id: str
    title: str = ""
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: str = ""
    featured_image: Optional[str] = None
    published: bool = False
    created_at: Optional[str] = None

    @property
    def route_key(self) -> str:
        return self.slug or self.id


class Project(ApiModel):
    id: str
    title: str = ""
    description: Optional[str] = None
    client: Optional[str] = None
    year: Optional[str] = None
    status: Optional[str] = None
    images: list[str] = []
    features: list[str] = []

    @field_validator("images", "features", mode="before")
    @classmethod
    def _default_lists(cls, value: Any) -> Any:
        return _none_to_list(value)


class ServiceOffering(ApiModel):
    id: str
    title: str = ""
    description: str = ""
    icon_name: Optional[str] = None
    features: list[str] = []
    price: Optional[str] = None
    duration: Optional[str] = None
    active: bool = True

    @field_validator("features", mode="before")
    @classmethod
    def _default_features(cls, value: Any) -> Any:
        return _none_to_list(value)


class ContactMessage(ApiModel):
    id: str
    name: str = ""
    email: str = ""
    subject: Optional[str] = None
    message: str = ""
    is_read: bool = False
    archived: bool = False
    created_at: Optional[str] = None


class UserMessage(ApiModel):
    id: str
    user_id: Optional[str] = None
    sender: str = ""
    subject: str = ""
    message: str = ""
    is_read: bool = False
    created_at: Optional[str] = None

    @property
    def sender_initials(self) -> str:
        return "".join(part[0] for part in self.sender.split() if part).upper()[:2]


class ReturnRequest(ApiModel):
    id: str
    order_id: Optional[str] = None
    reason: str = ""
    images: list[str] = []
    status: str = ""

    @field_validator("images", mode="before")
    @classmethod
    def _default_images(cls, value: Any) -> Any:
        return _none_to_list(value)


ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class PagedResult(Generic[ModelT]):
    items: list[ModelT] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)

    @property
    def total(self) -> int:
        return self.pagination.total

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        items_key: str,
        model: type[ModelT],
        limit: Optional[int] = None,
    ) -> "PagedResult[ModelT]":
        body = payload if isinstance(payload, dict) else {}
        raw_items = body.get(items_key) or []
        return cls(
            items=[model.model_validate(raw) for raw in raw_items],
            pagination=Pagination.from_payload(body.get("pagination"), limit=limit),
        )
