from __future__ import annotations

import re
from typing import Any, Optional

from storefront_client.application.dtos.forms.base_form import BaseForm
from storefront_client.infrastructure.http.dtos.resource_models import Product

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_float(raw: str) -> Optional[float]:
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def _to_int(raw: str) -> Optional[int]:
    """Leading integer of the input, so "12.5" reads as 12 and "abc" as None."""
    match = _LEADING_INT.match(raw or "")
    return int(match.group(1)) if match else None


class ProductForm(BaseForm):
    name: str = ""
    price: str = ""
    category: str = ""
    description: str = ""
    discount: str = ""
    hs_code: str = ""
    stock: str = "0"
    on_offer: bool = False
    big_offer: bool = False
    product_type: str = "internal"
    external_url: str = ""
    images: list[str] = []

    @classmethod
    def from_product(cls, product: Product) -> "ProductForm":
        """Prefills the edit screen from an existing product."""
        discount = product.discount or 0
        return cls(
            name=product.title,
            price=str(product.price),
            category=product.category or "",
            description=product.description or "",
            discount=str(int(discount)),
            hs_code=product.hs_code or "",
            stock=str(product.stock),
            big_offer=product.featured,
            images=list(product.images),
        )

    def collect_errors(self) -> dict[str, str]:
        errors: dict[str, str] = {}

        if not self.name.strip():
            errors["name"] = "Product name is required"

        price = _to_float(self.price)
        if not self.price or price is None or price <= 0:
            errors["price"] = "Valid price is required (must be a positive number)"

        if not self.category.strip():
            errors["category"] = "Category is required"

        if not self.description.strip():
            errors["description"] = "Description is required"

        if not self.hs_code.strip():
            errors["hs_code"] = "HS Code is required"

        stock = _to_int(self.stock)
        if self.stock and (stock is None or stock < 0):
            errors["stock"] = "Stock must be a non-negative number"

        if self.discount:
            discount = _to_int(self.discount)
            if discount is None or discount < 0 or discount > 100:
                errors["discount"] = "Discount must be between 0 and 100"

        if self.product_type == "external" and not self.external_url.strip():
            errors["external_url"] = "External URL is required for external products"

        return errors

    def to_payload(self) -> dict[str, Any]:
        """Request body for create and update; empty optionals and a zero discount are omitted."""
        self.ensure_valid()
        discount = _to_int(self.discount) if self.discount else 0
        payload: dict[str, Any] = {
            "title": self.name.strip(),
            "price": float(self.price),
            "hsCode": self.hs_code.strip(),
            "stock": _to_int(self.stock) or 0,
        }
        if self.description.strip():
            payload["description"] = self.description.strip()
        if self.category.strip():
            payload["category"] = self.category.strip()
        if discount:
            payload["discount"] = discount
        payload["featured"] = self.big_offer or self.on_offer
        if self.images:
            payload["images"] = list(self.images)
        return payload
