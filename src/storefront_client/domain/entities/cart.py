from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class CartItem:
    product_id: str
    name: str
    unit_price: float
    image_ref: str
    quantity: int = 1
    original_price: Optional[float] = None

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.product_id,
            "name": self.name,
            "price": self.unit_price,
            "image": self.image_ref,
            "quantity": self.quantity,
        }
        if self.original_price is not None:
            record["originalPrice"] = self.original_price
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "CartItem":
        original = record.get("originalPrice")
        quantity = record.get("quantity", 1)
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"Cart quantity must be an integer, got {quantity!r}")
        return cls(
            product_id=str(record["id"]),
            name=str(record.get("name", "")),
            unit_price=float(record["price"]),
            image_ref=str(record.get("image", "")),
            quantity=quantity,
            original_price=float(original) if original is not None else None,
        )


@dataclass
class Cart:
    """
    Ordered line items, unique by product id.
    Stored items always carry a quantity of at least one.
    """

    items: list[CartItem] = field(default_factory=list)

    def _index_of(self, product_id: str) -> Optional[int]:
        for index, item in enumerate(self.items):
            if item.product_id == product_id:
                return index
        return None

    def get(self, product_id: str) -> Optional[CartItem]:
        index = self._index_of(product_id)
        return self.items[index] if index is not None else None

    def add(self, item: CartItem) -> CartItem:
        """Adds one unit. An existing line for the same product is incremented, never duplicated."""
        index = self._index_of(item.product_id)
        if index is None:
            added = replace(item, quantity=1)
            self.items.append(added)
            return added
        current = self.items[index]
        updated = replace(current, quantity=current.quantity + 1)
        self.items[index] = updated
        return updated

    def remove(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.product_id != product_id]

    def update_quantity(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove(product_id)
            return
        index = self._index_of(product_id)
        if index is not None:
            self.items[index] = replace(self.items[index], quantity=quantity)

    def clear(self) -> None:
        self.items = []

    def is_empty(self) -> bool:
        return not self.items

    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def to_records(self) -> list[dict[str, Any]]:
        return [item.to_record() for item in self.items]

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "Cart":
        cart = cls()
        for record in records:
            try:
                item = CartItem.from_record(record)
            except (KeyError, TypeError, ValueError, AttributeError):
                continue
            if item.quantity <= 0 or cart._index_of(item.product_id) is not None:
                continue
            cart.items.append(item)
        return cart
