from __future__ import annotations

import json
from typing import Optional

from storefront_client.application.ports.key_value_store import KeyValueStore
from storefront_client.domain.entities.cart import Cart, CartItem
from storefront_client.infrastructure.observability.logger_factory_service import build_logger

logger = build_logger(__name__)

CART_STORAGE_KEY = "cart_items"


class CartService:
    """
    Cart state mirrored to client storage.
    Loaded once on construction; every mutation is written back.
    """

    def __init__(self, store: KeyValueStore, storage_key: str = CART_STORAGE_KEY):
        self.store = store
        self.storage_key = storage_key
        self.cart = self._load()

    def _load(self) -> Cart:
        try:
            raw = self.store.get(self.storage_key)
            if not raw:
                return Cart()
            records = json.loads(raw)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Error loading cart from storage: {e}")
            return Cart()
        if not isinstance(records, list):
            logger.error("Error loading cart from storage: stored value is not a list")
            return Cart()
        return Cart.from_records(records)

    def _save(self) -> None:
        try:
            self.store.set(self.storage_key, json.dumps(self.cart.to_records()))
        except OSError as e:
            # The in-memory cart stays authoritative for this session
            logger.error(f"Error saving cart to storage: {e}")

    @property
    def items(self) -> list[CartItem]:
        return list(self.cart.items)

    def get_item(self, product_id: str) -> Optional[CartItem]:
        return self.cart.get(product_id)

    def add_to_cart(self, item: CartItem) -> CartItem:
        added = self.cart.add(item)
        self._save()
        return added

    def remove_from_cart(self, product_id: str) -> None:
        self.cart.remove(product_id)
        self._save()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        self.cart.update_quantity(product_id, quantity)
        self._save()

    def clear_cart(self) -> None:
        self.cart.clear()
        self._save()

    def is_empty(self) -> bool:
        return self.cart.is_empty()

    def get_total_items(self) -> int:
        return self.cart.total_items()

    def get_subtotal(self) -> float:
        return self.cart.subtotal()
