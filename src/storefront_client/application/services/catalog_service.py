from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from storefront_client.domain.entities.cart import CartItem
from storefront_client.infrastructure.http.dtos.resource_models import PagedResult, Product
from storefront_client.infrastructure.http.resources.products_api import ProductsApi

ALL_CATEGORIES = "All"


class ProductSort(str, Enum):
    FEATURED = "featured"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"


class CatalogService:
    def __init__(
        self,
        products_api: ProductsApi,
        placeholder_image: str = "/images/products/headphones.png",
        offers_discount_threshold: float = 20.0,
    ):
        self.products_api = products_api
        self.placeholder_image = placeholder_image
        self.offers_discount_threshold = offers_discount_threshold

    def list_products(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> PagedResult[Product]:
        if category == ALL_CATEGORIES:
            category = None
        return self.products_api.list(page=page, limit=limit, category=category, search=search)

    def get_product(self, product_id: str) -> Product:
        return self.products_api.get(product_id)

    def featured_products(self, limit: Optional[int] = None) -> list[Product]:
        """Products flagged for promotion; filtered client-side so unflagged rows never leak through."""
        result = self.products_api.list(limit=limit, featured=True)
        return [product for product in result.items if product.featured]

    def offers(self, limit: Optional[int] = 5, threshold: Optional[float] = None) -> list[Product]:
        """Discounted products; only discounts strictly above the threshold qualify."""
        minimum = self.offers_discount_threshold if threshold is None else threshold
        result = self.products_api.list(limit=limit)
        return [product for product in result.items if product.discount and product.discount > minimum]

    @staticmethod
    def filter_by_category(products: Iterable[Product], category: str) -> list[Product]:
        if category == ALL_CATEGORIES:
            return list(products)
        return [product for product in products if product.category == category]

    @staticmethod
    def sort_products(products: Iterable[Product], sort_by: ProductSort | str) -> list[Product]:
        ordered = list(products)
        try:
            sort_key = ProductSort(sort_by)
        except ValueError:
            sort_key = ProductSort.FEATURED

        if sort_key is ProductSort.PRICE_LOW:
            ordered.sort(key=lambda p: p.price)
        elif sort_key is ProductSort.PRICE_HIGH:
            ordered.sort(key=lambda p: p.price, reverse=True)
        elif sort_key is ProductSort.RATING:
            ordered.sort(key=lambda p: p.rating or 0, reverse=True)
        # FEATURED keeps the API order
        return ordered

    def to_cart_item(self, product: Product) -> CartItem:
        return CartItem(
            product_id=product.id,
            name=product.title,
            unit_price=product.price,
            image_ref=product.primary_image(self.placeholder_image),
            original_price=product.original_price,
        )
