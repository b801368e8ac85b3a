from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from storefront_client.application.dtos.forms.address_form import AddressForm
from storefront_client.application.services.auth_session_service import AuthSessionService
from storefront_client.application.services.cart_service import CartService
from storefront_client.domain.exceptions.authentication_required_error import AuthenticationRequiredError
from storefront_client.domain.exceptions.checkout_error import CheckoutError
from storefront_client.infrastructure.http.resources.checkout_api import CheckoutApi
from storefront_client.infrastructure.http.resources.orders_api import OrdersApi
from storefront_client.infrastructure.observability.logger_factory_service import build_logger

logger = build_logger(__name__)


@dataclass(frozen=True)
class OrderSummary:
    subtotal: float
    shipping: float

    @property
    def total(self) -> float:
        return self.subtotal + self.shipping


@dataclass(frozen=True)
class CheckoutResult:
    order_id: str
    checkout_url: str


class CheckoutService:
    """Turns the cart into an order and a hosted payment session."""

    def __init__(
        self,
        cart_service: CartService,
        auth_session: AuthSessionService,
        orders_api: OrdersApi,
        checkout_api: CheckoutApi,
        shipping_cost: float = 10.0,
    ):
        self.cart_service = cart_service
        self.auth_session = auth_session
        self.orders_api = orders_api
        self.checkout_api = checkout_api
        self.shipping_cost = shipping_cost

    def order_summary(self) -> OrderSummary:
        return OrderSummary(subtotal=self.cart_service.get_subtotal(), shipping=self.shipping_cost)

    def start_checkout(self, shipping: AddressForm, billing: Optional[AddressForm] = None) -> CheckoutResult:
        """
        Creates the order and its payment session.
        Billing falls back to the shipping address when no billing name was entered.
        The cart is kept until complete_checkout() so an abandoned payment loses nothing.
        """
        if self.auth_session.user is None:
            raise AuthenticationRequiredError()
        if self.cart_service.is_empty():
            raise CheckoutError("Your cart is empty")

        shipping.ensure_valid()
        billing_form = billing if billing is not None and not billing.is_blank() else shipping

        order = self.orders_api.create(
            items=[(item.product_id, item.quantity) for item in self.cart_service.items],
            shipping_address=shipping.to_address(),
            billing_address=billing_form.to_address(),
        )
        logger.info(f"Order {order.id} created with {self.cart_service.get_total_items()} items")

        session = self.checkout_api.create_session(order.id)
        checkout_url = session.get("url") if isinstance(session, dict) else None
        if not checkout_url:
            raise CheckoutError("No checkout URL received")
        return CheckoutResult(order_id=order.id, checkout_url=checkout_url)

    def complete_checkout(self) -> None:
        """Called when the payment provider sends the user back after a successful payment."""
        self.cart_service.clear_cart()
