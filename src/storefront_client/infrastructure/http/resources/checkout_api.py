from typing import Any

from storefront_client.infrastructure.http.clients.storefront_http_client import StorefrontHttpClient


class CheckoutApi:
    def __init__(self, client: StorefrontHttpClient):
        self.client = client

    def create_session(self, order_id: str) -> dict[str, Any]:
        """Starts a hosted payment session; the response carries the redirect ``url``."""
        return self.client.post("/checkout", {"orderId": order_id})
