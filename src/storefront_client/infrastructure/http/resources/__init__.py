from storefront_client.infrastructure.http.resources.admin_api import AdminApi
from storefront_client.infrastructure.http.resources.auth_api import AuthApi
from storefront_client.infrastructure.http.resources.blog_api import BlogApi
from storefront_client.infrastructure.http.resources.checkout_api import CheckoutApi
from storefront_client.infrastructure.http.resources.contact_api import ContactApi
from storefront_client.infrastructure.http.resources.messages_api import MessagesApi
from storefront_client.infrastructure.http.resources.orders_api import OrdersApi
from storefront_client.infrastructure.http.resources.products_api import ProductsApi
from storefront_client.infrastructure.http.resources.projects_api import ProjectsApi
from storefront_client.infrastructure.http.resources.returns_api import ReturnsApi
from storefront_client.infrastructure.http.resources.services_api import ServicesApi

__all__ = [
    "AdminApi",
    "AuthApi",
    "BlogApi",
    "CheckoutApi",
    "ContactApi",
    "MessagesApi",
    "OrdersApi",
    "ProductsApi",
    "ProjectsApi",
    "ReturnsApi",
    "ServicesApi",
]
