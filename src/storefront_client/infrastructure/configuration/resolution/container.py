"""Functional DI container: builds a fully-wired storefront client.

Everything shares one key-value store, so the cart, the tokens and the
cached user survive restarts together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from storefront_client.application.ports.key_value_store import KeyValueStore
from storefront_client.application.services.admin_dashboard_service import AdminDashboardService
from storefront_client.application.services.auth_session_service import AuthSessionService
from storefront_client.application.services.back_office_service import BackOfficeService
from storefront_client.application.services.cart_service import CartService
from storefront_client.application.services.catalog_service import CatalogService
from storefront_client.application.services.checkout_service import CheckoutService
from storefront_client.application.services.content_service import ContentService
from storefront_client.application.services.inbox_service import ContactInboxService, UserInboxService
from storefront_client.application.services.token_store_service import TokenStoreService
from storefront_client.infrastructure.configuration.main_settings import StorefrontSettings
from storefront_client.infrastructure.http.auth.token_refresh_auth import TokenRefreshAuth
from storefront_client.infrastructure.http.clients.storefront_http_client import StorefrontHttpClient
from storefront_client.infrastructure.http.resources import (
    AdminApi,
    AuthApi,
    BlogApi,
    CheckoutApi,
    ContactApi,
    MessagesApi,
    OrdersApi,
    ProductsApi,
    ProjectsApi,
    ReturnsApi,
    ServicesApi,
)
from storefront_client.infrastructure.navigation.logging_login_redirect_adapter import LoggingLoginRedirectAdapter
from storefront_client.infrastructure.observability.logger_factory_service import build_logger, configure_logging
from storefront_client.infrastructure.storage.json_file_key_value_store import JsonFileKeyValueStore

logger = build_logger(__name__)


@dataclass
class StorefrontContainer:
    settings: StorefrontSettings
    store: KeyValueStore
    token_store: TokenStoreService
    login_redirect: LoggingLoginRedirectAdapter
    http_client: StorefrontHttpClient

    auth_api: AuthApi
    products_api: ProductsApi
    orders_api: OrdersApi
    checkout_api: CheckoutApi
    blog_api: BlogApi
    projects_api: ProjectsApi
    services_api: ServicesApi
    contact_api: ContactApi
    messages_api: MessagesApi
    returns_api: ReturnsApi
    admin_api: AdminApi

    auth_session: AuthSessionService
    cart: CartService
    catalog: CatalogService
    checkout: CheckoutService
    content: ContentService
    user_inbox: UserInboxService
    contact_inbox: ContactInboxService
    dashboard: AdminDashboardService
    back_office: BackOfficeService


def build_container(
    settings: Optional[StorefrontSettings] = None,
    store: Optional[KeyValueStore] = None,
    transport: Optional[httpx.BaseTransport] = None,
    navigate: Optional[Callable[[str], None]] = None,
    configure_logs: bool = False,
) -> StorefrontContainer:
    """Assembles the storefront client.

    ``store`` defaults to the JSON file under ``settings.storage_path``;
    ``transport`` is shared by API calls and token refreshes. ``configure_logs``
    installs the logging pipeline from the settings, for applications that do
    not configure logging themselves.
    """
    settings = settings or StorefrontSettings()
    if configure_logs:
        configure_logging(level=settings.log_level, log_format=settings.log_format)

    store = store if store is not None else JsonFileKeyValueStore(settings.storage_path)

    token_store = TokenStoreService(store)
    login_redirect = LoggingLoginRedirectAdapter(login_path=settings.login_path, navigate=navigate)
    auth = TokenRefreshAuth(
        token_store=token_store,
        refresh_url=settings.refresh_url,
        login_redirect=login_redirect,
        timeout=settings.request_timeout,
        refresh_transport=transport,
    )
    http_client = StorefrontHttpClient(settings, auth=auth, transport=transport)

    # 1. Resource APIs
    auth_api = AuthApi(http_client)
    products_api = ProductsApi(http_client)
    orders_api = OrdersApi(http_client)
    checkout_api = CheckoutApi(http_client)
    blog_api = BlogApi(http_client)
    projects_api = ProjectsApi(http_client)
    services_api = ServicesApi(http_client)
    contact_api = ContactApi(http_client)
    messages_api = MessagesApi(http_client)
    returns_api = ReturnsApi(http_client)
    admin_api = AdminApi(http_client)

    # 2. Client state
    auth_session = AuthSessionService(auth_api, token_store)
    cart = CartService(store)

    # 3. Flows
    checkout = CheckoutService(
        cart_service=cart,
        auth_session=auth_session,
        orders_api=orders_api,
        checkout_api=checkout_api,
        shipping_cost=settings.shipping_cost,
    )
    catalog = CatalogService(
        products_api,
        placeholder_image=settings.placeholder_image,
        offers_discount_threshold=settings.offers_discount_threshold,
    )

    logger.debug(f"Storefront client wired against {settings.api_base_url}")
    return StorefrontContainer(
        settings=settings,
        store=store,
        token_store=token_store,
        login_redirect=login_redirect,
        http_client=http_client,
        auth_api=auth_api,
        products_api=products_api,
        orders_api=orders_api,
        checkout_api=checkout_api,
        blog_api=blog_api,
        projects_api=projects_api,
        services_api=services_api,
        contact_api=contact_api,
        messages_api=messages_api,
        returns_api=returns_api,
        admin_api=admin_api,
        auth_session=auth_session,
        cart=cart,
        catalog=catalog,
        checkout=checkout,
        content=ContentService(blog_api, projects_api, services_api, contact_api),
        user_inbox=UserInboxService(messages_api),
        contact_inbox=ContactInboxService(contact_api),
        dashboard=AdminDashboardService(
            admin_api, products_api, blog_api, services_api, projects_api, contact_api
        ),
        back_office=BackOfficeService(
            auth_session, products_api, orders_api, admin_api, blog_api, projects_api, services_api
        ),
    )
