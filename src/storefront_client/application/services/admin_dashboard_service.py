from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from storefront_client.application.services.back_office_service import describe_admin_error
from storefront_client.domain.exceptions.storefront_error import StorefrontError
from storefront_client.domain.value_objects.pricing import parse_price
from storefront_client.infrastructure.http.resources.admin_api import AdminApi
from storefront_client.infrastructure.http.resources.blog_api import BlogApi
from storefront_client.infrastructure.http.resources.contact_api import ContactApi
from storefront_client.infrastructure.http.resources.products_api import ProductsApi
from storefront_client.infrastructure.http.resources.projects_api import ProjectsApi
from storefront_client.infrastructure.http.resources.services_api import ServicesApi
from storefront_client.infrastructure.observability.logger_factory_service import build_logger

logger = build_logger(__name__)


@dataclass(frozen=True)
class DashboardCounts:
    total_products: int = 0
    total_blogs: int = 0
    total_orders: int = 0
    total_projects: int = 0
    total_services: int = 0
    total_messages: int = 0


@dataclass(frozen=True)
class DashboardSnapshot:
    stats: dict[str, Any] = field(default_factory=dict)
    counts: DashboardCounts = field(default_factory=DashboardCounts)
    error: Optional[str] = None

    @property
    def total_revenue(self) -> float:
        return parse_price(self.stats.get("totalRevenue"))


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class AdminDashboardService:
    def __init__(
        self,
        admin_api: AdminApi,
        products_api: ProductsApi,
        blog_api: BlogApi,
        services_api: ServicesApi,
        projects_api: ProjectsApi,
        contact_api: ContactApi,
    ):
        self.admin_api = admin_api
        self.products_api = products_api
        self.blog_api = blog_api
        self.services_api = services_api
        self.projects_api = projects_api
        self.contact_api = contact_api

    def load(self) -> DashboardSnapshot:
        """
        Stats plus per-section counts. Counts come from the ``total`` of
        single-row list calls; any failure zeroes every count and reports the error.
        """
        try:
            stats = self.admin_api.get_stats()
            products = self.products_api.list(limit=1)
            blog = self.blog_api.list(limit=1, published=False)
            services = self.services_api.list(limit=1, active=False)
            projects = self.projects_api.list(limit=1)
            contact = self.contact_api.list(limit=1, archived=False)
        except StorefrontError as e:
            logger.error(f"Error fetching dashboard stats: {e}")
            return DashboardSnapshot(error=describe_admin_error(e, "Failed to load dashboard"))

        counts = DashboardCounts(
            total_products=_int(stats.get("totalProducts")) or products.total,
            total_blogs=blog.total,
            total_orders=_int(stats.get("totalOrders")),
            total_projects=projects.total,
            total_services=services.total,
            total_messages=contact.total,
        )
        return DashboardSnapshot(stats=stats, counts=counts)
