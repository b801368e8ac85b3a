from __future__ import annotations

from datetime import date
from typing import Optional

from storefront_client.application.dtos.forms.content_forms import BlogPostForm, ProjectForm, ServiceForm
from storefront_client.application.dtos.forms.product_form import ProductForm
from storefront_client.application.services.auth_session_service import AuthSessionService
from storefront_client.domain.entities.user_session import User
from storefront_client.domain.exceptions.api_error import ApiError, describe_api_error
from storefront_client.domain.exceptions.authentication_required_error import AuthenticationRequiredError
from storefront_client.domain.value_objects.statuses import OrderStatus
from storefront_client.infrastructure.http.dtos.resource_models import (
    BlogPost,
    Order,
    PagedResult,
    Product,
    Project,
    ServiceOffering,
)
from storefront_client.infrastructure.http.resources.admin_api import AdminApi
from storefront_client.infrastructure.http.resources.blog_api import BlogApi
from storefront_client.infrastructure.http.resources.orders_api import OrdersApi
from storefront_client.infrastructure.http.resources.products_api import ProductsApi
from storefront_client.infrastructure.http.resources.projects_api import ProjectsApi
from storefront_client.infrastructure.http.resources.services_api import ServicesApi
from storefront_client.infrastructure.observability.logger_factory_service import build_logger

logger = build_logger(__name__)


def describe_admin_error(exc: BaseException, fallback: str) -> str:
    """User-facing message for back-office failures; auth failures get their own wording."""
    if isinstance(exc, ApiError):
        if exc.status_code == 403:
            return "Access denied. Please ensure you are logged in as an admin."
        if exc.status_code == 401:
            return "Authentication required. Please log in again."
    return describe_api_error(exc, fallback)


class BackOfficeService:
    """Admin-only management of the catalog, orders, users and site content."""

    def __init__(
        self,
        auth_session: AuthSessionService,
        products_api: ProductsApi,
        orders_api: OrdersApi,
        admin_api: AdminApi,
        blog_api: BlogApi,
        projects_api: ProjectsApi,
        services_api: ServicesApi,
    ):
        self.auth_session = auth_session
        self.products_api = products_api
        self.orders_api = orders_api
        self.admin_api = admin_api
        self.blog_api = blog_api
        self.projects_api = projects_api
        self.services_api = services_api

    def _require_admin(self) -> None:
        if not self.auth_session.is_admin():
            raise AuthenticationRequiredError("Admin access required")

    def load_product_form(self, product_id: Optional[str] = None) -> ProductForm:
        if product_id is None:
            return ProductForm()
        self._require_admin()
        return ProductForm.from_product(self.products_api.get(product_id))

    def save_product(self, form: ProductForm, product_id: Optional[str] = None) -> Product:
        self._require_admin()
        payload = form.to_payload()
        if product_id:
            logger.info(f"Updating product {product_id}")
            return self.products_api.update(product_id, payload)
        logger.info(f"Creating product '{payload['title']}'")
        return self.products_api.create(payload)

    def delete_product(self, product_id: str) -> None:
        self._require_admin()
        self.products_api.delete(product_id)

    def list_orders(self, page: Optional[int] = None, limit: Optional[int] = None) -> PagedResult[Order]:
        self._require_admin()
        return self.orders_api.list(page=page, limit=limit)

    def update_order_status(
        self,
        order_id: str,
        status: OrderStatus,
        tracking_number: Optional[str] = None,
        sub_order_id: Optional[str] = None,
    ) -> Order:
        self._require_admin()
        return self.orders_api.update(
            order_id,
            status=status,
            tracking_number=tracking_number,
            sub_order_id=sub_order_id,
        )

    def list_users(self, page: Optional[int] = None, limit: Optional[int] = None) -> PagedResult[User]:
        self._require_admin()
        return self.admin_api.list_users(page=page, limit=limit)

    def save_blog_post(self, form: BlogPostForm, post_id: Optional[str] = None) -> BlogPost:
        self._require_admin()
        kwargs = form.to_kwargs()
        if post_id:
            logger.info(f"Updating blog post {post_id}")
            return self.blog_api.update(post_id, **kwargs)
        logger.info(f"Creating blog post '{kwargs['title']}'")
        return self.blog_api.create(**kwargs)

    def delete_blog_post(self, post_id: str) -> None:
        self._require_admin()
        self.blog_api.delete(post_id)

    def save_project(self, form: ProjectForm, project_id: Optional[str] = None) -> Project:
        self._require_admin()
        kwargs = form.to_kwargs(default_year=str(date.today().year))
        if project_id:
            logger.info(f"Updating project {project_id}")
            return self.projects_api.update(project_id, **kwargs)
        logger.info(f"Creating project '{kwargs['title']}'")
        return self.projects_api.create(**kwargs)

    def delete_project(self, project_id: str) -> None:
        self._require_admin()
        self.projects_api.delete(project_id)

    def save_service(self, form: ServiceForm, service_id: Optional[str] = None) -> ServiceOffering:
        self._require_admin()
        kwargs = form.to_kwargs()
        if service_id:
            logger.info(f"Updating service {service_id}")
            return self.services_api.update(service_id, **kwargs)
        logger.info(f"Creating service '{kwargs['title']}'")
        return self.services_api.create(**kwargs)

    def delete_service(self, service_id: str) -> None:
        self._require_admin()
        self.services_api.delete(service_id)
