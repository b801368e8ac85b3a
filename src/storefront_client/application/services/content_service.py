from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from storefront_client.application.dtos.forms.contact_form import ContactForm
from storefront_client.domain.value_objects.pagination import Pagination
from storefront_client.infrastructure.http.dtos.resource_models import BlogPost, Project, ServiceOffering
from storefront_client.infrastructure.http.resources.blog_api import BlogApi
from storefront_client.infrastructure.http.resources.contact_api import ContactApi
from storefront_client.infrastructure.http.resources.projects_api import ProjectsApi
from storefront_client.infrastructure.http.resources.services_api import ServicesApi

BLOG_PAGE_SIZE = 6
SHOWCASE_LIMIT = 50


@dataclass
class BlogFeed:
    featured: Optional[BlogPost] = None
    posts: list[BlogPost] = field(default_factory=list)
    pagination: Pagination = field(default_factory=lambda: Pagination(limit=BLOG_PAGE_SIZE))


class ContentService:
    """Public content pages: blog, projects, services and the contact form."""

    def __init__(
        self,
        blog_api: BlogApi,
        projects_api: ProjectsApi,
        services_api: ServicesApi,
        contact_api: ContactApi,
    ):
        self.blog_api = blog_api
        self.projects_api = projects_api
        self.services_api = services_api
        self.contact_api = contact_api

    def blog_feed(self, page: int = 1, page_size: int = BLOG_PAGE_SIZE) -> BlogFeed:
        """The first published post of the page is featured; the rest form the list."""
        result = self.blog_api.list(page=page, limit=page_size, published=True)
        if not result.items:
            return BlogFeed(pagination=result.pagination)
        return BlogFeed(featured=result.items[0], posts=result.items[1:], pagination=result.pagination)

    def get_post(self, post_id: str) -> BlogPost:
        return self.blog_api.get(post_id)

    def projects(self) -> list[Project]:
        return self.projects_api.list(limit=SHOWCASE_LIMIT).items

    def active_services(self) -> list[ServiceOffering]:
        return self.services_api.list(limit=SHOWCASE_LIMIT, active=True).items

    def send_contact_message(self, form: ContactForm) -> None:
        form.ensure_valid()
        self.contact_api.create(
            name=form.name,
            email=form.email,
            subject=form.subject or None,
            message=form.message,
        )
