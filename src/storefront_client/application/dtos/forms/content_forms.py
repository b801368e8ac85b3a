from __future__ import annotations

from typing import Any

from storefront_client.application.dtos.forms.base_form import BaseForm
from storefront_client.domain.value_objects.statuses import ProjectStatus
from storefront_client.infrastructure.http.dtos.resource_models import BlogPost, Project, ServiceOffering

DEFAULT_SERVICE_ICON = "Cpu"


def split_features(raw: str) -> list[str]:
    """Comma-separated feature input as a list; blank entries are dropped."""
    return [feature.strip() for feature in raw.split(",") if feature.strip()]


def _missing(form: BaseForm, fields: tuple[str, ...], message: str) -> dict[str, str]:
    return {name: message for name in fields if not getattr(form, name).strip()}


class BlogPostForm(BaseForm):
    title: str = ""
    excerpt: str = ""
    content: str = ""
    featured_image: str = ""
    slug: str = ""
    published: bool = False

    @classmethod
    def from_post(cls, post: BlogPost) -> "BlogPostForm":
        return cls(
            title=post.title,
            excerpt=post.excerpt or "",
            content=post.content,
            featured_image=post.featured_image or "",
            slug=post.slug or "",
            published=post.published,
        )

    def collect_errors(self) -> dict[str, str]:
        return _missing(
            self,
            ("title", "excerpt", "featured_image"),
            "Please fill all required fields including image!",
        )

    def to_kwargs(self) -> dict[str, Any]:
        self.ensure_valid()
        kwargs: dict[str, Any] = {
            "title": self.title.strip(),
            "excerpt": self.excerpt.strip(),
            "content": self.content,
            "featured_image": self.featured_image.strip(),
            "published": self.published,
        }
        if self.slug.strip():
            kwargs["slug"] = self.slug.strip()
        return kwargs


class ProjectForm(BaseForm):
    title: str = ""
    description: str = ""
    client: str = ""
    status: ProjectStatus = ProjectStatus.COMPLETED
    year: str = ""
    image: str = ""
    features: str = ""

    @classmethod
    def from_project(cls, project: Project) -> "ProjectForm":
        try:
            status = ProjectStatus(project.status)
        except ValueError:
            status = ProjectStatus.COMPLETED
        return cls(
            title=project.title,
            description=project.description or "",
            client=project.client or "",
            status=status,
            year=project.year or "",
            image=project.images[0] if project.images else "",
            features=", ".join(project.features),
        )

    def collect_errors(self) -> dict[str, str]:
        return _missing(self, ("title", "description", "client"), "Please fill all required fields!")

    def to_kwargs(self, default_year: str) -> dict[str, Any]:
        """``default_year`` fills a blank year, the way new projects are dated."""
        self.ensure_valid()
        kwargs: dict[str, Any] = {
            "title": self.title.strip(),
            "description": self.description.strip(),
            "client": self.client.strip(),
            "status": self.status,
            "year": self.year.strip() or default_year,
            "features": split_features(self.features),
        }
        if self.image.strip():
            kwargs["images"] = [self.image.strip()]
        return kwargs


class ServiceForm(BaseForm):
    title: str = ""
    description: str = ""
    features: str = ""
    price: str = ""
    duration: str = ""
    icon_name: str = DEFAULT_SERVICE_ICON
    active: bool = True

    @classmethod
    def from_service(cls, service: ServiceOffering) -> "ServiceForm":
        return cls(
            title=service.title,
            description=service.description,
            features=", ".join(service.features),
            price=service.price or "",
            duration=service.duration or "",
            icon_name=service.icon_name or DEFAULT_SERVICE_ICON,
            active=service.active,
        )

    def collect_errors(self) -> dict[str, str]:
        return _missing(
            self,
            ("title", "description"),
            "Please fill all required fields (Title and Description)!",
        )

    def to_kwargs(self) -> dict[str, Any]:
        self.ensure_valid()
        kwargs: dict[str, Any] = {
            "title": self.title.strip(),
            "description": self.description.strip(),
            "features": split_features(self.features),
            "icon_name": self.icon_name or DEFAULT_SERVICE_ICON,
            "active": self.active,
        }
        # Price and duration are free text and optional
        if self.price.strip():
            kwargs["price"] = self.price.strip()
        if self.duration.strip():
            kwargs["duration"] = self.duration.strip()
        return kwargs
