from __future__ import annotations

from typing import Any, Optional

from storefront_client.infrastructure.http.dtos.resource_models import BlogPost, PagedResult
from storefront_client.infrastructure.http.resources.base_resource_api import (
    UNSET,
    BaseResourceApi,
    compact,
    page_params,
)


class BlogApi(BaseResourceApi[BlogPost]):
    path = "/blog"
    collection_key = "posts"
    item_key = "post"
    model = BlogPost

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        published: Optional[bool] = None,
        search: Optional[str] = None,
    ) -> PagedResult[BlogPost]:
        params = {**page_params(page, limit), "published": published, "search": search or None}
        return self._list(params, limit=limit)

    def create(
        self,
        title: str,
        content: str,
        slug: Any = UNSET,
        excerpt: Any = UNSET,
        featured_image: Any = UNSET,
        published: Any = UNSET,
    ) -> BlogPost:
        payload = compact(
            title=title,
            content=content,
            slug=slug,
            excerpt=excerpt,
            featuredImage=featured_image,
            published=published,
        )
        return self._parse_item(self.client.post(self.path, payload))

    def update(
        self,
        post_id: str,
        title: Any = UNSET,
        slug: Any = UNSET,
        excerpt: Any = UNSET,
        content: Any = UNSET,
        featured_image: Any = UNSET,
        published: Any = UNSET,
    ) -> BlogPost:
        payload = compact(
            title=title,
            slug=slug,
            excerpt=excerpt,
            content=content,
            featuredImage=featured_image,
            published=published,
        )
        return self._parse_item(self.client.put(self._item_path(post_id), payload))
