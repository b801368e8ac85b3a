from __future__ import annotations

from typing import Any, Optional

from storefront_client.domain.value_objects.statuses import ProjectStatus
from storefront_client.infrastructure.http.dtos.resource_models import PagedResult, Project
from storefront_client.infrastructure.http.resources.base_resource_api import (
    UNSET,
    BaseResourceApi,
    compact,
    page_params,
)


def _status_value(status: Any) -> Any:
    if status is UNSET or status is None:
        return status
    return ProjectStatus(status).value


class ProjectsApi(BaseResourceApi[Project]):
    path = "/projects"
    collection_key = "projects"
    item_key = "project"
    model = Project

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
    ) -> PagedResult[Project]:
        return self._list({**page_params(page, limit), "status": status or None}, limit=limit)

    def create(
        self,
        title: str,
        description: Any = UNSET,
        client: Any = UNSET,
        year: Any = UNSET,
        status: Any = UNSET,
        images: Any = UNSET,
        features: Any = UNSET,
    ) -> Project:
        payload = compact(
            title=title,
            description=description,
            client=client,
            year=year,
            status=_status_value(status),
            images=images,
            features=features,
        )
        return self._parse_item(self.client.post(self.path, payload))

    def update(
        self,
        project_id: str,
        title: Any = UNSET,
        description: Any = UNSET,
        client: Any = UNSET,
        year: Any = UNSET,
        status: Any = UNSET,
        images: Any = UNSET,
        features: Any = UNSET,
    ) -> Project:
        payload = compact(
            title=title,
            description=description,
            client=client,
            year=year,
            status=_status_value(status),
            images=images,
            features=features,
        )
        return self._parse_item(self.client.put(self._item_path(project_id), payload))
