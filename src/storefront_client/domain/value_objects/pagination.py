from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    total: int = 0
    total_pages: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @classmethod
    def from_payload(cls, payload: Optional[dict[str, Any]], limit: Optional[int] = None) -> "Pagination":
        """
        Reads the API ``pagination`` block.
        A missing block yields an empty first page sized to the requested limit.
        """
        fallback_limit = limit or DEFAULT_PAGE_SIZE
        if not isinstance(payload, dict):
            return cls(page=1, limit=fallback_limit, total=0, total_pages=0)
        return cls(
            page=int(payload.get("page") or 1),
            limit=int(payload.get("limit") or fallback_limit),
            total=int(payload.get("total") or 0),
            total_pages=int(payload.get("totalPages") or 0),
        )
