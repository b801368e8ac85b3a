from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Optional

from storefront_client.domain.exceptions.storefront_error import StorefrontError

_PRISMA_FIELD_PATTERN = re.compile(r"Invalid.*?`(\w+)`")


@dataclass(frozen=False, eq=False)
class ApiError(StorefrontError):
    status_code: Optional[int]
    message: str
    payload: dict[str, Any] = field(default_factory=dict)
    path: Optional[str] = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        where = f" path={self.path}" if self.path else ""
        return f"{self.message}{code}{where}"

    @property
    def details(self) -> Any:
        return self.payload.get("details")


@dataclass(frozen=False, eq=False)
class SessionExpiredError(ApiError):
    """401 that survived the token refresh; the session has been cleared."""


@dataclass(frozen=False, eq=False)
class ApiConnectionError(StorefrontError):
    message: str
    path: Optional[str] = None

    def __str__(self) -> str:
        return self.message


def extract_error_message(payload: Any, fallback: str) -> str:
    """Returns ``payload["error"]`` when the API sent one, else the fallback."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, str) and error.strip():
            return error
    return fallback


def _format_details(details: Any) -> str:
    if isinstance(details, list):
        lines = []
        for entry in details:
            entry = entry if isinstance(entry, dict) else {"message": str(entry)}
            path = entry.get("path") or []
            field_name = ".".join(str(p) for p in path) if path else "unknown"
            lines.append(f"{field_name}: {entry.get('message')}")
        return "Validation errors:\n" + "\n".join(lines)

    if isinstance(details, str):
        match = _PRISMA_FIELD_PATTERN.search(details)
        if match:
            return f"Database error: Invalid field '{match.group(1)}'. Please check your input."
        return f"Error: {details}"

    return f"Error: {json.dumps(details)}"


def describe_api_error(exc: BaseException, fallback: str) -> str:
    """
    Builds the user-facing message for a failed API call.

    Backend validation ``details`` take precedence over the plain ``error``
    string; connection failures report their own message.
    """
    if isinstance(exc, ApiError):
        if exc.details is not None:
            return _format_details(exc.details)
        return extract_error_message(exc.payload, fallback)
    if isinstance(exc, ApiConnectionError):
        return exc.message or fallback
    return fallback
