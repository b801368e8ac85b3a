"""Storefront log schema processor for structlog.

Reshapes the flat structlog event_dict into nested blocks
(root, error, http, context, extra).
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    """Extract root-level fields: timestamp, level, service, environment, message."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "storefront-client"),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    """Cast a value to float, returning None on failure."""
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "status": event_dict.pop("error_status", None),
        "details": event_dict.pop("error_details", None),
    }


def _build_http(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract outbound HTTP call block."""
    method = event_dict.pop("http_method", None)
    if method is None:
        return None
    return {
        "method": method,
        "path": event_dict.pop("http_path", None),
        "status": event_dict.pop("http_status", None),
        "duration_ms": _safe_float(event_dict.pop("http_duration_ms", None)),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract execution context block."""
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {
        "component": component,
        "operation": event_dict.pop("context_operation", None),
    }


def storefront_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that reshapes flat event_dict into the storefront schema."""
    result = _build_root_fields(event_dict)

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    http = _build_http(event_dict)
    if http is not None:
        result["http"] = http

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
