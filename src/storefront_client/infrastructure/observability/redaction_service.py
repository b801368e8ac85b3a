"""Scrubs storefront credentials out of log events.

Covers the bearer header, the token and password fields of the auth
endpoints (camelCase or snake_case), and the same fields when a request or
response body was logged as serialized JSON text.
"""

import re
from typing import Any

REDACTED = "[REDACTED]"

# Normalized: lower-cased with "_" and "-" removed
CREDENTIAL_FIELDS = frozenset(
    {
        "authorization",
        "token",
        "accesstoken",
        "refreshtoken",
        "resettoken",
        "password",
        "currentpassword",
        "newpassword",
        "confirmpassword",
    }
)

_BEARER = re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/=]+", re.IGNORECASE)
_JSON_CREDENTIAL = re.compile(
    r"(\"(?:token|accessToken|refreshToken|resetToken|password|currentPassword|newPassword)\"\s*:\s*\")[^\"]*(\")"
)


def is_credential_field(name: Any) -> bool:
    return str(name).lower().replace("_", "").replace("-", "") in CREDENTIAL_FIELDS


def redact_text(text: str) -> str:
    if not text:
        return text
    text = _BEARER.sub(rf"\1{REDACTED}", text)
    return _JSON_CREDENTIAL.sub(rf"\1{REDACTED}\2", text)


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, (list, tuple)):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``obj`` with credential fields masked at any depth."""
    return {
        key: REDACTED if is_credential_field(key) else redact_value(value)
        for key, value in obj.items()
    }


def redaction_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Structlog processor; runs before the schema processor nests the event."""
    return redact_dict(event_dict)
