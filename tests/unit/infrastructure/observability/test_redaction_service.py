from storefront_client.infrastructure.observability.redaction_service import (
    redact_dict,
    redact_text,
    redaction_processor,
)


def test_bearer_tokens_are_redacted_in_text():
    redacted = redact_text("Authorization: Bearer abc.def-123")

    assert "abc.def-123" not in redacted
    assert redacted.startswith("Authorization: ")


def test_refresh_token_in_serialized_body_is_redacted():
    assert redact_text('{"refreshToken": "r-123"}') == '{"refreshToken": "[REDACTED]"}'


def test_sensitive_keys_are_redacted_case_insensitively():
    data = {
        "accessToken": "a",
        "refreshToken": "r",
        "newPassword": "secret1",
        "Authorization": "Bearer x",
        "email": "ada@example.com",
        "nested": {"token": "t", "items": [{"password": "p"}, "Bearer zzz"]},
    }

    assert redact_dict(data) == {
        "accessToken": "[REDACTED]",
        "refreshToken": "[REDACTED]",
        "newPassword": "[REDACTED]",
        "Authorization": "[REDACTED]",
        "email": "ada@example.com",
        "nested": {"token": "[REDACTED]", "items": [{"password": "[REDACTED]"}, "Bearer [REDACTED]"]},
    }


def test_processor_redacts_event_dict():
    event = redaction_processor(None, "info", {"event": "login", "password": "hunter2"})
    assert event == {"event": "login", "password": "[REDACTED]"}


def test_snake_case_fields_and_reset_bodies_are_redacted():
    data = {
        "reset_token": "rt-1",
        "current-password": "old",
        "token_count": 3,
        "body": '{"resetToken": "rt-2", "newPassword": "n3w", "email": "ada@example.com"}',
    }

    assert redact_dict(data) == {
        "reset_token": "[REDACTED]",
        "current-password": "[REDACTED]",
        "token_count": 3,
        "body": '{"resetToken": "[REDACTED]", "newPassword": "[REDACTED]", "email": "ada@example.com"}',
    }
