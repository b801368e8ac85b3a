import io
import logging
import os
from unittest.mock import MagicMock, patch

import pytest
import structlog

from storefront_client.infrastructure.observability import logger_factory_service
from storefront_client.infrastructure.observability.logger_factory_service import (
    _select_renderer,
    build_logger,
    configure_logging,
    get_logger,
)
from storefront_client.infrastructure.observability.logging import storefront_schema_processor


def test_flat_event_is_nested_into_blocks():
    event = {
        "event": "API call",
        "level": "debug",
        "timestamp": "2024-01-01T00:00:00Z",
        "context_component": "http_client",
        "http_method": "GET",
        "http_path": "/products",
        "http_status": 200,
        "http_duration_ms": "12.5",
        "attempt": 1,
    }

    with patch.dict(os.environ, {"SERVICE_NAME": "shop", "APP_ENV": "qa"}):
        result = storefront_schema_processor(None, "debug", event)

    assert result["message"] == "API call"
    assert result["service"] == "shop"
    assert result["environment"] == "qa"
    assert result["http"] == {"method": "GET", "path": "/products", "status": 200, "duration_ms": 12.5}
    assert result["context"] == {"component": "http_client", "operation": None}
    assert result["extra"] == {"attempt": 1}
    assert "error" not in result


def test_error_block():
    result = storefront_schema_processor(
        None,
        "warning",
        {"event": "Token refresh rejected", "error_type": "RefreshRejected", "error_status": 401},
    )

    assert result["error"] == {"type": "RefreshRejected", "status": 401, "details": None}
    assert "extra" not in result
    assert "http" not in result


def test_renderer_follows_format_and_terminal():
    pipe = io.StringIO()
    terminal = MagicMock()
    terminal.isatty.return_value = True

    assert isinstance(_select_renderer("auto", pipe), structlog.processors.JSONRenderer)
    assert isinstance(_select_renderer("auto", terminal), structlog.dev.ConsoleRenderer)
    assert isinstance(_select_renderer("JSON", terminal), structlog.processors.JSONRenderer)
    assert isinstance(_select_renderer("console", pipe), structlog.dev.ConsoleRenderer)
    with pytest.raises(ValueError):
        _select_renderer("xml", pipe)


def test_configure_logging_applies_once_and_quiets_transport(monkeypatch):
    monkeypatch.setattr(logger_factory_service, "_configured", False)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        with patch.object(structlog, "configure") as mock_configure:
            assert configure_logging(level="info", log_format="json", stream=io.StringIO()) is True
            assert configure_logging(level="debug", log_format="json", stream=io.StringIO()) is False

        mock_configure.assert_called_once()
        assert root.level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.getLogger("httpx").setLevel(logging.NOTSET)
        logging.getLogger("httpcore").setLevel(logging.NOTSET)


def test_logger_factories():
    assert isinstance(build_logger("storefront_client.test"), logging.Logger)
    assert get_logger("cart") is not None
