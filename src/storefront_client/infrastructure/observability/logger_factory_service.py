"""Logging for the storefront client.

Modules log through ``build_logger(__name__)`` (stdlib) or
``get_logger(component)`` (structlog, bound to a component). Nothing is
printed in a particular shape until the host application calls
``configure_logging``; ``build_container(configure_logs=True)`` does so from
``StorefrontSettings.log_level`` and ``log_format``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO, Union

import structlog

from storefront_client.infrastructure.observability.logging.storefront_processor import (
    storefront_schema_processor,
)
from storefront_client.infrastructure.observability.redaction_service import redaction_processor

# httpx logs every request at INFO; the client's own http_client events cover that
TRANSPORT_LOGGERS = ("httpx", "httpcore")

_configured = False


def _select_renderer(log_format: str, stream: TextIO) -> Any:
    """``auto`` renders for humans on a terminal and as JSON lines otherwise."""
    log_format = log_format.lower()
    if log_format == "auto":
        log_format = "console" if stream.isatty() else "json"
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=stream.isatty())
    raise ValueError(f"Unknown log format '{log_format}' (expected auto, json or console)")


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_format: str = "auto",
    stream: TextIO = sys.stderr,
) -> bool:
    """
    Routes structlog and stdlib records through one pipeline:
    redaction, then the storefront schema, then the renderer.
    Only the first call takes effect; returns whether this call configured logging.
    """
    global _configured  # noqa: PLW0603
    if _configured:
        return False

    renderer = _select_renderer(log_format, stream)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redaction_processor,
        storefront_schema_processor,
    ]
    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *shared_processors,
                renderer,
            ],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)

    if root.getEffectiveLevel() > logging.DEBUG:
        for name in TRANSPORT_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    return True


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Structlog logger with ``context_component`` bound."""
    return structlog.get_logger().bind(context_component=component)


def build_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
