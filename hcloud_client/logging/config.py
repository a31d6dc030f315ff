"""Structured logging for the client.

The library itself only calls ``get_logger``; applications that want the
client's events rendered call ``setup_logging`` once at startup. Format and
level default to ``ClientSettings`` (``HCLOUD_LOG_FORMAT``, ``HCLOUD_LOG_LEVEL``).

Usage:
    from hcloud_client.logging import setup_logging

    setup_logging(service_name="provisioner", log_format="json")
"""

import logging
import sys
from typing import Literal

import structlog
from structlog.types import Processor

from hcloud_client.config import ClientSettings, get_settings

DEFAULT_SERVICE_NAME = "hcloud-client"


def _build_processors(log_format: str) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        # service, request_id
        structlog.contextvars.merge_contextvars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=False))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def setup_logging(
    service_name: str | None = None,
    log_format: Literal["json", "console"] | None = None,
    log_level: str | None = None,
    settings: ClientSettings | None = None,
) -> None:
    """Configure structured logging with structlog.

    Args:
        service_name: Name of the calling application, bound to every line.
                     Falls back to ``settings.application_name`` or "hcloud-client".
        log_format: "json" for production, "console" for development.
                   Falls back to ``settings.log_format``.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
                  Falls back to ``settings.log_level``.
        settings: Settings to take defaults from. Defaults to ``get_settings()``.
    """
    settings = settings or get_settings()
    service_name = service_name or settings.application_name or DEFAULT_SERVICE_NAME
    log_format = log_format or settings.log_format
    log_level = (log_level or settings.log_level).upper()

    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))

    structlog.configure(
        processors=_build_processors(log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=service_name)

    get_logger(__name__).info(
        "logging_initialized",
        service=service_name,
        log_format=log_format,
        log_level=log_level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name. If not provided, uses the caller's module name.
    """
    return structlog.get_logger(name)
