"""Structured logging setup for the extension.

Console rendering for local development and tests, JSON lines in production
(or whenever ``LOG_FORMAT=json``).
"""

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor

from shared.config import Settings

SERVICE_NAME = "braintree-extension"


def _service_context(environment: str):
    def add_service_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict["service.name"] = SERVICE_NAME
        event_dict["deployment.environment"] = environment
        return event_dict

    return add_service_context


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root logger from settings."""
    use_json = settings.log_format == "json" or (not settings.log_format and settings.is_production)
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors: list[Processor] = [
        merge_contextvars,
        _service_context(settings.environment),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if use_json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=settings.is_production,
    )

    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s")
    # The SDK logs every HTTP round trip at INFO
    logging.getLogger("braintree").setLevel(logging.WARNING)
