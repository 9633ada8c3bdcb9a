"""
Structured logging configuration using structlog.

Produces JSON-formatted log lines enriched with timestamps, log levels
and the service name. Library modules keep logging through the stdlib
``logging`` module; the bridge configured here renders those records
with the same processor chain.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from paginator.infrastructure.settings import PaginatorSettings, get_settings

# ======================================================================
# Constants
# ======================================================================

SERVICE_NAME: str = "paginator"


# ======================================================================
# Custom processors
# ======================================================================


def make_service_name_processor(service_name: str) -> structlog.types.Processor:
    """Return a processor that tags every event with *service_name*."""

    def add_service_name(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return add_service_name  # type: ignore[return-value]


add_service_name = make_service_name_processor(SERVICE_NAME)


# ======================================================================
# Setup
# ======================================================================


def setup_logging(settings: Optional[PaginatorSettings] = None) -> None:
    """
    Configure structlog and the stdlib logging bridge for JSON output.

    Call this once from the host application; the library never calls
    it on its own.

    Parameters
    ----------
    settings:
        Source of ``log_level`` (``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``,
        ``CRITICAL``) and ``service_name``. Loaded from the environment
        when omitted.
    """

    settings = settings or get_settings()
    numeric_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        make_service_name_processor(settings.service_name),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # stdlib records (logging.getLogger(__name__)) pass through foreign_pre_chain.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)


# ======================================================================
# Logger factory
# ======================================================================


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a bound structlog logger pre-populated with the given *name*.

    Additional context can be attached via ``.bind()``::

        log = get_logger("listing")
        log = log.bind(url_pattern="/staff/(:page)/")
        log.info("Page window rendered", page_count=42)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
