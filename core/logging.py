"""
Logging

structlog setup for the stats service. Every event carries the service name
and, inside a request, the caller's correlation id. Production emits one
JSON object per line; development renders coloured console output.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any, Optional

import structlog


# Set by CorrelationMiddleware per request
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(cid: str) -> None:
    correlation_id_var.set(cid)


def add_correlation_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp the current request's correlation id, when there is one."""
    cid = correlation_id_var.get()
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def add_service_info(service_name: str) -> structlog.typing.Processor:
    """Build a processor that tags events with ``service``."""

    def processor(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["service"] = service_name
        return event_dict

    return processor


def _renderer(json_format: bool) -> list[structlog.typing.Processor]:
    if json_format:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def setup_logging(
    log_level: str = "INFO",
    json_format: bool = True,
    service_name: str = "pickup-stats-engine",
) -> None:
    """
    (Re)configure structlog. Safe to call more than once.

    Args:
        log_level: Name of the minimum level, e.g. ``"DEBUG"``
        json_format: JSON lines when True, console rendering otherwise
        service_name: Value of the ``service`` key on every event
    """
    level = logging.getLevelName(log_level.upper())

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_info(service_name),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    processors += _renderer(json_format)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Return a structlog logger, e.g. ``get_logger("stats").debug("leaderboard_built")``."""
    return structlog.get_logger(name)
