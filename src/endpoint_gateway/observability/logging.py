"""
endpoint_gateway.observability.logging

Structured logging configuration for the gateway.

Responsibilities:
- Configure `structlog` for JSON logs on stdout.
- Let DEBUG dispatch logs through for selected endpoints only.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import Any

import structlog

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}


def configure_logging(
    *,
    service_name: str,
    level: str,
    debug_endpoints: Iterable[str] = (),
) -> None:
    """
    One JSON object per line; dispatch rejections show up at DEBUG.
    """

    debug_set = frozenset(debug_endpoints)
    threshold = getattr(logging, level.upper(), logging.INFO)

    # With per-endpoint debugging, stdlib must pass DEBUG and structlog does the filtering.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug_set else threshold,
    )

    level_filter = structlog.stdlib.filter_by_level
    if debug_set:
        level_filter = _endpoint_debug_filter(debug_set, threshold)

    # structlog processors run on each log event; the filter needs contextvars merged first.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            level_filter,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _endpoint_debug_filter(endpoints: frozenset[str], threshold: int):
    # Events tagged with a listed `endpoint` pass at any level; others honour the threshold.
    def processor(_: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        if event_dict.get("endpoint") in endpoints:
            return event_dict
        if _METHOD_LEVELS.get(method_name, logging.INFO) < threshold:
            raise structlog.DropEvent
        return event_dict

    return processor


def _add_service_name(service_name: str):
    # Adds a stable "service" field for log routing/aggregation across environments.
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request-scoped fields (request_id, path, http_method) come from `observability.middleware`;
# the dispatcher adds `endpoint` to every event it logs.
