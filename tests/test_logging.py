"""
tests.test_logging

Per-endpoint DEBUG filtering in the structlog processor chain.
"""

from __future__ import annotations

import logging

import pytest
import structlog

from endpoint_gateway.observability.logging import _endpoint_debug_filter


def test_listed_endpoint_debug_events_pass() -> None:
    processor = _endpoint_debug_filter(frozenset({"ping"}), logging.INFO)
    event = {"event": "endpoint_not_found", "endpoint": "ping"}

    assert processor(None, "debug", event) is event


def test_other_debug_events_are_dropped() -> None:
    processor = _endpoint_debug_filter(frozenset({"ping"}), logging.INFO)

    with pytest.raises(structlog.DropEvent):
        processor(None, "debug", {"event": "method_not_allowed", "endpoint": "echo"})
    with pytest.raises(structlog.DropEvent):
        processor(None, "debug", {"event": "startup"})


def test_events_at_threshold_pass() -> None:
    processor = _endpoint_debug_filter(frozenset({"ping"}), logging.INFO)

    assert processor(None, "info", {"event": "app_created"})["event"] == "app_created"
    assert processor(None, "exception", {"event": "dispatch_failed", "endpoint": "echo"})
