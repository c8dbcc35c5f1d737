"""Tests for request-id aware logging."""

import logging

from task_api.shared.context import bind_request_id, get_request_id, unbind_request_id
from task_api.shared.telemetry.logging import LOG_FORMAT, RequestIdLogFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("task_api.test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_uses_dash_outside_a_request() -> None:
    record = _record()
    assert RequestIdLogFilter().filter(record) is True
    assert record.request_id == "-"


def test_filter_uses_bound_request_id() -> None:
    token = bind_request_id("req-123")
    try:
        record = _record()
        RequestIdLogFilter().filter(record)
    finally:
        unbind_request_id(token)
    assert record.request_id == "req-123"
    assert get_request_id() is None


def test_format_includes_request_id() -> None:
    record = _record()
    RequestIdLogFilter().filter(record)
    line = logging.Formatter(LOG_FORMAT).format(record)
    assert line.endswith("- task_api.test - INFO - [-] hello")
