"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from task_api.shared.telemetry.logging import RequestIdLogFilter, setup_logging
from task_api.shared.telemetry.telemetry import (
    TelemetryConfig,
    configure_telemetry,
    get_telemetry,
    set_telemetry,
)
from task_api.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "RequestIdLogFilter",
    "TelemetryConfig",
    "configure_telemetry",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
]
