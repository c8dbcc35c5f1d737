"""OpenTelemetry tracing for the task service.

configure_telemetry(settings) builds a TelemetryConfig, installs its tracer
provider globally and registers it for the lifespan (SQLAlchemy
instrumentation at startup, flush on shutdown). Spans go to the console,
to an OTLP gRPC collector, or nowhere (sampling only).
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

if TYPE_CHECKING:
    from task_api.core.config import Settings

logger = logging.getLogger(__name__)

# Health probes are polled constantly and carry no task traffic.
UNTRACED_URLS = "/health"


def _build_exporter(
    exporter_type: str, otlp_endpoint: str | None
) -> SpanExporter | None:
    """Return the span exporter for exporter_type, or None for "none"."""
    if exporter_type == "none":
        return None
    if exporter_type == "otlp":
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
            )
        logger.warning(
            "OTLP exporter selected without TELEMETRY_OTLP_ENDPOINT, using console"
        )
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider plus the instrumentations attached to it."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and install it as the global one.

        Args:
            exporter_type: "console", "otlp", or "none".
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Fraction of root traces kept, 0.0-1.0.

        Returns:
            The provider, or None when disabled or the exporter cannot be built.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            exporter = _build_exporter(exporter_type, otlp_endpoint)
        except Exception:
            logger.exception(
                "Could not create %s span exporter; tracing stays off", exporter_type
            )
            return None

        provider = TracerProvider(
            resource=Resource.create(
                {
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            ),
            sampler=ParentBased(TraceIdRatioBased(sample_rate)),
        )
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        self.tracer_provider = provider
        logger.info(
            "Tracing %s %s with %s exporter (sample rate %s)",
            self.service_name,
            self.service_version,
            exporter_type,
            sample_rate,
        )
        return provider

    @property
    def active(self) -> bool:
        return self.enabled and self.tracer_provider is not None

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Trace every request except the health probes."""
        if not self.active:
            return
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=self.tracer_provider, excluded_urls=UNTRACED_URLS
        )

    def instrument_sqlalchemy(self, engine: AsyncEngine) -> None:
        """Trace statements issued through engine (the task insert, readiness SELECT 1)."""
        if not self.active:
            return
        SQLAlchemyInstrumentor().instrument(
            engine=engine.sync_engine, tracer_provider=self.tracer_provider
        )

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.tracer_provider is None:
            return
        self.tracer_provider.shutdown()
        self.tracer_provider = None


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the telemetry registered by configure_telemetry, if any."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Register (or clear, with None) the process-wide telemetry."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry


def configure_telemetry(settings: Settings) -> TelemetryConfig | None:
    """Build telemetry from settings and register it; None when disabled."""
    if not settings.telemetry_enabled:
        return None
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        environment=settings.telemetry_environment,
    )
    if telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    ) is None:
        return None
    set_telemetry(telemetry)
    return telemetry
