"""OpenTelemetry initialization helpers for the bot's HTTP surface."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SpanExporter

from drinkbot.core.config import Settings

logger = logging.getLogger(__name__)
_TRACING_INITIALIZED = False


def setup_tracing(app: FastAPI, settings: Settings) -> bool:
    """Configure a tracer provider and instrument `app` when tracing is enabled."""

    global _TRACING_INITIALIZED
    if not settings.ENABLE_TRACING:
        return False

    if not _TRACING_INITIALIZED:
        resource = Resource.create(
            {
                "service.name": settings.API_TITLE.lower().replace(" ", "-"),
                "service.version": settings.API_VERSION,
            }
        )

        provider = TracerProvider(resource=resource)
        exporter = _select_exporter(settings)
        provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)

        _TRACING_INITIALIZED = True
        logger.info("OpenTelemetry tracing initialized with %s exporter", exporter.__class__.__name__)

    FastAPIInstrumentor.instrument_app(app)
    return True


def _select_exporter(settings: Settings) -> SpanExporter:
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        return OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)
    return ConsoleSpanExporter()


__all__ = ["setup_tracing"]
