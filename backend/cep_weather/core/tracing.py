"""Distributed Tracing Configuration.

Implements OpenTelemetry distributed tracing for request correlation across
the gateway and the resolver.

The tracer provider is NOT installed globally. Each application builds its own
provider at startup and hands a ``Tracer`` to every component that opens
spans, so components can be constructed in tests with any tracer (or the
no-op one) without touching process-wide state.

Span boundaries:
- gateway.handle / gateway.forward (Front Gateway)
- resolver.handle (Resolver Aggregator)
- directory.resolve_city / weather.resolve_temperature (collaborator calls)
"""

import logging
from typing import Optional

from opentelemetry import context as otel_context
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Tracer
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from .config import Settings

logger = logging.getLogger(__name__)

_propagator = TraceContextTextMapPropagator()


def setup_tracing(service_name: str, settings: Settings) -> Optional[TracerProvider]:
    """Build an OpenTelemetry tracer provider for one service.

    Configures:
    - Resource attributes (service name, version, environment)
    - Span exporter (OTLP or Console based on configuration)

    Args:
        service_name: Name reported in the ``service.name`` resource attribute
        settings: Application settings

    Returns:
        TracerProvider instance if tracing is enabled, None otherwise
    """
    if not settings.TRACING_ENABLED:
        logger.info("Distributed tracing is disabled", extra={'service': service_name})
        return None

    resource = Resource.create({
        "service.name": service_name,
        "service.version": settings.APP_VERSION,
        "service.namespace": settings.ENVIRONMENT,
        "deployment.environment": settings.ENVIRONMENT,
    })

    tracer_provider = TracerProvider(resource=resource)

    if settings.TRACING_EXPORTER.lower() == 'otlp':
        span_exporter = OTLPSpanExporter(endpoint=settings.TRACING_OTLP_ENDPOINT)
        logger.info(
            "Tracing configured with OTLP exporter",
            extra={'endpoint': settings.TRACING_OTLP_ENDPOINT}
        )
    else:
        span_exporter = ConsoleSpanExporter()
        logger.info("Tracing configured with console exporter")

    tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))

    logger.info(
        "Distributed tracing initialized",
        extra={
            'service': service_name,
            'exporter': settings.TRACING_EXPORTER,
            'environment': settings.ENVIRONMENT
        }
    )

    return tracer_provider


def get_tracer(name: str, tracer_provider: Optional[TracerProvider] = None) -> Tracer:
    """Get a tracer from an explicit provider.

    Args:
        name: Name of the tracer (typically module name)
        tracer_provider: Provider returned by ``setup_tracing``; None yields a no-op tracer

    Returns:
        Tracer instance
    """
    if tracer_provider is None:
        return trace.NoOpTracer()
    return tracer_provider.get_tracer(name)


def inject_trace_context(carrier: dict) -> None:
    """Inject the current trace context (traceparent, tracestate) into a carrier.

    Args:
        carrier: Dictionary (typically outbound HTTP headers) to inject into
    """
    _propagator.inject(carrier)


def extract_trace_context(carrier) -> Optional[otel_context.Context]:
    """Extract trace context from a carrier such as inbound HTTP headers.

    Args:
        carrier: Mapping containing trace context headers

    Returns:
        OpenTelemetry Context if a valid trace context was found, None otherwise
    """
    if not carrier:
        return None

    context = _propagator.extract(carrier)
    span = trace.get_current_span(context)
    if span.get_span_context().is_valid:
        return context
    return None


def get_trace_id() -> Optional[str]:
    """Get the current trace ID as a hex string.

    Returns:
        Trace ID as hex string, or None if no active trace
    """
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        return format(span_context.trace_id, '032x')
    return None


def get_span_id() -> Optional[str]:
    """Get the current span ID as a hex string.

    Returns:
        Span ID as hex string, or None if no active span
    """
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        return format(span_context.span_id, '016x')
    return None
