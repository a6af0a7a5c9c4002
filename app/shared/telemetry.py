# app/shared/telemetry.py
import structlog

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from app.shared.config import settings

logger = structlog.get_logger()

def setup_telemetry(service_name: str = settings.OTEL_SERVICE_NAME, service_version: str = "0.0.0") -> bool:
    """
    Initializes the OpenTelemetry SDK with OTLP export.
    Called once at process startup. Returns False when tracing is disabled.
    """
    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT")
        return False

    logger.info("telemetry_init", service=service_name, endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)

    # 1. Service identity
    resource = Resource.create(attributes={
        "service.name": service_name,
        "service.version": service_version,
        "deployment.environment": settings.APP_ENV.value,
    })

    # 2. Tracer provider + OTLP exporter
    trace_provider = TracerProvider(resource=resource)
    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT.rstrip("/")
    trace_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces"))
    )

    # 3. Console exporter for local debugging
    if settings.DEBUG:
        trace_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(trace_provider)
    return True

def instrument_fastapi(app):
    """
    Auto-instruments the FastAPI application to trace incoming HTTP requests.
    """
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app)

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in specific modules.
    Without setup_telemetry() this is a no-op tracer.
    """
    return trace.get_tracer(name)
