"""
Distributed Tracing Configuration

Sets up and configures OpenTelemetry for distributed tracing.
"""
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.resources import Resource
from loguru import logger

from graylog_mcp.core.constants import APP_NAME, APP_VERSION


def setup_tracing():
    """Initializes the OpenTelemetry tracer provider (no exporter attached)."""

    resource = Resource(attributes={
        "service.name": APP_NAME,
        "service.version": APP_VERSION,
    })

    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    logger.debug("OpenTelemetry tracing initialized (exporter disabled).")


def get_tracer(name: str):
    """Gets a tracer instance for a specific module."""
    return trace.get_tracer(name)
