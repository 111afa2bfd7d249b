"""Telemetry configuration.

This module handles OpenTelemetry configuration and initialization so the
rest of the package never touches OpenTelemetry setup APIs.
"""

import logging
from typing import Any

# Import OpenTelemetry SDK only in this module
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)

from kubeconfig_resolver.config.models import TelemetryConfigModel
from kubeconfig_resolver.version import PACKAGE_NAME, PACKAGE_VERSION

logger = logging.getLogger(__name__)

# Global flag for telemetry state
_telemetry_enabled = False


def configure_telemetry(config: TelemetryConfigModel | None = None, **kwargs: Any) -> None:
    """Configure tracing.

    Args:
        config: TelemetryConfigModel object
        **kwargs: Alternative to config, pass individual settings

    Examples:
        # Using config object
        configure_telemetry(TelemetryConfigModel(enabled=True, endpoint="..."))

        # Using kwargs
        configure_telemetry(enabled=True, console_export=True)
    """
    global _telemetry_enabled

    if config is None:
        config = TelemetryConfigModel(**kwargs)

    if not config.enabled:
        logger.info("Telemetry disabled")
        _telemetry_enabled = False
        return

    if config.console_export:
        processor: SimpleSpanProcessor | BatchSpanProcessor = SimpleSpanProcessor(
            ConsoleSpanExporter()
        )
    elif config.endpoint:
        processor = BatchSpanProcessor(
            OTLPSpanExporter(endpoint=f"{config.endpoint}/v1/traces", headers=config.headers or {})
        )
    else:
        logger.warning("Telemetry enabled but no endpoint configured")
        _telemetry_enabled = False
        return

    logger.info(f"Configuring telemetry with endpoint: {config.endpoint}")

    resource = Resource.create(
        {
            "service.name": config.service_name or PACKAGE_NAME,
            "service.version": PACKAGE_VERSION,
            "deployment.environment": config.environment,
        }
    )
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    _telemetry_enabled = True


def shutdown_telemetry() -> None:
    """Flush pending spans and disable tracing."""
    global _telemetry_enabled

    provider = trace.get_tracer_provider()
    if hasattr(provider, "shutdown"):
        provider.shutdown()
    _telemetry_enabled = False
    logger.info("Telemetry shutdown complete")


def is_telemetry_enabled() -> bool:
    """Check if telemetry is currently enabled."""
    return _telemetry_enabled
