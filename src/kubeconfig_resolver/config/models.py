"""Pydantic models for resolver settings.

This module defines the model classes for the settings file that tunes the
bulk fetch and telemetry of a resolver.
"""

from pydantic import Field

from kubeconfig_resolver.client.multigetter import DEFAULT_MAX_CONCURRENCY
from kubeconfig_resolver.models import ResolverBaseModel


class FetchConfigModel(ResolverBaseModel):
    """Settings for the bulk fetch of referenced objects.

    Attributes:
        max_concurrency: Maximum number of objects fetched at the same time
        timeout_seconds: Upper bound for fetching a whole batch, None for no limit

    Example:
        >>> config = FetchConfigModel(max_concurrency=4, timeout_seconds=30)
    """

    max_concurrency: int = Field(default=DEFAULT_MAX_CONCURRENCY, ge=1)
    timeout_seconds: float | None = Field(default=None, gt=0)


class TelemetryConfigModel(ResolverBaseModel):
    """Settings for OpenTelemetry tracing.

    Attributes:
        enabled: Whether spans are exported
        endpoint: OTLP/HTTP collector endpoint (e.g., http://localhost:4318)
        service_name: Service name reported with every span
        environment: Deployment environment reported with every span
        headers: Extra headers sent to the collector
        console_export: Print spans to stdout instead of exporting them
    """

    enabled: bool = False
    endpoint: str | None = None
    service_name: str | None = None
    environment: str = "development"
    headers: dict[str, str] | None = None
    console_export: bool = False


class ResolverSettingsModel(ResolverBaseModel):
    """Root settings for a resolver.

    This is the structure of the ``config`` section of the settings file:

    ```yaml
    config:
      fetch:
        max_concurrency: 8
        timeout_seconds: 30
      telemetry:
        enabled: true
        endpoint: "http://localhost:4318"
    ```
    """

    fetch: FetchConfigModel = Field(default_factory=FetchConfigModel)
    telemetry: TelemetryConfigModel = Field(default_factory=TelemetryConfigModel)
