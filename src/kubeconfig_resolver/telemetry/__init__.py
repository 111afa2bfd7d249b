"""Telemetry - OpenTelemetry tracing wrapper.

```python
from kubeconfig_resolver.telemetry import configure_telemetry, traced_operation

# Configure once at startup
configure_telemetry(enabled=True, endpoint="http://localhost:4318")

with traced_operation("my.operation", {"key": "value"}) as span:
    span.set_attribute("result", "success")
```
"""

from ._config import configure_telemetry, is_telemetry_enabled, shutdown_telemetry
from ._tracer import traced_operation
from ._types import Span, SpanKind, Status, StatusCode

__all__ = [
    "configure_telemetry",
    "shutdown_telemetry",
    "is_telemetry_enabled",
    "traced_operation",
    "Span",
    "SpanKind",
    "Status",
    "StatusCode",
]
