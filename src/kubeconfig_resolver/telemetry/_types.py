"""Type definitions for telemetry."""

from enum import Enum
from typing import Any, Protocol


class StatusCode(Enum):
    """Span status codes."""

    UNSET = 0
    OK = 1
    ERROR = 2


class Status:
    """Span status.

    Attributes:
        status_code: The status code indicating success, error, or unset
        description: Optional human-readable description of the status
    """

    def __init__(self, status_code: StatusCode, description: str | None = None):
        self.status_code = status_code
        self.description = description


class SpanKind(Enum):
    """Type of span."""

    INTERNAL = 0
    SERVER = 1
    CLIENT = 2
    PRODUCER = 3
    CONSUMER = 4


class Span(Protocol):
    """Minimal interface of the span objects yielded by `traced_operation`."""

    def set_attribute(self, key: str, value: Any) -> None: ...

    def set_status(self, status: Status) -> None: ...

    def record_exception(self, exception: Exception) -> None: ...

    def is_recording(self) -> bool: ...
