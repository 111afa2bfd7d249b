"""Error types raised while resolving a Kubeconfig descriptor.

Every error raised by the pipeline derives from :class:`ResolutionError`.
The orchestrator re-raises stage errors with stage context while keeping
their kind, so callers can still tell a fetch failure from a selector
failure after the message has been prefixed:

```python
try:
    config = await resolver.resolve(kubeconfig)
except FetchError as e:
    # One or more referenced secrets could not be retrieved
    for key, reason in e.failures.items():
        print(key, reason)
except SelectorError as e:
    print(f"{e.key} has no data at key {e.data_key}")
```
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from kubeconfig_resolver.api.secret import ObjectKey

__all__ = [
    "ResolutionError",
    "ValidationError",
    "DiscoveryError",
    "FetchError",
    "SelectorError",
]


class ResolutionError(Exception):
    """Base class for all resolution errors."""

    def __init__(self, message: str, *, stage: str | None = None):
        super().__init__(message)
        self.stage = stage

    def with_context(self, context: str, stage: str | None = None) -> Self:
        """Return a copy of this error with ``context`` prepended to its message.

        The copy keeps the concrete error type and all of its attributes.
        """
        err = copy.copy(self)
        err.args = (f"{context}: {self}",)
        if stage is not None:
            err.stage = stage
        return err


class ValidationError(ResolutionError, ValueError):
    """Raised when a resolver or one of its collaborators is misconfigured."""


class DiscoveryError(ResolutionError):
    """Raised when the referenced objects of a descriptor cannot be determined."""


class FetchError(ResolutionError):
    """Raised when one or more referenced objects could not be retrieved.

    Attributes:
        failures: Mapping of object key to a description of why fetching it failed.
    """

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        failures: Mapping[ObjectKey, str] | None = None,
    ):
        super().__init__(message, stage=stage)
        self.failures: dict[ObjectKey, str] = dict(failures or {})


class SelectorError(ResolutionError):
    """Raised when a fetched object lacks the data key a selector points at.

    Attributes:
        key: Key of the object that was inspected
        data_key: The data key that was looked up
    """

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        key: Any = None,
        data_key: str | None = None,
    ):
        super().__init__(message, stage=stage)
        self.key = key
        self.data_key = data_key
