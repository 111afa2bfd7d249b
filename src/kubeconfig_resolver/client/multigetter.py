"""
Bulk retrieval of objects.

`MultiGetter` fetches a batch of objects in one logical operation. Requests
are fanned out to worker threads (the object client is blocking) with a
bounded number in flight, and the outcome is all-or-nothing: either every
placeholder is filled in, or `FetchError` is raised naming every object that
could not be retrieved and no placeholder is modified.

```python
getter = MultiGetter(client, max_concurrency=8, timeout=30)
await getter.multi_get(*requests_from_objects(store.objects()))
```
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from kubeconfig_resolver.api.secret import ObjectKey
from kubeconfig_resolver.errors import FetchError, ValidationError
from kubeconfig_resolver.store import NotFoundError

from .base import ObjectClient

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 8


@dataclass
class GetRequest:
    """Request to fetch one object into a placeholder.

    Attributes:
        kind: Kind of the object
        key: Namespace and name of the object
        obj: Placeholder that receives the fetched payload
    """

    kind: str
    key: ObjectKey
    obj: Any


def requests_from_objects(objects: list[Any]) -> list[GetRequest]:
    """Build one request per placeholder object."""
    return [GetRequest(kind=obj.kind, key=obj.key, obj=obj) for obj in objects]


class MultiGetter:
    """Fetches batches of objects through an `ObjectClient`."""

    def __init__(
        self,
        client: ObjectClient | None,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        timeout: float | None = None,
    ):
        if client is None:
            raise ValidationError("client needs to be set")
        if max_concurrency < 1:
            raise ValidationError(f"max_concurrency must be at least 1, got {max_concurrency}")
        if timeout is not None and timeout <= 0:
            raise ValidationError(f"timeout must be positive, got {timeout}")

        self.client = client
        self.max_concurrency = max_concurrency
        self.timeout = timeout

    async def multi_get(self, *requests: GetRequest) -> None:
        """Fetch all requested objects and fill their placeholders in place.

        Raises:
            FetchError: If any object is missing or inaccessible, or the batch
                did not complete within the configured timeout
        """
        if not requests:
            logger.debug("No objects to fetch")
            return

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def fetch(request: GetRequest) -> Any:
            async with semaphore:
                return await asyncio.to_thread(
                    self.client.get, request.kind, request.key.namespace, request.key.name
                )

        batch = asyncio.gather(*(fetch(r) for r in requests), return_exceptions=True)
        try:
            if self.timeout is None:
                results = await batch
            else:
                results = await asyncio.wait_for(batch, timeout=self.timeout)
        except TimeoutError:
            message = f"timed out after {self.timeout}s fetching {len(requests)} objects"
            logger.error(message)
            raise FetchError(
                message, failures={r.key: "timed out" for r in requests}
            ) from None

        failures: dict[ObjectKey, str] = {}
        for request, result in zip(requests, results, strict=True):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, NotFoundError):
                failures[request.key] = "not found"
            elif isinstance(result, BaseException):
                failures[request.key] = f"{type(result).__name__}: {result}"

        if failures:
            details = ", ".join(f"{key} ({reason})" for key, reason in failures.items())
            message = f"could not get {len(failures)} of {len(requests)} objects: {details}"
            logger.error(message)
            raise FetchError(message, failures=failures)

        for request, fetched in zip(requests, results, strict=True):
            request.obj.update_from(fetched)
            logger.debug(f"Fetched {request.kind} {request.key}")
