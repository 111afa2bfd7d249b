"""Contracts for clients that read objects from a remote object store."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ObjectClient(Protocol):
    """Interface all object clients must implement.

    Implementations are called from worker threads by the bulk fetcher, so
    ``get`` may block and must be safe to call concurrently.
    """

    def get(self, kind: str, namespace: str, name: str) -> Any:
        """Fetch a single object.

        Raises:
            NotFoundError: If the object does not exist
        """
        ...
