"""Clients for reading objects from a remote object store."""

from .base import ObjectClient
from .multigetter import DEFAULT_MAX_CONCURRENCY, GetRequest, MultiGetter, requests_from_objects

__all__ = [
    "ObjectClient",
    "KubernetesObjectClient",
    "GetRequest",
    "MultiGetter",
    "requests_from_objects",
    "DEFAULT_MAX_CONCURRENCY",
]


# The Kubernetes client library is slow to import, load it on first use
def __getattr__(name: str):
    if name == "KubernetesObjectClient":
        from .kubernetes_client import KubernetesObjectClient

        return KubernetesObjectClient
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
