"""Object client backed by the official Kubernetes Python client."""

from __future__ import annotations

import logging
from typing import Any

from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.exceptions import ApiException

from kubeconfig_resolver.api.secret import SECRET_KIND, ObjectKey, Secret
from kubeconfig_resolver.store import NotFoundError, UnknownTypeError

logger = logging.getLogger(__name__)


class KubernetesObjectClient:
    """Reads objects from a Kubernetes API server.

    Each instance owns its own ``ApiClient`` so that clients bound to
    different clusters never share authentication or TLS settings.

    Example:
        ```python
        client = KubernetesObjectClient.from_kubeconfig(context="admin@shoot")
        secret = client.get("Secret", "shoot", "apiserver-ca")
        ```
    """

    def __init__(self, api_client: k8s_client.ApiClient):
        self.api_client = api_client
        self.core_v1 = k8s_client.CoreV1Api(api_client)

    @classmethod
    def from_kubeconfig(
        cls, config_file: str | None = None, context: str | None = None
    ) -> KubernetesObjectClient:
        """Create a client from a kubeconfig file without touching global SDK state."""
        return cls(k8s_config.new_client_from_config(config_file=config_file, context=context))

    @classmethod
    def from_incluster(cls) -> KubernetesObjectClient:
        """Create a client from the service account mounted into the pod."""
        configuration = k8s_client.Configuration()
        k8s_config.load_incluster_config(client_configuration=configuration)
        return cls(k8s_client.ApiClient(configuration))

    def get(self, kind: str, namespace: str, name: str) -> Any:
        if kind != SECRET_KIND:
            raise UnknownTypeError(f"Kind {kind} is not supported by {type(self).__name__}")

        logger.debug(f"Reading secret {namespace}/{name}")
        try:
            secret = self.core_v1.read_namespaced_secret(name=name, namespace=namespace)
        except ApiException as e:
            if e.status == 404:
                raise NotFoundError(kind, ObjectKey(namespace, name)) from e
            raise

        return Secret.from_manifest(
            {
                "metadata": {"name": secret.metadata.name, "namespace": secret.metadata.namespace},
                "type": secret.type,
                "data": secret.data,
            }
        )

    def close(self) -> None:
        """Release the connection pool of the underlying API client."""
        self.api_client.close()

    def __enter__(self) -> KubernetesObjectClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
