"""Tests for the Kubernetes-backed object client."""

import base64
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from kubernetes.client.exceptions import ApiException

from kubeconfig_resolver.api import ObjectKey, Secret
from kubeconfig_resolver.client import KubernetesObjectClient, ObjectClient
from kubeconfig_resolver.store import NotFoundError, UnknownTypeError


@pytest.fixture
def core_v1():
    with patch("kubeconfig_resolver.client.kubernetes_client.k8s_client.CoreV1Api") as api_cls:
        yield api_cls.return_value


@pytest.fixture
def client(core_v1):
    return KubernetesObjectClient(MagicMock())


def v1_secret(name: str, namespace: str, data: dict[str, bytes] | None, type_: str = "Opaque"):
    encoded = None
    if data is not None:
        encoded = {k: base64.b64encode(v).decode("ascii") for k, v in data.items()}
    return SimpleNamespace(
        metadata=SimpleNamespace(name=name, namespace=namespace), data=encoded, type=type_
    )


def test_implements_object_client_protocol(client):
    assert isinstance(client, ObjectClient)


def test_get_decodes_secret_data(client, core_v1):
    core_v1.read_namespaced_secret.return_value = v1_secret(
        "apiserver-ca", "shoot", {"ca.crt": b"-----BEGIN CERTIFICATE-----"}, "kubernetes.io/tls"
    )

    secret = client.get("Secret", "shoot", "apiserver-ca")

    core_v1.read_namespaced_secret.assert_called_once_with(name="apiserver-ca", namespace="shoot")
    assert isinstance(secret, Secret)
    assert secret.key == ObjectKey("shoot", "apiserver-ca")
    assert secret.type == "kubernetes.io/tls"
    assert secret.data == {"ca.crt": b"-----BEGIN CERTIFICATE-----"}


def test_get_secret_without_data(client, core_v1):
    core_v1.read_namespaced_secret.return_value = v1_secret("empty", "shoot", None)

    assert client.get("Secret", "shoot", "empty").data == {}


def test_not_found_maps_to_not_found_error(client, core_v1):
    core_v1.read_namespaced_secret.side_effect = ApiException(status=404, reason="Not Found")

    with pytest.raises(NotFoundError, match="Secret shoot/missing not found"):
        client.get("Secret", "shoot", "missing")


def test_other_api_errors_propagate(client, core_v1):
    core_v1.read_namespaced_secret.side_effect = ApiException(status=403, reason="Forbidden")

    with pytest.raises(ApiException):
        client.get("Secret", "shoot", "forbidden")


def test_unsupported_kind(client, core_v1):
    with pytest.raises(UnknownTypeError):
        client.get("ConfigMap", "shoot", "settings")
    core_v1.read_namespaced_secret.assert_not_called()


def test_from_kubeconfig_uses_isolated_api_client():
    with patch(
        "kubeconfig_resolver.client.kubernetes_client.k8s_config.new_client_from_config"
    ) as new_client:
        client = KubernetesObjectClient.from_kubeconfig(context="admin@shoot")

    new_client.assert_called_once_with(config_file=None, context="admin@shoot")
    assert client.api_client is new_client.return_value


def test_context_manager_closes_api_client():
    api_client = MagicMock()

    with KubernetesObjectClient(api_client):
        pass

    api_client.close.assert_called_once()
