"""
Global pytest configuration and fixtures.
"""

import threading
from pathlib import Path

import pytest

from kubeconfig_resolver.api import Kubeconfig, ObjectKey, Secret
from kubeconfig_resolver.api.secret import ObjectMeta
from kubeconfig_resolver.store import NotFoundError, default_scheme

NAMESPACE = "shoot"


class FakeObjectClient:
    """In-memory object client that records every get.

    Secrets are added with `add`; gets for anything else raise `NotFoundError`.
    Keys listed in ``errors`` raise the given exception instead.
    """

    def __init__(self) -> None:
        self.secrets: dict[ObjectKey, Secret] = {}
        self.errors: dict[ObjectKey, Exception] = {}
        self.calls: list[tuple[str, str, str]] = []
        self._lock = threading.Lock()

    def add(self, name: str, data: dict[str, bytes], namespace: str = NAMESPACE) -> Secret:
        secret = Secret(metadata=ObjectMeta(name=name, namespace=namespace), data=data)
        self.secrets[secret.key] = secret
        return secret

    def get(self, kind: str, namespace: str, name: str) -> Secret:
        with self._lock:
            self.calls.append((kind, namespace, name))
        key = ObjectKey(namespace, name)
        if key in self.errors:
            raise self.errors[key]
        try:
            return self.secrets[key].model_copy(deep=True)
        except KeyError:
            raise NotFoundError(kind, key) from None

    @property
    def requested_names(self) -> list[str]:
        return [name for _, _, name in self.calls]


@pytest.fixture
def fake_client():
    return FakeObjectClient()


@pytest.fixture
def scheme():
    return default_scheme()


@pytest.fixture
def fixtures_path() -> Path:
    return Path(__file__).parent / "fixtures"


def _make_kubeconfig(
    clusters: list[dict] | None = None,
    auth_infos: list[dict] | None = None,
    contexts: list[dict] | None = None,
    current_context: str = "",
    namespace: str = NAMESPACE,
) -> Kubeconfig:
    """Build a descriptor from wire-format (camelCase) fragments."""
    return Kubeconfig.model_validate(
        {
            "metadata": {"name": "admin", "namespace": namespace},
            "spec": {
                "clusters": clusters or [],
                "authInfos": auth_infos or [],
                "contexts": contexts or [],
                "currentContext": current_context,
            },
        }
    )


def _secret_ref(name: str, key: str | None = None) -> dict:
    selector = {"name": name}
    if key is not None:
        selector["key"] = key
    return {"secret": selector}


@pytest.fixture
def make_kubeconfig():
    return _make_kubeconfig


@pytest.fixture
def secret_ref():
    return _secret_ref
