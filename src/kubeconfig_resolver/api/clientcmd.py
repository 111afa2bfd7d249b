"""Resolved client configuration (the ``clientcmd`` v1 ``Config`` document).

The models mirror the kubeconfig file format understood by kubectl and the
Kubernetes client libraries. Wire names are kebab-case; ``*-data`` fields
hold raw bytes in Python and are base64-encoded when serialized.
"""

import base64
from typing import Annotated, Any, ClassVar

import yaml
from pydantic import Field, PlainSerializer, SerializerFunctionWrapHandler, model_serializer

from kubeconfig_resolver.models import ResolverBaseModel

Base64Bytes = Annotated[
    bytes,
    PlainSerializer(lambda v: base64.b64encode(v).decode("ascii"), return_type=str, when_used="json"),
]


class _OmitEmptyModel(ResolverBaseModel):
    """Section whose optional fields are left out of the document when empty."""

    always_serialized: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        kept = set(self.always_serialized)
        for name in self.always_serialized:
            alias = type(self).model_fields[name].alias
            if alias:
                kept.add(alias)
        return {key: value for key, value in handler(self).items() if key in kept or value}


class Cluster(_OmitEmptyModel):
    always_serialized: ClassVar[frozenset[str]] = frozenset({"server"})

    server: str
    tls_server_name: str | None = Field(default=None, alias="tls-server-name")
    insecure_skip_tls_verify: bool = Field(default=False, alias="insecure-skip-tls-verify")
    certificate_authority_data: Base64Bytes | None = Field(
        default=None, alias="certificate-authority-data"
    )
    proxy_url: str | None = Field(default=None, alias="proxy-url")


class AuthInfo(_OmitEmptyModel):
    client_certificate_data: Base64Bytes | None = Field(
        default=None, alias="client-certificate-data"
    )
    client_key_data: Base64Bytes | None = Field(default=None, alias="client-key-data")
    token: str | None = None
    impersonate: str | None = Field(default=None, alias="as")
    impersonate_groups: list[str] | None = Field(default=None, alias="as-groups")
    username: str | None = None
    password: str | None = None


class Context(_OmitEmptyModel):
    always_serialized: ClassVar[frozenset[str]] = frozenset({"cluster", "auth_info"})

    cluster: str
    auth_info: str = Field(alias="user")
    namespace: str | None = None


class NamedCluster(ResolverBaseModel):
    name: str
    cluster: Cluster


class NamedAuthInfo(ResolverBaseModel):
    name: str
    auth_info: AuthInfo = Field(alias="user")


class NamedContext(ResolverBaseModel):
    name: str
    context: Context


class Config(ResolverBaseModel):
    """A self-contained kubeconfig with all credential material inlined.

    Attributes:
        clusters: Clusters in descriptor order
        auth_infos: Auth infos in descriptor order (``users`` on the wire)
        contexts: Contexts in descriptor order
        current_context: Name of the context used by default

    Example:
        >>> config = Config(
        ...     clusters=[NamedCluster(name="c1", cluster=Cluster(server="https://c1"))],
        ...     current_context="",
        ... )
        >>> config.to_dict()["clusters"]
        [{'name': 'c1', 'cluster': {'server': 'https://c1'}}]
    """

    api_version: str = Field(default="v1", alias="apiVersion")
    kind: str = "Config"
    preferences: dict[str, Any] = Field(default_factory=dict)
    clusters: list[NamedCluster] = Field(default_factory=list)
    auth_infos: list[NamedAuthInfo] = Field(default_factory=list, alias="users")
    contexts: list[NamedContext] = Field(default_factory=list)
    current_context: str = Field(default="", alias="current-context")

    def to_dict(self) -> dict[str, Any]:
        """Render the kubeconfig document as plain data."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_yaml(self) -> str:
        """Render the kubeconfig document as YAML."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)
