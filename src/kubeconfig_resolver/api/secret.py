"""Secret objects as held by the object store."""

import base64
from typing import Any, NamedTuple

from pydantic import ConfigDict, Field

from kubeconfig_resolver.models import ManifestModel

SECRET_KIND = "Secret"


class ObjectKey(NamedTuple):
    """Namespace and name identifying an object."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


class ObjectMeta(ManifestModel):
    """Subset of Kubernetes object metadata used by this package."""

    name: str
    namespace: str = "default"


class Secret(ManifestModel):
    """A Kubernetes Secret.

    Secrets are mutable: discovery stores empty placeholders that only carry
    metadata, and the bulk fetch fills ``data`` and ``type`` in place.

    Attributes:
        metadata: Name and namespace of the secret
        type: Secret type (e.g. ``Opaque``, ``kubernetes.io/tls``)
        data: Decoded secret payloads by data key
    """

    model_config = ConfigDict(extra="ignore", frozen=False, populate_by_name=True)

    api_version: str = Field(default="v1", alias="apiVersion")
    kind: str = SECRET_KIND
    metadata: ObjectMeta
    type: str = "Opaque"
    data: dict[str, bytes] = Field(default_factory=dict)

    @property
    def key(self) -> ObjectKey:
        return ObjectKey(self.metadata.namespace, self.metadata.name)

    @classmethod
    def placeholder(cls, namespace: str, name: str) -> "Secret":
        """Create an empty secret carrying only its metadata."""
        return cls(metadata=ObjectMeta(name=name, namespace=namespace))

    @classmethod
    def from_manifest(cls, manifest: dict[str, Any]) -> "Secret":
        """Build a secret from a Kubernetes manifest.

        ``data`` values are base64-encoded on the wire; ``stringData`` values
        are plain text and take precedence over ``data`` for the same key,
        as they do on the API server. Non-string ``stringData`` scalars are
        stored as their string form.
        """
        data = {
            key: base64.b64decode(value) for key, value in (manifest.get("data") or {}).items()
        }
        for key, value in (manifest.get("stringData") or {}).items():
            data[key] = str(value).encode("utf-8")
        return cls.model_validate(
            {
                "apiVersion": manifest.get("apiVersion", "v1"),
                "kind": manifest.get("kind", SECRET_KIND),
                "metadata": manifest.get("metadata") or {},
                "type": manifest.get("type") or "Opaque",
                "data": data,
            }
        )

    def update_from(self, other: "Secret") -> None:
        """Copy the payload of ``other`` into this secret, keeping its metadata."""
        self.type = other.type
        self.data = dict(other.data)
