"""
Secret-bearing fields of a Kubeconfig descriptor.

Discovery and field resolution walk the descriptor independently; this table
is the single policy both of them follow. Each row names the descriptor
attribute holding the reference, the output attribute receiving the value,
and how the value is decoded. Default data keys are looked up by field kind.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from kubeconfig_resolver.api.descriptor import (
    DEFAULT_AUTH_INFO_CLIENT_CERTIFICATE_KEY,
    DEFAULT_AUTH_INFO_CLIENT_KEY_KEY,
    DEFAULT_AUTH_INFO_PASSWORD_KEY,
    DEFAULT_AUTH_INFO_TOKEN_KEY,
    DEFAULT_CLUSTER_CERTIFICATE_AUTHORITY_KEY,
    SecretSelector,
)
from kubeconfig_resolver.errors import SelectorError
from kubeconfig_resolver.store import ObjectStore


class FieldKind(str, Enum):
    CLIENT_CERTIFICATE = "client-certificate"
    CLIENT_KEY = "client-key"
    TOKEN = "token"
    PASSWORD = "password"
    CERTIFICATE_AUTHORITY = "certificate-authority"


DEFAULT_DATA_KEYS: dict[FieldKind, str] = {
    FieldKind.CLIENT_CERTIFICATE: DEFAULT_AUTH_INFO_CLIENT_CERTIFICATE_KEY,
    FieldKind.CLIENT_KEY: DEFAULT_AUTH_INFO_CLIENT_KEY_KEY,
    FieldKind.TOKEN: DEFAULT_AUTH_INFO_TOKEN_KEY,
    FieldKind.PASSWORD: DEFAULT_AUTH_INFO_PASSWORD_KEY,
    FieldKind.CERTIFICATE_AUTHORITY: DEFAULT_CLUSTER_CERTIFICATE_AUTHORITY_KEY,
}


@dataclass(frozen=True)
class SecretField:
    """One secret-bearing field.

    Attributes:
        kind: Field kind, selects the default data key
        source: Descriptor attribute holding the secret reference
        target: Output attribute receiving the resolved value
        as_text: Whether the payload is decoded to a string
    """

    kind: FieldKind
    source: str
    target: str
    as_text: bool = False

    @property
    def default_key(self) -> str:
        return DEFAULT_DATA_KEYS[self.kind]


AUTH_INFO_FIELDS: tuple[SecretField, ...] = (
    SecretField(FieldKind.CLIENT_CERTIFICATE, "client_certificate", "client_certificate_data"),
    SecretField(FieldKind.CLIENT_KEY, "client_key", "client_key_data"),
    SecretField(FieldKind.TOKEN, "token", "token", as_text=True),
    SecretField(FieldKind.PASSWORD, "password", "password", as_text=True),
)

CLUSTER_FIELDS: tuple[SecretField, ...] = (
    SecretField(
        FieldKind.CERTIFICATE_AUTHORITY, "certificate_authority", "certificate_authority_data"
    ),
)


def iter_secret_fields(
    source: Any, fields: tuple[SecretField, ...]
) -> Iterator[tuple[SecretField, SecretSelector]]:
    """Yield every field of ``source`` that holds a secret reference."""
    for field in fields:
        reference = getattr(source, field.source)
        if reference is not None:
            yield field, reference.secret


def get_secret_selector(
    store: ObjectStore, namespace: str, selector: SecretSelector, default_key: str
) -> bytes:
    """Return the payload a selector points at.

    The selector's explicit key wins over ``default_key``.

    Raises:
        NotFoundError: If the secret is not in the store
        SelectorError: If the secret has no data at the selected key
    """
    secret = store.get(namespace, selector.name)
    data_key = selector.key or default_key
    try:
        return secret.data[data_key]
    except KeyError:
        raise SelectorError(
            f"secret {secret.key} has no data at key {data_key}",
            key=secret.key,
            data_key=data_key,
        ) from None
