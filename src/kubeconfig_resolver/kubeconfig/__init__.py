"""Resolution of Kubeconfig descriptors into self-contained kubeconfigs."""

from .discovery import create_kubeconfig_references
from .fields import (
    AUTH_INFO_FIELDS,
    CLUSTER_FIELDS,
    DEFAULT_DATA_KEYS,
    FieldKind,
    SecretField,
    get_secret_selector,
    iter_secret_fields,
)
from .materialization import resolve_kubeconfig_objects
from .resolution import resolve_kubeconfig
from .resolver import Resolver, ResolverOptions, new_resolver

__all__ = [
    "Resolver",
    "ResolverOptions",
    "new_resolver",
    "create_kubeconfig_references",
    "resolve_kubeconfig_objects",
    "resolve_kubeconfig",
    "FieldKind",
    "SecretField",
    "AUTH_INFO_FIELDS",
    "CLUSTER_FIELDS",
    "DEFAULT_DATA_KEYS",
    "iter_secret_fields",
    "get_secret_selector",
]
