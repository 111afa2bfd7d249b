"""Resource models: the Kubeconfig descriptor, Secrets, and the resolved config."""

from . import clientcmd
from .descriptor import (
    DEFAULT_AUTH_INFO_CLIENT_CERTIFICATE_KEY,
    DEFAULT_AUTH_INFO_CLIENT_KEY_KEY,
    DEFAULT_AUTH_INFO_PASSWORD_KEY,
    DEFAULT_AUTH_INFO_TOKEN_KEY,
    DEFAULT_CLUSTER_CERTIFICATE_AUTHORITY_KEY,
    AuthInfo,
    CertificateAuthority,
    ClientCertificate,
    ClientKey,
    Cluster,
    Context,
    Kubeconfig,
    KubeconfigSpec,
    NamedAuthInfo,
    NamedCluster,
    NamedContext,
    Password,
    SecretReference,
    SecretSelector,
    Token,
)
from .secret import SECRET_KIND, ObjectKey, ObjectMeta, Secret

__all__ = [
    "clientcmd",
    # Descriptor
    "Kubeconfig",
    "KubeconfigSpec",
    "NamedCluster",
    "NamedAuthInfo",
    "NamedContext",
    "Cluster",
    "AuthInfo",
    "Context",
    "SecretSelector",
    "SecretReference",
    "ClientCertificate",
    "ClientKey",
    "Token",
    "Password",
    "CertificateAuthority",
    "DEFAULT_AUTH_INFO_CLIENT_CERTIFICATE_KEY",
    "DEFAULT_AUTH_INFO_CLIENT_KEY_KEY",
    "DEFAULT_AUTH_INFO_TOKEN_KEY",
    "DEFAULT_AUTH_INFO_PASSWORD_KEY",
    "DEFAULT_CLUSTER_CERTIFICATE_AUTHORITY_KEY",
    # Objects
    "SECRET_KIND",
    "ObjectKey",
    "ObjectMeta",
    "Secret",
]
