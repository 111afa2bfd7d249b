"""Kubeconfig descriptor models.

A Kubeconfig descriptor is a namespaced resource describing clusters,
credential profiles ("auth infos") and contexts. Credential material is not
inlined; it is referenced through secret selectors that point at Secrets in
the descriptor's own namespace:

```yaml
apiVersion: matryoshka.onmetal.de/v1alpha1
kind: Kubeconfig
metadata:
  name: admin
  namespace: shoot
spec:
  clusters:
    - name: shoot
      cluster:
        server: https://apiserver.shoot.svc:443
        certificateAuthority:
          secret:
            name: apiserver-ca
  authInfos:
    - name: admin
      user:
        token:
          secret:
            name: admin-token
            key: token
  contexts:
    - name: default
      context:
        cluster: shoot
        user: admin
  currentContext: default
```
"""

from pydantic import AliasChoices, Field

from kubeconfig_resolver.api.secret import ObjectMeta
from kubeconfig_resolver.models import ManifestModel

# Data keys looked up when a selector does not name one explicitly
DEFAULT_AUTH_INFO_CLIENT_CERTIFICATE_KEY = "client.crt"
DEFAULT_AUTH_INFO_CLIENT_KEY_KEY = "client.key"
DEFAULT_AUTH_INFO_TOKEN_KEY = "token"
DEFAULT_AUTH_INFO_PASSWORD_KEY = "password"
DEFAULT_CLUSTER_CERTIFICATE_AUTHORITY_KEY = "ca.crt"


class SecretSelector(ManifestModel):
    """Selects a Secret by name and, optionally, one of its data keys."""

    name: str
    key: str | None = None


class SecretReference(ManifestModel):
    """Wrapper around a secret selector, as used by every credential field."""

    secret: SecretSelector


class ClientCertificate(SecretReference):
    pass


class ClientKey(SecretReference):
    pass


class Token(SecretReference):
    pass


class Password(SecretReference):
    pass


class CertificateAuthority(SecretReference):
    pass


class Cluster(ManifestModel):
    """Connection information for a Kubernetes API server."""

    server: str
    tls_server_name: str | None = Field(default=None, alias="tlsServerName")
    insecure_skip_tls_verify: bool = Field(default=False, alias="insecureSkipTLSVerify")
    certificate_authority: CertificateAuthority | None = Field(
        default=None, alias="certificateAuthority"
    )
    proxy_url: str | None = Field(default=None, alias="proxyURL")


class AuthInfo(ManifestModel):
    """Credentials for authenticating against a cluster."""

    client_certificate: ClientCertificate | None = Field(default=None, alias="clientCertificate")
    client_key: ClientKey | None = Field(default=None, alias="clientKey")
    token: Token | None = None
    impersonate: str | None = Field(
        default=None, alias="as", validation_alias=AliasChoices("as", "impersonate")
    )
    impersonate_groups: list[str] | None = Field(
        default=None,
        alias="as-groups",
        validation_alias=AliasChoices("as-groups", "impersonateGroups", "impersonate_groups"),
    )
    username: str | None = None
    password: Password | None = None


class Context(ManifestModel):
    """Binds a cluster to an auth info and a default namespace, by name."""

    cluster: str
    auth_info: str = Field(alias="user")
    namespace: str | None = None


class NamedCluster(ManifestModel):
    name: str
    cluster: Cluster


class NamedAuthInfo(ManifestModel):
    name: str
    auth_info: AuthInfo = Field(alias="user")


class NamedContext(ManifestModel):
    name: str
    context: Context


class KubeconfigSpec(ManifestModel):
    """Ordered clusters, auth infos and contexts of a descriptor."""

    clusters: list[NamedCluster] = Field(default_factory=list)
    auth_infos: list[NamedAuthInfo] = Field(default_factory=list, alias="authInfos")
    contexts: list[NamedContext] = Field(default_factory=list)
    current_context: str = Field(default="", alias="currentContext")


class Kubeconfig(ManifestModel):
    """The Kubeconfig descriptor resource."""

    api_version: str = Field(default="matryoshka.onmetal.de/v1alpha1", alias="apiVersion")
    kind: str = "Kubeconfig"
    metadata: ObjectMeta
    spec: KubeconfigSpec = Field(default_factory=KubeconfigSpec)

    @property
    def namespace(self) -> str:
        return self.metadata.namespace
