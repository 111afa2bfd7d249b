"""Field resolution: rebuild the descriptor with every reference inlined."""

from typing import Any

from kubeconfig_resolver.api import clientcmd
from kubeconfig_resolver.api.descriptor import AuthInfo, Cluster, Kubeconfig
from kubeconfig_resolver.api.secret import ObjectKey
from kubeconfig_resolver.errors import SelectorError
from kubeconfig_resolver.store import ObjectStore

from .fields import (
    AUTH_INFO_FIELDS,
    CLUSTER_FIELDS,
    SecretField,
    get_secret_selector,
    iter_secret_fields,
)


def _resolve_secret_fields(
    store: ObjectStore, namespace: str, source: Any, fields: tuple[SecretField, ...]
) -> dict[str, Any]:
    resolved: dict[str, Any] = {}
    for field, selector in iter_secret_fields(source, fields):
        data = get_secret_selector(store, namespace, selector, field.default_key)
        if field.as_text:
            try:
                resolved[field.target] = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise SelectorError(
                    f"secret {namespace}/{selector.name} has no text data at key "
                    f"{selector.key or field.default_key}: {e}",
                    key=ObjectKey(namespace, selector.name),
                    data_key=selector.key or field.default_key,
                ) from e
        else:
            resolved[field.target] = data
    return resolved


def resolve_auth_info(store: ObjectStore, namespace: str, auth_info: AuthInfo) -> clientcmd.AuthInfo:
    return clientcmd.AuthInfo(
        impersonate=auth_info.impersonate,
        impersonate_groups=auth_info.impersonate_groups,
        username=auth_info.username,
        **_resolve_secret_fields(store, namespace, auth_info, AUTH_INFO_FIELDS),
    )


def resolve_cluster(store: ObjectStore, namespace: str, cluster: Cluster) -> clientcmd.Cluster:
    return clientcmd.Cluster(
        server=cluster.server,
        tls_server_name=cluster.tls_server_name,
        insecure_skip_tls_verify=cluster.insecure_skip_tls_verify,
        proxy_url=cluster.proxy_url,
        **_resolve_secret_fields(store, namespace, cluster, CLUSTER_FIELDS),
    )


def resolve_kubeconfig(store: ObjectStore, kubeconfig: Kubeconfig) -> clientcmd.Config:
    """Assemble the resolved config from the descriptor and the fetched secrets.

    Every referenced secret must already be in ``store`` and filled in.

    Raises:
        SelectorError: If a secret lacks the selected data key
        NotFoundError: If a referenced secret was never discovered
    """
    namespace = kubeconfig.namespace
    spec = kubeconfig.spec

    auth_infos = [
        clientcmd.NamedAuthInfo(
            name=named.name, auth_info=resolve_auth_info(store, namespace, named.auth_info)
        )
        for named in spec.auth_infos
    ]

    clusters = [
        clientcmd.NamedCluster(name=named.name, cluster=resolve_cluster(store, namespace, named.cluster))
        for named in spec.clusters
    ]

    contexts = [
        clientcmd.NamedContext(
            name=named.name,
            context=clientcmd.Context(
                cluster=named.context.cluster,
                auth_info=named.context.auth_info,
                namespace=named.context.namespace,
            ),
        )
        for named in spec.contexts
    ]

    return clientcmd.Config(
        clusters=clusters,
        auth_infos=auth_infos,
        contexts=contexts,
        current_context=spec.current_context,
    )
