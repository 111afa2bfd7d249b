"""Reference discovery: which secrets does a descriptor point at."""

import logging

from kubeconfig_resolver.api.descriptor import Kubeconfig, SecretSelector
from kubeconfig_resolver.api.secret import SECRET_KIND
from kubeconfig_resolver.store import ObjectStore, ignore_already_exists

from .fields import AUTH_INFO_FIELDS, CLUSTER_FIELDS, iter_secret_fields

logger = logging.getLogger(__name__)


def _create_secret_reference(store: ObjectStore, namespace: str, selector: SecretSelector) -> None:
    # Several fields may share one secret
    with ignore_already_exists():
        store.create(store.scheme.new_object(SECRET_KIND, namespace, selector.name))


def create_kubeconfig_references(store: ObjectStore, kubeconfig: Kubeconfig) -> None:
    """Insert a placeholder into ``store`` for every secret the descriptor references."""
    namespace = kubeconfig.namespace

    for named in kubeconfig.spec.auth_infos:
        for field, selector in iter_secret_fields(named.auth_info, AUTH_INFO_FIELDS):
            logger.debug(f"Auth info {named.name}: {field.kind.value} -> {namespace}/{selector.name}")
            _create_secret_reference(store, namespace, selector)

    for named in kubeconfig.spec.clusters:
        for field, selector in iter_secret_fields(named.cluster, CLUSTER_FIELDS):
            logger.debug(f"Cluster {named.name}: {field.kind.value} -> {namespace}/{selector.name}")
            _create_secret_reference(store, namespace, selector)
