"""Batch materialization: fetch every referenced object in one bulk operation."""

import logging

from kubeconfig_resolver.client import MultiGetter, requests_from_objects
from kubeconfig_resolver.store import ObjectStore

logger = logging.getLogger(__name__)


async def resolve_kubeconfig_objects(store: ObjectStore, multigetter: MultiGetter) -> None:
    """Fill every placeholder in ``store`` with its fetched payload.

    Raises:
        FetchError: If any referenced object is missing or inaccessible
    """
    requests = requests_from_objects(store.objects())
    logger.debug(f"Fetching {len(requests)} referenced objects")
    await multigetter.multi_get(*requests)
