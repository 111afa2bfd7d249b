"""
Resolver for Kubeconfig descriptors.

The resolver turns a Kubeconfig descriptor, whose credentials are references
to Secrets, into a self-contained kubeconfig with all credential material
inlined. Resolution runs three stages in strict sequence:

1. **Discovery** - collect every referenced Secret into a fresh object store,
   one placeholder per distinct namespace and name
2. **Materialization** - fetch all placeholders in one bulk operation
3. **Field resolution** - rebuild the config, substituting each reference
   with the selected data of its fetched Secret

Resolution is all-or-nothing. A missing Secret or data key fails the whole
call and no partial config is returned.

## Usage

```python
from kubeconfig_resolver import Resolver, ResolverOptions, default_scheme
from kubeconfig_resolver.client import KubernetesObjectClient

resolver = Resolver(
    ResolverOptions(client=KubernetesObjectClient.from_incluster(), scheme=default_scheme())
)
config = await resolver.resolve(kubeconfig)
print(config.to_yaml())
```

Each call allocates its own store, so one resolver may serve concurrent
`resolve` calls. Cancelling the calling task aborts the resolution.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from kubeconfig_resolver.api import clientcmd
from kubeconfig_resolver.api.descriptor import Kubeconfig
from kubeconfig_resolver.client import MultiGetter, ObjectClient
from kubeconfig_resolver.config import ResolverSettingsModel, load_resolver_settings
from kubeconfig_resolver.errors import (
    DiscoveryError,
    FetchError,
    ResolutionError,
    SelectorError,
    ValidationError,
)
from kubeconfig_resolver.store import ObjectStore, Scheme, SchemeError, StoreError, default_scheme
from kubeconfig_resolver.telemetry import SpanKind, configure_telemetry, traced_operation

from .discovery import create_kubeconfig_references
from .materialization import resolve_kubeconfig_objects
from .resolution import resolve_kubeconfig

logger = logging.getLogger(__name__)

STAGE_DISCOVERY = "discovery"
STAGE_FETCH = "fetch"
STAGE_RESOLUTION = "resolution"


@dataclass
class ResolverOptions:
    """Dependencies and settings of a `Resolver`.

    Attributes:
        client: Client used to fetch referenced objects
        scheme: Type registry used to build placeholders
        settings: Fetch and telemetry settings, defaults when omitted
    """

    client: ObjectClient | None = None
    scheme: Scheme | None = None
    settings: ResolverSettingsModel | None = None

    def validate(self) -> None:
        """Raise `ValidationError` unless all required dependencies are set."""
        if self.client is None:
            raise ValidationError("client needs to be set")
        if self.scheme is None:
            raise ValidationError("scheme needs to be set")


class Resolver:
    """Resolves Kubeconfig descriptors into kubeconfig documents."""

    def __init__(self, options: ResolverOptions):
        options.validate()

        self.client: ObjectClient = options.client  # type: ignore[assignment]
        self.scheme: Scheme = options.scheme  # type: ignore[assignment]
        self.settings = options.settings or ResolverSettingsModel()
        self.multigetter = MultiGetter(
            self.client,
            max_concurrency=self.settings.fetch.max_concurrency,
            timeout=self.settings.fetch.timeout_seconds,
        )

    @classmethod
    def from_settings_file(
        cls, client: ObjectClient, config_path: str | Path | None = None
    ) -> "Resolver":
        """Create a resolver using the default scheme and settings loaded from YAML.

        Tracing is configured from the settings when it is enabled there.

        Args:
            client: Client used to fetch referenced objects
            config_path: Path to the settings file. If None, the default
                        locations are searched.
        """
        settings = load_resolver_settings(Path(config_path) if config_path else None)
        if settings.telemetry.enabled:
            configure_telemetry(settings.telemetry)
        return cls(ResolverOptions(client=client, scheme=default_scheme(), settings=settings))

    def object_references(self, kubeconfig: Kubeconfig) -> ObjectStore:
        """Return a store holding a placeholder for every object the descriptor references.

        Performs no I/O. Useful to pre-warm caches or check access before a
        full resolution.

        Raises:
            DiscoveryError: If the referenced objects cannot be determined
        """
        store = ObjectStore(self.scheme)
        try:
            create_kubeconfig_references(store, kubeconfig)
        except (StoreError, SchemeError) as e:
            raise DiscoveryError(str(e), stage=STAGE_DISCOVERY) from e
        return store

    async def resolve(self, kubeconfig: Kubeconfig) -> clientcmd.Config:
        """Resolve a descriptor into a kubeconfig with all credentials inlined.

        Raises:
            DiscoveryError: If the referenced objects cannot be determined
            FetchError: If any referenced object is missing or inaccessible
            SelectorError: If a fetched object lacks the selected data key
        """
        name = f"{kubeconfig.namespace}/{kubeconfig.metadata.name}"
        with traced_operation("kubeconfig.resolve", {"kubeconfig.name": name}) as span:
            with traced_operation("kubeconfig.discover"):
                try:
                    store = self.object_references(kubeconfig)
                except ResolutionError as e:
                    raise e.with_context(
                        "error determining referenced objects", STAGE_DISCOVERY
                    ) from e
            span.set_attribute("kubeconfig.references", len(store))

            with traced_operation(
                "kubeconfig.fetch", {"kubeconfig.references": len(store)}, kind=SpanKind.CLIENT
            ):
                try:
                    await resolve_kubeconfig_objects(store, self.multigetter)
                except FetchError as e:
                    raise e.with_context("error fetching referenced objects", STAGE_FETCH) from e

            with traced_operation("kubeconfig.resolve_fields"):
                try:
                    config = resolve_kubeconfig(store, kubeconfig)
                except SelectorError as e:
                    raise e.with_context(
                        "error resolving descriptor to config", STAGE_RESOLUTION
                    ) from e

        logger.info(
            f"Resolved kubeconfig {name}: {len(config.clusters)} clusters, "
            f"{len(config.auth_infos)} auth infos, {len(config.contexts)} contexts, "
            f"{len(store)} referenced secrets"
        )
        return config


def new_resolver(options: ResolverOptions) -> Resolver:
    """Validate ``options`` and create a resolver."""
    return Resolver(options)
