"""kubeconfig-resolver - materialize Kubeconfig descriptors into kubeconfig files.

A Kubeconfig descriptor lists clusters, auth infos and contexts whose
certificates, keys, tokens and passwords are references to Secrets. The
resolver fetches every referenced Secret in one bulk operation and produces
a self-contained kubeconfig.

## Key Modules

- `kubeconfig_resolver.kubeconfig`: `Resolver` and the resolution stages
- `kubeconfig_resolver.api`: descriptor, Secret and kubeconfig models
- `kubeconfig_resolver.store`: per-resolution object store and type registry
- `kubeconfig_resolver.client`: object clients and the bulk fetcher
- `kubeconfig_resolver.config`: settings and manifest loading
- `kubeconfig_resolver.telemetry`: OpenTelemetry tracing wrapper

## Quick Example

```python
from kubeconfig_resolver import Resolver, load_kubeconfig_file
from kubeconfig_resolver.client import KubernetesObjectClient

kubeconfig = load_kubeconfig_file("admin-kubeconfig.yaml")
resolver = Resolver.from_settings_file(KubernetesObjectClient.from_kubeconfig())

config = await resolver.resolve(kubeconfig)
print(config.to_yaml())
```
"""

from .api import Kubeconfig
from .api.clientcmd import Config
from .config import ResolverSettingsModel, load_kubeconfig_file, load_resolver_settings
from .errors import (
    DiscoveryError,
    FetchError,
    ResolutionError,
    SelectorError,
    ValidationError,
)
from .kubeconfig import Resolver, ResolverOptions, new_resolver
from .store import ObjectStore, Scheme, default_scheme
from .version import PACKAGE_NAME, PACKAGE_VERSION, get_package_info

__all__ = [
    "Resolver",
    "ResolverOptions",
    "new_resolver",
    "Kubeconfig",
    "Config",
    "ObjectStore",
    "Scheme",
    "default_scheme",
    "ResolverSettingsModel",
    "load_resolver_settings",
    "load_kubeconfig_file",
    "ResolutionError",
    "ValidationError",
    "DiscoveryError",
    "FetchError",
    "SelectorError",
    "PACKAGE_NAME",
    "PACKAGE_VERSION",
    "get_package_info",
]
