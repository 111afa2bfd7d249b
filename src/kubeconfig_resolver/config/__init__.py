"""Resolver settings and manifest loading."""

from .loader import SETTINGS_ENV_VAR, load_kubeconfig_file, load_resolver_settings
from .models import FetchConfigModel, ResolverSettingsModel, TelemetryConfigModel

__all__ = [
    "FetchConfigModel",
    "TelemetryConfigModel",
    "ResolverSettingsModel",
    "load_resolver_settings",
    "load_kubeconfig_file",
    "SETTINGS_ENV_VAR",
]
