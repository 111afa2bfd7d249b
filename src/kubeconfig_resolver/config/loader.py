"""Loaders for resolver settings and Kubeconfig descriptor manifests.

Settings are read from a YAML file with a top-level ``config`` section.
Descriptors are read from Kubernetes manifests in YAML.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubeconfig_resolver.api.descriptor import Kubeconfig

from .models import ResolverSettingsModel

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "KUBECONFIG_RESOLVER_CONFIG"


def _default_settings_path() -> Path | None:
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidates = [Path.home() / ".kubeconfig-resolver" / "config.yaml", Path.cwd() / "config.yaml"]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def _load_yaml(path: Path) -> Any:
    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {path}: {e}") from e


def load_resolver_settings(config_path: Path | None = None) -> ResolverSettingsModel:
    """Load resolver settings from a YAML file.

    Args:
        config_path: Optional path to the settings file.
                    If not provided, looks for:
                    1. KUBECONFIG_RESOLVER_CONFIG environment variable
                    2. ~/.kubeconfig-resolver/config.yaml
                    3. ./config.yaml

    Returns:
        ResolverSettingsModel with resolver settings

    Raises:
        FileNotFoundError: If an explicitly given settings file doesn't exist
        ValueError: If the settings are invalid
    """
    if config_path is None:
        config_path = _default_settings_path()
        if config_path is None:
            logger.info("No resolver settings file found, using default settings")
            return ResolverSettingsModel()

    if not config_path.exists():
        raise FileNotFoundError(f"Resolver settings file not found at {config_path}")

    logger.debug(f"Loading resolver settings from: {config_path}")
    raw_config = _load_yaml(config_path)

    if not raw_config:
        logger.info("Empty resolver settings file, using default settings")
        return ResolverSettingsModel()

    if not isinstance(raw_config, dict):
        raise ValueError(f"Resolver settings file {config_path} must contain a mapping")

    try:
        settings = ResolverSettingsModel.model_validate(raw_config.get("config") or {})
    except ValidationError as e:
        raise ValueError(f"Invalid resolver settings: {e}") from e

    logger.debug(f"Loaded resolver settings: {settings}")
    return settings


def load_kubeconfig_file(path: str | Path) -> Kubeconfig:
    """Parse a Kubeconfig descriptor manifest.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid YAML or not a Kubeconfig manifest
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Kubeconfig manifest not found: {path}")

    manifest = _load_yaml(path)
    if not isinstance(manifest, dict):
        raise ValueError(f"Kubeconfig manifest {path} must contain a mapping")

    try:
        return Kubeconfig.model_validate(manifest)
    except ValidationError as e:
        raise ValueError(f"Invalid Kubeconfig manifest {path}: {e}") from e
