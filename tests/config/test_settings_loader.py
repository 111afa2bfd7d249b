"""Tests for loading resolver settings and descriptor manifests."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from kubeconfig_resolver.config import (
    SETTINGS_ENV_VAR,
    ResolverSettingsModel,
    load_kubeconfig_file,
    load_resolver_settings,
)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run with no settings file in any default location."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
    return tmp_path


def test_load_explicit_file(fixtures_path):
    settings = load_resolver_settings(fixtures_path / "kubeconfig" / "settings.yaml")

    assert settings.fetch.max_concurrency == 2
    assert settings.fetch.timeout_seconds == 15
    assert settings.telemetry.enabled is False


def test_defaults_without_settings_file(isolated_cwd):
    assert load_resolver_settings() == ResolverSettingsModel()


def test_env_var_selects_file(isolated_cwd):
    settings_file = isolated_cwd / "custom.yaml"
    settings_file.write_text("config:\n  fetch:\n    max_concurrency: 5\n")

    with patch.dict(os.environ, {SETTINGS_ENV_VAR: str(settings_file)}):
        settings = load_resolver_settings()

    assert settings.fetch.max_concurrency == 5
    assert settings.fetch.timeout_seconds is None


def test_cwd_config_is_found(isolated_cwd):
    (isolated_cwd / "config.yaml").write_text("config:\n  fetch:\n    timeout_seconds: 3\n")

    assert load_resolver_settings().fetch.timeout_seconds == 3


def test_empty_file_uses_defaults(tmp_path):
    settings_file = tmp_path / "empty.yaml"
    settings_file.write_text("")

    assert load_resolver_settings(settings_file) == ResolverSettingsModel()


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_resolver_settings(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "config: [unclosed",
        "- just\n- a list\n",
        "config:\n  fetch:\n    max_concurrency: 0\n",
        "config:\n  fetch:\n    retries: 3\n",
    ],
)
def test_invalid_settings(tmp_path, content):
    settings_file = tmp_path / "bad.yaml"
    settings_file.write_text(content)

    with pytest.raises(ValueError):
        load_resolver_settings(settings_file)


def test_load_kubeconfig_file(fixtures_path):
    kubeconfig = load_kubeconfig_file(fixtures_path / "kubeconfig" / "admin-kubeconfig.yaml")

    assert kubeconfig.namespace == "shoot"
    assert [c.name for c in kubeconfig.spec.clusters] == ["shoot"]
    assert [a.name for a in kubeconfig.spec.auth_infos] == ["admin", "viewer"]
    assert kubeconfig.spec.current_context == "admin"


def test_load_kubeconfig_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_kubeconfig_file(tmp_path / "missing.yaml")

    not_a_mapping = tmp_path / "list.yaml"
    not_a_mapping.write_text("- a\n")
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_kubeconfig_file(not_a_mapping)

    no_metadata = tmp_path / "invalid.yaml"
    no_metadata.write_text("kind: Kubeconfig\nspec: {}\n")
    with pytest.raises(ValueError, match="Invalid Kubeconfig manifest"):
        load_kubeconfig_file(no_metadata)
