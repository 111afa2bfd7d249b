"""Tests for the type registry."""

import pytest

from kubeconfig_resolver.api import Secret
from kubeconfig_resolver.store import Scheme, SchemeError, default_scheme


def test_default_scheme_knows_secrets():
    scheme = default_scheme()

    assert scheme.is_registered("Secret")
    assert scheme.known_kinds() == ["Secret"]


def test_new_object_builds_empty_placeholder():
    placeholder = default_scheme().new_object("Secret", "shoot", "ca")

    assert isinstance(placeholder, Secret)
    assert placeholder.metadata.name == "ca"
    assert placeholder.metadata.namespace == "shoot"
    assert placeholder.data == {}


def test_kind_for():
    assert default_scheme().kind_for(Secret.placeholder("shoot", "ca")) == "Secret"

    with pytest.raises(SchemeError, match="not registered"):
        Scheme().kind_for(Secret.placeholder("shoot", "ca"))


def test_unknown_kind():
    with pytest.raises(SchemeError, match="Kind ConfigMap is not registered"):
        default_scheme().new_object("ConfigMap", "shoot", "settings")


def test_register_twice_is_noop_but_conflicts_fail():
    class OtherSecret(Secret):
        pass

    scheme = default_scheme()
    scheme.add_known_type("Secret", Secret)

    with pytest.raises(SchemeError, match="already registered"):
        scheme.add_known_type("Secret", OtherSecret)
