"""Tests for the in-memory object store."""

import pytest

from kubeconfig_resolver.api import ObjectKey, Secret
from kubeconfig_resolver.store import (
    AlreadyExistsError,
    NotFoundError,
    ObjectStore,
    Scheme,
    UnknownTypeError,
    ignore_already_exists,
)


@pytest.fixture
def store(scheme):
    return ObjectStore(scheme)


def test_create_and_get(store):
    secret = Secret.placeholder("shoot", "ca")

    store.create(secret)

    assert store.get("shoot", "ca") is secret
    assert store.objects() == [secret]
    assert ObjectKey("shoot", "ca") in store


def test_create_duplicate_raises(store):
    store.create(Secret.placeholder("shoot", "ca"))

    with pytest.raises(AlreadyExistsError) as exc_info:
        store.create(Secret.placeholder("shoot", "ca"))

    assert exc_info.value.key == ObjectKey("shoot", "ca")
    assert len(store) == 1


def test_ignore_already_exists_keeps_first_entry(store):
    first = Secret.placeholder("shoot", "ca")
    store.create(first)

    with ignore_already_exists():
        store.create(Secret.placeholder("shoot", "ca"))

    assert store.objects() == [first]
    assert store.get("shoot", "ca") is first


def test_ignore_already_exists_does_not_swallow_other_errors():
    with pytest.raises(NotFoundError):
        with ignore_already_exists():
            raise NotFoundError("Secret", ObjectKey("shoot", "ca"))


def test_same_name_in_different_namespaces(store):
    store.create(Secret.placeholder("a", "ca"))
    store.create(Secret.placeholder("b", "ca"))

    assert store.keys() == [("Secret", ObjectKey("a", "ca")), ("Secret", ObjectKey("b", "ca"))]


def test_get_missing(store):
    with pytest.raises(NotFoundError, match="Secret shoot/ca not found"):
        store.get("shoot", "ca")


def test_objects_keep_insertion_order(store):
    for name in ["z", "a", "m"]:
        store.create(Secret.placeholder("shoot", name))

    assert [obj.key.name for obj in store.objects()] == ["z", "a", "m"]


def test_unregistered_type_is_rejected():
    store = ObjectStore(Scheme())

    with pytest.raises(UnknownTypeError):
        store.create(Secret.placeholder("shoot", "ca"))
