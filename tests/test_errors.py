"""Tests for resolution error types."""

from kubeconfig_resolver.api import ObjectKey
from kubeconfig_resolver.errors import (
    FetchError,
    ResolutionError,
    SelectorError,
    ValidationError,
)


def test_with_context_keeps_type_and_attributes():
    key = ObjectKey("shoot", "tok")
    error = FetchError("could not get 1 of 1 objects", stage="fetch", failures={key: "not found"})

    wrapped = error.with_context("error fetching referenced objects", "resolve")

    assert isinstance(wrapped, FetchError)
    assert wrapped is not error
    assert str(wrapped) == "error fetching referenced objects: could not get 1 of 1 objects"
    assert wrapped.stage == "resolve"
    assert wrapped.failures == {key: "not found"}
    assert str(error) == "could not get 1 of 1 objects"
    assert error.stage == "fetch"


def test_with_context_without_stage_keeps_stage():
    error = SelectorError("no data", stage="resolution", key=ObjectKey("a", "b"), data_key="ca.crt")

    wrapped = error.with_context("outer")

    assert wrapped.stage == "resolution"
    assert wrapped.data_key == "ca.crt"
    assert str(wrapped) == "outer: no data"


def test_validation_error_is_value_error():
    error = ValidationError("client needs to be set")

    assert isinstance(error, ResolutionError)
    assert isinstance(error, ValueError)
    assert error.stage is None
