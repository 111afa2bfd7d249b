"""Base Pydantic models for kubeconfig-resolver.

This module provides the base model classes that all package models inherit from.
It establishes consistent configuration across all models including:

- Strict field validation (no extra fields allowed)
- Immutable instances for thread safety
- Population by either Python attribute name or Kubernetes wire name

Example:
    >>> from kubeconfig_resolver.models import ResolverBaseModel
    >>> from pydantic import Field
    >>>
    >>> class MyModel(ResolverBaseModel):
    ...     proxy_url: str | None = Field(default=None, alias="proxyURL")
    >>>
    >>> MyModel(proxyURL="http://proxy:3128").proxy_url
    'http://proxy:3128'
"""

from pydantic import BaseModel, ConfigDict


class ResolverBaseModel(BaseModel):
    """Base model for all kubeconfig-resolver Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable for thread safety
    - populate_by_name=True: Accepts snake_case attribute names as well as
      the camelCase aliases used on the wire

    For models that need mutability (e.g., Secret placeholders that are
    filled in place), override ``model_config``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class ManifestModel(ResolverBaseModel):
    """Base model for Kubernetes manifests read from YAML.

    Manifests routinely carry fields this package does not interpret
    (``status``, ``metadata.labels``, ``managedFields``...), so unknown
    fields are ignored instead of rejected.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
