"""
Type registry for objects held by the object store.

The scheme maps object kinds to the model classes that represent them. The
resolver only needs it to build empty typed placeholders before fetching:

```python
scheme = Scheme()
scheme.add_known_type("Secret", Secret)

placeholder = scheme.new_object("Secret", "shoot", "apiserver-ca")
```
"""

import logging
from typing import Any

from kubeconfig_resolver.api.secret import SECRET_KIND, Secret

logger = logging.getLogger(__name__)


class SchemeError(Exception):
    """Raised for unknown kinds or conflicting registrations."""


class Scheme:
    """Registry of known object kinds."""

    def __init__(self) -> None:
        self._types: dict[str, type[Any]] = {}
        self._kinds: dict[type[Any], str] = {}

    def add_known_type(self, kind: str, cls: type[Any]) -> None:
        """Register ``cls`` as the model for ``kind``.

        Registering the same pair twice is a no-op; registering a different
        class for a known kind is an error.
        """
        existing = self._types.get(kind)
        if existing is not None and existing is not cls:
            raise SchemeError(
                f"Kind {kind} is already registered to {existing.__name__}, "
                f"cannot register {cls.__name__}"
            )
        self._types[kind] = cls
        self._kinds[cls] = kind
        logger.debug(f"Registered kind {kind}: {cls.__name__}")

    def is_registered(self, kind: str) -> bool:
        return kind in self._types

    def known_kinds(self) -> list[str]:
        """List all registered kinds."""
        return list(self._types.keys())

    def kind_for(self, obj: Any) -> str:
        """Return the registered kind of ``obj``."""
        kind = self._kinds.get(type(obj))
        if kind is None:
            raise SchemeError(f"Type {type(obj).__name__} is not registered in scheme")
        return kind

    def new_object(self, kind: str, namespace: str, name: str) -> Any:
        """Create an empty placeholder of the given kind."""
        cls = self._types.get(kind)
        if cls is None:
            raise SchemeError(f"Kind {kind} is not registered in scheme")
        return cls.placeholder(namespace, name)


def default_scheme() -> Scheme:
    """Return a scheme with the core kinds used by kubeconfig resolution registered."""
    scheme = Scheme()
    scheme.add_known_type(SECRET_KIND, Secret)
    return scheme
