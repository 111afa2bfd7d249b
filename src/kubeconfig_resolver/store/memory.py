"""
In-memory object store.

The store holds one object per ``(kind, namespace, name)``. It is used as the
reference set of a single resolution: discovery inserts placeholders, the
bulk fetch fills them in, and field resolution reads them back.

`create` refuses duplicates so that callers decide what a duplicate means.
Reference discovery treats it as success:

```python
with ignore_already_exists():
    store.create(Secret.placeholder("shoot", "apiserver-ca"))
```
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from kubeconfig_resolver.api.secret import SECRET_KIND, ObjectKey

from .scheme import Scheme, SchemeError

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for object store errors."""


class AlreadyExistsError(StoreError):
    """Raised when creating an object whose key is already present."""

    def __init__(self, kind: str, key: ObjectKey):
        super().__init__(f"{kind} {key} already exists")
        self.kind = kind
        self.key = key


class NotFoundError(StoreError, LookupError):
    """Raised when an object is not present."""

    def __init__(self, kind: str, key: ObjectKey):
        super().__init__(f"{kind} {key} not found")
        self.kind = kind
        self.key = key


class UnknownTypeError(StoreError, TypeError):
    """Raised when storing an object whose type the scheme does not know."""


@contextmanager
def ignore_already_exists() -> Iterator[None]:
    """Treat `AlreadyExistsError` as success inside the block."""
    try:
        yield
    except AlreadyExistsError as e:
        logger.debug(f"Ignoring duplicate: {e}")


class ObjectStore:
    """Insertion-ordered store of objects keyed by kind, namespace and name."""

    def __init__(self, scheme: Scheme):
        self.scheme = scheme
        self._objects: dict[tuple[str, ObjectKey], Any] = {}

    def create(self, obj: Any) -> None:
        """Store ``obj``.

        Raises:
            UnknownTypeError: If the object's type is not registered
            AlreadyExistsError: If an object with the same kind and key exists
        """
        try:
            kind = self.scheme.kind_for(obj)
        except SchemeError as e:
            raise UnknownTypeError(str(e)) from e

        entry = (kind, obj.key)
        if entry in self._objects:
            raise AlreadyExistsError(kind, obj.key)
        self._objects[entry] = obj

    def get(self, namespace: str, name: str, kind: str = SECRET_KIND) -> Any:
        """Return the stored object.

        Raises:
            NotFoundError: If no such object is stored
        """
        key = ObjectKey(namespace, name)
        try:
            return self._objects[(kind, key)]
        except KeyError:
            raise NotFoundError(kind, key) from None

    def objects(self) -> list[Any]:
        """Return all stored objects in insertion order."""
        return list(self._objects.values())

    def keys(self) -> list[tuple[str, ObjectKey]]:
        """Return ``(kind, key)`` of all stored objects in insertion order."""
        return list(self._objects.keys())

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ObjectKey):
            item = (SECRET_KIND, item)
        return item in self._objects
