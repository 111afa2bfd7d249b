"""Object store and type registry used as the reference set of a resolution."""

from .memory import (
    AlreadyExistsError,
    NotFoundError,
    ObjectStore,
    StoreError,
    UnknownTypeError,
    ignore_already_exists,
)
from .scheme import Scheme, SchemeError, default_scheme

__all__ = [
    "ObjectStore",
    "StoreError",
    "AlreadyExistsError",
    "NotFoundError",
    "UnknownTypeError",
    "ignore_already_exists",
    "Scheme",
    "SchemeError",
    "default_scheme",
]
