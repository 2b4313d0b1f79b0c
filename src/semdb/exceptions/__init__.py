"""Exception hierarchy for semdb."""

from .base import SemdbError
from .config import ConfigurationError, InvalidConfigError
from .index import InvalidEntityReference, RootMismatch, UnclassifiableTag
from .storage import (
    DatabaseIOError,
    MalformedDatabase,
    MalformedRecord,
    StorageError,
    UnknownEntityKind,
)

__all__ = [
    "SemdbError",
    "StorageError",
    "DatabaseIOError",
    "MalformedDatabase",
    "MalformedRecord",
    "UnknownEntityKind",
    "InvalidEntityReference",
    "RootMismatch",
    "UnclassifiableTag",
    "ConfigurationError",
    "InvalidConfigError",
]
