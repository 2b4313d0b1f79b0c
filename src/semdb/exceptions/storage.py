"""Storage exceptions: file access and on-disk schema violations."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base import SemdbError


class StorageError(SemdbError):
    """Base class for load/save and decoding errors."""

    pass


class DatabaseIOError(StorageError):
    """Raised when a database file cannot be read or written."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot access database file: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class MalformedDatabase(StorageError):
    """Raised when the top-level document is not a database object."""

    def __init__(self, reason: str, path: Optional[Union[str, Path]] = None):
        details: Dict[str, str] = {"reason": reason}
        if path is not None:
            details["path"] = str(path)
        super().__init__("Malformed database", details=details)
        self.reason = reason
        self.path = path


class MalformedRecord(StorageError):
    """Raised when an entity record does not match its encoding."""

    def __init__(self, reason: str, record: Any = None, index: Optional[int] = None):
        details: Dict[str, str] = {"reason": reason}
        if index is not None:
            details["index"] = str(index)
        if record is not None:
            details["record"] = _preview(record)
        super().__init__("Malformed entity record", details=details)
        self.reason = reason
        self.record = record
        self.index = index


class UnknownEntityKind(StorageError):
    """Raised when an encoded kind is outside the fixed vocabulary."""

    def __init__(self, value: Any, index: Optional[int] = None):
        details: Dict[str, str] = {"value": repr(value)}
        if index is not None:
            details["index"] = str(index)
        super().__init__(f"Unknown entity kind: {value!r}", details=details)
        self.value = value
        self.index = index


def _preview(record: Any, limit: int = 80) -> str:
    text = repr(record)
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text
