"""Root of the semdb exception hierarchy.

Every error carries a short ``message`` and a ``details`` mapping of string
values (the offending path, entity index, kind number, ...). ``str()`` joins
them as ``message (key=value, ...)``, which is what the CLI prints.
"""

from typing import Dict, Optional


class SemdbError(Exception):
    """Base exception for all semdb errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"
