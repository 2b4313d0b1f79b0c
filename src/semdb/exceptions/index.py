"""Exceptions about the entity index: references, merges, classification."""

from typing import Any, Optional

from .base import SemdbError


class InvalidEntityReference(SemdbError):
    """Raised when an entity id does not point inside the entity list.

    ``size`` is the length of that list, or None when the id is rejected on
    its own (negative or not an integer).
    """

    def __init__(self, entity_id: Any, size: Optional[int] = None, owner: Optional[int] = None):
        details = {"entity_id": str(entity_id)}
        if size is not None:
            details["size"] = str(size)
        if owner is not None:
            details["referenced_by"] = str(owner)
        super().__init__(f"Invalid entity reference: {entity_id}", details=details)
        self.entity_id = entity_id
        self.size = size
        self.owner = owner


class RootMismatch(SemdbError):
    """Raised when merging databases built from different roots."""

    def __init__(self, root_a: str, root_b: str):
        super().__init__(
            f"Database roots differ: {root_a!r} != {root_b!r}",
            details={"root_a": root_a, "root_b": root_b},
        )
        self.root_a = root_a
        self.root_b = root_b


class UnclassifiableTag(SemdbError):
    """Raised when a highlighting tag has no entity kind counterpart."""

    def __init__(self, tag: Any, usage: str):
        super().__init__(
            f"Tag has no entity kind counterpart: {tag}",
            details={"tag": str(tag), "usage": usage},
        )
        self.tag = tag
        self.usage = usage
