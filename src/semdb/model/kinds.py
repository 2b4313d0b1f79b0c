"""Entity kinds and their fixed codings.

The integer table is part of the on-disk compact format. Never renumber an
existing kind; new kinds take the next free integer.
"""

from __future__ import annotations

from enum import Enum

from semdb.exceptions import UnknownEntityKind


class EntityKind(Enum):
    """Kinds of semantic facts stored in a database."""

    FUNCTION = "Function"
    CLASS = "Class"
    MODULE = "Module"
    TYPE = "Type"
    CONSTANT = "Constant"
    GLOBAL = "Global"
    MACRO = "Macro"

    # nested entities
    METHOD = "Method"
    STATIC_METHOD = "StaticMethod"
    FIELD = "Field"

    # completion only
    FILE = "File"
    DIR = "Dir"
    MULTI_DIRS = "MultiDirs"

    @property
    def code(self) -> int:
        """Integer used by the compact encoding."""
        return _KIND_TO_INT[self]

    @property
    def short(self) -> str:
        """One to three character abbreviation for compact display."""
        return _KIND_TO_SHORT[self]

    @property
    def is_synthetic(self) -> bool:
        """True for kinds only produced when building completion lists."""
        return self in SYNTHETIC_KINDS

    @classmethod
    def from_int(cls, value: int) -> EntityKind:
        # bool is an int subclass; True must not decode as Function
        if not isinstance(value, int) or isinstance(value, bool) or value not in _INT_TO_KIND:
            raise UnknownEntityKind(value)
        return _INT_TO_KIND[value]

    @classmethod
    def from_string(cls, value: str) -> EntityKind:
        try:
            return cls(value)
        except ValueError:
            raise UnknownEntityKind(value) from None


_KIND_TO_INT = {
    EntityKind.FUNCTION: 1,
    EntityKind.CLASS: 2,
    EntityKind.MODULE: 3,
    EntityKind.TYPE: 4,
    EntityKind.CONSTANT: 5,
    EntityKind.GLOBAL: 6,
    EntityKind.METHOD: 7,
    EntityKind.STATIC_METHOD: 8,
    EntityKind.FIELD: 9,
    EntityKind.FILE: 10,
    EntityKind.DIR: 11,
    EntityKind.MULTI_DIRS: 12,
    EntityKind.MACRO: 13,
}

_INT_TO_KIND = {code: kind for kind, code in _KIND_TO_INT.items()}

_KIND_TO_SHORT = {
    EntityKind.FUNCTION: "F",
    EntityKind.CLASS: "Cl",
    EntityKind.MODULE: "Mo",
    EntityKind.TYPE: "T",
    EntityKind.CONSTANT: "Co",
    EntityKind.GLOBAL: "G",
    EntityKind.MACRO: "Mc",
    EntityKind.METHOD: "Me",
    EntityKind.STATIC_METHOD: "SM",
    EntityKind.FIELD: "Fld",
    EntityKind.FILE: "Fi",
    EntityKind.DIR: "Di",
    EntityKind.MULTI_DIRS: "Md",
}

SYNTHETIC_KINDS = frozenset({EntityKind.FILE, EntityKind.DIR, EntityKind.MULTI_DIRS})

# Kinds whose external user counts are approximated per name
MEMBER_KINDS = frozenset({EntityKind.METHOD, EntityKind.FIELD})
