"""Compact entity encoding: one positional JSON array per entity.

    [kind, name, full_name, file, line, column, external_users, example_uses]

This is the persisted form. Any change to the field order breaks every
existing database file.
"""

from __future__ import annotations

from semdb.codec.base import (
    JsonValue,
    decode_ids,
    encode_ids,
    expect_int,
    expect_str,
)
from semdb.exceptions import MalformedRecord
from semdb.model import Entity, EntityKind, Position

ARITY = 8


class CompactCodec:
    """Positional entity codec used for database files."""

    name = "compact"

    def encode(self, entity: Entity) -> list[JsonValue]:
        return [
            entity.kind.code,
            entity.name,
            entity.full_name,
            entity.file,
            entity.position.line,
            entity.position.column,
            entity.external_users,
            encode_ids(entity.example_uses),
        ]

    def decode(self, value: JsonValue) -> Entity:
        if not isinstance(value, list) or len(value) != ARITY:
            raise MalformedRecord(f"compact entity must be an array of {ARITY} items", value)
        kind, name, full_name, file, line, column, count, ids = value
        return Entity(
            kind=EntityKind.from_int(expect_int(kind, "kind", value)),
            name=expect_str(name, "name", value),
            full_name=expect_str(full_name, "full name", value),
            file=expect_str(file, "file", value),
            position=Position(
                expect_int(line, "line", value),
                expect_int(column, "column", value),
            ),
            external_users=expect_int(count, "external users", value),
            example_uses=decode_ids(ids, value),
        )
