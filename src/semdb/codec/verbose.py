"""Verbose entity encoding: one JSON object per entity with named fields.

    {"k": "Function", "n": "foo", "fn": "", "f": "a/b.ml",
     "p": [12, 0], "cnt": 3, "u": [4, 7]}

Decoding is strict: the keys must be exactly these, in this order.
"""

from __future__ import annotations

from typing import Any

from semdb.codec.base import (
    JsonValue,
    decode_ids,
    encode_ids,
    expect_int,
    expect_str,
)
from semdb.exceptions import MalformedRecord
from semdb.model import Entity, EntityKind, Position

FIELDS = ("k", "n", "fn", "f", "p", "cnt", "u")


class VerboseCodec:
    """Named-field entity codec, mostly for debugging dumps."""

    name = "verbose"

    def encode(self, entity: Entity) -> dict[str, JsonValue]:
        return {
            "k": entity.kind.value,
            "n": entity.name,
            "fn": entity.full_name,
            "f": entity.file,
            "p": [entity.position.line, entity.position.column],
            # external users, not the kind
            "cnt": entity.external_users,
            "u": encode_ids(entity.example_uses),
        }

    def decode(self, value: JsonValue) -> Entity:
        if not isinstance(value, dict):
            raise MalformedRecord("verbose entity must be an object", value)
        if tuple(value.keys()) != FIELDS:
            raise MalformedRecord(
                f"expected fields {list(FIELDS)}, got {list(value.keys())}", value
            )
        return Entity(
            kind=EntityKind.from_string(expect_str(value["k"], "kind", value)),
            name=expect_str(value["n"], "name", value),
            full_name=expect_str(value["fn"], "full name", value),
            file=expect_str(value["f"], "file", value),
            position=_decode_position(value["p"], value),
            external_users=expect_int(value["cnt"], "external users", value),
            example_uses=decode_ids(value["u"], value),
        )


def _decode_position(value: Any, record: Any) -> Position:
    if not isinstance(value, list) or len(value) != 2:
        raise MalformedRecord("position must be a [line, column] array", record)
    return Position(
        expect_int(value[0], "line", record),
        expect_int(value[1], "column", record),
    )
