"""Shared pieces of the entity codecs.

JSON values are the plain Python objects produced by ``json.loads``:
dict, list, str, int, float, bool and None.
"""

from __future__ import annotations

from typing import Any, Protocol

from semdb.exceptions import MalformedRecord
from semdb.model import Entity, EntityId

JsonValue = Any


class EntityCodec(Protocol):
    """Encodes one entity to a JSON value and back."""

    name: str

    def encode(self, entity: Entity) -> JsonValue: ...

    def decode(self, value: JsonValue) -> Entity: ...


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def expect_int(value: Any, what: str, record: Any) -> int:
    if not is_int(value):
        raise MalformedRecord(f"{what} must be an integer, got {type(value).__name__}", record)
    return value


def expect_str(value: Any, what: str, record: Any) -> str:
    if not isinstance(value, str):
        raise MalformedRecord(f"{what} must be a string, got {type(value).__name__}", record)
    return value


def encode_ids(ids: list[EntityId]) -> list[int]:
    return [int(i) for i in ids]


def decode_ids(value: Any, record: Any) -> list[EntityId]:
    if not isinstance(value, list):
        raise MalformedRecord("example uses must be an array", record)
    return [EntityId(expect_int(v, "example use id", record)) for v in value]
