"""Database-level encoding (compact entities only).

    {"root": "/src/",
     "dirs": [["/src/lib", 12], ...],
     "files": [["/src/lib/a.ml", 3], ...],
     "entities": [[1, "foo", "", "/src/lib/a.ml", 12, 0, 3, []], ...]}
"""

from __future__ import annotations

from typing import Any

from semdb.codec.base import JsonValue, is_int
from semdb.codec.compact import CompactCodec
from semdb.exceptions import (
    InvalidEntityReference,
    MalformedDatabase,
    MalformedRecord,
    UnknownEntityKind,
)
from semdb.model import Database, PathCount

TOP_LEVEL_KEYS = ("root", "dirs", "files", "entities")

_entity_codec = CompactCodec()


def encode_database(db: Database) -> dict[str, JsonValue]:
    return {
        "root": db.root,
        "dirs": [[path, count] for path, count in db.dirs],
        "files": [[path, count] for path, count in db.files],
        "entities": [_entity_codec.encode(e) for e in db.entities],
    }


def decode_database(value: JsonValue) -> Database:
    """Rebuild a database from its JSON value.

    Raises:
        MalformedDatabase: top-level shape is wrong, or an example use
            points outside the entity list.
        MalformedRecord: an entity array is wrong; ``index`` is its position.
        UnknownEntityKind: an entity has an unknown kind number; ``index``
            is its position.
    """
    if not isinstance(value, dict):
        raise MalformedDatabase(f"expected an object, got {type(value).__name__}")
    if tuple(value.keys()) != TOP_LEVEL_KEYS:
        raise MalformedDatabase(
            f"expected keys {list(TOP_LEVEL_KEYS)}, got {list(value.keys())}"
        )

    root = value["root"]
    if not isinstance(root, str):
        raise MalformedDatabase("root must be a string")
    for key in ("dirs", "files", "entities"):
        if not isinstance(value[key], list):
            raise MalformedDatabase(f"{key} must be an array")

    entities = []
    for index, record in enumerate(value["entities"]):
        try:
            entities.append(_entity_codec.decode(record))
        except MalformedRecord as e:
            raise MalformedRecord(e.reason, record, index=index) from e
        except UnknownEntityKind as e:
            raise UnknownEntityKind(e.value, index=index) from e

    db = Database(
        root=root,
        dirs=_decode_path_counts(value["dirs"], "dirs"),
        files=_decode_path_counts(value["files"], "files"),
        entities=entities,
    )
    try:
        db.check_references()
    except InvalidEntityReference as e:
        raise MalformedDatabase(f"dangling example use: {e}") from e
    return db


def _decode_path_counts(items: list[Any], key: str) -> list[PathCount]:
    pairs = []
    for item in items:
        if (
            not isinstance(item, list)
            or len(item) != 2
            or not isinstance(item[0], str)
            or not is_int(item[1])
        ):
            raise MalformedDatabase(f"{key} entries must be [path, count] pairs, got {item!r}")
        pairs.append((item[0], item[1]))
    return pairs
