"""Load and save databases as JSON files.

The file holds the compact encoding (see :mod:`semdb.codec.database`). It is
written once and never updated in place, so any number of processes can read
it concurrently. Writers must not target a file that is being read.

Usage:
    from semdb.store import load_database, save_database

    db = load_database("PFFF_DB.db")
    save_database(db, "PFFF_DB.db", readable=True)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from semdb.codec import decode_database, encode_database
from semdb.exceptions import DatabaseIOError, MalformedDatabase
from semdb.logging_config import get_logger
from semdb.model import Database, empty_database

logger = get_logger(__name__)

DEFAULT_DB_NAME = "PFFF_DB.db"

PathLike = Union[str, Path]


def load_database(path: PathLike) -> Database:
    """Read a database file.

    Raises:
        DatabaseIOError: file missing, unreadable or not UTF-8.
        MalformedDatabase: content is not JSON, or not a database object.
        MalformedRecord: an entity record does not match the compact encoding.
        UnknownEntityKind: an entity has an unknown kind number.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DatabaseIOError(path, str(e)) from e

    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integers and runaway nesting
        raise MalformedDatabase(f"invalid JSON: {e}", path=path) from e

    try:
        db = decode_database(value)
    except MalformedDatabase as e:
        if e.path is None:
            raise MalformedDatabase(e.reason, path=path) from e
        raise

    logger.debug("Loaded %d entities from %s", len(db.entities), path)
    return db


def save_database(db: Database, path: PathLike, readable: bool = False) -> None:
    """Write ``db`` to ``path``.

    With ``readable``, each top-level field and each dir, file and entity
    goes on its own line; nested values stay on one line.
    """
    path = Path(path)
    value = encode_database(db)
    if readable:
        text = dumps_readable(value)
    else:
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)

    try:
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise DatabaseIOError(path, str(e)) from e

    logger.debug("Saved %d entities to %s (readable=%s)", len(db.entities), path, readable)


def dumps_readable(value: dict) -> str:
    """Pretty-print one level deep."""
    fields = []
    for key, item in value.items():
        encoded_key = json.dumps(key)
        if isinstance(item, list) and item:
            rows = ",\n".join(f"    {_dumps_flat(row)}" for row in item)
            fields.append(f"  {encoded_key}: [\n{rows}\n  ]")
        else:
            fields.append(f"  {encoded_key}: {_dumps_flat(item)}")
    return "{\n" + ",\n".join(fields) + "\n}"


def _dumps_flat(value: object) -> str:
    return json.dumps(value, separators=(", ", ": "), ensure_ascii=False)


__all__ = [
    "DEFAULT_DB_NAME",
    "Database",
    "empty_database",
    "load_database",
    "save_database",
    "dumps_readable",
]
