"""Combine databases built by different analyzers.

Entities reference each other through their index in the entity list, so
concatenating two entity lists requires shifting every reference held by
the second database by the length of the first one.
"""

from __future__ import annotations

from typing import Callable, Sequence, Union

from semdb.exceptions import RootMismatch
from semdb.logging_config import get_logger
from semdb.model import Database, Entity, PathCount

logger = get_logger(__name__)

# Either a fixed answer or a callback asked with (root_a, root_b)
RootPolicy = Union[bool, Callable[[str, str], bool]]


def merge_databases(a: Database, b: Database, allow_root_mismatch: RootPolicy = False) -> Database:
    """Merge ``b`` after ``a`` into a new database.

    - root: ``a.root``
    - dirs: counts summed per path
    - files: ``a.files`` followed by ``b.files``; duplicated paths are kept
    - entities: ``a``'s unchanged, then ``b``'s with example uses shifted

    Neither input is modified.

    Raises:
        RootMismatch: the roots differ and ``allow_root_mismatch`` is false
            or the callback declined.
    """
    if a.root != b.root:
        logger.warning("merge_databases: the root differs, %s != %s", a.root, b.root)
        if callable(allow_root_mismatch):
            proceed = allow_root_mismatch(a.root, b.root)
        else:
            proceed = allow_root_mismatch
        if not proceed:
            raise RootMismatch(a.root, b.root)

    offset = len(a.entities)

    return Database(
        root=a.root,
        dirs=sum_path_counts(a.dirs, b.dirs),
        files=list(a.files) + list(b.files),
        entities=[_copy(e) for e in a.entities] + shift_entities(b.entities, offset),
    )


def merge_all(dbs: Sequence[Database], allow_root_mismatch: RootPolicy = False) -> Database:
    """Fold ``merge_databases`` over ``dbs`` from left to right."""
    if not dbs:
        raise ValueError("merge_all needs at least one database")
    merged = dbs[0]
    for db in dbs[1:]:
        merged = merge_databases(merged, db, allow_root_mismatch)
    return merged


def shift_entities(entities: Sequence[Entity], offset: int) -> list[Entity]:
    """Copies of ``entities`` relocated ``offset`` positions further in the list."""
    return [e.remapped(lambda i: i + offset) for e in entities]


def sum_path_counts(*groups: Sequence[PathCount]) -> list[PathCount]:
    """Union of path counters, adding the counts of paths seen more than once."""
    totals: dict[str, int] = {}
    for group in groups:
        for path, count in group:
            totals[path] = totals.get(path, 0) + count
    return list(totals.items())


def _copy(entity: Entity) -> Entity:
    return entity.remapped(lambda i: i)
