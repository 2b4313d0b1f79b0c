"""Entities for a search box powered by completion.

Besides the real entities, directories and files are useful things to
complete on, so they are turned into pseudo-entities. People also tend to
spread one component over several directories sharing a leaf name
(``www/lib/`` and ``scripts/lib/``); each such name gets a MultiDirs entity
standing for all of them at once.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from semdb.logging_config import get_logger
from semdb.model import START_OF_FILE, Database, Entity, EntityKind

logger = get_logger(__name__)

DEFAULT_THRESHOLD_TOO_MANY_ENTITIES = 100_000

MULTI_DIRS_SEPARATOR = "|"

PRIORITIES = {
    EntityKind.MULTI_DIRS: 100,
    EntityKind.DIR: 40,
    EntityKind.FILE: 20,
}


@dataclass
class CompletionResult:
    """Completion candidates, best first.

    ``truncated`` is set when the database held more entities than the
    threshold and only directories and files were kept.
    """

    entities: list[Entity] = field(default_factory=list)
    truncated: bool = False

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)

    def __len__(self) -> int:
        return len(self.entities)

    def matching(self, text: str) -> list[Entity]:
        """Candidates whose name contains ``text``, ignoring case."""
        needle = text.lower()
        return [e for e in self.entities if needle in e.name.lower()]


def basename(path: str) -> str:
    return posixpath.basename(path.rstrip("/")) or path


def make_dir_entity(path: str, count: int) -> Entity:
    return Entity(
        kind=EntityKind.DIR,
        name=basename(path) + "/",
        file=path,
        position=START_OF_FILE,
        external_users=count,
    )


def make_file_entity(path: str, count: int) -> Entity:
    return Entity(
        kind=EntityKind.FILE,
        name=basename(path),
        file=path,
        position=START_OF_FILE,
        external_users=count,
    )


def make_multi_dirs_entity(name: str, dirs: Sequence[Entity]) -> Entity:
    # file holds every directory path, not a real path
    return Entity(
        kind=EntityKind.MULTI_DIRS,
        name=name + "//",
        file=MULTI_DIRS_SEPARATOR.join(d.file for d in dirs),
        position=START_OF_FILE,
        external_users=len(dirs),
    )


def multi_dirs_entities(dirs: Sequence[Entity]) -> list[Entity]:
    """One MultiDirs entity per directory name used by more than one directory."""
    by_name: dict[str, list[Entity]] = {}
    for d in dirs:
        by_name.setdefault(d.name, []).append(d)
    return [
        make_multi_dirs_entity(name, group) for name, group in by_name.items() if len(group) > 1
    ]


def completion_priority(entity: Entity) -> int:
    return PRIORITIES.get(entity.kind, entity.external_users)


def entities_for_completion(
    db: Database,
    threshold_too_many_entities: int = DEFAULT_THRESHOLD_TOO_MANY_ENTITIES,
) -> CompletionResult:
    """Directories, files and entities of ``db`` sorted for completion.

    Real entities are listed under their full name when they have one.
    When ``db`` holds more than ``threshold_too_many_entities`` entities
    only directories and files are returned.
    """
    dirs = [make_dir_entity(path, count) for path, count in db.dirs]
    files = [make_file_entity(path, count) for path, count in db.files]

    candidates = multi_dirs_entities(dirs) + dirs + files

    truncated = len(db.entities) > threshold_too_many_entities
    if truncated:
        logger.warning(
            "Too many entities (%d > %d). Completion just for filenames",
            len(db.entities),
            threshold_too_many_entities,
        )
    else:
        candidates.extend(_completion_entity(e) for e in db.entities)

    candidates.sort(key=completion_priority, reverse=True)
    return CompletionResult(entities=candidates, truncated=truncated)


def _completion_entity(entity: Entity) -> Entity:
    # completion searches by suffix, so the full name alone is enough
    return entity.renamed(entity.full_name or entity.name)
