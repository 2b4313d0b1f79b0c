"""The database aggregate: root, directory/file counters and the entity list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from semdb.model.entities import Entity, EntityId, check_entity_id

# (path, number of external references)
PathCount = tuple[str, int]


@dataclass
class Database:
    """Semantic facts about one codebase.

    Attributes:
        root:     Common prefix of the analyzed paths, stripped for display.
        dirs:     Directories with their external reference counts. Treated
                  as a mapping keyed by path.
        files:    Files with their external reference counts. May hold the
                  same path twice after a merge.
        entities: The entity list; an entity's id is its index here.
    """

    root: str = ""
    dirs: list[PathCount] = field(default_factory=list)
    files: list[PathCount] = field(default_factory=list)
    entities: list[Entity] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)

    def entity(self, entity_id: int) -> Entity:
        """Entity at ``entity_id``, raising InvalidEntityReference when out of range."""
        return self.entities[check_entity_id(entity_id, len(self.entities))]

    def examples_of(self, entity: Entity) -> list[Entity]:
        """Resolve the example uses of ``entity`` against this database."""
        return [self.entity(i) for i in entity.example_uses]

    def ids(self) -> range:
        return range(len(self.entities))

    def check_references(self) -> None:
        """Verify that every example use points inside the entity list."""
        size = len(self.entities)
        for owner, entity in enumerate(self.entities):
            for entity_id in entity.example_uses:
                check_entity_id(entity_id, size, owner=owner)

    def stripped(self, path: str) -> str:
        """``path`` relative to the root, for display."""
        if self.root and path.startswith(self.root):
            return path[len(self.root):].lstrip("/") or path
        return path


def empty_database() -> Database:
    return Database()
