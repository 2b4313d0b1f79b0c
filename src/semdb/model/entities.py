"""Entity model for semdb.

An entity is one semantic fact about a codebase element. Entities live in
the ``entities`` list of a :class:`~semdb.store.Database` and reference each
other by position in that list:

    entities[0]  Function  parse_file      example_uses=[2]
    entities[1]  Class     Parser
    entities[2]  Function  test_parse_file

Identity fields are fixed at creation. Analyzers compute all entities in a
first pass and adjust the two counters (external users, example uses) in
later passes, so only those change, through the methods below.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, NamedTuple, NewType

from semdb.exceptions import InvalidEntityReference
from semdb.model.kinds import EntityKind

EntityId = NewType("EntityId", int)

_IDENTITY_FIELDS = frozenset({"kind", "name", "full_name", "file", "position"})


class Position(NamedTuple):
    """Location of a definition: 1-based line, 0-based column."""

    line: int
    column: int


START_OF_FILE = Position(1, 0)


def check_entity_id(entity_id: int, size: int, owner: int | None = None) -> EntityId:
    """Return ``entity_id`` as an EntityId if it indexes a list of ``size`` entities."""
    if isinstance(entity_id, bool) or not isinstance(entity_id, int):
        raise InvalidEntityReference(entity_id, size, owner)
    if not 0 <= entity_id < size:
        raise InvalidEntityReference(entity_id, size, owner)
    return EntityId(entity_id)


@dataclass
class Entity:
    """One indexed semantic fact.

    Attributes:
        kind:           What the entity is; never reassigned.
        name:           Short display name.
        full_name:      Qualified name, empty when identical to ``name``.
        file:           File defining the entity.
        position:       Definition position.
        external_users: Approximate number of uses from outside the file.
        example_uses:   Ids of entities that are good examples of use
                        (typically unit tests calling this function).
    """

    kind: EntityKind
    name: str
    full_name: str = ""
    file: str = ""
    position: Position = START_OF_FILE
    external_users: int = 0
    example_uses: list[EntityId] = field(default_factory=list)

    def __setattr__(self, key: str, value: object) -> None:
        if key in _IDENTITY_FIELDS and key in self.__dict__:
            raise AttributeError(f"Entity.{key} cannot be reassigned")
        super().__setattr__(key, value)

    @property
    def display_name(self) -> str:
        """Fully qualified name when known, short name otherwise."""
        return self.full_name or self.name

    # -- counters --------------------------------------------------------

    def increment_external_users(self, n: int = 1) -> None:
        self.external_users += n

    def divide_external_users(self, n: int) -> None:
        """Integer-divide the external user count by ``n`` (n >= 1)."""
        if n < 1:
            raise ValueError(f"divisor must be at least 1, got {n}")
        self.external_users //= n

    def set_external_users(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"external user count must be non-negative, got {n}")
        self.external_users = n

    def add_example_use(self, entity_id: int) -> None:
        if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id < 0:
            raise InvalidEntityReference(entity_id)
        self.example_uses.append(EntityId(entity_id))

    # -- derived copies --------------------------------------------------

    def renamed(self, name: str) -> Entity:
        """Copy of this entity under another display name."""
        return replace(self, name=name, example_uses=list(self.example_uses))

    def remapped(self, remap: Callable[[int], int]) -> Entity:
        """Copy of this entity with every example use passed through ``remap``."""
        return replace(self, example_uses=[EntityId(remap(i)) for i in self.example_uses])


def make_entity(
    kind: EntityKind,
    name: str,
    file: str,
    line: int = 1,
    column: int = 0,
    full_name: str = "",
    external_users: int = 0,
    example_uses: Iterable[int] = (),
) -> Entity:
    """Convenience constructor used by analyzers and tests."""
    return Entity(
        kind=kind,
        name=name,
        full_name=full_name,
        file=file,
        position=Position(line, column),
        external_users=external_users,
        example_uses=[EntityId(i) for i in example_uses],
    )
