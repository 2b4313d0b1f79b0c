"""Entity model: kinds, positions and entity records."""

from .entities import (
    START_OF_FILE,
    Entity,
    EntityId,
    Position,
    check_entity_id,
    make_entity,
)
from .database import Database, PathCount, empty_database
from .kinds import MEMBER_KINDS, SYNTHETIC_KINDS, EntityKind

__all__ = [
    "Database",
    "PathCount",
    "empty_database",
    "Entity",
    "EntityId",
    "EntityKind",
    "Position",
    "START_OF_FILE",
    "MEMBER_KINDS",
    "SYNTHETIC_KINDS",
    "check_entity_id",
    "make_entity",
]
