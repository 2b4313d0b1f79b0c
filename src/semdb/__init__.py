"""
semdb - a generic database of semantic facts about a codebase.

Language-specific analyzers record functions, classes, fields, files and
directories together with how often each is used from outside its file.
Visualizers and completion front ends load the result and query it.

Entities reference each other by their index in the database's entity list.
"""

__version__ = "0.1.0"

from .classify import kind_from_definition_tag, kind_from_use_tag, matches_use
from .merge import merge_databases
from .model import Database, Entity, EntityId, EntityKind, Position, empty_database
from .store import DEFAULT_DB_NAME, load_database, save_database
from .views import (
    adjust_member_external_users,
    entities_for_completion,
    top_k_entities_per_file,
)

__all__ = [
    "Database",
    "Entity",
    "EntityId",
    "EntityKind",
    "Position",
    "DEFAULT_DB_NAME",
    "empty_database",
    "load_database",
    "save_database",
    "merge_databases",
    "top_k_entities_per_file",
    "entities_for_completion",
    "adjust_member_external_users",
    "kind_from_definition_tag",
    "kind_from_use_tag",
    "matches_use",
]
