"""Presentation data computed on demand from a database."""

from .adjust import adjust_member_external_users, count_member_definitions
from .completion import (
    DEFAULT_THRESHOLD_TOO_MANY_ENTITIES,
    CompletionResult,
    completion_priority,
    entities_for_completion,
)
from .dirs import all_dirs_and_parent_dirs, parent_dirs
from .ranking import group_by_file, top_k_entities_per_file

__all__ = [
    "adjust_member_external_users",
    "count_member_definitions",
    "CompletionResult",
    "DEFAULT_THRESHOLD_TOO_MANY_ENTITIES",
    "completion_priority",
    "entities_for_completion",
    "all_dirs_and_parent_dirs",
    "parent_dirs",
    "group_by_file",
    "top_k_entities_per_file",
]
