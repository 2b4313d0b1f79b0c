"""Translate token highlighting tags into entity kinds.

Analyzers that build a database walk tokens already classified for syntax
highlighting. A tag says what a token is (a function, a field, ...) and
whether it is a definition or a use. Only the categories naming something
that can be an entity have a counterpart here.

When a use is seen, looking up its name in the environment can return
several entities of different kinds; :func:`matches_use` filters those back
to the ones of the right kind before their external user count is bumped.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, NamedTuple

from semdb.exceptions import UnclassifiableTag
from semdb.model import Entity, EntityKind


class TagCategory(Enum):
    """Highlighting categories."""

    FUNCTION = "function"
    FUNCTION_DECL = "function_decl"
    GLOBAL = "global"
    CLASS = "class"
    METHOD = "method"
    FIELD = "field"
    STATIC_METHOD = "static_method"
    MACRO = "macro"
    MACRO_VAR = "macro_var"
    MODULE = "module"
    TYPEDEF = "typedef"
    STRUCT_NAME = "struct_name"

    # no entity counterpart
    LOCAL = "local"
    PARAMETER = "parameter"
    CONSTANT = "constant"
    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    PUNCTUATION = "punctuation"


class TagUsage(Enum):
    DEF = "def"
    USE = "use"


class HighlightTag(NamedTuple):
    category: TagCategory
    usage: TagUsage

    def __str__(self) -> str:
        return f"{self.category.value}:{self.usage.value}"


# TODO: map TagCategory.CONSTANT once analyzers emit Constant entities
_DEFINITION_KINDS = {
    TagCategory.FUNCTION: EntityKind.FUNCTION,
    TagCategory.GLOBAL: EntityKind.GLOBAL,
    TagCategory.CLASS: EntityKind.CLASS,
    TagCategory.METHOD: EntityKind.METHOD,
    TagCategory.FIELD: EntityKind.FIELD,
    TagCategory.STATIC_METHOD: EntityKind.STATIC_METHOD,
    TagCategory.MACRO: EntityKind.MACRO,
    TagCategory.MACRO_VAR: EntityKind.MACRO,
    TagCategory.MODULE: EntityKind.MODULE,
    TagCategory.TYPEDEF: EntityKind.TYPE,
}

_USE_KINDS = {
    **_DEFINITION_KINDS,
    TagCategory.STRUCT_NAME: EntityKind.CLASS,
}


def kind_from_definition_tag(tag: HighlightTag) -> EntityKind:
    """Kind of the entity defined at a token tagged ``tag``."""
    # a prototype counts as a function whether seen as def or use
    if tag.category is TagCategory.FUNCTION_DECL:
        return EntityKind.FUNCTION
    if tag.usage is TagUsage.DEF and tag.category in _DEFINITION_KINDS:
        return _DEFINITION_KINDS[tag.category]
    raise UnclassifiableTag(tag, TagUsage.DEF.value)


def kind_from_use_tag(tag: HighlightTag) -> EntityKind:
    """Kind of the entity used at a token tagged ``tag``."""
    if tag.category is TagCategory.FUNCTION_DECL:
        return EntityKind.FUNCTION
    if tag.usage is TagUsage.USE and tag.category in _USE_KINDS:
        return _USE_KINDS[tag.category]
    raise UnclassifiableTag(tag, TagUsage.USE.value)


def matches_use(entity: Entity, tag: HighlightTag) -> bool:
    return entity.kind == kind_from_use_tag(tag)


def filter_matching_uses(candidates: Iterable[Entity], tag: HighlightTag) -> list[Entity]:
    """Keep the candidates a use tagged ``tag`` can refer to."""
    kind = kind_from_use_tag(tag)
    return [e for e in candidates if e.kind == kind]


def definition(category: TagCategory) -> HighlightTag:
    return HighlightTag(category, TagUsage.DEF)


def use(category: TagCategory) -> HighlightTag:
    return HighlightTag(category, TagUsage.USE)
