"""Correction of external user counts for methods and fields.

Light analyzers often count uses of a method by name only, without knowing
the class of the receiver. When three classes define ``run``, every call to
``run`` is then credited to all three. Dividing each count by the number of
same-named definitions compensates for this. It is an approximation, and
applying it twice divides twice: run it once per analysis pass.
"""

from __future__ import annotations

from typing import Sequence

from semdb.logging_config import get_logger
from semdb.model import MEMBER_KINDS, Entity

logger = get_logger(__name__)


def count_member_definitions(entities: Sequence[Entity]) -> dict[str, int]:
    """Number of method/field definitions per name."""
    counts: dict[str, int] = {}
    for e in entities:
        if e.kind in MEMBER_KINDS:
            counts[e.name] = counts.get(e.name, 0) + 1
    return counts


def adjust_member_external_users(entities: Sequence[Entity]) -> dict[str, int]:
    """Divide method and field counts by their number of same-named definitions.

    Mutates ``entities`` in place and returns the per-name definition counts.
    """
    nb_defs = count_member_definitions(entities)

    for e in entities:
        if e.kind not in MEMBER_KINDS:
            continue
        n = nb_defs[e.name]
        if n > 1:
            logger.debug("Adjusting: %s (%d definitions)", e.display_name, n)
        e.divide_external_users(n)

    return nb_defs
