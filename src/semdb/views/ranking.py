"""Most externally used entities of each file."""

from __future__ import annotations

from typing import Iterable

from semdb.model import Entity


def group_by_file(entities: Iterable[Entity]) -> dict[str, list[Entity]]:
    groups: dict[str, list[Entity]] = {}
    for entity in entities:
        groups.setdefault(entity.file, []).append(entity)
    return groups


def top_k_entities_per_file(entities: Iterable[Entity], k: int) -> dict[str, list[Entity]]:
    """Map each file to its ``k`` entities with the most external users.

    Lists are sorted by external users, highest first; entities with equal
    counts keep their order in the input.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return {
        file: sorted(group, key=lambda e: e.external_users, reverse=True)[:k]
        for file, group in group_by_file(entities).items()
    }
