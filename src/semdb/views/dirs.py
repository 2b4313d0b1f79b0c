"""Directory helpers for building the ``dirs`` list of a database.

Analyzers usually infer directories from the files they analyzed, which only
yields directories directly holding such files. A search box should still
propose ``flib/herald`` when only ``flib/herald/lib/foo.php`` was analyzed.
"""

from __future__ import annotations

from typing import Iterable


def parent_dirs(relative_dir: str) -> list[str]:
    """``a/b/c`` -> ``["a", "a/b", "a/b/c"]``."""
    parts = [p for p in relative_dir.split("/") if p and p != "."]
    return ["/".join(parts[: i + 1]) for i in range(len(parts))]


def all_dirs_and_parent_dirs(dirs: Iterable[str]) -> list[str]:
    """Every directory in ``dirs`` plus all its ancestors, deduplicated and sorted."""
    found: set[str] = set()
    for d in dirs:
        found.update(parent_dirs(d))
    return sorted(found)
