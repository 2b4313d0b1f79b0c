"""Shared CLI helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import IndexConfig
from ..exceptions import SemdbError
from ..model import Database
from ..store import load_database, save_database

console = Console()


@dataclass
class CliState:
    config: IndexConfig = field(default_factory=IndexConfig)


state = CliState()


def fail(error: Exception) -> typer.Exit:
    """Print ``error`` and return the Exit to raise."""
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(1)


def resolve_db_path(path: Optional[Path]) -> Path:
    """``path`` or the configured default database name."""
    return path if path is not None else Path(state.config.db_name)


def open_database(path: Optional[Path]) -> Database:
    try:
        return load_database(resolve_db_path(path))
    except SemdbError as e:
        raise fail(e)


def write_database(db: Database, path: Path, readable: Optional[bool] = None) -> None:
    if readable is None:
        readable = state.config.readable_db
    try:
        save_database(db, path, readable=readable)
    except SemdbError as e:
        raise fail(e)
