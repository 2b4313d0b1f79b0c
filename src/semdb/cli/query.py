"""Read-only query commands: top entities per file and completion."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..views import entities_for_completion, top_k_entities_per_file
from . import app
from ._common import console, open_database, state


@app.command()
def top(
    db_path: Optional[Path] = typer.Argument(None, help="Database file"),
    k: Optional[int] = typer.Option(None, "--k", "-k", min=0, help="Entities per file"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Only show this file"),
) -> None:
    """Show the most externally used entities of each file."""
    db = open_database(db_path)
    per_file = top_k_entities_per_file(db.entities, state.config.top_k if k is None else k)

    if file is not None:
        per_file = {file: per_file.get(file, [])}

    for path, entities in per_file.items():
        console.print(f"[bold]{escape(db.stripped(path))}[/bold]")
        for e in entities:
            console.print(
                f"  [dim]{e.kind.short:>3}[/dim] {escape(e.display_name)} "
                f"[yellow]{e.external_users}[/yellow]"
            )


@app.command()
def complete(
    text: str = typer.Argument(..., help="Text to complete"),
    db_path: Optional[Path] = typer.Option(None, "--db", "-d", help="Database file"),
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="Maximum candidates"),
) -> None:
    """List completion candidates containing TEXT, best first."""
    db = open_database(db_path)
    result = entities_for_completion(db, state.config.completion_threshold)
    if result.truncated:
        console.print("[yellow]Too many entities: completing files and directories only[/yellow]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Kind")
    table.add_column("Name")
    table.add_column("Location")
    table.add_column("Users", justify="right")
    for e in result.matching(text)[:limit]:
        table.add_row(
            e.kind.short, escape(e.name), escape(db.stripped(e.file)), str(e.external_users)
        )
    console.print(table)
