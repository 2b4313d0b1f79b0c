"""Database summary command."""

from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from . import app
from ._common import console, open_database


@app.command()
def info(
    db_path: Optional[Path] = typer.Argument(None, help="Database file (default: PFFF_DB.db)"),
) -> None:
    """Show root, sizes and entity counts per kind."""
    db = open_database(db_path)

    console.print("[bold cyan]Database summary[/bold cyan]")
    console.print(f"Root: [blue]{escape(db.root) or '-'}[/blue]")
    console.print(f"Dirs: [yellow]{len(db.dirs)}[/yellow]")
    console.print(f"Files: [yellow]{len(db.files)}[/yellow]")
    console.print(f"Entities: [yellow]{len(db.entities)}[/yellow]")

    kinds = Counter(e.kind for e in db.entities)
    if not kinds:
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Kind")
    table.add_column("Abbrev")
    table.add_column("Count", justify="right")
    for kind, count in kinds.most_common():
        table.add_row(kind.value, kind.short, str(count))
    console.print(table)
