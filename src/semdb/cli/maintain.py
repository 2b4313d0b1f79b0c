"""Commands writing databases: merge, adjust, convert."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from ..exceptions import RootMismatch
from ..merge import merge_all
from ..views import adjust_member_external_users
from . import app
from ._common import console, fail, open_database, state, write_database


def _confirm_root_mismatch(root_a: str, root_b: str) -> bool:
    console.print(
        f"[yellow]Database roots differ:[/yellow] {escape(root_a)} != {escape(root_b)}"
    )
    return typer.confirm("Continue?", default=False)


@app.command()
def merge(
    inputs: List[Path] = typer.Argument(..., help="Databases to merge, in order"),
    output: Path = typer.Option(..., "--output", "-o", help="Merged database file", dir_okay=False),
    force: bool = typer.Option(False, "--force", help="Merge even when roots differ"),
    readable: Optional[bool] = typer.Option(None, "--readable/--compact", help="Output style"),
) -> None:
    """Merge several databases into one, renumbering entity references."""
    if len(inputs) < 2:
        console.print("[red]Error:[/red] need at least two databases to merge")
        raise typer.Exit(1)

    dbs = [open_database(path) for path in inputs]
    policy = force or state.config.allow_root_mismatch or _confirm_root_mismatch
    try:
        merged = merge_all(dbs, allow_root_mismatch=policy)
    except RootMismatch as e:
        raise fail(e)

    write_database(merged, output, readable)
    console.print(
        f"[green]Merged {len(dbs)} databases[/green] into {escape(str(output))} "
        f"({len(merged.entities)} entities)"
    )


@app.command()
def adjust(
    db_path: Optional[Path] = typer.Argument(None, help="Database file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Defaults to DB_PATH"),
) -> None:
    """Divide method/field user counts by their number of same-named definitions."""
    db = open_database(db_path)
    nb_defs = adjust_member_external_users(db.entities)
    shared = sum(1 for n in nb_defs.values() if n > 1)

    target = output or db_path or Path(state.config.db_name)
    write_database(db, target)
    console.print(
        f"[green]Adjusted[/green] {len(nb_defs)} member names ({shared} shared), "
        f"saved to {escape(str(target))}"
    )


@app.command()
def convert(
    db_path: Path = typer.Argument(..., help="Database file"),
    output: Path = typer.Option(..., "--output", "-o", help="Output file", dir_okay=False),
    readable: bool = typer.Option(False, "--readable/--compact", help="Output style"),
) -> None:
    """Re-save a database, pretty-printed or minified."""
    db = open_database(db_path)
    write_database(db, output, readable)
    console.print(f"[green]Saved[/green] {escape(str(output))}")
