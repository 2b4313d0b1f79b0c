"""CLI entry point: registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..config import load_config
from ..exceptions import SemdbError
from ..logging_config import setup_logging
from ._common import console, state

app = typer.Typer(
    name="semdb",
    help="semdb - inspect, merge and query code entity databases",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"semdb {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (TOML)", dir_okay=False
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Load configuration and logging shared by every command."""
    try:
        state.config = load_config(config_file=config, verbose=verbose, quiet=quiet)
    except SemdbError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    setup_logging(state.config.verbosity)


# Import subcommands to register them
from .info import info as _info  # noqa: F401, E402
from .query import complete as _complete, top as _top  # noqa: F401, E402
from .maintain import adjust as _adjust, convert as _convert, merge as _merge  # noqa: F401, E402
