# ABOUTME: Shared Click options and error reporting for Axiomatic CLI commands.
# ABOUTME: Provides the --db/--json decorators and the red-message-and-exit helper.

from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from axiomatic.db.connection import DEFAULT_DB_PATH

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="AXIOMATIC_DB",
    help=f"Path to library database (default: {DEFAULT_DB_PATH})",
)

json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output results as JSON.",
)


def fail(console: Console, exc: Exception) -> NoReturn:
    """Print an error in red and exit with status 1."""
    console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
    raise SystemExit(1) from exc
