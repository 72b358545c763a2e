# ABOUTME: The `axiomatic dir` command group for managing watched directories.
# ABOUTME: Provides ls, add, and rm subcommands over the directory registry.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from axiomatic.cli.options import db_option, fail, json_option
from axiomatic.errors import AxiomaticError
from axiomatic.library import Library

console = Console()


@click.group("dir")
def directory() -> None:
    """Manage the directories scanned for textbooks."""


@directory.command("ls")
@db_option
@json_option
def dir_ls(db_path: Path | None, json_output: bool) -> None:
    """List registered directories."""
    with Library.open(db_path) as library:
        directories = library.list_directories()

    if json_output:
        click.echo(json_lib.dumps([d.to_dict() for d in directories], indent=2))
        return

    if not directories:
        console.print("[yellow]No directories registered.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Label", style="bold")
    table.add_column("Path")
    table.add_column("Added", style="dim")

    for d in directories:
        table.add_row(str(d.id), escape(d.label), escape(d.path), d.added_at)

    console.print(table)


@directory.command("add")
@click.argument("path", type=click.Path(path_type=Path))
@db_option
def dir_add(path: Path, db_path: Path | None) -> None:
    """Register a directory to scan for PDF textbooks."""
    with Library.open(db_path) as library:
        try:
            added = library.add_directory(str(path.expanduser().absolute()))
        except AxiomaticError as exc:
            fail(console, exc)

    console.print(f"Added [bold]{escape(added.label)}[/bold] (id {added.id}).")


@directory.command("rm")
@click.argument("directory_id", type=int)
@db_option
def dir_rm(directory_id: int, db_path: Path | None) -> None:
    """Unregister a directory. Its notes and tags are kept."""
    with Library.open(db_path) as library:
        library.remove_directory(directory_id)

    console.print(f"Removed directory {directory_id}.")
