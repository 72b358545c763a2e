# ABOUTME: The `axiomatic books` command group for discovered PDF textbooks.
# ABOUTME: Lists textbooks across registered directories and renames or deletes files.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from axiomatic.cli.options import db_option, fail, json_option
from axiomatic.core.textbooks import delete_textbook, rename_textbook
from axiomatic.errors import AxiomaticError
from axiomatic.library import Library

console = Console()


@click.group("books")
def books() -> None:
    """List and manage PDF textbooks."""


@books.command("ls")
@db_option
@json_option
@click.option("--tag", "tag_filter", default=None, help="Only show books with this tag name.")
def books_ls(db_path: Path | None, json_output: bool, tag_filter: str | None) -> None:
    """List textbooks found in all registered directories."""
    with Library.open(db_path) as library:
        textbooks = library.list_textbooks()
        book_tags = {m.book_slug: m.tags for m in library.list_book_tags_all()}

    if tag_filter:
        textbooks = [
            book
            for book in textbooks
            if any(t.name == tag_filter for t in book_tags.get(book.slug, []))
        ]

    if json_output:
        click.echo(json_lib.dumps([book.to_dict() for book in textbooks], indent=2))
        return

    if not textbooks:
        console.print("[yellow]No textbooks found.[/yellow]")
        return

    table = Table()
    table.add_column("Slug", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("File")
    table.add_column("Tags", style="cyan")

    for book in textbooks:
        tag_names = ", ".join(t.name for t in book_tags.get(book.slug, []))
        table.add_row(escape(book.slug), escape(book.title), escape(book.file), escape(tag_names))

    console.print(table)
    console.print(f"\n[dim]{len(textbooks)} textbook(s)[/dim]")


@books.command("rename")
@click.argument("full_path")
@click.argument("new_name")
def books_rename(full_path: str, new_name: str) -> None:
    """Rename a textbook file (the .pdf extension is added if missing)."""
    # The slug changes with the filename; notes and tags stay on the old one.
    try:
        new_path = rename_textbook(full_path, new_name)
    except AxiomaticError as exc:
        fail(console, exc)

    console.print(f"Renamed to [bold]{escape(new_path.name)}[/bold].")


@books.command("rm")
@click.argument("full_path")
@click.confirmation_option(prompt="Delete this file from disk?")
def books_rm(full_path: str) -> None:
    """Delete a textbook file from disk."""
    try:
        delete_textbook(full_path)
    except AxiomaticError as exc:
        fail(console, exc)

    console.print(f"Deleted {escape(full_path)}.")
