# ABOUTME: The `axiomatic tag` command group for managing colored textbook tags.
# ABOUTME: Creates, recolors, and deletes tags and attaches them to textbook slugs.

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


@click.group("tag")
def tag() -> None:
    """Manage textbook tags."""


@tag.command("ls")
@db_option
@json_option
def tag_ls(db_path: Path | None, json_output: bool) -> None:
    """List all tags."""
    with Library.open(db_path) as library:
        tags = library.list_tags()

    if json_output:
        click.echo(json_lib.dumps([t.to_dict() for t in tags], indent=2))
        return

    if not tags:
        console.print("[yellow]No tags in the library.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Tag", style="cyan")
    table.add_column("Color")

    for t in tags:
        table.add_row(str(t.id), escape(t.name), escape(t.color))

    console.print(table)


@tag.command("create")
@click.argument("name")
@click.option("--color", default=None, help="Display color, e.g. '#268bd2'.")
@db_option
def tag_create(name: str, color: str | None, db_path: Path | None) -> None:
    """Create a tag."""
    with Library.open(db_path) as library:
        try:
            created = library.create_tag(name, color)
        except AxiomaticError as exc:
            fail(console, exc)

    console.print(f"Created tag [cyan]{escape(created.name)}[/cyan] (id {created.id}).")


@tag.command("rm")
@click.argument("tag_id", type=int)
@db_option
def tag_rm(tag_id: int, db_path: Path | None) -> None:
    """Delete a tag and remove it from every textbook."""
    with Library.open(db_path) as library:
        library.delete_tag(tag_id)

    console.print(f"Deleted tag {tag_id}.")


@tag.command("color")
@click.argument("tag_id", type=int)
@click.argument("color")
@db_option
def tag_color(tag_id: int, color: str, db_path: Path | None) -> None:
    """Change a tag's color."""
    with Library.open(db_path) as library:
        library.update_tag_color(tag_id, color)

    console.print(f"Tag {tag_id} is now {escape(color)}.")


@tag.command("add")
@click.argument("slug")
@click.argument("tag_id", type=int)
@db_option
def tag_add(slug: str, tag_id: int, db_path: Path | None) -> None:
    """Tag a textbook by slug."""
    with Library.open(db_path) as library:
        try:
            library.tag_book(slug, tag_id)
        except AxiomaticError as exc:
            fail(console, exc)

    console.print(f"Tagged [bold]{escape(slug)}[/bold] with tag {tag_id}.")


@tag.command("untag")
@click.argument("slug")
@click.argument("tag_id", type=int)
@db_option
def tag_untag(slug: str, tag_id: int, db_path: Path | None) -> None:
    """Remove a tag from a textbook."""
    with Library.open(db_path) as library:
        library.untag_book(slug, tag_id)

    console.print(f"Removed tag {tag_id} from [bold]{escape(slug)}[/bold].")


@tag.command("books")
@db_option
@json_option
def tag_books(db_path: Path | None, json_output: bool) -> None:
    """Show the tags attached to each textbook."""
    with Library.open(db_path) as library:
        mappings = library.list_book_tags_all()

    if json_output:
        click.echo(json_lib.dumps([m.to_dict() for m in mappings], indent=2))
        return

    if not mappings:
        console.print("[yellow]No tagged textbooks.[/yellow]")
        return

    table = Table()
    table.add_column("Slug", style="bold")
    table.add_column("Tags", style="cyan")

    for m in mappings:
        table.add_row(escape(m.book_slug), escape(", ".join(t.name for t in m.tags)))

    console.print(table)
