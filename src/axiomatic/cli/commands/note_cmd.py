# ABOUTME: The `axiomatic note` command group for per-page textbook notes.
# ABOUTME: Reads, writes, exports, and imports notes and their embedded images.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from axiomatic.cli.options import db_option, fail, json_option
from axiomatic.db.notes import HTML_FORMAT
from axiomatic.errors import AxiomaticError
from axiomatic.library import Library

console = Console()


@click.group("note")
def note() -> None:
    """Manage per-page notes."""


@note.command("get")
@click.argument("slug")
@click.argument("page", type=int)
@db_option
@json_option
def note_get(slug: str, page: int, db_path: Path | None, json_output: bool) -> None:
    """Show the note on one page of a textbook."""
    with Library.open(db_path) as library:
        record = library.get_note(slug, page)

    if json_output:
        click.echo(json_lib.dumps(record.to_dict() if record else None, indent=2))
        return

    if record is None:
        console.print(f"[yellow]No note on page {page} of {escape(slug)}.[/yellow]")
        return

    click.echo(record.content)


@note.command("set")
@click.argument("slug")
@click.argument("page", type=int)
@click.argument("content")
@click.option("--format", "note_format", default=HTML_FORMAT, help="Content format tag.")
@db_option
def note_set(slug: str, page: int, content: str, note_format: str, db_path: Path | None) -> None:
    """Write a note. Empty CONTENT deletes the note."""
    with Library.open(db_path) as library:
        library.set_note(slug, page, content, note_format)

    if content:
        console.print(f"Saved note on page {page} of [bold]{escape(slug)}[/bold].")
    else:
        console.print(f"Cleared note on page {page} of [bold]{escape(slug)}[/bold].")


@note.command("ls")
@click.argument("slug")
@db_option
@json_option
def note_ls(slug: str, db_path: Path | None, json_output: bool) -> None:
    """List every note for a textbook, by page."""
    with Library.open(db_path) as library:
        notes = library.list_notes_for_book(slug)

    if json_output:
        click.echo(json_lib.dumps([n.to_dict() for n in notes], indent=2))
        return

    if not notes:
        console.print(f"[yellow]No notes for {escape(slug)}.[/yellow]")
        return

    table = Table()
    table.add_column("Page", justify="right", style="bold")
    table.add_column("Format", style="dim")
    table.add_column("Updated", style="dim")
    table.add_column("Content")

    for n in notes:
        preview = n.content if len(n.content) <= 60 else n.content[:57] + "..."
        table.add_row(str(n.page), escape(n.format), n.updated_at, escape(preview))

    console.print(table)


@note.command("rm")
@click.argument("slug")
@click.argument("page", type=int)
@db_option
def note_rm(slug: str, page: int, db_path: Path | None) -> None:
    """Delete the note on one page."""
    with Library.open(db_path) as library:
        library.delete_note(slug, page)

    console.print(f"Deleted note on page {page} of [bold]{escape(slug)}[/bold].")


@note.command("export")
@click.argument("slug")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to a file instead of stdout.",
)
@db_option
def note_export(slug: str, output_path: Path | None, db_path: Path | None) -> None:
    """Export all notes for a textbook as one Markdown document."""
    with Library.open(db_path) as library:
        text = library.export_notes_for_book(slug)

    if output_path is None:
        click.echo(text, nl=False)
        return

    output_path.write_text(text, encoding="utf-8")
    console.print(
        f"Exported notes for [bold]{escape(slug)}[/bold] to {escape(str(output_path))}."
    )


@note.command("migrate")
@click.argument(
    "json_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@db_option
def note_migrate(json_file: Path, db_path: Path | None) -> None:
    """Import notes from a legacy JSON export ({"slug:page": "<p>...</p>"})."""
    blob = json_file.read_text(encoding="utf-8")
    with Library.open(db_path) as library:
        try:
            count = library.migrate_notes_from_json(blob)
        except AxiomaticError as exc:
            fail(console, exc)

    console.print(f"[green]{count} note(s) imported.[/green]")


@note.command("image-add")
@click.argument("slug")
@click.argument("page", type=int)
@click.argument(
    "image_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@db_option
def note_image_add(slug: str, page: int, image_file: Path, db_path: Path | None) -> None:
    """Attach an image to a note. Re-adding a filename replaces its data."""
    with Library.open(db_path) as library:
        image_id = library.save_note_image(slug, page, image_file.name, image_file.read_bytes())

    console.print(f"Saved [bold]{escape(image_file.name)}[/bold] as image {image_id}.")


@note.command("image-get")
@click.argument("image_id", type=int)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="File to write the image bytes to.",
)
@db_option
def note_image_get(image_id: int, output_path: Path, db_path: Path | None) -> None:
    """Write a stored image to a file."""
    with Library.open(db_path) as library:
        try:
            data = library.get_note_image(image_id)
        except AxiomaticError as exc:
            fail(console, exc)

    output_path.write_bytes(data)
    console.print(f"Wrote {len(data)} bytes to {escape(str(output_path))}.")


@note.command("images")
@click.argument("slug")
@click.argument("page", type=int)
@db_option
@json_option
def note_images(slug: str, page: int, db_path: Path | None, json_output: bool) -> None:
    """List images attached to one note."""
    with Library.open(db_path) as library:
        images = library.list_note_images(slug, page)

    if json_output:
        click.echo(json_lib.dumps([image.to_dict() for image in images], indent=2))
        return

    if not images:
        console.print(f"[yellow]No images on page {page} of {escape(slug)}.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Filename", style="bold")
    table.add_column("Size", justify="right")
    table.add_column("Created", style="dim")

    for image in images:
        table.add_row(str(image.id), escape(image.filename), str(len(image.data)), image.created_at)

    console.print(table)
