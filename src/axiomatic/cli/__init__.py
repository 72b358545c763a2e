# ABOUTME: CLI package for Axiomatic, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from axiomatic.cli.commands import books_cmd, dir_cmd, note_cmd, tag_cmd


@click.group()
@click.version_option(package_name="axiomatic")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Axiomatic - organize PDF textbooks with per-page notes and tags."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


cli.add_command(dir_cmd.directory)
cli.add_command(books_cmd.books)
cli.add_command(note_cmd.note)
cli.add_command(tag_cmd.tag)
