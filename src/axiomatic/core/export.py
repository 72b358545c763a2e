# ABOUTME: Formats all notes of one textbook into a single Markdown-style text blob.
# ABOUTME: Read-only; each page becomes a heading followed by its note content.

from axiomatic.db.mapping import NoteRecord
from axiomatic.db.notes import NoteStore


def format_notes(notes: list[NoteRecord]) -> str:
    """Render notes as '## Page N' sections, in the order given."""
    return "".join(f"## Page {note.page}\n\n{note.content}\n\n" for note in notes)


def export_notes_for_book(notes: NoteStore, slug: str) -> str:
    """Export a textbook's notes ordered by page. Empty string if there are none."""
    return format_notes(notes.list_notes_for_book(slug))
