# ABOUTME: Per-page note storage with upsert-or-delete semantics and image attachments.
# ABOUTME: Notes and images are keyed by textbook slug and page, not by foreign key.

from axiomatic.db.connection import LibraryStore
from axiomatic.db.mapping import NoteImage, NoteRecord, row_to_note, row_to_note_image
from axiomatic.errors import ImageNotFoundError

HTML_FORMAT = "html"

_SELECT_NOTE = "SELECT id, slug, page, content, format, updated_at FROM notes"
_NOW = "strftime('%Y-%m-%dT%H:%M:%S', 'now')"


class NoteStore:
    """Typed CRUD for the notes and note_images tables."""

    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def get_note(self, slug: str, page: int) -> NoteRecord | None:
        """Return the note for (slug, page), or None when there is none."""
        with self._store.locked() as conn:
            cursor = conn.execute(
                f"{_SELECT_NOTE} WHERE slug = ? AND page = ?", (slug, page)
            )
            row = cursor.fetchone()
            return row_to_note(row) if row else None

    def set_note(self, slug: str, page: int, content: str, format: str) -> None:
        """Store the note for (slug, page).

        Empty content deletes any existing note instead of storing an empty
        row. Otherwise the note is inserted or its content, format and
        updated_at are replaced.
        """
        with self._store.locked() as conn:
            if not content:
                conn.execute(
                    "DELETE FROM notes WHERE slug = ? AND page = ?", (slug, page)
                )
                return

            conn.execute(
                "INSERT INTO notes (slug, page, content, format, updated_at) "
                f"VALUES (?, ?, ?, ?, {_NOW}) "
                "ON CONFLICT(slug, page) DO UPDATE SET "
                "content = excluded.content, "
                "format = excluded.format, "
                "updated_at = excluded.updated_at",
                (slug, page, content, format),
            )

    def import_note(self, slug: str, page: int, content: str) -> None:
        """Upsert an HTML note from the legacy store.

        New rows get the html format; an existing row keeps its format and only
        has content and updated_at replaced.
        """
        with self._store.locked() as conn:
            conn.execute(
                "INSERT INTO notes (slug, page, content, format, updated_at) "
                f"VALUES (?, ?, ?, ?, {_NOW}) "
                "ON CONFLICT(slug, page) DO UPDATE SET "
                "content = excluded.content, "
                "updated_at = excluded.updated_at",
                (slug, page, content, HTML_FORMAT),
            )

    def list_notes_for_book(self, slug: str) -> list[NoteRecord]:
        """Return every note for a textbook, ordered by page."""
        with self._store.locked() as conn:
            cursor = conn.execute(f"{_SELECT_NOTE} WHERE slug = ? ORDER BY page", (slug,))
            return [row_to_note(row) for row in cursor.fetchall()]

    def delete_note(self, slug: str, page: int) -> None:
        """Delete the note for (slug, page). No-op if absent."""
        with self._store.locked() as conn:
            conn.execute("DELETE FROM notes WHERE slug = ? AND page = ?", (slug, page))

    # --- Image attachments ---

    def save_note_image(self, slug: str, page: int, filename: str, data: bytes) -> int:
        """Store an image for a note, replacing the data of a same-named image.

        Returns:
            The image row id. Re-saving an existing (slug, page, filename)
            returns the id it already had.
        """
        with self._store.locked() as conn:
            cursor = conn.execute(
                "INSERT INTO note_images (note_slug, note_page, filename, data) "
                "VALUES (?, ?, ?, ?) "
                "ON CONFLICT(note_slug, note_page, filename) DO UPDATE SET "
                "data = excluded.data "
                "RETURNING id",
                (slug, page, filename, data),
            )
            (row,) = cursor.fetchall()
            return row[0]

    def get_note_image(self, image_id: int) -> bytes:
        """Return the raw bytes of an image.

        Raises:
            ImageNotFoundError: If no image has this id.
        """
        with self._store.locked() as conn:
            row = conn.execute(
                "SELECT data FROM note_images WHERE id = ?", (image_id,)
            ).fetchone()

        if row is None:
            raise ImageNotFoundError(f"Image {image_id} not found")
        return bytes(row[0])

    def list_note_images(self, slug: str, page: int) -> list[NoteImage]:
        """Return the images attached to one note, oldest first."""
        with self._store.locked() as conn:
            cursor = conn.execute(
                "SELECT * FROM note_images WHERE note_slug = ? AND note_page = ? "
                "ORDER BY id",
                (slug, page),
            )
            return [row_to_note_image(row) for row in cursor.fetchall()]
