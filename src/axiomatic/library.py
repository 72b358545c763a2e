# ABOUTME: Request-level facade over the Axiomatic backend, one method per request.
# ABOUTME: Wires the directory, note, and tag stores to a single locked connection.

from pathlib import Path
from types import TracebackType

from axiomatic.core import export, migrate, textbooks
from axiomatic.core.textbooks import Textbook
from axiomatic.db.connection import LibraryStore
from axiomatic.db.directories import DirectoryRegistry
from axiomatic.db.mapping import BookTagMapping, Directory, NoteImage, NoteRecord, Tag
from axiomatic.db.notes import NoteStore
from axiomatic.db.tags import TagStore


class Library:
    """Everything a front end can ask of the backend.

    All stores share one LibraryStore, so every store access across the
    application is serialized by the same lock.
    """

    def __init__(self, store: LibraryStore) -> None:
        self._store = store
        self.directories = DirectoryRegistry(store)
        self.notes = NoteStore(store)
        self.tags = TagStore(store)

    @classmethod
    def open(cls, path: Path | None = None) -> "Library":
        """Open (creating if needed) the library database.

        Raises:
            StoreError: If the database cannot be initialized.
        """
        return cls(LibraryStore.open(path))

    def close(self) -> None:
        self._store.close()

    def __enter__(self) -> "Library":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # --- Directories ---

    def list_directories(self) -> list[Directory]:
        return self.directories.list_directories()

    def add_directory(self, path: str) -> Directory:
        return self.directories.add_directory(path)

    def remove_directory(self, directory_id: int) -> None:
        self.directories.remove_directory(directory_id)

    # --- Textbooks ---

    def list_textbooks(self) -> list[Textbook]:
        return textbooks.list_textbooks(self.directories)

    def rename_textbook(self, full_path: str, new_name: str) -> None:
        textbooks.rename_textbook(full_path, new_name)

    def delete_textbook(self, full_path: str) -> None:
        textbooks.delete_textbook(full_path)

    def read_file_bytes(self, path: str) -> bytes:
        return textbooks.read_file_bytes(path)

    # --- Notes ---

    def get_note(self, slug: str, page: int) -> NoteRecord | None:
        return self.notes.get_note(slug, page)

    def set_note(self, slug: str, page: int, content: str, format: str) -> None:
        self.notes.set_note(slug, page, content, format)

    def list_notes_for_book(self, slug: str) -> list[NoteRecord]:
        return self.notes.list_notes_for_book(slug)

    def delete_note(self, slug: str, page: int) -> None:
        self.notes.delete_note(slug, page)

    def save_note_image(self, slug: str, page: int, filename: str, data: bytes) -> int:
        return self.notes.save_note_image(slug, page, filename, data)

    def get_note_image(self, image_id: int) -> bytes:
        return self.notes.get_note_image(image_id)

    def list_note_images(self, slug: str, page: int) -> list[NoteImage]:
        return self.notes.list_note_images(slug, page)

    def export_notes_for_book(self, slug: str) -> str:
        return export.export_notes_for_book(self.notes, slug)

    def migrate_notes_from_json(self, json_blob: str) -> int:
        return migrate.migrate_notes_from_json(json_blob, self.notes)

    # --- Tags ---

    def list_tags(self) -> list[Tag]:
        return self.tags.list_tags()

    def create_tag(self, name: str, color: str | None = None) -> Tag:
        return self.tags.create_tag(name, color)

    def delete_tag(self, tag_id: int) -> None:
        self.tags.delete_tag(tag_id)

    def update_tag_color(self, tag_id: int, color: str) -> None:
        self.tags.update_tag_color(tag_id, color)

    def tag_book(self, book_slug: str, tag_id: int) -> None:
        self.tags.tag_book(book_slug, tag_id)

    def untag_book(self, book_slug: str, tag_id: int) -> None:
        self.tags.untag_book(book_slug, tag_id)

    def list_book_tags_all(self) -> list[BookTagMapping]:
        return self.tags.list_book_tags_all()
