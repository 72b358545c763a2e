# ABOUTME: CRUD operations for the registry of watched textbook directories.
# ABOUTME: Validates paths on registration and re-reads rows by assigned id.

import logging
import sqlite3
from pathlib import Path

from axiomatic.db.connection import LibraryStore
from axiomatic.db.mapping import Directory, row_to_directory
from axiomatic.errors import DuplicatePathError, InvalidDirectoryError, StoreError

logger = logging.getLogger(__name__)

_SELECT_DIRECTORY = "SELECT id, path, label, added_at FROM directories"


def label_for_path(path: str) -> str:
    """Display label for a directory: its final path segment, else the raw path."""
    return Path(path).name or path


class DirectoryRegistry:
    """Typed CRUD for the directories table."""

    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def list_directories(self) -> list[Directory]:
        """Return all registered directories, oldest first."""
        with self._store.locked() as conn:
            cursor = conn.execute(f"{_SELECT_DIRECTORY} ORDER BY added_at, id")
            return [row_to_directory(row) for row in cursor.fetchall()]

    def get_directory(self, directory_id: int) -> Directory | None:
        """Retrieve a directory by its row ID."""
        with self._store.locked() as conn:
            cursor = conn.execute(f"{_SELECT_DIRECTORY} WHERE id = ?", (directory_id,))
            row = cursor.fetchone()
            return row_to_directory(row) if row else None

    def add_directory(self, path: str) -> Directory:
        """Register a directory for textbook discovery.

        Args:
            path: Filesystem path of an existing directory. Stored as given.

        Returns:
            The newly created Directory, re-read by its assigned id.

        Raises:
            InvalidDirectoryError: If path is not an existing directory.
            DuplicatePathError: If path is already registered.
        """
        if not Path(path).is_dir():
            raise InvalidDirectoryError(f"Not a directory: {path}")

        label = label_for_path(path)

        with self._store.locked() as conn:
            try:
                cursor = conn.execute(
                    "INSERT INTO directories (path, label) VALUES (?, ?)",
                    (path, label),
                )
            except sqlite3.IntegrityError as exc:
                raise DuplicatePathError(str(exc)) from exc
            new_id = cursor.lastrowid

        added = self.get_directory(new_id)
        if added is None:
            raise StoreError(f"Directory {new_id} vanished after insert")

        logger.info("Registered directory %s as %r", path, label)
        return added

    def remove_directory(self, directory_id: int) -> None:
        """Unregister a directory. No-op if the id does not exist.

        Notes and tags keyed to textbooks under the directory are left in place.
        """
        with self._store.locked() as conn:
            cursor = conn.execute("DELETE FROM directories WHERE id = ?", (directory_id,))

        if cursor.rowcount:
            logger.info("Removed directory %d", directory_id)
