# ABOUTME: SQLite connection management for the Axiomatic library database.
# ABOUTME: Opens or creates the database and serializes all access behind one lock.

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from axiomatic.db.schema import SCHEMA
from axiomatic.errors import StoreError

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".axiomatic" / "axiomatic.db"


def open_library(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the Axiomatic library database.

    Creates the database file and parent directories if they don't exist and
    applies the schema (every statement is CREATE ... IF NOT EXISTS). Sets WAL
    journal mode, enables foreign keys, and uses sqlite3.Row for dict-like
    column access.

    The connection may be used from any thread; callers must serialize access
    themselves (see LibraryStore).

    Args:
        path: Path to the database file. Defaults to ~/.axiomatic/axiomatic.db.

    Returns:
        A configured sqlite3.Connection.

    Raises:
        StoreError: If the database cannot be opened or initialized.
    """
    db_path = path or DEFAULT_DB_PATH
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA foreign_keys=ON")
        conn.executescript(SCHEMA)
    except (OSError, sqlite3.Error) as exc:
        raise StoreError(str(exc)) from exc

    logger.debug("Opened library database at %s", db_path)
    return conn


class LibraryStore:
    """The single shared connection plus the lock that guards it.

    Every store operation runs inside locked(), so at most one statement
    sequence is in flight at any instant regardless of how many threads call in.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.Lock()

    @classmethod
    def open(cls, path: Path | None = None) -> "LibraryStore":
        """Open the database at path (or the default) and wrap it."""
        return cls(open_library(path))

    @contextmanager
    def locked(self) -> Iterator[sqlite3.Connection]:
        """Hold the lock for one logical operation.

        Commits when the block finishes, rolls back if it raises. SQLite
        errors are re-raised as StoreError carrying the SQLite message.
        """
        with self._lock:
            try:
                yield self._conn
                self._conn.commit()
            except sqlite3.Error as exc:
                self._conn.rollback()
                raise StoreError(str(exc)) from exc
            except BaseException:
                self._conn.rollback()
                raise

    def close(self) -> None:
        with self._lock:
            self._conn.close()
