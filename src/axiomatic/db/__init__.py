# ABOUTME: Public API for the Axiomatic library database layer.
# ABOUTME: Exports connection management, the per-table stores, and record types.

from axiomatic.db.connection import DEFAULT_DB_PATH, LibraryStore, open_library
from axiomatic.db.directories import DirectoryRegistry
from axiomatic.db.mapping import BookTagMapping, Directory, NoteImage, NoteRecord, Tag
from axiomatic.db.notes import NoteStore
from axiomatic.db.tags import TAG_PALETTE, TagStore

__all__ = [
    "DEFAULT_DB_PATH",
    "TAG_PALETTE",
    "BookTagMapping",
    "Directory",
    "DirectoryRegistry",
    "LibraryStore",
    "NoteImage",
    "NoteRecord",
    "NoteStore",
    "Tag",
    "TagStore",
    "open_library",
]
