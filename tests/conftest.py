# ABOUTME: Shared pytest fixtures for Axiomatic tests.
# ABOUTME: Provides a temporary library database and a sample textbook directory.

from pathlib import Path

import pytest

from axiomatic.db.connection import LibraryStore
from axiomatic.library import Library


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a temporary library database (parent created on open)."""
    return tmp_path / "data" / "axiomatic.db"


@pytest.fixture
def store(db_path: Path):
    """A LibraryStore backed by a temporary database."""
    store = LibraryStore.open(db_path)
    yield store
    store.close()


@pytest.fixture
def library(db_path: Path):
    """A Library backed by a temporary database."""
    with Library.open(db_path) as library:
        yield library


@pytest.fixture
def textbook_dir(tmp_path: Path) -> Path:
    """Create a directory of textbooks.

    Layout:
        Math/
            Intro to Algebra.pdf
            calc_101.pdf
            notes.txt
            archive/
                old.pdf
    """
    root = tmp_path / "Math"
    root.mkdir()
    (root / "Intro to Algebra.pdf").write_bytes(b"%PDF-1.4 algebra")
    (root / "calc_101.pdf").write_bytes(b"%PDF-1.4 calc")
    (root / "notes.txt").write_text("not a textbook")
    nested = root / "archive"
    nested.mkdir()
    (nested / "old.pdf").write_bytes(b"%PDF-1.4 old")
    return root
