# ABOUTME: Unit tests for NoteStore note and image operations.
# ABOUTME: Validates upsert, delete-on-empty, ordering, and image id preservation.

import pytest

from axiomatic.db.connection import LibraryStore
from axiomatic.db.notes import NoteStore
from axiomatic.errors import ImageNotFoundError, NotFoundError


@pytest.fixture()
def notes(store: LibraryStore) -> NoteStore:
    return NoteStore(store)


def _row_count(store: LibraryStore, table: str) -> int:
    with store.locked() as conn:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


class TestGetNote:
    def test_absent_note_is_none(self, notes: NoteStore) -> None:
        """A missing note is reported as absence, not as an error."""
        assert notes.get_note("1_calc", 1) is None

    def test_roundtrip(self, notes: NoteStore) -> None:
        notes.set_note("1_calc", 4, "<p>limits</p>", "html")
        record = notes.get_note("1_calc", 4)
        assert record is not None
        assert record.slug == "1_calc"
        assert record.page == 4
        assert record.content == "<p>limits</p>"
        assert record.format == "html"
        assert record.updated_at


class TestSetNote:
    def test_empty_content_without_prior_note_is_noop(
        self, notes: NoteStore, store: LibraryStore
    ) -> None:
        notes.set_note("1_calc", 1, "", "html")
        assert notes.get_note("1_calc", 1) is None
        assert _row_count(store, "notes") == 0

    def test_empty_content_deletes_prior_note(self, notes: NoteStore) -> None:
        notes.set_note("1_calc", 1, "something", "markdown")
        notes.set_note("1_calc", 1, "", "markdown")
        assert notes.get_note("1_calc", 1) is None

    def test_second_write_updates_single_row(
        self, notes: NoteStore, store: LibraryStore
    ) -> None:
        notes.set_note("1_calc", 2, "first", "html")
        first = notes.get_note("1_calc", 2)
        notes.set_note("1_calc", 2, "second", "markdown")
        second = notes.get_note("1_calc", 2)

        assert first is not None and second is not None
        assert _row_count(store, "notes") == 1
        assert second.id == first.id
        assert second.content == "second"
        assert second.format == "markdown"
        assert second.updated_at >= first.updated_at

    def test_pages_are_independent(self, notes: NoteStore) -> None:
        notes.set_note("1_calc", 1, "one", "html")
        notes.set_note("1_calc", 2, "two", "html")
        notes.set_note("1_calc", 1, "", "html")
        assert notes.get_note("1_calc", 1) is None
        assert notes.get_note("1_calc", 2) is not None


class TestListNotesForBook:
    def test_ordered_by_page(self, notes: NoteStore) -> None:
        notes.set_note("1_calc", 10, "ten", "html")
        notes.set_note("1_calc", 2, "two", "html")
        notes.set_note("1_other", 1, "other book", "html")
        notes.set_note("1_calc", 5, "five", "html")

        pages = [n.page for n in notes.list_notes_for_book("1_calc")]
        assert pages == [2, 5, 10]

    def test_unknown_book_is_empty(self, notes: NoteStore) -> None:
        assert notes.list_notes_for_book("nope") == []


class TestDeleteNote:
    def test_deletes(self, notes: NoteStore) -> None:
        notes.set_note("1_calc", 1, "x", "html")
        notes.delete_note("1_calc", 1)
        assert notes.get_note("1_calc", 1) is None

    def test_missing_is_noop(self, notes: NoteStore) -> None:
        notes.delete_note("1_calc", 99)


class TestImportNote:
    def test_new_note_is_html(self, notes: NoteStore) -> None:
        notes.import_note("1_calc", 1, "<p>hi</p>")
        record = notes.get_note("1_calc", 1)
        assert record is not None
        assert record.format == "html"

    def test_existing_note_keeps_format(self, notes: NoteStore) -> None:
        notes.set_note("1_calc", 1, "# md", "markdown")
        notes.import_note("1_calc", 1, "<p>legacy</p>")
        record = notes.get_note("1_calc", 1)
        assert record is not None
        assert record.content == "<p>legacy</p>"
        assert record.format == "markdown"


class TestNoteImages:
    def test_save_returns_id_and_get_returns_bytes(self, notes: NoteStore) -> None:
        image_id = notes.save_note_image("1_calc", 1, "fig.png", b"\x89PNG one")
        assert isinstance(image_id, int)
        assert notes.get_note_image(image_id) == b"\x89PNG one"

    def test_resave_keeps_id_and_replaces_data(
        self, notes: NoteStore, store: LibraryStore
    ) -> None:
        first_id = notes.save_note_image("1_calc", 1, "fig.png", b"one")
        notes.save_note_image("1_calc", 2, "other.png", b"unrelated")
        second_id = notes.save_note_image("1_calc", 1, "fig.png", b"two")

        assert second_id == first_id
        assert notes.get_note_image(first_id) == b"two"
        assert _row_count(store, "note_images") == 2

    def test_same_filename_on_other_page_is_distinct(self, notes: NoteStore) -> None:
        a = notes.save_note_image("1_calc", 1, "fig.png", b"a")
        b = notes.save_note_image("1_calc", 2, "fig.png", b"b")
        assert a != b

    def test_missing_image_raises(self, notes: NoteStore) -> None:
        """Unlike get_note, a missing image is an error."""
        with pytest.raises(ImageNotFoundError, match="not found"):
            notes.get_note_image(12345)

    def test_missing_image_is_not_found_error(self, notes: NoteStore) -> None:
        with pytest.raises(NotFoundError):
            notes.get_note_image(12345)

    def test_list_note_images(self, notes: NoteStore) -> None:
        notes.save_note_image("1_calc", 1, "a.png", b"aa")
        notes.save_note_image("1_calc", 1, "b.png", b"bbb")
        notes.save_note_image("1_calc", 2, "c.png", b"c")

        images = notes.list_note_images("1_calc", 1)
        assert [i.filename for i in images] == ["a.png", "b.png"]
        assert images[1].data == b"bbb"
        assert images[0].note_slug == "1_calc"
        assert images[0].note_page == 1
