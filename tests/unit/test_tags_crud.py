# ABOUTME: Unit tests for TagStore tag and book-association operations.
# ABOUTME: Validates creation, palette defaults, cascades, and grouping by slug.

import pytest

from axiomatic.db.connection import LibraryStore
from axiomatic.db.mapping import BookTagMapping, Tag
from axiomatic.db.tags import TAG_PALETTE, TagStore, default_tag_color
from axiomatic.errors import DuplicateTagError, StoreError


@pytest.fixture()
def tags(store: LibraryStore) -> TagStore:
    return TagStore(store)


class TestCreateTag:
    def test_returns_tag(self, tags: TagStore) -> None:
        tag = tags.create_tag("analysis", "#268bd2")
        assert tag.id > 0
        assert tag.name == "analysis"
        assert tag.color == "#268bd2"

    def test_duplicate_name_raises(self, tags: TagStore) -> None:
        tags.create_tag("analysis", "#268bd2")
        with pytest.raises(DuplicateTagError, match="UNIQUE constraint failed"):
            tags.create_tag("analysis", "#000000")
        assert len(tags.list_tags()) == 1

    def test_default_colors_follow_palette(self, tags: TagStore) -> None:
        first = tags.create_tag("a")
        second = tags.create_tag("b")
        assert first.color == TAG_PALETTE[0]
        assert second.color == TAG_PALETTE[1]


class TestDefaultTagColor:
    def test_cycles(self) -> None:
        assert default_tag_color(len(TAG_PALETTE)) == TAG_PALETTE[0]
        assert default_tag_color(len(TAG_PALETTE) + 3) == TAG_PALETTE[3]


class TestListTags:
    def test_empty(self, tags: TagStore) -> None:
        assert tags.list_tags() == []

    def test_alphabetical(self, tags: TagStore) -> None:
        tags.create_tag("zebra", "#000")
        tags.create_tag("alpha", "#111")
        assert [t.name for t in tags.list_tags()] == ["alpha", "zebra"]


class TestUpdateTagColor:
    def test_updates(self, tags: TagStore) -> None:
        tag = tags.create_tag("algebra", "#000")
        tags.update_tag_color(tag.id, "#fff")
        assert tags.list_tags() == [Tag(id=tag.id, name="algebra", color="#fff")]

    def test_missing_id_is_noop(self, tags: TagStore) -> None:
        tags.update_tag_color(999, "#fff")
        assert tags.list_tags() == []


class TestTagBook:
    def test_tag_twice_is_idempotent(self, tags: TagStore) -> None:
        tag = tags.create_tag("algebra", "#000")
        tags.tag_book("1_intro", tag.id)
        tags.tag_book("1_intro", tag.id)

        mappings = tags.list_book_tags_all()
        assert mappings == [BookTagMapping(book_slug="1_intro", tags=[tag])]

    def test_unknown_tag_raises_store_error(self, tags: TagStore) -> None:
        with pytest.raises(StoreError, match="FOREIGN KEY"):
            tags.tag_book("1_intro", 42)

    def test_untag(self, tags: TagStore) -> None:
        tag = tags.create_tag("algebra", "#000")
        tags.tag_book("1_intro", tag.id)
        tags.untag_book("1_intro", tag.id)
        assert tags.list_book_tags_all() == []

    def test_untag_missing_is_noop(self, tags: TagStore) -> None:
        tag = tags.create_tag("algebra", "#000")
        tags.untag_book("1_intro", tag.id)


class TestDeleteTag:
    def test_cascades_to_every_book(self, tags: TagStore) -> None:
        doomed = tags.create_tag("doomed", "#000")
        kept = tags.create_tag("kept", "#111")
        tags.tag_book("1_a", doomed.id)
        tags.tag_book("1_b", doomed.id)
        tags.tag_book("1_b", kept.id)

        tags.delete_tag(doomed.id)

        mappings = tags.list_book_tags_all()
        assert mappings == [BookTagMapping(book_slug="1_b", tags=[kept])]
        assert all(doomed.id not in {t.id for t in m.tags} for m in mappings)


class TestListBookTagsAll:
    def test_groups_by_slug(self, tags: TagStore) -> None:
        proofs = tags.create_tag("proofs", "#000")
        algebra = tags.create_tag("algebra", "#111")
        tags.tag_book("2_rudin", proofs.id)
        tags.tag_book("1_axler", proofs.id)
        tags.tag_book("1_axler", algebra.id)

        mappings = tags.list_book_tags_all()
        assert [m.book_slug for m in mappings] == ["1_axler", "2_rudin"]
        assert [t.name for t in mappings[0].tags] == ["algebra", "proofs"]
        assert [t.name for t in mappings[1].tags] == ["proofs"]

    def test_to_dict_shape(self, tags: TagStore) -> None:
        tag = tags.create_tag("proofs", "#000")
        tags.tag_book("1_axler", tag.id)
        (mapping,) = tags.list_book_tags_all()
        assert mapping.to_dict() == {
            "book_slug": "1_axler",
            "tags": [{"id": tag.id, "name": "proofs", "color": "#000"}],
        }
