# ABOUTME: CRUD operations for colored tags and their textbook associations.
# ABOUTME: Associations are keyed by textbook slug and cascade away with their tag.

import sqlite3

from axiomatic.db.connection import LibraryStore
from axiomatic.db.mapping import BookTagMapping, Tag, row_to_tag
from axiomatic.errors import DuplicateTagError

TAG_PALETTE: tuple[str, ...] = (
    "#dc322f",
    "#cb4b16",
    "#b58900",
    "#859900",
    "#2aa198",
    "#268bd2",
    "#6c71c4",
    "#d33682",
    "#c97a2c",
    "#5e8c61",
)


def default_tag_color(index: int) -> str:
    """Palette color for the index-th tag, cycling through TAG_PALETTE."""
    return TAG_PALETTE[index % len(TAG_PALETTE)]


class TagStore:
    """Typed CRUD for the tags and book_tags tables."""

    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def list_tags(self) -> list[Tag]:
        """Return all tags, alphabetically sorted."""
        with self._store.locked() as conn:
            cursor = conn.execute("SELECT id, name, color FROM tags ORDER BY name")
            return [row_to_tag(row) for row in cursor.fetchall()]

    def create_tag(self, name: str, color: str | None = None) -> Tag:
        """Create a tag.

        Args:
            name: Unique tag name.
            color: Display color. Defaults to the next palette color.

        Raises:
            DuplicateTagError: If a tag with this name already exists.
        """
        with self._store.locked() as conn:
            if color is None:
                (count,) = conn.execute("SELECT COUNT(*) FROM tags").fetchone()
                color = default_tag_color(count)
            try:
                cursor = conn.execute(
                    "INSERT INTO tags (name, color) VALUES (?, ?)", (name, color)
                )
            except sqlite3.IntegrityError as exc:
                raise DuplicateTagError(str(exc)) from exc

        return Tag(id=cursor.lastrowid, name=name, color=color)  # type: ignore[arg-type]

    def delete_tag(self, tag_id: int) -> None:
        """Delete a tag and, by cascade, every book association it had."""
        with self._store.locked() as conn:
            conn.execute("DELETE FROM tags WHERE id = ?", (tag_id,))

    def update_tag_color(self, tag_id: int, color: str) -> None:
        """Recolor a tag. No-op if the id does not exist."""
        with self._store.locked() as conn:
            conn.execute("UPDATE tags SET color = ? WHERE id = ?", (color, tag_id))

    def tag_book(self, book_slug: str, tag_id: int) -> None:
        """Attach a tag to a textbook. Idempotent.

        Raises:
            StoreError: If tag_id does not exist (foreign key violation).
        """
        with self._store.locked() as conn:
            conn.execute(
                "INSERT OR IGNORE INTO book_tags (book_slug, tag_id) VALUES (?, ?)",
                (book_slug, tag_id),
            )

    def untag_book(self, book_slug: str, tag_id: int) -> None:
        """Detach a tag from a textbook. No-op if it was not attached."""
        with self._store.locked() as conn:
            conn.execute(
                "DELETE FROM book_tags WHERE book_slug = ? AND tag_id = ?",
                (book_slug, tag_id),
            )

    def list_book_tags_all(self) -> list[BookTagMapping]:
        """Group every association by textbook slug.

        Slugs with no tags do not appear. Mappings are ordered by slug and the
        tags inside each mapping by name.
        """
        with self._store.locked() as conn:
            rows = conn.execute(
                "SELECT bt.book_slug, t.id, t.name, t.color "
                "FROM book_tags bt "
                "JOIN tags t ON t.id = bt.tag_id "
                "ORDER BY bt.book_slug, t.name"
            ).fetchall()

        mappings: dict[str, BookTagMapping] = {}
        for row in rows:
            slug = row["book_slug"]
            if slug not in mappings:
                mappings[slug] = BookTagMapping(book_slug=slug)
            mappings[slug].tags.append(row_to_tag(row))
        return list(mappings.values())
