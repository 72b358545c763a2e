# ABOUTME: Record dataclasses for stored rows and their row-conversion helpers.
# ABOUTME: Each record serializes to the JSON shape handed to the front end.

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class Directory:
    """A filesystem root registered for textbook discovery."""

    id: int
    path: str
    label: str
    added_at: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class NoteRecord:
    """Rich-text annotation for one page of one textbook."""

    id: int
    slug: str
    page: int
    content: str
    format: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class NoteImage:
    """Binary attachment scoped to a note's book, page, and filename."""

    id: int
    note_slug: str
    note_page: int
    filename: str
    data: bytes
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        """Metadata only; the bytes are reported as a size."""
        return {
            "id": self.id,
            "note_slug": self.note_slug,
            "note_page": self.note_page,
            "filename": self.filename,
            "size": len(self.data),
            "created_at": self.created_at,
        }


@dataclass
class Tag:
    """A named, colored label."""

    id: int
    name: str
    color: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class BookTagMapping:
    """All tags attached to one textbook slug."""

    book_slug: str
    tags: list[Tag] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"book_slug": self.book_slug, "tags": [t.to_dict() for t in self.tags]}


def row_to_directory(row: Any) -> Directory:
    return Directory(
        id=row["id"],
        path=row["path"],
        label=row["label"],
        added_at=row["added_at"],
    )


def row_to_note(row: Any) -> NoteRecord:
    return NoteRecord(
        id=row["id"],
        slug=row["slug"],
        page=row["page"],
        content=row["content"],
        format=row["format"],
        updated_at=row["updated_at"],
    )


def row_to_note_image(row: Any) -> NoteImage:
    return NoteImage(
        id=row["id"],
        note_slug=row["note_slug"],
        note_page=row["note_page"],
        filename=row["filename"],
        data=bytes(row["data"]),
        created_at=row["created_at"],
    )


def row_to_tag(row: Any) -> Tag:
    return Tag(id=row["id"], name=row["name"], color=row["color"])
