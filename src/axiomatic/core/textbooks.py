# ABOUTME: Textbook discovery: projects registered directories onto virtual textbooks.
# ABOUTME: Scans each directory one level deep for PDFs and derives slugs and titles.

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from axiomatic.errors import ValidationError

if TYPE_CHECKING:
    from axiomatic.db.directories import DirectoryRegistry
    from axiomatic.db.mapping import Directory

logger = logging.getLogger(__name__)

PDF_EXTENSION = ".pdf"


@dataclass
class Textbook:
    """A PDF found under a registered directory. Never persisted.

    The slug is stable only while the directory id and filename stay the same;
    renaming or moving the file orphans notes and tags keyed to the old slug.
    """

    slug: str
    title: str
    file: str
    dir_id: int
    dir_path: str
    full_path: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def sanitize_slug(stem: str) -> str:
    """Lowercase a filename stem and replace anything but [alnum-_] with '-'.

    Leading and trailing dashes are stripped.
    """
    lowered = stem.lower()
    replaced = "".join(c if c.isalnum() or c in "-_" else "-" for c in lowered)
    return replaced.strip("-")


def title_from_stem(stem: str) -> str:
    """Turn a filename stem into a display title.

    'calc_101' -> 'Calc 101', 'intro-to algebra' -> 'Intro To Algebra'.
    Only the first character of each word is touched.
    """
    words = stem.replace("-", " ").replace("_", " ").split()
    return " ".join(word[0].upper() + word[1:] for word in words)


def make_slug(directory_id: int, stem: str) -> str:
    return f"{directory_id}_{sanitize_slug(stem)}"


def _is_pdf(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() == PDF_EXTENSION


def scan_directory(directory: Directory) -> list[Textbook]:
    """List the textbooks directly inside one registered directory.

    Only direct children are considered; subfolders are not entered. Order is
    the filesystem's enumeration order.

    Returns:
        The textbooks found. Empty if the directory no longer exists or cannot
        be read.
    """
    root = Path(directory.path)
    if not root.is_dir():
        return []

    try:
        pdfs = [child for child in root.iterdir() if _is_pdf(child)]
    except OSError as exc:
        logger.warning("Skipping unreadable directory %s: %s", directory.path, exc)
        return []

    return [
        Textbook(
            slug=make_slug(directory.id, pdf.stem),
            title=title_from_stem(pdf.stem),
            file=pdf.name,
            dir_id=directory.id,
            dir_path=directory.path,
            full_path=str(pdf),
        )
        for pdf in pdfs
    ]


def list_textbooks(registry: DirectoryRegistry) -> list[Textbook]:
    """List every textbook across all registered directories.

    Directories are read from the registry first; the filesystem scan then
    runs without holding the store lock. A directory that fails to scan
    contributes nothing and does not stop the others.
    """
    textbooks: list[Textbook] = []
    for directory in registry.list_directories():
        textbooks.extend(scan_directory(directory))
    return textbooks


def _require_file(full_path: str) -> Path:
    path = Path(full_path)
    if not path.is_file():
        raise ValidationError(f"File not found: {full_path}")
    return path


def rename_textbook(full_path: str, new_name: str) -> Path:
    """Rename a textbook file within its directory.

    A '.pdf' extension is appended unless new_name already ends with one
    (case-insensitive).

    Returns:
        The new path of the file.

    Raises:
        ValidationError: If full_path is not a file or the rename fails.
    """
    path = _require_file(full_path)
    new_file = new_name if new_name.lower().endswith(PDF_EXTENSION) else f"{new_name}.pdf"
    new_path = path.parent / new_file

    try:
        path.rename(new_path)
    except OSError as exc:
        raise ValidationError(str(exc)) from exc

    logger.info("Renamed %s to %s", path, new_path)
    return new_path


def delete_textbook(full_path: str) -> None:
    """Delete a textbook file from disk.

    Raises:
        ValidationError: If full_path is not a file or removal fails.
    """
    path = _require_file(full_path)
    try:
        path.unlink()
    except OSError as exc:
        raise ValidationError(str(exc)) from exc

    logger.info("Deleted %s", path)


def read_file_bytes(path: str) -> bytes:
    """Read an arbitrary file's raw bytes. The path is trusted as given.

    Raises:
        ValidationError: If the file cannot be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise ValidationError(str(exc)) from exc
