# ABOUTME: One-time import of notes from the legacy JSON note store.
# ABOUTME: Parses "{slug}:{page}" keys and upserts each non-empty note separately.

import json
import logging
import re

from axiomatic.db.notes import NoteStore
from axiomatic.errors import ValidationError

logger = logging.getLogger(__name__)

# What the legacy editor saved for a cleared note
EMPTY_PARAGRAPH = "<p></p>"

# Pages are stored as signed 64-bit integers
_PAGE_RE = re.compile(r"[+-]?[0-9]+")
_MIN_PAGE = -(2**63)
_MAX_PAGE = 2**63 - 1


def parse_note_key(key: str) -> tuple[str, int] | None:
    """Split a legacy '{slug}:{page}' key on its last colon.

    Slugs may contain colons themselves. Returns None when there is no colon
    or the page part is not a plain signed 64-bit integer.
    """
    slug, sep, page_text = key.rpartition(":")
    if not sep or _PAGE_RE.fullmatch(page_text) is None:
        return None
    page = int(page_text)
    if not _MIN_PAGE <= page <= _MAX_PAGE:
        return None
    return slug, page


def _load_legacy_map(json_blob: str) -> dict[str, str]:
    try:
        data = json.loads(json_blob)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid notes JSON: {exc}") from exc

    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        raise ValidationError("Invalid notes JSON: expected an object of string values")
    return data


def migrate_notes_from_json(json_blob: str, notes: NoteStore) -> int:
    """Import legacy notes into the note store.

    Entries with malformed keys, empty content, or the bare empty paragraph
    are skipped. Every other entry is upserted as an HTML note in its own
    store round trip, so a failure part-way leaves earlier entries committed.

    Args:
        json_blob: JSON object mapping "{slug}:{page}" to HTML content.
        notes: The note store to write into.

    Returns:
        The number of notes written.

    Raises:
        ValidationError: If json_blob is not an object of strings.
    """
    legacy = _load_legacy_map(json_blob)

    written = 0
    for key, content in legacy.items():
        parsed = parse_note_key(key)
        if parsed is None:
            logger.debug("Skipping legacy note with malformed key %r", key)
            continue
        if not content or content == EMPTY_PARAGRAPH:
            logger.debug("Skipping empty legacy note %r", key)
            continue

        slug, page = parsed
        notes.import_note(slug, page, content)
        written += 1

    logger.info("Imported %d of %d legacy note(s)", written, len(legacy))
    return written
