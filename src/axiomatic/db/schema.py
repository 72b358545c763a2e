# ABOUTME: SQL DDL statements for the Axiomatic library database schema.
# ABOUTME: Defines directories, notes, note_images, tags, and book_tags.

SCHEMA = """
-- Filesystem roots registered for textbook discovery
CREATE TABLE IF NOT EXISTS directories (
    id       INTEGER PRIMARY KEY AUTOINCREMENT,
    path     TEXT NOT NULL UNIQUE,
    label    TEXT NOT NULL,
    added_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

-- One rich-text note per (textbook slug, page)
CREATE TABLE IF NOT EXISTS notes (
    id         INTEGER PRIMARY KEY AUTOINCREMENT,
    slug       TEXT NOT NULL,
    page       INTEGER NOT NULL,
    content    TEXT NOT NULL,
    format     TEXT NOT NULL DEFAULT 'html',
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now')),
    UNIQUE (slug, page)
);

CREATE INDEX IF NOT EXISTS idx_notes_slug ON notes(slug);

-- Binary attachments embedded in a note
CREATE TABLE IF NOT EXISTS note_images (
    id         INTEGER PRIMARY KEY AUTOINCREMENT,
    note_slug  TEXT NOT NULL,
    note_page  INTEGER NOT NULL,
    filename   TEXT NOT NULL,
    data       BLOB NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now')),
    UNIQUE (note_slug, note_page, filename)
);

CREATE TABLE IF NOT EXISTS tags (
    id    INTEGER PRIMARY KEY AUTOINCREMENT,
    name  TEXT NOT NULL UNIQUE,
    color TEXT NOT NULL
);

-- Textbooks are virtual, so book_slug is a plain string key
CREATE TABLE IF NOT EXISTS book_tags (
    book_slug TEXT NOT NULL,
    tag_id    INTEGER NOT NULL REFERENCES tags(id) ON DELETE CASCADE,
    PRIMARY KEY (book_slug, tag_id)
);

CREATE INDEX IF NOT EXISTS idx_book_tags_tag_id ON book_tags(tag_id);
"""
