# ABOUTME: Exception hierarchy for the Axiomatic library backend.
# ABOUTME: Separates caller-input validation, store failures, and missing records.


class AxiomaticError(Exception):
    """Base class for every error surfaced to a caller."""


class ValidationError(AxiomaticError):
    """Raised when caller input fails a precondition (bad path, missing file)."""


class InvalidDirectoryError(ValidationError):
    """Raised when registering a path that is not an existing directory."""


class StoreError(AxiomaticError):
    """Raised when the embedded store fails.

    The message is the underlying SQLite message text, untranslated.
    """


class DuplicatePathError(StoreError):
    """Raised when registering a directory path that is already registered."""


class DuplicateTagError(StoreError):
    """Raised when creating a tag whose name already exists."""


class NotFoundError(AxiomaticError):
    """Raised by lookups that treat a missing record as an error."""


class ImageNotFoundError(NotFoundError):
    """Raised when a note image id does not exist."""
